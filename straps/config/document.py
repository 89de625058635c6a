"""
Straps Document Model
=====================

In-memory representation of a ``straps.xml`` document::

    <straps>
      <env name="dev">
        <strap key="CompanyName" value="NEWCO-DEV"/>
      </env>
    </straps>

Only direct ``<env>`` children of the root and direct ``<strap>`` children
of each ``<env>`` are read; anything else in the document is ignored.
"""

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

from .errors import MalformedDocumentError, StrapsFileNotFoundError

logger = logging.getLogger(__name__)

ROOT_TAG = "straps"
ENV_TAG = "env"
STRAP_TAG = "strap"


@dataclass(frozen=True)
class Setting:
    """A single strap key/value pair."""
    key: str
    value: str


@dataclass(frozen=True)
class Environment:
    """A named group of settings."""
    name: str
    settings: Tuple[Setting, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, str]:
        """Flatten settings into a dict; the last duplicate key wins."""
        return {setting.key: setting.value for setting in self.settings}


@dataclass(frozen=True)
class Document:
    """All environments of a straps document, in document order."""
    environments: Tuple[Environment, ...] = field(default_factory=tuple)

    @property
    def environment_names(self) -> List[str]:
        return [env.name for env in self.environments]

    def find_environment(self, name: str) -> Optional[Environment]:
        """Return the first environment called ``name``, or None."""
        for env in self.environments:
            if env.name == name:
                return env
        return None


def _read_root(source: BinaryIO) -> ET.Element:
    # Stop at the end of the first element; anything after it is ignored
    root = None
    depth = 0
    for event, element in ET.iterparse(source, events=("start", "end")):
        if event == "start":
            if root is None:
                root = element
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                break
    return root


def parse_document(source: Union[str, "os.PathLike[str]", BinaryIO]) -> Document:
    """
    Parse a straps document.

    Only the first top-level element is read; content after it is ignored.

    Args:
        source: Path to the document or a binary file object

    Returns:
        Parsed Document

    Raises:
        MalformedDocumentError: If the XML is not well-formed or the root
            element is not ``<straps>``
        StrapsFileNotFoundError: If ``source`` is a path that cannot be opened
    """
    try:
        if hasattr(source, "read"):
            root = _read_root(source)
        else:
            with open(source, "rb") as f:
                root = _read_root(f)
    except ET.ParseError as e:
        logger.error(f"Unable to read straps document: {e}")
        raise MalformedDocumentError(f"Unable to read straps document: {e}") from e
    except OSError as e:
        logger.error(f"Unable to open straps file {source}: {e}")
        raise StrapsFileNotFoundError(f"Unable to open straps file {source}: {e}", searched=(str(source),)) from e

    if root.tag != ROOT_TAG:
        logger.error(f"Unexpected root element <{root.tag}> in straps document")
        raise MalformedDocumentError(
            f"Expected root element <{ROOT_TAG}> but found <{root.tag}>"
        )

    environments = []
    for env_node in root.findall(ENV_TAG):
        settings = tuple(
            Setting(key=node.get("key", ""), value=node.get("value", ""))
            for node in env_node.findall(STRAP_TAG)
        )
        environments.append(Environment(name=env_node.get("name", ""), settings=settings))

    logger.debug(f"Parsed straps document with environments: {[e.name for e in environments]}")
    return Document(environments=tuple(environments))


__all__ = ["Setting", "Environment", "Document", "parse_document"]
