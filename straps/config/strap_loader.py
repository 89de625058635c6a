#!/usr/bin/env python3
"""Loader that turns a ``straps.xml`` file into a ``Straps`` handle.

File resolution:
- ``straps.xml`` in the search directory (the current working directory
  unless one is given)
- Fallback: ``$STRAPS_HOME/<relative_location>/straps.xml``; the base
  variable name can be overridden per call

The active environment is named by a process environment variable chosen
by the caller. When a ``.env`` file is supplied its variables fill in any
names missing from the process environment; ``os.environ`` is never
modified.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import BinaryIO, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .document import Document, parse_document
from .errors import (
    MissingBaseDirectoryError,
    MissingEnvironmentSelectorError,
    StrapsFileNotFoundError,
    UnknownEnvironmentError,
)
from .lookup import Straps

logger = logging.getLogger(__name__)

STRAPS_FILENAME = "straps.xml"
BASE_DIR_VARIABLE = "STRAPS_HOME"

PathLike = Union[str, "os.PathLike[str]"]


# ------------------------------------------------------------------
def _build_environ(environ: Optional[Mapping[str, str]], dotenv_path: Optional[PathLike]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    if dotenv_path is not None:
        # Keys declared without a value come back as None
        merged.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
        logger.debug(f"Read {len(merged)} variables from {dotenv_path}")
    merged.update(os.environ if environ is None else environ)
    return merged


def resolve_straps_path(
    relative_location: str = "",
    *,
    base_dir_variable: str = BASE_DIR_VARIABLE,
    search_dir: Optional[PathLike] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Locate the straps file.

    Args:
        relative_location: Location of the file below the base directory
        base_dir_variable: Environment variable holding the base directory
        search_dir: Directory checked first (defaults to the working directory)
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Absolute path of the straps file

    Raises:
        MissingBaseDirectoryError: If the fallback is needed and the base
            variable is unset
        StrapsFileNotFoundError: If the fallback file does not exist or
            ``relative_location`` leads outside the base directory
    """
    environ = os.environ if environ is None else environ

    primary = (Path(search_dir) if search_dir is not None else Path.cwd()) / STRAPS_FILENAME
    if primary.is_file():
        return primary.resolve()
    logger.debug(f"No straps file at {primary}, checking ${base_dir_variable}")

    base_dir = environ.get(base_dir_variable, "")
    if not base_dir:
        logger.error(f"Unable to locate straps file: {primary} missing and {base_dir_variable} not set")
        raise MissingBaseDirectoryError(base_dir_variable)

    base = Path(base_dir).resolve()
    fallback = (base / relative_location.lstrip("/\\") / STRAPS_FILENAME).resolve()
    try:
        fallback.relative_to(base)
    except ValueError:
        logger.error(f"Straps location {relative_location} escapes ${base_dir_variable} ({base})")
        raise StrapsFileNotFoundError(
            f"Straps location {relative_location} is outside {base}",
            searched=(str(primary),),
        ) from None
    if not fallback.is_file():
        logger.error(f"Unable to locate straps file at {primary} or {fallback}")
        raise StrapsFileNotFoundError(
            f"Unable to locate straps file at {primary} or {fallback}",
            searched=(str(primary), str(fallback)),
        )
    return fallback


def select_environment(document: Document, selector_variable: str, environ: Mapping[str, str]) -> str:
    """Return the environment name held by ``selector_variable``."""
    environment = environ.get(selector_variable, "") if selector_variable else ""
    if not environment:
        logger.error(f"Environment variable [{selector_variable}] does not exist")
        raise MissingEnvironmentSelectorError(selector_variable)

    if document.find_environment(environment) is None:
        logger.error(f"No environment with name {environment} found")
        raise UnknownEnvironmentError(environment, document.environment_names)
    return environment


# ------------------------------------------------------------------
def load_environment(
    source: Union[PathLike, BinaryIO],
    selector_variable: str,
    *,
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[PathLike] = None,
) -> Straps:
    """
    Build a handle from an already located straps document.

    Args:
        source: Path to the document or a binary file object
        selector_variable: Name of the variable that selects the environment
        environ: Environment mapping (defaults to ``os.environ``)
        dotenv_path: Optional ``.env`` file supplementing ``environ``

    Returns:
        Straps handle for the selected environment
    """
    variables = _build_environ(environ, dotenv_path)
    source_path = None if hasattr(source, "read") else Path(source)
    document = parse_document(source_path or source)
    name = select_environment(document, selector_variable, variables)

    straps = Straps.from_environment(document.find_environment(name), source=source_path)
    logger.info(f"Loaded {len(straps)} straps for environment {name}")
    return straps


def load(
    selector_variable: str,
    relative_location: str = "",
    *,
    base_dir_variable: str = BASE_DIR_VARIABLE,
    search_dir: Optional[PathLike] = None,
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[PathLike] = None,
) -> Straps:
    """
    Locate, parse and select the active straps.

    Args:
        selector_variable: Name of the variable that selects the environment
        relative_location: Location of the file below the base directory
        base_dir_variable: Environment variable holding the base directory
        search_dir: Directory checked first (defaults to the working directory)
        environ: Environment mapping (defaults to ``os.environ``)
        dotenv_path: Optional ``.env`` file supplementing ``environ``

    Returns:
        Straps handle for the selected environment

    Raises:
        StrapsLoadError: Any failure to locate, read, parse or select
    """
    variables = _build_environ(environ, dotenv_path)
    path = resolve_straps_path(
        relative_location,
        base_dir_variable=base_dir_variable,
        search_dir=search_dir,
        environ=variables,
    )

    document = parse_document(path)
    name = select_environment(document, selector_variable, variables)
    straps = Straps.from_environment(document.find_environment(name), source=path)
    logger.info(f"Loaded {len(straps)} straps for environment {name} from {path}")
    return straps


__all__ = [
    "STRAPS_FILENAME",
    "BASE_DIR_VARIABLE",
    "resolve_straps_path",
    "select_environment",
    "load_environment",
    "load",
]
