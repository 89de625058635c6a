"""
Straps Lookup Handle
====================

``Straps`` holds the key/value pairs of one environment and exposes typed
accessors over them. A handle is immutable once built; loading again
produces a new handle rather than changing an existing one.

Missing keys and unparseable values raise ``StrapsError`` subclasses. The
only fallback is a ``default`` the caller passes explicitly, and it only
covers a missing key, never a bad value.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Pattern, Union

from .document import Environment
from .errors import InvalidPatternError, MissingKeyError, TypeConversionError

logger = logging.getLogger(__name__)

_MISSING = object()

TRUE_VALUES = frozenset({"1", "t", "true"})
FALSE_VALUES = frozenset({"0", "f", "false"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -(2 ** 63), 2 ** 63 - 1


class Straps(Mapping):
    """Read-only view of the straps for a single environment."""

    def __init__(self, values: Dict[str, str], name: str = "", source: Optional[Path] = None):
        self._values = MappingProxyType(dict(values))
        self._name = name
        self._source = source

    @classmethod
    def from_environment(cls, environment: Environment, source: Optional[Path] = None) -> "Straps":
        """Build a handle from a parsed environment."""
        return cls(environment.to_dict(), name=environment.name, source=source)

    @property
    def name(self) -> str:
        """Name of the environment these straps came from."""
        return self._name

    @property
    def source(self) -> Optional[Path]:
        """Path of the straps file, when loaded from disk."""
        return self._source

    @property
    def mapping(self) -> Mapping:
        return self._values

    # ------------------------------------------------------------------
    def __getitem__(self, key: str) -> str:
        try:
            return self._values[key]
        except KeyError:
            raise MissingKeyError(key, self._name) from None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Straps(name={self._name!r}, keys={len(self._values)}, source={self._source!r})"

    # ------------------------------------------------------------------
    def exists(self, key: str) -> bool:
        """Return True if ``key`` is defined for this environment."""
        return key in self._values

    def get_string(self, key: str, default: Any = _MISSING) -> str:
        """
        Return the value for ``key`` exactly as stored.

        Args:
            key: Strap key
            default: Returned when the key is missing; omit to raise instead

        Raises:
            MissingKeyError: If the key is missing and no default was given
        """
        if key in self._values:
            return self._values[key]
        if default is not _MISSING:
            return default
        logger.error(f"Unable to locate key {key} in environment {self._name}")
        raise MissingKeyError(key, self._name)

    def get_strings_matching(self, pattern: Union[str, Pattern]) -> List[str]:
        """
        Return the values of every key matching ``pattern``.

        The pattern is searched anywhere in the key (``re.search``). Results
        are ordered by key; no match gives an empty list.

        Raises:
            InvalidPatternError: If ``pattern`` is not a valid regular expression
        """
        try:
            find = re.compile(pattern)
        except re.error as e:
            logger.error(f"Invalid strap key pattern {pattern!r}: {e}")
            raise InvalidPatternError(f"Invalid strap key pattern {pattern!r}: {e}") from e

        return [self._values[key] for key in sorted(self._values) if find.search(key)]

    def get_bool(self, key: str, default: Any = _MISSING) -> bool:
        """
        Return the value for ``key`` as a bool.

        Accepts 1/t/true and 0/f/false in any letter case.

        Raises:
            MissingKeyError: If the key is missing and no default was given
            TypeConversionError: If the value is not a recognised boolean
        """
        if default is not _MISSING and key not in self._values:
            return default
        value = self.get_string(key)
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        logger.error(f"Unable to convert key {key} to bool: {value!r}")
        raise TypeConversionError(key, value, "bool")

    def get_int(self, key: str, default: Any = _MISSING) -> int:
        """
        Return the value for ``key`` as a base-10 integer.

        Raises:
            MissingKeyError: If the key is missing and no default was given
            TypeConversionError: If the value is not a plain decimal integer
                or falls outside the signed 64-bit range
        """
        if default is not _MISSING and key not in self._values:
            return default
        value = self.get_string(key)
        if not _INT_RE.fullmatch(value):
            logger.error(f"Unable to convert key {key} to integer: {value!r}")
            raise TypeConversionError(key, value, "integer")
        # int() rejects very long digit strings on newer interpreters
        try:
            number = int(value)
        except ValueError:
            number = None
        if number is None or not INT_MIN <= number <= INT_MAX:
            logger.error(f"Value of key {key} is out of 64-bit integer range: {value!r}")
            raise TypeConversionError(key, value, "integer")
        return number


__all__ = ["Straps", "TRUE_VALUES", "FALSE_VALUES"]
