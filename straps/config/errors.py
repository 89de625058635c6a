"""
Straps Errors
=============

Exception hierarchy for loading and reading straps.

Load-phase errors derive from ``StrapsLoadError`` and are raised by the
loader before any handle exists. Accessor errors are raised by ``Straps``
lookups and leave the handle untouched.
"""

from typing import Iterable, Optional


class StrapsError(Exception):
    """Base class for every straps failure."""


class StrapsLoadError(StrapsError):
    """Raised when a straps file cannot be turned into a handle."""


class StrapsFileNotFoundError(StrapsLoadError, FileNotFoundError):
    """No readable straps file at any of the resolved locations."""

    def __init__(self, message: str, searched: Iterable[str] = ()):
        super().__init__(message)
        self.searched = tuple(searched)

    def __str__(self) -> str:
        return self.args[0]


class MissingBaseDirectoryError(StrapsLoadError):
    """The fallback location was needed but its base variable is unset."""

    def __init__(self, variable: str):
        super().__init__(f"Base directory variable [{variable}] is not set")
        self.variable = variable


class MalformedDocumentError(StrapsLoadError):
    """The straps document is not well-formed or has the wrong root."""


class MissingEnvironmentSelectorError(StrapsLoadError):
    """The environment selector variable is empty or unset."""

    def __init__(self, variable: str):
        super().__init__(f"Environment variable [{variable}] does not exist")
        self.variable = variable


class UnknownEnvironmentError(StrapsLoadError):
    """The selected environment name is not in the document."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = tuple(available)
        message = f"No environment with name {name} found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class MissingKeyError(StrapsError, KeyError):
    """A strap key is not present in the active environment."""

    def __init__(self, key: str, environment: Optional[str] = None):
        super().__init__(key)
        self.key = key
        self.environment = environment

    def __str__(self) -> str:
        if self.environment is None:
            return f"Unable to locate key {self.key}"
        return f"Unable to locate key {self.key} in environment {self.environment}"


class InvalidPatternError(StrapsError, ValueError):
    """A key pattern is not a valid regular expression."""


class TypeConversionError(StrapsError, ValueError):
    """A strap value cannot be converted to the requested type."""

    def __init__(self, key: str, value: str, target: str):
        super().__init__(f"Unable to convert key {key} with value {value!r} to {target}")
        self.key = key
        self.value = value
        self.target = target


__all__ = [
    "StrapsError",
    "StrapsLoadError",
    "StrapsFileNotFoundError",
    "MissingBaseDirectoryError",
    "MalformedDocumentError",
    "MissingEnvironmentSelectorError",
    "UnknownEnvironmentError",
    "MissingKeyError",
    "InvalidPatternError",
    "TypeConversionError",
]
