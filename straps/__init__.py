"""
Straps - Environment-Scoped Application Settings
================================================

Loads the settings for one environment out of a ``straps.xml`` document,
selecting the environment through a process environment variable::

    import straps

    settings = straps.load("PROGRAM_ENV", "myapp")
    settings.get_string("CompanyName")

Modules:
- config: Document model, loader and the Straps lookup handle
- utils: Logging utilities
"""

__version__ = "1.0.0"
__author__ = "Straps Team"

from .config import (
    BASE_DIR_VARIABLE,
    STRAPS_FILENAME,
    Document,
    Environment,
    Setting,
    Straps,
    load,
    load_environment,
    parse_document,
    resolve_straps_path,
)
from .config.errors import (
    InvalidPatternError,
    MalformedDocumentError,
    MissingBaseDirectoryError,
    MissingEnvironmentSelectorError,
    MissingKeyError,
    StrapsError,
    StrapsFileNotFoundError,
    StrapsLoadError,
    TypeConversionError,
    UnknownEnvironmentError,
)

__all__ = [
    "BASE_DIR_VARIABLE",
    "STRAPS_FILENAME",
    "Document",
    "Environment",
    "Setting",
    "Straps",
    "load",
    "load_environment",
    "parse_document",
    "resolve_straps_path",
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
