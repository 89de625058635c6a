"""Configuration package.

Provides the straps loader, the document model and the ``Straps`` lookup handle.
"""
from .document import Document, Environment, Setting, parse_document  # noqa: F401
from .errors import *  # noqa: F401,F403
from .lookup import Straps  # noqa: F401
from .strap_loader import (  # noqa: F401
    BASE_DIR_VARIABLE,
    STRAPS_FILENAME,
    load,
    load_environment,
    resolve_straps_path,
)
