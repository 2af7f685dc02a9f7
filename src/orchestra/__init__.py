"""
Orchestra - design-token build tool.

Turns a design-tokens JSON document (primitives plus per-brand component
tokens) into theme files for web, Android, iOS and Flutter.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ClassificationError,
    ConfigError,
    EmitterError,
    OrchestraError,
    TokenFileError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "OrchestraError",
    "TokenFileError",
    "ClassificationError",
    "ConfigError",
    "EmitterError",
]
