"""
Error types for Orchestra token loading, classification, and emission.
"""

from __future__ import annotations

from pathlib import Path


class OrchestraError(Exception):
    """Base exception for all Orchestra errors."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the remediation hint if available."""
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class TokenFileError(OrchestraError):
    """
    Raised when the design-tokens document cannot be loaded.

    Examples:
    - tokens/ directory missing
    - design-tokens.json missing
    - File is not valid JSON, or its top level is not an object
    """

    def __init__(self, message: str, path: Path, hint: str | None = None):
        self.path = path
        super().__init__(message, hint)


class ClassificationError(OrchestraError):
    """
    Raised when top-level groups cannot be assigned roles.

    Examples:
    - Only one top-level group present
    - Component group resolves to a token leaf instead of a group
    - Override key names a group that does not exist
    """

    def __init__(self, message: str, keys: list[str], hint: str | None = None):
        self.keys = list(keys)
        super().__init__(message, hint)

    def _format_message(self) -> str:
        base = f"{self.message} (top-level keys: {', '.join(self.keys) or 'none'})"
        if self.hint:
            return f"{base}\nHint: {self.hint}"
        return base


class ConfigError(OrchestraError):
    """
    Raised when build configuration is invalid.

    Examples:
    - orchestra.toml is not valid TOML
    - Unknown android output format
    """

    pass


class EmitterError(OrchestraError):
    """
    Raised when a platform emitter fails to write its output.

    Examples:
    - Permission denied on the destination directory
    - Destination path is a directory
    """

    def __init__(self, message: str, platform: str, brand: str, hint: str | None = None):
        self.platform = platform
        self.brand = brand
        super().__init__(message, hint)
