"""
String utility functions for Orchestra.

Identifier-style transforms used to turn human-entered token and brand names
into CSS variable names, file names and source-code identifiers.
"""

from __future__ import annotations

import re
from enum import StrEnum

_HUMP = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


class CaseStyle(StrEnum):
    """Identifier conventions used by the emitters."""

    KEBAB = "kebab"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    UPPER_SNAKE = "upper_snake"


def split_words(name: str) -> list[str]:
    """
    Split a free-text name into lower-case words.

    Camel humps, spaces, punctuation and path separators all act as word
    boundaries.

    Examples:
        >>> split_words("AcmeCorp Primary/hover")
        ['acme', 'corp', 'primary', 'hover']
        >>> split_words("HTTPServer")
        ['http', 'server']
    """
    spaced = _ACRONYM.sub(r"\1 \2", name)
    spaced = _HUMP.sub(r"\1 \2", spaced)
    return [word.lower() for word in _NON_ALNUM.split(spaced) if word]


def to_kebab_case(name: str) -> str:
    """
    Convert a name to kebab-case.

    Examples:
        >>> to_kebab_case("Brand Primary")
        'brand-primary'
        >>> to_kebab_case("buttonBackground")
        'button-background'
    """
    return "-".join(split_words(name))


def to_snake_case(name: str) -> str:
    """Convert a name to snake_case."""
    return "_".join(split_words(name))


def to_upper_snake_case(name: str) -> str:
    """Convert a name to UPPER_SNAKE_CASE."""
    return to_snake_case(name).upper()


def to_camel_case(name: str) -> str:
    """
    Convert a name to camelCase.

    Examples:
        >>> to_camel_case("acme-button-background")
        'acmeButtonBackground'
        >>> to_camel_case("Mode 1")
        'mode1'
    """
    words = split_words(name)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(name: str) -> str:
    """Convert a name to PascalCase."""
    return "".join(word.capitalize() for word in split_words(name))


def safe_identifier(name: str) -> str:
    """Prefix identifiers that would start with a digit (or be empty) with ``_``."""
    if not name or name[0].isdigit():
        return f"_{name}"
    return name


_CONVERTERS = {
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.PASCAL: to_pascal_case,
    CaseStyle.SNAKE: to_snake_case,
    CaseStyle.UPPER_SNAKE: to_upper_snake_case,
}


def convert_case(name: str, style: CaseStyle) -> str:
    """Convert ``name`` to the given case style."""
    return _CONVERTERS[CaseStyle(style)](name)
