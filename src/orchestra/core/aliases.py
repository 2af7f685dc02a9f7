"""
Alias resolution.

A token whose whole value is ``{some.path}`` refers to a primitive. Resolution
is a single lookup: a primitive that is itself a reference is returned as the
literal reference text, and references embedded in a longer string
(``"1px solid {color.border}"``) are left alone. Unknown references are
returned unchanged so the build can continue; callers inspect
``parse_reference`` on the result to find them.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .tree import REFERENCE_SEPARATOR

logger = logging.getLogger(__name__)

_FULL_REFERENCE = re.compile(r"\{([^{}]+)\}")


def parse_reference(value: Any) -> str | None:
    """
    Return the lookup key if ``value`` is exactly one ``{...}`` reference.

    Examples:
        >>> parse_reference("{color/brand/primary}")
        'color.brand.primary'
        >>> parse_reference("2px {size.sm}") is None
        True
    """
    if not isinstance(value, str):
        return None
    match = _FULL_REFERENCE.fullmatch(value)
    if match is None:
        return None
    return match.group(1).strip().replace("/", REFERENCE_SEPARATOR)


def resolve_alias(value: Any, lookup: dict[str, Any]) -> Any:
    """
    Resolve a single-hop alias against the primitive lookup table.

    Args:
        value: Raw leaf value
        lookup: Primitive lookup table

    Returns:
        The referenced primitive value, or ``value`` unchanged when it is not a
        reference or the reference is unknown
    """
    ref = parse_reference(value)
    if ref is None:
        return value
    if ref not in lookup:
        logger.debug("Unresolved alias %s", value)
        return value
    return lookup[ref]
