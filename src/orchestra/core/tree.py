"""
Token tree model and normalizer.

The raw design-tokens document is loosely typed: leaves may be bare
primitives, ``{"value": ...}`` records (Tokens Studio style) or
``{"$value": ...}`` records (W3C DTCG style), and alias references may use
either ``/`` or ``.`` between path segments. ``normalize_tree`` coerces all of
that into a single recursive structure so that downstream code only ever sees
``TokenGroup`` and ``TokenLeaf`` nodes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

VALUE_MARKERS = ("value", "$value")
META_PREFIX = "$"
REFERENCE_SEPARATOR = "."

_REFERENCE_BODY = re.compile(r"\{([^{}]*)\}")

TokenValue = str | int | float | bool


@dataclass(frozen=True)
class TokenLeaf:
    """A single design token.

    Attributes:
        value: The raw (possibly aliased) token value
        attributes: Any other keys found on the leaf record (``type``,
            ``description``, ``$extensions`` ...), kept verbatim
    """

    value: Any
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TokenGroup:
    """A named collection of child nodes.

    Attributes:
        children: Child nodes keyed by name, in document order
        meta: ``$``-prefixed metadata keys found on the group, kept verbatim
    """

    children: dict[str, TokenNode] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    def groups(self) -> dict[str, TokenGroup]:
        """Return only the children that are groups."""
        return {k: v for k, v in self.children.items() if isinstance(v, TokenGroup)}

    def __len__(self) -> int:
        return len(self.children)


TokenNode = TokenLeaf | TokenGroup


def is_meta_key(key: str) -> bool:
    """Whether a key is reserved metadata rather than a token or group name."""
    return key.startswith(META_PREFIX)


def repair_reference(value: Any) -> Any:
    """
    Rewrite ``/`` path separators inside ``{...}`` references to ``.``.

    Values that are not strings, or that lack either a brace or a slash, are
    returned untouched.

    Examples:
        >>> repair_reference("{color/brand/primary}")
        '{color.brand.primary}'
        >>> repair_reference("1px solid {color/border}")
        '1px solid {color.border}'
    """
    if not isinstance(value, str) or "{" not in value or "/" not in value:
        return value
    return _REFERENCE_BODY.sub(
        lambda m: "{" + m.group(1).replace("/", REFERENCE_SEPARATOR) + "}",
        value,
    )


def _find_value_marker(record: dict[str, Any]) -> str | None:
    for marker in VALUE_MARKERS:
        if marker in record:
            return marker
    return None


def _normalize_leaf(record: dict[str, Any], marker: str) -> TokenLeaf:
    attributes = {k: v for k, v in record.items() if k != marker}
    return TokenLeaf(value=repair_reference(record[marker]), attributes=attributes)


def _normalize_node(raw: Any, path: tuple[str, ...]) -> TokenNode | None:
    if isinstance(raw, TokenLeaf):
        return TokenLeaf(value=repair_reference(raw.value), attributes=dict(raw.attributes))
    if isinstance(raw, TokenGroup):
        return _normalize_group(raw.children, raw.meta, path)
    if isinstance(raw, dict):
        marker = _find_value_marker(raw)
        if marker is not None:
            return _normalize_leaf(raw, marker)
        meta = {k: v for k, v in raw.items() if is_meta_key(k)}
        children = {k: v for k, v in raw.items() if not is_meta_key(k)}
        return _normalize_group(children, meta, path)
    if isinstance(raw, str | int | float | bool):
        return TokenLeaf(value=repair_reference(raw))

    logger.debug("Dropping non-token value at %s: %r", "/".join(path) or "<root>", raw)
    return None


def _normalize_group(
    children: dict[str, Any], meta: dict[str, Any], path: tuple[str, ...]
) -> TokenGroup:
    normalized: dict[str, TokenNode] = {}
    for key, child in children.items():
        node = _normalize_node(child, (*path, key))
        if node is not None:
            normalized[key] = node
    return TokenGroup(children=normalized, meta=dict(meta))


def normalize_tree(raw: Any) -> TokenGroup:
    """
    Coerce a raw JSON document into a token tree.

    Args:
        raw: Decoded JSON (normally a dict) or an already-normalized node

    Returns:
        Root ``TokenGroup``. A root that is itself a leaf or primitive is
        returned as an empty group.
    """
    node = _normalize_node(raw, ())
    if isinstance(node, TokenGroup):
        return node
    logger.debug("Token document root is not an object; treating it as empty")
    return TokenGroup()


def tree_to_raw(node: TokenNode) -> Any:
    """Serialize a token tree back to canonical JSON-compatible data."""
    if isinstance(node, TokenLeaf):
        return {"value": node.value, **node.attributes}
    raw: dict[str, Any] = dict(node.meta)
    for key, child in node.children.items():
        raw[key] = tree_to_raw(child)
    return raw


def iter_leaves(node: TokenNode, path: tuple[str, ...] = ()):
    """Yield ``(path, leaf)`` pairs depth-first, in document order."""
    if isinstance(node, TokenLeaf):
        yield path, node
        return
    for key, child in node.children.items():
        yield from iter_leaves(child, (*path, key))
