"""
Mode flattening and the primitive lookup table.

Primitive collections exported from design tools are often nested one level
deeper than the tokens themselves, under named modes::

    {"Mode 1": {"color": {...}}, "Mode 2": {"color": {...}}}

Only one mode is honoured: the first one in document order.
"""

from __future__ import annotations

import logging
from typing import Any

from .tree import REFERENCE_SEPARATOR, TokenGroup, TokenLeaf, iter_leaves

logger = logging.getLogger(__name__)

PrimitiveLookup = dict[str, Any]


def is_mode_nested(group: TokenGroup) -> bool:
    """A group is mode-nested when it has children and every child is a group."""
    return bool(group.children) and all(
        isinstance(child, TokenGroup) for child in group.children.values()
    )


def base_mode(group: TokenGroup) -> tuple[str | None, TokenGroup]:
    """
    Select the canonical mode of a primitive group.

    Returns:
        ``(mode_name, mode_group)``; ``mode_name`` is ``None`` when the group
        is not mode-nested and is used as-is.
    """
    if not is_mode_nested(group):
        return None, group
    name, mode = next(iter(group.children.items()))
    assert isinstance(mode, TokenGroup)
    return name, mode


def flatten_group(group: TokenGroup) -> PrimitiveLookup:
    """
    Flatten one primitive group into ``{"a.b.c": value}``.

    Mode-nested groups are flattened beneath their first mode; the other
    modes are discarded.
    """
    mode_name, mode = base_mode(group)
    if mode_name is not None and len(group.children) > 1:
        logger.debug(
            "Using mode %r; ignoring %s", mode_name, ", ".join(list(group.children)[1:])
        )

    flat: PrimitiveLookup = {}
    for path, leaf in iter_leaves(mode):
        flat[REFERENCE_SEPARATOR.join(path)] = leaf.value
    return flat


def build_primitive_lookup(root: TokenGroup, primitive_keys: tuple[str, ...] | list[str]) -> PrimitiveLookup:
    """
    Merge every primitive group into a single lookup table.

    Groups are merged in the order given; on key collisions the later group
    wins.
    """
    lookup: PrimitiveLookup = {}
    for key in primitive_keys:
        group = root.children.get(key)
        if isinstance(group, TokenLeaf) or group is None:
            logger.debug("Skipping primitive key %r: not a group", key)
            continue
        for ref, value in flatten_group(group).items():
            if ref in lookup and lookup[ref] != value:
                logger.debug("Primitive %r from %r overrides earlier value", ref, key)
            lookup[ref] = value
    logger.debug("Primitive lookup holds %d tokens", len(lookup))
    return lookup
