"""
Collection classifier.

Design tools export top-level collections with free-text names ("Primitives",
"Brand tokens", "Mode 1", "Start-up components" ...). The classifier decides
which collection holds the per-brand component tokens and which collections
are shared primitives that brands refer to.

Selection order for the component group:
1. Explicit override (``GroupOverrides.component_key``)
2. First name matching a component predicate, in predicate priority order,
   that does not also look primitive
3. Positional fallback (the second group)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel

from .errors import ClassificationError
from .tree import TokenGroup, is_meta_key

logger = logging.getLogger(__name__)

POSITIONAL_COMPONENT_INDEX = 1


class ClassificationStrategy(StrEnum):
    """How the component group was chosen."""

    OVERRIDE = "override"
    PATTERN = "pattern"
    POSITIONAL = "positional"


class GroupOverrides(BaseModel):
    """Explicit group selection that bypasses the name heuristics."""

    primitive_key: str | None = None
    component_key: str | None = None


@dataclass(frozen=True)
class NamePredicate:
    """A named, case-insensitive pattern over group names."""

    name: str
    pattern: re.Pattern[str]

    def __call__(self, key: str) -> bool:
        return bool(self.pattern.search(key))


def _predicate(name: str, pattern: str) -> NamePredicate:
    return NamePredicate(name=name, pattern=re.compile(pattern, re.IGNORECASE))


# Evaluated in order; the first predicate with a matching key wins.
COMPONENT_PREDICATES: tuple[NamePredicate, ...] = (
    _predicate("component", r"component"),
    _predicate("brand", r"brand"),
    _predicate("semantic", r"semantic"),
    _predicate("token", r"token"),
    _predicate("start-up", r"start-?up"),
)

PRIMITIVE_PREDICATES: tuple[NamePredicate, ...] = (
    _predicate("primitive", r"primitive"),
    _predicate("base", r"base"),
    _predicate("core", r"core"),
    _predicate("global", r"global"),
    _predicate("spacing", r"spacing"),
)


def looks_primitive(key: str) -> bool:
    """Whether a group name matches any primitive predicate."""
    return any(predicate(key) for predicate in PRIMITIVE_PREDICATES)


@dataclass(frozen=True)
class Classification:
    """Role assignment for the top-level groups of a token document.

    Attributes:
        primitive_keys: Shared groups, in document order
        component_key: The group whose children are brands
        strategy: How ``component_key`` was selected
        matched_predicate: Name of the predicate that matched, for ``pattern``
    """

    primitive_keys: tuple[str, ...]
    component_key: str
    strategy: ClassificationStrategy
    matched_predicate: str | None = None


def _first_match(
    keys: list[str], predicates: tuple[NamePredicate, ...], exclude: Callable[[str], bool]
) -> tuple[str, str] | None:
    for predicate in predicates:
        for key in keys:
            if predicate(key) and not exclude(key):
                return key, predicate.name
    return None


def _pick_component(
    keys: list[str], overrides: GroupOverrides
) -> tuple[str | None, ClassificationStrategy, str | None]:
    if overrides.component_key:
        return overrides.component_key, ClassificationStrategy.OVERRIDE, None

    match = _first_match(keys, COMPONENT_PREDICATES, exclude=looks_primitive)
    if match is not None:
        key, predicate_name = match
        return key, ClassificationStrategy.PATTERN, predicate_name

    if len(keys) > POSITIONAL_COMPONENT_INDEX:
        return keys[POSITIONAL_COMPONENT_INDEX], ClassificationStrategy.POSITIONAL, None
    return None, ClassificationStrategy.POSITIONAL, None


def classify_groups(root: TokenGroup, overrides: GroupOverrides | None = None) -> Classification:
    """
    Assign primitive and component roles to the top-level groups.

    Args:
        root: Normalized token document
        overrides: Optional forced primitive/component keys

    Returns:
        Classification with at least one primitive group and exactly one
        component group

    Raises:
        ClassificationError: If the component group is missing or not a group,
            an override names a missing or non-group key, or no primitive
            group remains
    """
    overrides = overrides or GroupOverrides()
    all_keys = [k for k in root.children if not is_meta_key(k)]
    group_keys = list(root.groups())

    component_key, strategy, predicate_name = _pick_component(group_keys, overrides)
    if component_key is None:
        raise ClassificationError(
            "Could not identify the component/brand group",
            all_keys,
            hint="Provide at least two top-level groups or set ORCHESTRA_COMPONENT_KEY",
        )
    if not isinstance(root.children.get(component_key), TokenGroup):
        raise ClassificationError(
            f'Component group "{component_key}" is missing or is not a group',
            all_keys,
            hint="Set ORCHESTRA_COMPONENT_KEY to the group that contains your brands",
        )

    if overrides.primitive_key:
        if not isinstance(root.children.get(overrides.primitive_key), TokenGroup):
            raise ClassificationError(
                f'Primitive group "{overrides.primitive_key}" is missing or is not a group',
                all_keys,
                hint="Check ORCHESTRA_PRIMITIVE_KEY",
            )
        primitive_keys = [overrides.primitive_key]
    else:
        primitive_keys = [k for k in group_keys if k != component_key]

    if overrides.primitive_key == component_key:
        raise ClassificationError(
            f'Group "{component_key}" cannot be both primitive and component',
            all_keys,
        )
    if not primitive_keys:
        raise ClassificationError(
            "Could not identify any primitive group",
            all_keys,
            hint="Add a primitives group or set ORCHESTRA_PRIMITIVE_KEY",
        )

    logger.debug(
        "Classified groups via %s: primitives=%s component=%s",
        strategy,
        primitive_keys,
        component_key,
    )
    return Classification(
        primitive_keys=tuple(primitive_keys),
        component_key=component_key,
        strategy=strategy,
        matched_predicate=predicate_name,
    )
