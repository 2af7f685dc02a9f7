"""
Brand walker.

Turns one brand's token subtree into the flat, ordered token list that every
emitter consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .aliases import parse_reference, resolve_alias
from .strings import CaseStyle, convert_case
from .tree import TokenNode, iter_leaves

LOGICAL_NAME_SEPARATOR = "-"


@dataclass(frozen=True)
class ResolvedToken:
    """A brand token with its alias resolved.

    Attributes:
        brand: Brand name as written in the document
        path: Path segments below the brand
        value: Resolved value
        alias: Reference text of the original leaf, if it was an alias
        attributes: Extra leaf attributes (``type``, ``description`` ...)
    """

    brand: str
    path: tuple[str, ...]
    value: Any
    alias: str | None = None
    attributes: dict[str, Any] | None = None

    @property
    def logical_name(self) -> str:
        return LOGICAL_NAME_SEPARATOR.join(self.path)

    @property
    def qualified_name(self) -> str:
        """``{brand}-{logical_name}``, the base for all derived identifiers."""
        if not self.path:
            return self.brand
        return f"{self.brand}{LOGICAL_NAME_SEPARATOR}{self.logical_name}"

    @property
    def resolved(self) -> bool:
        """False when the token still holds an unresolved ``{...}`` reference."""
        return self.alias is None or parse_reference(self.value) is None

    def identifier(self, style: CaseStyle) -> str:
        return convert_case(self.qualified_name, style)

    @property
    def description(self) -> str | None:
        if not self.attributes:
            return None
        text = self.attributes.get("description") or self.attributes.get("$description")
        return str(text) if text else None


def walk_brand(brand: str, subtree: TokenNode, lookup: dict[str, Any]) -> list[ResolvedToken]:
    """
    Depth-first, pre-order walk of a brand subtree.

    Args:
        brand: Brand name
        subtree: The brand's node inside the component group
        lookup: Primitive lookup table used for alias resolution

    Returns:
        Tokens in document order
    """
    tokens: list[ResolvedToken] = []
    for path, leaf in iter_leaves(subtree):
        alias = leaf.value if parse_reference(leaf.value) is not None else None
        tokens.append(
            ResolvedToken(
                brand=brand,
                path=path,
                value=resolve_alias(leaf.value, lookup),
                alias=alias,
                attributes=dict(leaf.attributes) or None,
            )
        )
    return tokens


def unresolved_tokens(tokens: list[ResolvedToken]) -> list[ResolvedToken]:
    """Return tokens whose alias could not be resolved."""
    return [token for token in tokens if not token.resolved]
