"""Tests for the brand walker."""

from __future__ import annotations

from orchestra.core.modes import build_primitive_lookup
from orchestra.core.strings import CaseStyle
from orchestra.core.tree import TokenGroup, TokenLeaf, normalize_tree
from orchestra.core.walker import ResolvedToken, unresolved_tokens, walk_brand


def _brands(document):
    root = normalize_tree(document)
    lookup = build_primitive_lookup(root, ("Primitives",))
    return root.children["Brand Components"], lookup


class TestWalkBrand:
    def test_document_order_and_resolution(self, token_document):
        brands, lookup = _brands(token_document)
        tokens = walk_brand("Acme", brands.children["Acme"], lookup)

        assert [t.logical_name for t in tokens] == [
            "button-background",
            "button-text",
            "button-padding",
        ]
        assert [t.value for t in tokens] == ["#0055FF", "#FFFFFF", "16px"]
        assert tokens[0].alias == "{color.blue.500}"
        assert tokens[0].attributes == {"type": "color"}

    def test_literal_values_have_no_alias(self, token_document):
        brands, lookup = _brands(token_document)
        tokens = walk_brand("Globex Corp", brands.children["Globex Corp"], lookup)

        assert [(t.logical_name, t.value, t.alias) for t in tokens] == [
            ("button-background", "#FF0000", None),
            ("button-radius", 4, None),
        ]

    def test_unresolved_aliases_flagged(self):
        subtree = normalize_tree({"a": "{nope}", "b": "{known}", "c": "plain"})
        tokens = walk_brand("X", subtree, {"known": "1px"})

        assert [t.logical_name for t in unresolved_tokens(tokens)] == ["a"]
        assert tokens[0].value == "{nope}"

    def test_alias_to_reference_counts_as_unresolved(self):
        tokens = walk_brand("X", normalize_tree({"a": "{p}"}), {"p": "{q}"})
        assert tokens[0].value == "{q}"
        assert not tokens[0].resolved

    def test_brand_that_is_a_leaf(self):
        tokens = walk_brand("Solo", TokenLeaf(value="#fff"), {})
        assert len(tokens) == 1
        assert tokens[0].path == ()
        assert tokens[0].qualified_name == "Solo"

    def test_empty_brand(self):
        assert walk_brand("Empty", TokenGroup(), {}) == []


class TestResolvedToken:
    def test_identifiers(self):
        token = ResolvedToken(brand="Globex Corp", path=("button", "background"), value="#f00")

        assert token.qualified_name == "Globex Corp-button-background"
        assert token.identifier(CaseStyle.KEBAB) == "globex-corp-button-background"
        assert token.identifier(CaseStyle.CAMEL) == "globexCorpButtonBackground"
        assert token.identifier(CaseStyle.SNAKE) == "globex_corp_button_background"
        assert token.identifier(CaseStyle.UPPER_SNAKE) == "GLOBEX_CORP_BUTTON_BACKGROUND"

    def test_description(self):
        token = ResolvedToken(
            brand="A", path=("x",), value=1, attributes={"description": "Primary action"}
        )
        assert token.description == "Primary action"
        assert ResolvedToken(brand="A", path=("x",), value=1).description is None

    def test_literal_is_resolved(self):
        assert ResolvedToken(brand="A", path=("x",), value="{looks.like.ref}").resolved
