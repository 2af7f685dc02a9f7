"""Tests for the token tree normalizer."""

from __future__ import annotations

from orchestra.core.tree import (
    TokenGroup,
    TokenLeaf,
    iter_leaves,
    normalize_tree,
    repair_reference,
    tree_to_raw,
)


class TestNormalizeLeaves:
    def test_primitive_is_wrapped(self):
        tree = normalize_tree({"color": "#fff", "size": 4, "enabled": True})
        assert tree.children["color"] == TokenLeaf(value="#fff")
        assert tree.children["size"] == TokenLeaf(value=4)
        assert tree.children["enabled"] == TokenLeaf(value=True)

    def test_value_record_is_leaf(self):
        tree = normalize_tree({"color": {"value": "#fff", "type": "color"}})
        leaf = tree.children["color"]
        assert isinstance(leaf, TokenLeaf)
        assert leaf.value == "#fff"
        assert leaf.attributes == {"type": "color"}

    def test_dtcg_value_record_is_leaf(self):
        tree = normalize_tree({"color": {"$value": "#000", "$type": "color"}})
        leaf = tree.children["color"]
        assert isinstance(leaf, TokenLeaf)
        assert leaf.value == "#000"
        assert leaf.attributes == {"$type": "color"}

    def test_nested_objects_become_groups(self):
        tree = normalize_tree({"color": {"brand": {"primary": "#123456"}}})
        brand = tree.children["color"]
        assert isinstance(brand, TokenGroup)
        assert isinstance(brand.children["brand"], TokenGroup)

    def test_non_token_values_dropped(self):
        tree = normalize_tree({"a": None, "b": [1, 2], "c": "ok"})
        assert list(tree.children) == ["c"]

    def test_list_under_value_marker_kept(self):
        tree = normalize_tree({"shadow": {"value": [1, 2]}})
        assert tree.children["shadow"] == TokenLeaf(value=[1, 2])

    def test_non_object_root_is_empty_group(self):
        assert normalize_tree(["not", "a", "tree"]) == TokenGroup()


class TestMetadata:
    def test_meta_keys_kept_on_group(self):
        tree = normalize_tree({"color": {"$type": "color", "$description": "Colours", "red": "#f00"}})
        group = tree.children["color"]
        assert isinstance(group, TokenGroup)
        assert group.meta == {"$type": "color", "$description": "Colours"}
        assert list(group.children) == ["red"]

    def test_meta_object_not_treated_as_group(self):
        tree = normalize_tree({"$extensions": {"tool": {"id": 1}}, "a": "1"})
        assert "$extensions" not in tree.children
        assert tree.meta == {"$extensions": {"tool": {"id": 1}}}


class TestReferenceRepair:
    def test_slash_reference_rewritten(self):
        assert repair_reference("{color/brand/primary}") == "{color.brand.primary}"

    def test_embedded_reference_rewritten(self):
        assert repair_reference("1px solid {color/border}") == "1px solid {color.border}"

    def test_slash_outside_braces_untouched(self):
        assert repair_reference("16px/1.5 {font/body}") == "16px/1.5 {font.body}"

    def test_values_without_brace_untouched(self):
        assert repair_reference("a/b") == "a/b"
        assert repair_reference(12) == 12

    def test_applied_during_normalize(self):
        tree = normalize_tree({"bg": {"value": "{color/blue/500}"}, "fg": "{color/white}"})
        assert tree.children["bg"].value == "{color.blue.500}"
        assert tree.children["fg"].value == "{color.white}"


class TestIdempotence:
    def test_normalize_twice(self, token_document):
        once = normalize_tree(token_document)
        assert normalize_tree(once) == once

    def test_round_trip_through_raw(self, token_document):
        once = normalize_tree(token_document)
        assert normalize_tree(tree_to_raw(once)) == once

    def test_order_preserved(self, token_document):
        tree = normalize_tree(token_document)
        assert list(tree.children) == ["Primitives", "Brand Components"]


class TestIterLeaves:
    def test_depth_first_document_order(self):
        tree = normalize_tree({"a": {"x": "1", "y": {"z": "2"}}, "b": "3"})
        assert [path for path, _ in iter_leaves(tree)] == [("a", "x"), ("a", "y", "z"), ("b",)]

    def test_leaf_root(self):
        assert list(iter_leaves(TokenLeaf(value=1))) == [((), TokenLeaf(value=1))]
