"""Tests for alias resolution."""

from __future__ import annotations

import logging

import pytest

from orchestra.core.aliases import parse_reference, resolve_alias

LOOKUP = {
    "color.blue.500": "#0055FF",
    "color.primary": "{color.blue.500}",
    "space.md": "16px",
}


class TestParseReference:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("{color.blue.500}", "color.blue.500"),
            ("{color/blue/500}", "color.blue.500"),
            ("{ space.md }", "space.md"),
        ],
    )
    def test_full_references(self, value, expected):
        assert parse_reference(value) == expected

    @pytest.mark.parametrize("value", ["#fff", "1px solid {color.border}", "{a}{b}", 4, None, True])
    def test_non_references(self, value):
        assert parse_reference(value) is None


class TestResolveAlias:
    def test_resolves_known_reference(self):
        assert resolve_alias("{color.blue.500}", LOOKUP) == "#0055FF"

    def test_slash_reference(self):
        assert resolve_alias("{space/md}", LOOKUP) == "16px"

    def test_single_hop_only(self):
        # the primitive is itself a reference and is returned as-is
        assert resolve_alias("{color.primary}", LOOKUP) == "{color.blue.500}"

    def test_unknown_reference_passthrough(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="orchestra"):
            assert resolve_alias("{color.missing}", LOOKUP) == "{color.missing}"
        assert "Unresolved alias {color.missing}" in caplog.text

    def test_embedded_reference_not_resolved(self):
        assert resolve_alias("1px solid {color.blue.500}", LOOKUP) == "1px solid {color.blue.500}"

    @pytest.mark.parametrize("value", ["#fff", 12, 1.5, False])
    def test_plain_values_unchanged(self, value):
        assert resolve_alias(value, LOOKUP) == value
