"""
Android emitter.

Default output is a resource file, ``tokens/android/theme_<brand>.xml``:

    <resources>
      <color name="acme_button_background">#FF0055FF</color>
      <dimen name="acme_spacing_md">16dp</dimen>
    </resources>

With ``android_format = "kotlin"`` it writes ``theme_<brand>.kt`` instead, an
``object`` of ``const val`` entries named in UPPER_SNAKE_CASE. Either way the
file is overwritten.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any
from xml.sax.saxutils import escape, quoteattr

from orchestra.core.config import AndroidFormat
from orchestra.core.strings import CaseStyle, safe_identifier, to_kebab_case, to_pascal_case

from .base import GENERATED_NOTICE, Emitter, EmitterRegistry
from .values import dimension_to_points, format_number, is_number, parse_hex_color

if TYPE_CHECKING:
    from orchestra.core.walker import ResolvedToken

ANDROID_DIR = Path("tokens") / "android"


def android_resource(value: Any) -> tuple[str, str]:
    """Pick the resource element and its text for a token value."""
    if isinstance(value, bool):
        return "bool", "true" if value else "false"
    if is_number(value):
        if isinstance(value, int):
            return "integer", str(value)
        return "dimen", f"{format_number(value)}dp"
    color = parse_hex_color(value)
    if color is not None:
        return "color", f"#{color.to_argb_hex()}"
    points = dimension_to_points(value)
    if points is not None:
        unit = "sp" if str(value).strip().endswith("sp") else "dp"
        return "dimen", f"{format_number(points)}{unit}"
    return "string", escape(str(value))


def kotlin_literal(value: Any) -> tuple[str, str]:
    """Return ``(kotlin_type, literal)`` for a token value."""
    if isinstance(value, bool):
        return "Boolean", "true" if value else "false"
    if isinstance(value, int):
        return "Int", str(value)
    if isinstance(value, float):
        return "Float", f"{value}f"
    color = parse_hex_color(value)
    if color is not None:
        return "Long", f"0x{color.to_argb_hex()}"
    return "String", json.dumps(str(value), ensure_ascii=False).replace("$", "\\$")


@EmitterRegistry.register
class AndroidEmitter(Emitter):
    """Generate Android resources (or a Kotlin constants object)."""

    platform = "android"
    identifier_style = CaseStyle.SNAKE

    @property
    def output_format(self) -> AndroidFormat:
        if self.config is None:
            return AndroidFormat.XML
        return self.config.android_format

    def token_identifier(self, token: ResolvedToken) -> str:
        if self.output_format == AndroidFormat.KOTLIN:
            return safe_identifier(token.identifier(CaseStyle.UPPER_SNAKE))
        return super().token_identifier(token)

    def destination(self, brand: str) -> Path:
        extension = "kt" if self.output_format == AndroidFormat.KOTLIN else "xml"
        return ANDROID_DIR / f"theme_{to_kebab_case(brand)}.{extension}"

    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        if self.output_format == AndroidFormat.KOTLIN:
            return self._render_kotlin(brand, tokens)
        return self._render_xml(tokens)

    def _render_xml(self, tokens: list[ResolvedToken]) -> str:
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            "",
            "<!--",
            f"  {GENERATED_NOTICE}",
            "-->",
            "<resources>",
        ]
        for name, token in self.named_tokens(tokens):
            element, text = android_resource(token.value)
            lines.append(f"  <{element} name={quoteattr(name)}>{text}</{element}>")
        lines.append("</resources>")
        lines.append("")
        return "\n".join(lines)

    def _render_kotlin(self, brand: str, tokens: list[ResolvedToken]) -> str:
        lines = [
            "//",
            f"// {GENERATED_NOTICE}",
            "//",
            "",
            f"object Theme{to_pascal_case(brand)} {{",
        ]
        for name, token in self.named_tokens(tokens):
            kotlin_type, literal = kotlin_literal(token.value)
            lines.append(f"    const val {name}: {kotlin_type} = {literal}")
        lines.append("}")
        lines.append("")
        return "\n".join(lines)
