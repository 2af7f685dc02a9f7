"""
Flutter emitter.

Writes ``tokens/flutter/theme_<brand>.dart`` with a ``<Brand>Theme`` class of
``static const`` members.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from orchestra.core.strings import safe_identifier, to_kebab_case, to_pascal_case

from .base import GENERATED_NOTICE, Emitter, EmitterRegistry
from .values import dimension_to_points, is_number, parse_hex_color

if TYPE_CHECKING:
    from orchestra.core.walker import ResolvedToken

FLUTTER_DIR = Path("tokens") / "flutter"


def dart_class_name(brand: str) -> str:
    return safe_identifier(f"{to_pascal_case(brand)}Theme")


def dart_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$").replace("\n", "\\n")
    return f"'{escaped}'"


def dart_literal(value: Any) -> str:
    """Render a token value as a Dart constant expression."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return str(float(value))
    color = parse_hex_color(value)
    if color is not None:
        return f"Color(0x{color.to_argb_hex()})"
    points = dimension_to_points(value)
    if points is not None:
        return str(float(points))
    return dart_string(str(value))


@EmitterRegistry.register
class FlutterEmitter(Emitter):
    """Generate a Dart class of static token constants."""

    platform = "flutter"

    def destination(self, brand: str) -> Path:
        return FLUTTER_DIR / f"theme_{to_kebab_case(brand)}.dart"

    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        class_name = dart_class_name(brand)
        lines = [
            "//",
            f"// {self.destination(brand).name}",
            "//",
            f"// {GENERATED_NOTICE}",
            "//",
            "",
            "import 'dart:ui';",
            "",
            f"class {class_name} {{",
            f"  {class_name}._();",
            "",
        ]
        for name, token in self.named_tokens(tokens):
            lines.append(f"  static const {name} = {dart_literal(token.value)};")
        lines.append("}")
        lines.append("")
        return "\n".join(lines)
