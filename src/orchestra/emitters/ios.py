"""
iOS emitter.

Writes ``tokens/ios/Theme<Brand>.swift`` containing a caseless ``enum`` with
one ``public static let`` per token.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from orchestra.core.strings import safe_identifier, to_pascal_case

from .base import GENERATED_NOTICE, Emitter, EmitterRegistry
from .values import dimension_to_points, format_number, is_number, parse_hex_color

if TYPE_CHECKING:
    from orchestra.core.walker import ResolvedToken

IOS_DIR = Path("tokens") / "ios"


def swift_type_name(brand: str) -> str:
    return safe_identifier(f"Theme{to_pascal_case(brand)}")


def swift_literal(value: Any) -> tuple[str, str]:
    """Return ``(swift_type, expression)`` for a token value."""
    if isinstance(value, bool):
        return "Bool", "true" if value else "false"
    if is_number(value):
        return "CGFloat", format_number(value)
    color = parse_hex_color(value)
    if color is not None:
        r, g, b, a = color.to_unit_floats()
        return "UIColor", f"UIColor(red: {r}, green: {g}, blue: {b}, alpha: {a})"
    points = dimension_to_points(value)
    if points is not None:
        return "CGFloat", format_number(points)
    return "String", json.dumps(str(value), ensure_ascii=False)


@EmitterRegistry.register
class IOSEmitter(Emitter):
    """Generate a Swift enum of static token constants."""

    platform = "ios"

    def destination(self, brand: str) -> Path:
        return IOS_DIR / f"{swift_type_name(brand)}.swift"

    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        type_name = swift_type_name(brand)
        lines = [
            "//",
            f"// {type_name}.swift",
            "//",
            f"// {GENERATED_NOTICE}",
            "//",
            "",
            "import UIKit",
            "",
            f"public enum {type_name} {{",
        ]
        for name, token in self.named_tokens(tokens):
            swift_type, expression = swift_literal(token.value)
            if token.description:
                lines.append(f"    /// {token.description}")
            lines.append(f"    public static let {name}: {swift_type} = {expression}")
        lines.append("}")
        lines.append("")
        return "\n".join(lines)
