"""
Value helpers shared by the native-platform emitters.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_DIMENSION = re.compile(r"(-?\d+(?:\.\d+)?)(px|dp|sp|pt|rem|em)")

REM_BASE_PX = 16


class RGBA(NamedTuple):
    """A colour with 0-255 channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def to_argb_hex(self) -> str:
        """``AARRGGBB`` in upper case, as used by Android and Flutter."""
        return f"{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_unit_floats(self) -> tuple[float, float, float, float]:
        """Channels scaled to 0..1, rounded to 3 places."""
        return tuple(round(c / 255, 3) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]


def parse_hex_color(value: Any) -> RGBA | None:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

    Returns:
        RGBA, or None if ``value`` is not a hex colour string
    """
    if not isinstance(value, str):
        return None
    match = _HEX_COLOR.fullmatch(value.strip())
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    return RGBA(*channels)


def parse_dimension(value: Any) -> tuple[float, str] | None:
    """Parse strings like ``"16px"`` or ``"1.5rem"`` into ``(number, unit)``."""
    if not isinstance(value, str):
        return None
    match = _DIMENSION.fullmatch(value.strip())
    if match is None:
        return None
    return float(match.group(1)), match.group(2)


def dimension_to_points(value: Any) -> float | None:
    """Convert a dimension to density-independent points (px, dp, pt and rem)."""
    parsed = parse_dimension(value)
    if parsed is None:
        return None
    number, unit = parsed
    if unit in ("rem", "em"):
        return number * REM_BASE_PX
    return number


def format_number(number: float | int) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
