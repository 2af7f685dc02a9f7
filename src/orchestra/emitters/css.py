"""
CSS custom-property emitter.

Writes ``src/styles/theme-<brand>.css`` with one ``[data-theme="<brand>"]``
block. Custom properties already in the file are kept, so hand-written
variables survive a rebuild; a generated token with the same name replaces
the old value.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from orchestra.core.strings import CaseStyle, to_kebab_case

from .base import GENERATED_NOTICE, Emitter, EmitterRegistry

if TYPE_CHECKING:
    from orchestra.core.walker import ResolvedToken

STYLES_DIR = Path("src") / "styles"

_CSS_PROPERTY = re.compile(r"(--[A-Za-z0-9_-]+)\s*:\s*(\S.*?)\s*", re.DOTALL)


def css_value(value: Any) -> str:
    """Render a token value as a CSS value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _in_custom_property(buffer: list[str]) -> bool:
    text = "".join(buffer).lstrip()
    return text.startswith("--") and ":" in text


def split_css_segments(content: str) -> list[str]:
    """
    Split a stylesheet into declaration-sized segments.

    Segments end at ``;``, ``{`` and ``}`` outside strings and brackets.
    Comments are dropped. Braces inside a custom-property value (an
    unresolved ``{alias}``) belong to the value.
    """
    segments: list[str] = []
    buffer: list[str] = []
    depth = 0
    quote: str | None = None
    i, n = 0, len(content)

    def flush() -> None:
        text = "".join(buffer).strip()
        buffer.clear()
        if text:
            segments.append(text)

    while i < n:
        ch = content[i]
        if quote:
            buffer.append(ch)
            if ch == "\\" and i + 1 < n:
                buffer.append(content[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue
        if content.startswith("/*", i):
            end = content.find("*/", i + 2)
            i = n if end < 0 else end + 2
            continue

        if ch in "\"'":
            quote = ch
        elif ch in "([" or (ch == "{" and _in_custom_property(buffer)):
            depth += 1
        elif ch in ")]}" and depth:
            depth -= 1
        elif ch in ";{}":
            flush()
            i += 1
            continue
        buffer.append(ch)
        i += 1

    flush()
    return segments


def parse_css_properties(content: str) -> dict[str, str]:
    """
    Extract ``--name: value`` declarations from existing CSS, in file order.

    Layout does not matter: one-line blocks and several declarations per
    line parse the same as one declaration per line. A later declaration
    of the same name wins, as it does in the browser.
    """
    properties: dict[str, str] = {}
    for segment in split_css_segments(content):
        match = _CSS_PROPERTY.fullmatch(segment)
        if match is not None:
            properties[match.group(1)] = match.group(2)
    return properties


def theme_selector(brand: str) -> str:
    return f'[data-theme="{to_kebab_case(brand)}"]'


@EmitterRegistry.register
class CSSEmitter(Emitter):
    """Generate CSS custom properties scoped to a brand."""

    platform = "css"
    merges_existing = True
    identifier_style = CaseStyle.KEBAB

    def destination(self, brand: str) -> Path:
        return STYLES_DIR / f"theme-{to_kebab_case(brand)}.css"

    def token_identifier(self, token: ResolvedToken) -> str:
        return f"--{token.identifier(self.identifier_style)}"

    def generated_properties(self, tokens: list[ResolvedToken]) -> dict[str, str]:
        return {name: css_value(token.value) for name, token in self.named_tokens(tokens)}

    def preserved_entries(self, tokens: list[ResolvedToken], existing: str | None) -> list[str]:
        if not existing:
            return []
        generated = self.generated_properties(tokens)
        return sorted(name for name in parse_css_properties(existing) if name not in generated)

    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        properties = parse_css_properties(existing) if existing else {}
        properties.update(self.generated_properties(tokens))

        lines: list[str] = []
        lines.append("/**")
        lines.append(f" * {GENERATED_NOTICE}")
        lines.append(" */")
        lines.append("")
        lines.append(f"{theme_selector(brand)} {{")
        for name in sorted(properties):
            lines.append(f"  {name}: {properties[name]};")
        lines.append("}")
        lines.append("")
        return "\n".join(lines)
