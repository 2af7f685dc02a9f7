"""
TypeScript constants emitter.

Writes ``src/styles/theme-<brand>.ts`` with one ``export const`` per token.
Everything else already in the module is kept verbatim: hand-written
constants (including multi-line object and array literals) and other
top-level statements such as imports and type declarations. Only a
constant whose name matches a generated token is replaced.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from orchestra.core.strings import to_kebab_case

from .base import GENERATED_NOTICE, Emitter, EmitterRegistry
from .css import STYLES_DIR

if TYPE_CHECKING:
    from orchestra.core.walker import ResolvedToken

_TS_CONSTANT = re.compile(
    r"export\s+const\s+([A-Za-z_$][\w$]*)\s*(?::[^=]*)?=\s*(.*)",
    re.DOTALL,
)

# A newline after one of these does not end a statement.
_CONTINUATION_SUFFIXES = tuple("=+-*/%,.?:|&([{")


@dataclass(frozen=True)
class Statement:
    """A top-level statement of an existing module.

    Attributes:
        text: Source text without the terminating semicolon
        terminated: Whether the source ended it with ``;``
    """

    text: str
    terminated: bool

    def render(self) -> str:
        return f"{self.text};" if self.terminated else self.text


def split_statements(content: str) -> list[Statement]:
    """
    Split a module into top-level statements.

    A statement ends at a ``;`` outside strings and brackets, or at a
    line break once the statement is complete. Top-level comments are
    dropped; comments inside brackets stay with their statement.
    """
    statements: list[Statement] = []
    buffer: list[str] = []
    depth = 0
    quote: str | None = None
    i, n = 0, len(content)

    def flush(terminated: bool) -> None:
        text = "".join(buffer).strip()
        buffer.clear()
        if text:
            statements.append(Statement(text=text, terminated=terminated))

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
        if content.startswith("//", i) or content.startswith("/*", i):
            if content[i + 1] == "/":
                end = content.find("\n", i)
                end = n if end < 0 else end
            else:
                end = content.find("*/", i + 2)
                end = n if end < 0 else end + 2
            if depth:
                buffer.append(content[i:end])
            i = end
            continue

        if ch in "\"'`":
            quote = ch
        elif ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth = max(depth - 1, 0)
        elif depth == 0 and ch == ";":
            flush(terminated=True)
            i += 1
            continue
        elif depth == 0 and ch == "\n":
            pending = "".join(buffer).rstrip()
            if pending and not pending.endswith(_CONTINUATION_SUFFIXES):
                flush(terminated=False)
                i += 1
                continue
        buffer.append(ch)
        i += 1

    flush(terminated=False)
    return statements


def parse_ts_module(content: str) -> tuple[dict[str, str], list[Statement]]:
    """
    Split an existing module into its constants and everything else.

    Returns:
        ``({name: statement_text}, other_statements)``; constants keep
        their full source text, type annotation and initializer included
    """
    constants: dict[str, str] = {}
    others: list[Statement] = []
    for statement in split_statements(content):
        match = _TS_CONSTANT.fullmatch(statement.text)
        if match is None:
            others.append(statement)
        else:
            constants[match.group(1)] = statement.text
    return constants, others


def ts_literal(value: Any) -> str:
    """Render a token value as a TypeScript literal."""
    return json.dumps(value, ensure_ascii=False)


@EmitterRegistry.register
class TypeScriptEmitter(Emitter):
    """Generate an ES module of named token constants."""

    platform = "ts"
    merges_existing = True

    def destination(self, brand: str) -> Path:
        return STYLES_DIR / f"theme-{to_kebab_case(brand)}.ts"

    def generated_constants(self, tokens: list[ResolvedToken]) -> dict[str, str]:
        return {
            name: f"export const {name} = {ts_literal(token.value)}"
            for name, token in self.named_tokens(tokens)
        }

    def preserved_entries(self, tokens: list[ResolvedToken], existing: str | None) -> list[str]:
        if not existing:
            return []
        generated = self.generated_constants(tokens)
        constants, _ = parse_ts_module(existing)
        return sorted(name for name in constants if name not in generated)

    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        constants, others = parse_ts_module(existing) if existing else ({}, [])
        constants.update(self.generated_constants(tokens))

        lines = ["/**", f" * {GENERATED_NOTICE}", " */", ""]
        if others:
            lines.extend(statement.render() for statement in others)
            lines.append("")
        for name in sorted(constants):
            lines.append(f"{constants[name]};")
        lines.append("")
        return "\n".join(lines)
