"""
Base emitter classes.

Each emitter turns one brand's resolved tokens into a single platform file:
- CSS and TypeScript emitters merge with the existing file
- Android, iOS and Flutter emitters overwrite it

Emitters share no state, so the build runs a brand's emitters concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from orchestra.core.strings import CaseStyle, safe_identifier

if TYPE_CHECKING:
    from orchestra.core.config import BuildConfig
    from orchestra.core.walker import ResolvedToken

logger = logging.getLogger(__name__)

GENERATED_NOTICE = "Do not edit directly, this file was auto-generated."


@dataclass
class EmitResult:
    """
    Result from one or more emitter runs.

    Attributes:
        files_written: Paths of files created or overwritten
        preserved: Names of pre-existing entries kept during a merge
        warnings: Non-fatal problems to show to the user
    """

    files_written: list[Path] = field(default_factory=list)
    preserved: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        """Record a file that was written."""
        self.files_written.append(path)

    def add_warning(self, warning: str) -> None:
        """Record a warning."""
        self.warnings.append(warning)

    def merge(self, other: EmitResult) -> None:
        """Merge another result into this one."""
        self.files_written.extend(other.files_written)
        self.preserved.extend(other.preserved)
        self.warnings.extend(other.warnings)


class Emitter(ABC):
    """
    Base class for all platform emitters.

    Subclasses define where the brand file goes and how it is rendered.

    Example:
        class JsonEmitter(Emitter):
            platform = "json"

            def destination(self, brand: str) -> Path:
                return Path("tokens") / f"{brand}.json"

            def render(self, brand, tokens, existing=None) -> str:
                return json.dumps({t.logical_name: t.value for t in tokens})
    """

    platform: ClassVar[str]
    merges_existing: ClassVar[bool] = False
    identifier_style: ClassVar[CaseStyle] = CaseStyle.CAMEL

    def __init__(self, output_root: Path, config: BuildConfig | None = None):
        """
        Initialize emitter.

        Args:
            output_root: Project root; destinations are relative to it
            config: Build configuration, for emitter-specific options
        """
        self.output_root = output_root
        self.config = config

    @abstractmethod
    def destination(self, brand: str) -> Path:
        """Path of the brand's output file, relative to ``output_root``."""

    @abstractmethod
    def render(
        self, brand: str, tokens: list[ResolvedToken], existing: str | None = None
    ) -> str:
        """Render the file content for a brand."""

    def output_path(self, brand: str) -> Path:
        return self.output_root / self.destination(brand)

    def token_identifier(self, token: ResolvedToken) -> str:
        """Source-level name of a token on this platform."""
        return safe_identifier(token.identifier(self.identifier_style))

    def named_tokens(self, tokens: list[ResolvedToken]) -> list[tuple[str, ResolvedToken]]:
        """
        Pair each token with its identifier, dropping later tokens whose
        identifier is already taken.

        Different paths can collapse to one name (``button/Primary`` and
        ``button-primary``); the first token in document order keeps it.
        """
        named, _ = self._dedupe(tokens)
        return named

    def identifier_collisions(self, tokens: list[ResolvedToken]) -> list[str]:
        """Describe every token dropped by ``named_tokens``."""
        _, collisions = self._dedupe(tokens)
        return collisions

    def _dedupe(
        self, tokens: list[ResolvedToken]
    ) -> tuple[list[tuple[str, ResolvedToken]], list[str]]:
        owners: dict[str, ResolvedToken] = {}
        named: list[tuple[str, ResolvedToken]] = []
        collisions: list[str] = []
        for token in tokens:
            name = self.token_identifier(token)
            owner = owners.get(name)
            if owner is not None:
                collisions.append(
                    f'[{self.platform}] "{token.brand}/{token.logical_name}" maps to {name}, '
                    f'already used by "{owner.brand}/{owner.logical_name}"; skipped'
                )
                continue
            owners[name] = token
            named.append((name, token))
        return named, collisions

    def preserved_entries(self, tokens: list[ResolvedToken], existing: str | None) -> list[str]:
        """Names of existing entries that the merge keeps. Only merging emitters override this."""
        return []

    def _read_existing(self, path: Path) -> str | None:
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def _write_file(self, path: Path, content: str) -> None:
        """Write content to a file, creating parent directories if needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    async def emit(self, brand: str, tokens: list[ResolvedToken]) -> EmitResult:
        """
        Render and write the brand file.

        The existing file is read synchronously before the write; the write
        itself runs in a worker thread.
        """
        result = EmitResult()
        for collision in self.identifier_collisions(tokens):
            logger.warning(collision)
            result.add_warning(collision)

        path = self.output_path(brand)
        existing = self._read_existing(path) if self.merges_existing else None
        content = self.render(brand, tokens, existing)
        await asyncio.to_thread(self._write_file, path, content)
        result.add_file(path)
        result.preserved.extend(self.preserved_entries(tokens, existing))
        logger.debug("[%s] wrote %s (%d tokens)", self.platform, path, len(tokens))
        return result


class EmitterRegistry:
    """
    Registry for platform emitters.

    Maps emitter keys ("css", "ts", ...) to implementations.
    """

    _emitters: dict[str, type[Emitter]] = {}

    @classmethod
    def register(cls, emitter: type[Emitter]) -> type[Emitter]:
        """Register an emitter class under its ``platform`` key. Usable as a decorator."""
        cls._emitters[emitter.platform] = emitter
        return emitter

    @classmethod
    def get(cls, platform: str) -> type[Emitter] | None:
        """Get emitter class by key."""
        return cls._emitters.get(platform)

    @classmethod
    def list_platforms(cls) -> list[str]:
        """List registered emitter keys."""
        return list(cls._emitters.keys())


# User-facing build targets and the emitters each one runs.
PLATFORM_TARGETS: dict[str, tuple[str, ...]] = {
    "web": ("css", "ts"),
    "android": ("android",),
    "ios": ("ios",),
    "flutter": ("flutter",),
    "all": ("css", "ts", "android", "ios", "flutter"),
}

DEFAULT_TARGET = "all"


def resolve_target(target: str | None) -> list[str]:
    """
    Map a build target to emitter keys.

    Accepts the targets in ``PLATFORM_TARGETS`` or a single emitter key,
    case-insensitively. Unknown targets map to an empty list and log a warning.
    """
    name = (target or DEFAULT_TARGET).strip().lower()
    if name in PLATFORM_TARGETS:
        return list(PLATFORM_TARGETS[name])
    if name in PLATFORM_TARGETS[DEFAULT_TARGET]:
        return [name]
    logger.warning(
        'Unknown platform argument "%s". Valid: %s.', name, ", ".join(PLATFORM_TARGETS)
    )
    return []


def select_emitters(
    target: str | None, output_root: Path, config: BuildConfig | None = None
) -> list[Emitter]:
    """Instantiate the emitters for a build target."""
    emitters: list[Emitter] = []
    for key in resolve_target(target):
        emitter_cls = EmitterRegistry.get(key)
        if emitter_cls is None:
            raise KeyError(f"No emitter registered for {key!r}")
        emitters.append(emitter_cls(output_root, config))
    return emitters
