"""
Build runner - orchestrates the token build.

Pipeline:
    design-tokens.json -> normalize -> classify -> primitive lookup
    -> for each brand: walk -> emitters (concurrently)

Brands are built one after another. A brand's emitters run as tasks in an
``asyncio.TaskGroup``; if one fails the others are cancelled and the build
stops. Files written for earlier brands are left in place.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from orchestra.core.classifier import Classification, classify_groups
from orchestra.core.config import BuildConfig
from orchestra.core.errors import EmitterError, TokenFileError
from orchestra.core.modes import PrimitiveLookup, build_primitive_lookup
from orchestra.core.tree import TokenGroup, normalize_tree
from orchestra.core.walker import ResolvedToken, unresolved_tokens, walk_brand
from orchestra.emitters import EmitResult, Emitter, select_emitters

logger = logging.getLogger(__name__)


@dataclass
class BrandBuild:
    """Outcome of building one brand."""

    brand: str
    tokens: list[ResolvedToken]
    result: EmitResult

    @property
    def unresolved(self) -> list[ResolvedToken]:
        return unresolved_tokens(self.tokens)


@dataclass
class BuildReport:
    """
    Result of a build invocation.

    Attributes:
        classification: Role assignment used for the document
        platforms: Emitter keys that ran for each brand
        brands: Per-brand outcomes, in build order
    """

    classification: Classification
    platforms: list[str]
    brands: list[BrandBuild] = field(default_factory=list)

    @property
    def files_written(self) -> list[Path]:
        return [path for brand in self.brands for path in brand.result.files_written]

    @property
    def unresolved(self) -> list[ResolvedToken]:
        return [token for brand in self.brands for token in brand.unresolved]

    @property
    def warnings(self) -> list[str]:
        warnings = [w for brand in self.brands for w in brand.result.warnings]
        if not self.platforms:
            warnings.insert(0, "No emitters selected; nothing was written")
        return warnings


def load_token_document(token_path: Path) -> dict[str, Any]:
    """
    Read and decode the design-tokens document.

    Raises:
        TokenFileError: If the tokens directory or file is missing, the file
            is not valid JSON, or its top level is not an object
    """
    if not token_path.parent.is_dir():
        raise TokenFileError(
            f"Tokens directory not found: {token_path.parent}",
            token_path,
            hint="Export your design tokens into a tokens/ directory at the project root",
        )
    if not token_path.is_file():
        raise TokenFileError(
            f"{token_path.name} not found in {token_path.parent}",
            token_path,
            hint="Export your design tokens to tokens/design-tokens.json",
        )
    try:
        document = json.loads(token_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TokenFileError(f"{token_path} is not valid JSON: {e}", token_path) from e
    if not isinstance(document, dict):
        raise TokenFileError(f"{token_path} must contain a JSON object", token_path)
    return document


class BuildRunner:
    """
    Orchestrates a token build.

    Loads the document once, classifies it, builds the primitive lookup and
    then builds every brand with the emitters selected by the target.
    """

    def __init__(self, config: BuildConfig, target: str | None = None):
        """
        Initialize the build runner.

        Args:
            config: Resolved build configuration
            target: Platform target (web, android, ios, flutter, all, or an
                emitter key); defaults to all
        """
        self.config = config
        self.target = target

    def prepare(self) -> tuple[TokenGroup, Classification, PrimitiveLookup]:
        """Load, normalize and classify the document and build the lookup table."""
        root = normalize_tree(load_token_document(self.config.token_path))
        classification = classify_groups(root, self.config.groups)
        logger.info('Using primitives: "%s"', '", "'.join(classification.primitive_keys))
        logger.info('Using components: "%s"', classification.component_key)
        lookup = build_primitive_lookup(root, classification.primitive_keys)
        return root, classification, lookup

    def emitters(self) -> list[Emitter]:
        return select_emitters(self.target, self.config.project_root, self.config)

    async def build_brand(
        self,
        brand: str,
        subtree: Any,
        lookup: PrimitiveLookup,
        emitters: list[Emitter],
    ) -> BrandBuild:
        """Walk one brand and run its emitters concurrently."""
        tokens = walk_brand(brand, subtree, lookup)
        for token in unresolved_tokens(tokens):
            logger.debug("[%s] %s keeps unresolved alias %s", brand, token.logical_name, token.value)

        result = EmitResult()
        if not emitters:
            return BrandBuild(brand=brand, tokens=tokens, result=result)

        tasks: dict[str, asyncio.Task[EmitResult]] = {}
        try:
            async with asyncio.TaskGroup() as group:
                for emitter in emitters:
                    tasks[emitter.platform] = group.create_task(emitter.emit(brand, tokens))
        except ExceptionGroup as eg:
            platform = next(
                (p for p, t in tasks.items() if t.done() and not t.cancelled() and t.exception()),
                "unknown",
            )
            first = eg.exceptions[0]
            raise EmitterError(
                f'Emitter "{platform}" failed for brand "{brand}": {first}',
                platform=platform,
                brand=brand,
            ) from first

        for emitter in emitters:
            result.merge(tasks[emitter.platform].result())
        return BrandBuild(brand=brand, tokens=tokens, result=result)

    async def run_async(self) -> BuildReport:
        """Run the build."""
        root, classification, lookup = self.prepare()
        component_group = root.children[classification.component_key]
        assert isinstance(component_group, TokenGroup)

        emitters = self.emitters()
        report = BuildReport(
            classification=classification,
            platforms=[emitter.platform for emitter in emitters],
        )
        brands = list(component_group.children)
        logger.info("Found brands: %s", ", ".join(brands) or "none")

        for brand, subtree in component_group.children.items():
            logger.info("Building brand: %s", brand)
            report.brands.append(await self.build_brand(brand, subtree, lookup, emitters))
        return report

    def run(self) -> BuildReport:
        """Run the build from synchronous code."""
        return asyncio.run(self.run_async())


def run_build(config: BuildConfig, target: str | None = None) -> BuildReport:
    """Convenience wrapper: build every brand for ``target``."""
    return BuildRunner(config, target).run()
