"""
Build command for Orchestra CLI.

    orchestra build [web|android|ios|flutter|all]
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.markup import escape

from orchestra.build import BuildReport, run_build
from orchestra.core.config import load_build_config
from orchestra.core.errors import OrchestraError
from orchestra.logging import setup_logging

from .utils import console, report_error


def _print_report(report: BuildReport, project_root: Path) -> None:
    for warning in report.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    for token in report.unresolved:
        console.print(
            f"[yellow]Unresolved alias[/yellow] {escape(token.brand)}/"
            f"{escape(token.logical_name)}: {escape(str(token.value))}"
        )

    for path in report.files_written:
        try:
            shown = path.relative_to(project_root)
        except ValueError:
            shown = path
        console.print(f"  [dim]wrote[/dim] {escape(str(shown))}")

    console.print(
        f"[green]Built {len(report.brands)} brand(s) for "
        f"{', '.join(report.platforms) or 'no platforms'}[/green]"
    )


def build_command(
    platform: str = typer.Argument(
        "all",
        help="Target platform: web, android, ios, flutter or all",
    ),
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    primitive_key: str | None = typer.Option(
        None,
        "--primitive-key",
        help="Force the primitives group (overrides ORCHESTRA_PRIMITIVE_KEY)",
    ),
    component_key: str | None = typer.Option(
        None,
        "--component-key",
        help="Force the component/brand group (overrides ORCHESTRA_COMPONENT_KEY)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show debug diagnostics, including unresolved aliases as they occur",
    ),
    log_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--log-file",
        help="Also write a JSONL log to this file",
    ),
) -> None:
    """
    Build design tokens for the selected platform.

    Reads tokens/design-tokens.json and writes one theme file per brand.

    Examples:
        orchestra build             # All platforms
        orchestra build web         # CSS + TypeScript only
        orchestra build android -p ./app
    """
    setup_logging(logging.DEBUG if verbose else logging.INFO, log_file)

    try:
        config = load_build_config(
            project_dir,
            primitive_key=primitive_key,
            component_key=component_key,
        )
        report = run_build(config, platform)
    except OrchestraError as e:
        report_error("Build", e)
        raise typer.Exit(code=1)

    _print_report(report, config.project_root)
