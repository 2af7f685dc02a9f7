"""
Init command for Orchestra CLI.

Writes the design-sync GitHub workflow and registers the ``tokens`` npm
script.
"""

from __future__ import annotations

from pathlib import Path

import typer

from orchestra.core.config import load_build_config
from orchestra.core.errors import ConfigError, OrchestraError
from orchestra.workflow import (
    WORKFLOW_PATH,
    ScriptStatus,
    build_command,
    register_build_script,
    write_workflow,
)

from .utils import console, report_error


def init_command(
    platform: str = typer.Argument(
        "all",
        help="Platform the workflow builds: web, android, ios, flutter or all",
    ),
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
) -> None:
    """
    Generate the GitHub workflow and package.json script.

    The workflow is always overwritten so that its file pattern matches the
    selected platform.
    """
    try:
        config = load_build_config(project_dir)
        write_workflow(config.project_root, platform, config)
    except OrchestraError as e:
        report_error("Init", e)
        raise typer.Exit(code=1)
    console.print(f"[green]Generated/Updated {WORKFLOW_PATH.as_posix()}[/green]")

    try:
        status = register_build_script(config.project_root, platform)
    except ConfigError as e:
        report_error("package.json update", e)
        return

    if status == ScriptStatus.MISSING:
        console.print("[yellow]No package.json found in project directory.[/yellow]")
    else:
        console.print(
            f'[green]Set "tokens" script in package.json to: {build_command(platform)}[/green]'
        )
