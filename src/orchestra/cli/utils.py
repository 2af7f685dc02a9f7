"""
Orchestra CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import platform

import typer
from rich.console import Console
from rich.markup import escape

from orchestra._version import get_version
from orchestra.core.errors import OrchestraError

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Orchestra {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def report_error(action: str, error: OrchestraError) -> None:
    """Print an Orchestra error (message, key list, hint) in red."""
    console.print(f"[red]{action} failed:[/red] {escape(str(error))}")
