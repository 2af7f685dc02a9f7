"""
Orchestra CLI Package.

- build.py: token build command
- init.py: workflow and package.json setup
- utils.py: shared console and version helpers
"""

from __future__ import annotations

import typer

from .build import build_command
from .init import init_command
from .utils import version_callback

app = typer.Typer(
    help="""Orchestra - design tokens to platform theme files

Commands:
  • build [platform]  Build design tokens (web, android, ios, flutter, all)
  • init [platform]   Generate GitHub workflow and package.json script
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Orchestra CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="init")(init_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "build_command", "init_command"]
