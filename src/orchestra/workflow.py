"""
Project setup for ``orchestra init``.

- Renders the GitHub Actions workflow that rebuilds tokens on push
- Registers a ``tokens`` script in an existing package.json
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path, PurePosixPath

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from orchestra.core.config import BuildConfig
from orchestra.core.errors import ConfigError, OrchestraError
from orchestra.emitters import select_emitters

WORKFLOW_PATH = Path(".github") / "workflows" / "design-syncs.yml"
WORKFLOW_TEMPLATE = "design-syncs.yml.j2"
PACKAGE_NAME = "orchestra"
PYTHON_VERSION = "3.12"
SCRIPT_NAME = "tokens"

_SAMPLE_BRAND = "brand"


class ScriptStatus(StrEnum):
    """Outcome of registering the package.json script."""

    UPDATED = "updated"
    MISSING = "missing"


def _environment() -> Environment:
    # [[ ]] keeps ${{ }} GitHub expressions literal
    return Environment(
        loader=PackageLoader("orchestra", "templates"),
        undefined=StrictUndefined,
        variable_start_string="[[",
        variable_end_string="]]",
        keep_trailing_newline=True,
    )


def workflow_file_pattern(target: str | None, config: BuildConfig | None = None) -> str:
    """
    Space-separated globs of the files a build for ``target`` writes.

    Examples:
        >>> workflow_file_pattern("web")
        'src/styles/*.css src/styles/*.ts'
    """
    patterns: list[str] = []
    root = config.project_root if config else Path(".")
    for emitter in select_emitters(target, root, config):
        destination = PurePosixPath(emitter.destination(_SAMPLE_BRAND).as_posix())
        pattern = str(destination.parent / f"*{destination.suffix}")
        if pattern not in patterns:
            patterns.append(pattern)
    return " ".join(patterns)


def render_workflow(target: str | None, config: BuildConfig | None = None) -> str:
    """Render the design-sync workflow document for ``target``."""
    target_name = (target or "all").strip().lower()
    try:
        template = _environment().get_template(WORKFLOW_TEMPLATE)
        return template.render(
            target=target_name,
            file_pattern=workflow_file_pattern(target_name, config),
            package=PACKAGE_NAME,
            python_version=PYTHON_VERSION,
        )
    except TemplateError as e:
        raise OrchestraError(f"Failed to render workflow template: {e}") from e


def write_workflow(project_root: Path, target: str | None, config: BuildConfig | None = None) -> Path:
    """
    Write ``.github/workflows/design-syncs.yml``, replacing any existing copy.

    Returns:
        Path of the written workflow
    """
    path = project_root / WORKFLOW_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_workflow(target, config), encoding="utf-8")
    return path


def register_build_script(project_root: Path, target: str | None) -> ScriptStatus:
    """
    Set ``scripts.tokens`` in package.json to ``orchestra build <target>``.

    Returns:
        ``UPDATED`` when written, ``MISSING`` when there is no package.json

    Raises:
        ConfigError: If package.json is not a JSON object
    """
    path = project_root / "package.json"
    if not path.exists():
        return ScriptStatus.MISSING

    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse package.json: {e}") from e
    if not isinstance(manifest, dict):
        raise ConfigError("package.json must contain a JSON object")

    scripts = manifest.setdefault("scripts", {})
    if not isinstance(scripts, dict):
        raise ConfigError('"scripts" in package.json must be an object')
    scripts[SCRIPT_NAME] = build_command(target)

    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return ScriptStatus.UPDATED


def build_command(target: str | None) -> str:
    return f"{PACKAGE_NAME} build {(target or 'all').strip().lower()}"
