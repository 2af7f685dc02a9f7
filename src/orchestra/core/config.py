"""
Build configuration.

Settings come from, in increasing precedence:
1. Defaults
2. The ``[tokens]`` table of ``orchestra.toml`` in the project root
3. ``ORCHESTRA_*`` environment variables
4. Explicit command-line options

Example orchestra.toml::

    [tokens]
    token_file = "tokens/design-tokens.json"
    primitive_key = "Primitives"
    component_key = "Brands"
    android_format = "xml"
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .classifier import GroupOverrides
from .errors import ConfigError

CONFIG_FILENAME = "orchestra.toml"
DEFAULT_TOKEN_FILE = Path("tokens") / "design-tokens.json"

ENV_PRIMITIVE_KEY = "ORCHESTRA_PRIMITIVE_KEY"
ENV_COMPONENT_KEY = "ORCHESTRA_COMPONENT_KEY"
ENV_TOKEN_FILE = "ORCHESTRA_TOKEN_FILE"
ENV_ANDROID_FORMAT = "ORCHESTRA_ANDROID_FORMAT"


class AndroidFormat(StrEnum):
    """Output flavour of the Android emitter."""

    XML = "xml"
    KOTLIN = "kotlin"


class BuildConfig(BaseModel):
    """Resolved settings for one build invocation."""

    model_config = ConfigDict(frozen=True)

    project_root: Path = Field(default_factory=Path.cwd)
    token_file: Path = DEFAULT_TOKEN_FILE
    groups: GroupOverrides = Field(default_factory=GroupOverrides)
    android_format: AndroidFormat = AndroidFormat.XML

    @property
    def token_path(self) -> Path:
        """Absolute path of the design-tokens document."""
        if self.token_file.is_absolute():
            return self.token_file
        return self.project_root / self.token_file


def _read_toml_settings(project_root: Path) -> dict[str, Any]:
    path = project_root / CONFIG_FILENAME
    if not path.exists():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e
    section = data.get("tokens", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tokens] in {CONFIG_FILENAME} must be a table")
    return section


def _read_env_settings(env: Mapping[str, str]) -> dict[str, Any]:
    mapping = {
        ENV_TOKEN_FILE: "token_file",
        ENV_PRIMITIVE_KEY: "primitive_key",
        ENV_COMPONENT_KEY: "component_key",
        ENV_ANDROID_FORMAT: "android_format",
    }
    return {field: env[var] for var, field in mapping.items() if env.get(var)}


def load_build_config(
    project_root: Path | None = None,
    env: Mapping[str, str] | None = None,
    **options: Any,
) -> BuildConfig:
    """
    Build a ``BuildConfig`` from orchestra.toml, the environment and options.

    Args:
        project_root: Project directory (default: current directory)
        env: Environment mapping (default: ``os.environ``)
        **options: Command-line values; ``None`` values are ignored. Accepts
            ``token_file``, ``primitive_key``, ``component_key`` and
            ``android_format``.

    Returns:
        Resolved BuildConfig

    Raises:
        ConfigError: If orchestra.toml or a setting is invalid
    """
    root = (project_root or Path.cwd()).resolve()
    settings: dict[str, Any] = {}
    settings.update(_read_toml_settings(root))
    settings.update(_read_env_settings(os.environ if env is None else env))
    settings.update({k: v for k, v in options.items() if v is not None})

    try:
        return BuildConfig(
            project_root=root,
            token_file=Path(settings.get("token_file", DEFAULT_TOKEN_FILE)),
            groups=GroupOverrides(
                primitive_key=settings.get("primitive_key"),
                component_key=settings.get("component_key"),
            ),
            android_format=str(settings.get("android_format", AndroidFormat.XML)).lower(),
        )
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid build configuration: {e}") from e
