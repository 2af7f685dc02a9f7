"""Tests for workflow generation and package.json registration."""

from __future__ import annotations

import json

import pytest
import yaml

from orchestra.core.config import AndroidFormat, BuildConfig
from orchestra.core.errors import ConfigError
from orchestra.workflow import (
    WORKFLOW_PATH,
    ScriptStatus,
    build_command,
    register_build_script,
    render_workflow,
    workflow_file_pattern,
    write_workflow,
)


class TestFilePattern:
    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("web", "src/styles/*.css src/styles/*.ts"),
            ("android", "tokens/android/*.xml"),
            ("ios", "tokens/ios/*.swift"),
            ("flutter", "tokens/flutter/*.dart"),
            (
                "all",
                "src/styles/*.css src/styles/*.ts tokens/android/*.xml "
                "tokens/ios/*.swift tokens/flutter/*.dart",
            ),
        ],
    )
    def test_patterns(self, target, expected):
        assert workflow_file_pattern(target) == expected

    def test_kotlin_android(self, tmp_path):
        config = BuildConfig(project_root=tmp_path, android_format=AndroidFormat.KOTLIN)
        assert workflow_file_pattern("android", config) == "tokens/android/*.kt"

    def test_unknown_target(self):
        assert workflow_file_pattern("windows") == ""


class TestRenderWorkflow:
    def test_valid_yaml(self):
        document = yaml.safe_load(render_workflow("web"))

        assert document["name"] == "Orchestra Design System Sync"
        # YAML 1.1 reads the bare "on" key as True
        trigger = document.get("on", document.get(True))
        assert trigger == {"push": {"paths": ["tokens/**/*.json"]}}

        steps = document["jobs"]["build-tokens"]["steps"]
        runs = [step.get("run") for step in steps]
        assert "orchestra build web" in runs
        assert "pip install orchestra" in runs

        commit = steps[-1]
        assert commit["uses"] == "stefanzweifel/git-auto-commit-action@v5"
        assert commit["with"]["commit_message"] == "Design Token Updates"
        assert commit["with"]["file_pattern"] == "src/styles/*.css src/styles/*.ts"

    def test_github_expressions_kept(self):
        content = render_workflow("ios")
        assert "${{ github.ref_name }}" in content
        assert "[[" not in content

    def test_target_normalized(self):
        assert "orchestra build all" in render_workflow(None)
        assert "orchestra build android" in render_workflow(" Android ")

    def test_write_workflow_overwrites(self, tmp_path):
        path = tmp_path / WORKFLOW_PATH
        path.parent.mkdir(parents=True)
        path.write_text("stale", encoding="utf-8")

        assert write_workflow(tmp_path, "flutter") == path
        assert "orchestra build flutter" in path.read_text(encoding="utf-8")


class TestRegisterBuildScript:
    def test_missing_package_json(self, tmp_path):
        assert register_build_script(tmp_path, "web") == ScriptStatus.MISSING
        assert not (tmp_path / "package.json").exists()

    def test_adds_script_and_keeps_other_fields(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "site", "scripts": {"dev": "vite"}}), encoding="utf-8")

        assert register_build_script(tmp_path, "web") == ScriptStatus.UPDATED

        manifest = json.loads(path.read_text(encoding="utf-8"))
        assert manifest == {"name": "site", "scripts": {"dev": "vite", "tokens": "orchestra build web"}}
        assert path.read_text(encoding="utf-8").endswith("}\n")

    def test_creates_scripts_section(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{}", encoding="utf-8")

        register_build_script(tmp_path, None)

        assert json.loads(path.read_text(encoding="utf-8"))["scripts"] == {"tokens": "orchestra build all"}

    @pytest.mark.parametrize("content", ["{oops", "[]", '{"scripts": "npm test"}'])
    def test_invalid_package_json(self, tmp_path, content):
        (tmp_path / "package.json").write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            register_build_script(tmp_path, "web")

    def test_build_command(self):
        assert build_command("IOS") == "orchestra build ios"
