"""
CLI tests using typer's CliRunner.

The build and init commands run against real temporary projects; only
failure paths are patched.
"""

from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from orchestra.cli import app
from orchestra.core.errors import EmitterError

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Orchestra" in result.stdout
        assert "Python" in result.stdout


class TestBuildCommand:
    def test_build_web(self, project):
        result = runner.invoke(app, ["build", "web", "--project", str(project)])

        assert result.exit_code == 0, result.output
        assert "Built 2 brand(s) for css, ts" in result.stdout
        assert (project / "src/styles/theme-acme.css").is_file()
        assert (project / "src/styles/theme-globex-corp.ts").is_file()

    def test_build_defaults_to_all(self, project):
        result = runner.invoke(app, ["build", "-p", str(project)])

        assert result.exit_code == 0, result.output
        assert (project / "tokens/flutter/theme_acme.dart").is_file()

    def test_missing_tokens_exits_1(self, tmp_path):
        result = runner.invoke(app, ["build", "web", "--project", str(tmp_path)])

        assert result.exit_code == 1
        assert "Build failed" in result.stdout

    def test_unknown_platform_exits_0(self, project):
        result = runner.invoke(app, ["build", "desktop", "--project", str(project)])

        assert result.exit_code == 0
        assert "No emitters selected" in result.stdout
        assert not (project / "src").exists()

    def test_group_override_options(self, tmp_path, write_tokens):
        write_tokens(
            tmp_path,
            {
                "Alpha": {"red": {"value": "#f00"}},
                "Omega": {"One": {"a": {"value": "{red}"}}},
                "Zeta": {"Two": {"b": {"value": "1px"}}},
            },
        )
        result = runner.invoke(
            app,
            ["build", "web", "-p", str(tmp_path), "--primitive-key", "Alpha", "--component-key", "Zeta"],
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "src/styles/theme-two.css").is_file()
        assert not (tmp_path / "src/styles/theme-one.css").exists()

    def test_emitter_failure_exits_1(self, project):
        error = EmitterError("disk full", platform="css", brand="Acme")
        with patch("orchestra.cli.build.run_build", side_effect=error):
            result = runner.invoke(app, ["build", "web", "--project", str(project)])

        assert result.exit_code == 1
        assert "disk full" in result.stdout

    def test_log_file(self, project, tmp_path):
        log_file = tmp_path / "build.jsonl"
        result = runner.invoke(
            app, ["build", "ios", "--project", str(project), "--log-file", str(log_file)]
        )

        assert result.exit_code == 0, result.output
        messages = [json.loads(line)["message"] for line in log_file.read_text().splitlines()]
        assert "Building brand: Acme" in messages


class TestInitCommand:
    def test_init_with_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text('{"name": "site"}', encoding="utf-8")

        result = runner.invoke(app, ["init", "web", "--project", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / ".github/workflows/design-syncs.yml").is_file()
        manifest = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert manifest["scripts"]["tokens"] == "orchestra build web"
        assert "orchestra build web" in result.stdout

    def test_init_without_package_json(self, tmp_path):
        result = runner.invoke(app, ["init", "--project", str(tmp_path)])

        assert result.exit_code == 0
        assert "No package.json found" in result.stdout
        assert (tmp_path / ".github/workflows/design-syncs.yml").is_file()

    def test_init_with_invalid_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text("not json", encoding="utf-8")

        result = runner.invoke(app, ["init", "--project", str(tmp_path)])

        assert result.exit_code == 0
        assert "package.json update failed" in result.stdout
        assert (tmp_path / "package.json").read_text(encoding="utf-8") == "not json"
