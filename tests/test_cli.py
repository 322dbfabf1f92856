"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from scsslens.cli import app

runner = CliRunner()


@pytest.fixture
def project(write_files):
    return write_files({
        "colors.scss": "$bg: #fff;\n",
        "dark.scss": "$bg: #000;\n",
        "app.scss": '@import "colors";\n.a { background: $bg; }\n',
    })


class TestCli:
    def test_symbols_json(self, project):
        result = runner.invoke(app, ["symbols", str(project), "$bg", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert sorted(entry["file"] for entry in data) == sorted([
            str(project / "colors.scss"),
            str(project / "dark.scss"),
        ])
        assert all(entry["kind"] == "variable" and entry["line"] == 1 for entry in data)

    def test_scan_json(self, project):
        result = runner.invoke(app, ["scan", str(project), "--json"])

        assert result.exit_code == 0
        rows = {row["file"]: row for row in json.loads(result.stdout)}
        assert rows[str(project / "app.scss")]["imports"] == 1
        assert rows[str(project / "colors.scss")]["variables"] == 1

    def test_definition_json(self, project):
        # `$bg` on line 2, column 19 (1-based)
        result = runner.invoke(app, ["definition", str(project), str(project / "app.scss"), "2", "19", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"file": str(project / "colors.scss"), "line": 1, "column": 1}]

    def test_definition_nothing_at_position(self, project):
        result = runner.invoke(app, ["definition", str(project), str(project / "app.scss"), "2", "1", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout) is None

    def test_hover_json(self, project):
        result = runner.invoke(app, ["hover", str(project), str(project / "app.scss"), "2", "19", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"contents": "```scss\n// Symbol from module\ncolors\n```\n"}

    def test_missing_root(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "missing")])

        assert result.exit_code == 1

    def test_bad_config(self, project, tmp_path):
        config = tmp_path / "bad.json"
        config.write_text("[]")
        result = runner.invoke(app, ["scan", str(project), "--config", str(config)])

        assert result.exit_code == 1

    def test_settings_command(self, tmp_path):
        config = tmp_path / "scss-lens.json"
        config.write_text('{"exclude": ["vendor"]}')
        result = runner.invoke(app, ["settings", "--config", str(config), "--log-level", "INFO"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "include": "**/*.scss",
            "exclude": ["vendor"],
            "log_level": "INFO",
        }
