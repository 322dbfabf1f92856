"""Tests for settings loading and logging setup."""

import logging

import pytest

from scsslens.config import Settings, configure_logging, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()

        assert settings.include == "**/*.scss"
        assert settings.exclude == [".git", "node_modules"]
        assert settings.log_level == "WARNING"

    def test_from_file(self, tmp_path):
        path = tmp_path / "scss-lens.json"
        path.write_text('{"exclude": ["vendor"], "log_level": "DEBUG"}')
        settings = load_settings(path)

        assert settings.exclude == ["vendor"]
        assert settings.include == "**/*.scss"
        assert settings.log_level == "DEBUG"

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "scss-lens.json"
        path.write_text('{"log_level": "DEBUG"}')
        settings = load_settings(path, log_level="INFO", include=None)

        assert settings.log_level == "INFO"
        assert settings.include == "**/*.scss"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scss-lens.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="scss-lens.json"):
            load_settings(path)

    def test_unknown_field(self, tmp_path):
        path = tmp_path / "scss-lens.json"
        path.write_text('{"projects": []}')

        with pytest.raises(ValueError):
            load_settings(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "scss-lens.json"
        path.write_text('{"exclude": "vendor"}')

        with pytest.raises(ValueError):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.json")

    def test_settings_struct(self):
        assert Settings(include="*.scss").exclude == [".git", "node_modules"]


class TestConfigureLogging:
    def test_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")
            assert root.level == logging.DEBUG
            configure_logging("no-such-level")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
