"""
Tests for app settings loading and placeholder substitution.
"""

from pathlib import Path

import pytest

from fitfam.config.loader import Settings, _merge_dict, _substitute, load_settings
from fitfam.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings class."""

    def test_dot_notation(self):
        settings = Settings({"logging": {"level": "DEBUG"}})
        assert settings.get("logging.level") == "DEBUG"
        assert settings.get("logging.missing", "fallback") == "fallback"

    def test_getitem(self):
        settings = Settings({"bundle": {"path": "Resources"}, "name": "FitFam"})
        assert settings["name"] == "FitFam"
        assert isinstance(settings["bundle"], Settings)
        assert settings["bundle.path"] == "Resources"
        with pytest.raises(KeyError):
            _ = settings["missing"]

    def test_contains(self):
        settings = Settings({"a": {"b": 1}})
        assert "a" in settings
        assert "a.b" in settings
        assert "a.c" not in settings

    def test_bundle_path_default(self, tmp_path):
        assert Settings({}).bundle_path(tmp_path) == tmp_path / "Resources"

    def test_bundle_path_absolute(self, tmp_path):
        target = tmp_path / "elsewhere"
        settings = Settings({"bundle": {"path": str(target)}})
        assert settings.bundle_path(Path("/unused")) == target

    def test_validate_sections(self):
        with pytest.raises(ConfigurationError, match="'logging' must be a dictionary"):
            Settings({"logging": "loud"}).validate()
        with pytest.raises(ConfigurationError, match="'sources' must be a list"):
            Settings({"sources": {"a": 1}}).validate()
        Settings({"bundle": {"path": "x"}, "sources": []}).validate()

    def test_validate_rejects_unset_path_variables(self, tmp_path, monkeypatch):
        monkeypatch.delenv("FITFAM_MISSING_ROOT", raising=False)
        (tmp_path / "fitfam.yaml").write_text("bundle:\n  path: ${FITFAM_MISSING_ROOT}/Resources\n")
        settings = load_settings(tmp_path)
        with pytest.raises(ConfigurationError, match="bundle.path.*FITFAM_MISSING_ROOT"):
            settings.validate()

    def test_validate_allows_unset_variables_outside_paths(self):
        Settings({"labels": {"title": "${FITFAM_MISSING_TITLE}"}}).validate()


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings.data == {}

    def test_load_basic(self, tmp_path):
        (tmp_path / "fitfam.yaml").write_text("bundle:\n  path: App/Resources\n")
        settings = load_settings(tmp_path)
        assert settings.bundle_path(tmp_path) == tmp_path / "App" / "Resources"

    def test_env_overlay(self, tmp_path):
        (tmp_path / "fitfam.yaml").write_text("logging:\n  level: INFO\n  console_enabled: true\n")
        (tmp_path / "fitfam.prod.yaml").write_text("logging:\n  level: WARNING\n")
        settings = load_settings(tmp_path, env="prod")
        assert settings.get("logging.level") == "WARNING"
        assert settings.get("logging.console_enabled") is True

    def test_env_placeholders(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FITFAM_BUNDLE", "/opt/bundle")
        (tmp_path / "fitfam.yaml").write_text("bundle:\n  path: ${FITFAM_BUNDLE}/{env}\n")
        settings = load_settings(tmp_path, env="staging")
        assert settings.get("bundle.path") == "/opt/bundle/staging"

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "fitfam.yaml").write_text("bundle: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Error parsing fitfam.yaml"):
            load_settings(tmp_path)

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "fitfam.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_settings(tmp_path)


class TestSubstitution:
    """Tests for placeholder substitution."""

    def test_unset_variable_left_as_is(self, monkeypatch):
        monkeypatch.delenv("FITFAM_NOT_SET", raising=False)
        assert _substitute({"a": "${FITFAM_NOT_SET}"}, "dev") == {"a": "${FITFAM_NOT_SET}"}

    def test_nested_and_lists(self, monkeypatch):
        monkeypatch.setenv("FITFAM_X", "x")
        data = {"a": [{"b": "${FITFAM_X}-{env}"}], "n": 3}
        assert _substitute(data, "dev") == {"a": [{"b": "x-dev"}], "n": 3}

    def test_merge_dict(self):
        base = {"a": {"b": 1, "c": 2}, "d": 1}
        _merge_dict(base, {"a": {"c": 3}, "e": 4})
        assert base == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}
