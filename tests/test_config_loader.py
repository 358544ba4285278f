"""
Unit tests for configuration loader.

Tests multi-layer config merging, environment variable overrides,
caching, .env loading and XDG directory handling.
"""

import json
import os
from pathlib import Path

import pytest

from gpeid.core.config import (
    ConfigError,
    GpeidConfig,
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    load_config,
    load_layered_env,
)
from gpeid.core.config.loader import (
    apply_env_overrides,
    deep_merge,
    get_default_config,
    get_xdg_config_home,
    load_json_file,
)
from gpeid.core.config.models import CheckConfig

# ==============================================================================
# Helper Functions Tests
# ==============================================================================


class TestDeepMerge:
    """Test the deep_merge helper function."""

    def test_simple_merge(self):
        """Test merging two simple dicts."""
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self):
        """Test merging nested dicts."""
        base = {"a": 1, "b": {"x": 10, "y": 20}}
        override = {"b": {"y": 30, "z": 40}, "c": 3}
        assert deep_merge(base, override) == {"a": 1, "b": {"x": 10, "y": 30, "z": 40}, "c": 3}

    def test_override_replaces_non_dict(self):
        """Test that lists are replaced, not merged."""
        assert deep_merge({"a": [1, 2, 3]}, {"a": [4]}) == {"a": [4]}

    def test_base_not_mutated(self):
        """Test that the inputs are left untouched."""
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestPaths:
    """Test config path helpers."""

    def test_xdg_config_home_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that XDG_CONFIG_HOME is honoured."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
        assert get_xdg_config_home() == tmp_path / "cfg"
        assert get_user_config_path() == tmp_path / "cfg" / "gpeid" / "config.json"

    def test_xdg_config_home_default(self, monkeypatch: pytest.MonkeyPatch):
        """Test the ~/.config fallback."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        assert get_xdg_config_home() == Path.home() / ".config"

    def test_project_config_path(self, tmp_path: Path):
        """Test the project config file name."""
        assert get_project_config_path(tmp_path) == tmp_path / ".gpeid.json"


class TestLoadJsonFile:
    """Test load_json_file."""

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file gives None."""
        assert load_json_file(tmp_path / "nope.json") is None

    def test_invalid_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        """Test that broken JSON is logged and ignored."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        assert load_json_file(path) is None
        assert "Failed to parse config" in caplog.text

    def test_non_object(self, tmp_path: Path):
        """Test that a top-level array is ignored."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert load_json_file(path) is None


class TestEnvOverrides:
    """Test apply_env_overrides."""

    def test_no_env(self):
        """Test that nothing changes without GPEID_* variables."""
        config = get_default_config()
        assert apply_env_overrides(config) == config

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("false", False), ("0", False), ("off", False), ("true", True), ("1", True)],
    )
    def test_enabled(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool):
        """Test GPEID_ENABLED parsing."""
        monkeypatch.setenv("GPEID_ENABLED", value)
        assert apply_env_overrides(get_default_config())["enabled"] is expected

    def test_output_format(self, monkeypatch: pytest.MonkeyPatch):
        """Test GPEID_OUTPUT_FORMAT keeps other output settings."""
        monkeypatch.setenv("GPEID_OUTPUT_FORMAT", "JSON")
        result = apply_env_overrides({"output": {"show_valid": True}})
        assert result["output"] == {"show_valid": True, "format": "json"}

    def test_extensions(self, monkeypatch: pytest.MonkeyPatch):
        """Test GPEID_EXTENSIONS is split on commas."""
        monkeypatch.setenv("GPEID_EXTENSIONS", ".md, rst,,")
        result = apply_env_overrides({})
        assert result["check"]["extensions"] == [".md", " rst"]


# ==============================================================================
# load_config Tests
# ==============================================================================


class TestLoadConfig:
    """Test the full layered load."""

    def test_defaults(self):
        """Test loading with no config files."""
        config = load_config()

        assert config == GpeidConfig()
        assert config.enabled is True
        assert config.check.extensions == [".txt", ".md", ".gpeid"]
        assert config.output.format == "text"

    def test_project_overrides_user(self, tmp_path: Path, isolated_env: Path):
        """Test precedence of project config over user config."""
        user_path = get_user_config_path()
        user_path.parent.mkdir(parents=True)
        user_path.write_text(json.dumps({"output": {"format": "json", "show_valid": True}}))
        (isolated_env / ".gpeid.json").write_text(json.dumps({"output": {"format": "text"}}))

        config = load_config()

        assert config.output.format == "text"
        assert config.output.show_valid is True

    def test_env_overrides_files(self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that env vars beat the project config."""
        (isolated_env / ".gpeid.json").write_text(json.dumps({"enabled": True}))
        monkeypatch.setenv("GPEID_ENABLED", "false")

        assert load_config().enabled is False

    def test_invalid_value_raises(self, isolated_env: Path):
        """Test that an invalid setting raises ConfigError."""
        (isolated_env / ".gpeid.json").write_text(json.dumps({"output": {"format": "xml"}}))

        with pytest.raises(ConfigError) as exc_info:
            load_config()
        assert "Invalid gpeid configuration" in str(exc_info.value)

    def test_unknown_keys_ignored(self, isolated_env: Path):
        """Test that unknown keys do not break loading."""
        (isolated_env / ".gpeid.json").write_text(json.dumps({"future_option": 1}))
        assert load_config() == GpeidConfig()

    def test_cache(self, isolated_env: Path):
        """Test that the loaded config is cached until cleared."""
        first = load_config()
        (isolated_env / ".gpeid.json").write_text(json.dumps({"enabled": False}))

        assert load_config() is first
        assert load_config(use_cache=False).enabled is False

        clear_cache()
        assert load_config().enabled is False

    def test_explicit_project_dir(self, tmp_path: Path):
        """Test loading project config from another directory."""
        project = tmp_path / "project"
        project.mkdir()
        (project / ".gpeid.json").write_text(json.dumps({"check": {"max_file_size_kb": 5}}))

        assert load_config(project_dir=project, use_cache=False).check.max_file_size_kb == 5


class TestModels:
    """Test config model validation."""

    def test_extensions_normalized(self):
        """Test that suffixes get a leading dot and lowercase."""
        config = CheckConfig(extensions=["MD", ".Txt", " rst ", ""])
        assert config.extensions == [".md", ".txt", ".rst"]

    def test_max_file_size_positive(self):
        """Test that the size limit must be at least 1."""
        with pytest.raises(ValueError):
            CheckConfig(max_file_size_kb=0)


class TestLayeredEnv:
    """Test .env loading."""

    def test_precedence(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test OS env > project .env > user .env."""
        # setenv first so monkeypatch restores keys written by the loader
        for key in ("GPEID_A", "GPEID_B", "GPEID_C"):
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
        monkeypatch.setenv("GPEID_C", "from-os")

        user_env = tmp_path / "user.env"
        user_env.write_text("GPEID_A=user\nGPEID_B=user\nGPEID_C=user\n")
        project_env = tmp_path / "project.env"
        project_env.write_text("GPEID_B=project\nGPEID_C=project\n")

        loaded = load_layered_env(user_env_paths=[user_env], project_env_paths=[project_env])

        assert os.environ["GPEID_A"] == "user"
        assert os.environ["GPEID_B"] == "project"
        assert os.environ["GPEID_C"] == "from-os"
        assert loaded == {"GPEID_A", "GPEID_B"}

    def test_missing_files(self, tmp_path: Path):
        """Test that missing .env files are ignored."""
        loaded = load_layered_env(
            user_env_paths=[tmp_path / "none.env"],
            project_env_paths=[tmp_path / "also-none.env"],
        )
        assert loaded == set()
