"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import GpeidConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per session
_config_cache: GpeidConfig | None = None


class ConfigError(Exception):
    """Merged configuration failed validation."""

    pass


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/gpeid/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "gpeid" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .gpeid.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".gpeid.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`. Nested dicts
    are merged, not replaced.

    Example:
        >>> deep_merge({"a": 1, "b": {"x": 10}}, {"b": {"y": 20}})
        {'a': 1, 'b': {'x': 10, 'y': 20}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config at {path}: top level is not an object")
            return None
    except (json.JSONDecodeError, OSError) as e:
        # Config system should be resilient to a broken file
        logger.warning(f"Failed to parse config at {path}: {e}")
        return None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in ("false", "0", "no", "off", "")


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        GPEID_ENABLED - overrides enabled
        GPEID_OUTPUT_FORMAT - overrides output.format
        GPEID_EXTENSIONS - overrides check.extensions (comma-separated)

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if (enabled_str := os.environ.get("GPEID_ENABLED")) is not None:
        result["enabled"] = _parse_bool(enabled_str)

    if format_str := os.environ.get("GPEID_OUTPUT_FORMAT"):
        result["output"] = {**result.get("output", {}), "format": format_str.strip().lower()}

    if extensions_str := os.environ.get("GPEID_EXTENSIONS"):
        extensions = [ext for ext in extensions_str.split(",") if ext.strip()]
        result["check"] = {**result.get("check", {}), "extensions": extensions}

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return GpeidConfig().model_dump()


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> GpeidConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (GPEID_*)
        2. Project config (.gpeid.json)
        3. User config (~/.config/gpeid/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .gpeid.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated GpeidConfig instance

    Raises:
        ConfigError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := load_json_file(user_config_path):
        logger.debug(f"Loaded user config from {user_config_path}")
        merged = deep_merge(merged, user_config)

    project_config_path = get_project_config_path(project_dir)
    if project_config := load_json_file(project_config_path):
        logger.debug(f"Loaded project config from {project_config_path}")
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    try:
        config = GpeidConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid gpeid configuration: {e}") from e

    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
