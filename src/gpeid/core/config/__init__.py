"""
Configuration models and loading.

This module provides Pydantic models for gpeid configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_layered_env
from .loader import (
    ConfigError,
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import CheckConfig, GpeidConfig, OutputConfig

__all__ = [
    # Models
    "CheckConfig",
    "GpeidConfig",
    "OutputConfig",
    # Loader functions
    "ConfigError",
    "clear_cache",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
