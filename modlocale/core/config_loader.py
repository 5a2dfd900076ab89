#!/usr/bin/env python3
"""Configuration loader with environment-based config support."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from modlocale.core.config_schema import config_to_dict, validate_config
from modlocale.core.logging_utils import setup_logger

logger = setup_logger("modlocale.config")

# config/base.yaml at the project root
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "base.yaml"


class ConfigError(Exception):
    """Raised when the configuration fails validation."""


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML files with environment-based overrides.

    Loads the base config and merges the environment-specific config from
    envs/{MODLOCALE_ENV}.yaml next to it (default: dev).

    Args:
        config_path: Path to base config file (default: config/base.yaml)

    Returns:
        Configuration dictionary with environment overrides applied

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        yaml.YAMLError: If a config file is invalid YAML
        ConfigError: If validation fails

    Environment Variables:
        MODLOCALE_ENV: Environment name (dev|prod, default: dev)
        STRICT_CONFIG: Set to 0 to skip schema validation
    """
    env = os.getenv("MODLOCALE_ENV", "dev")

    if config_path is None:
        config_file = DEFAULT_CONFIG_PATH
        if not config_file.exists():
            logger.debug(f"No config at {config_file}, using defaults")
    else:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    config: dict[str, Any] = {}
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

    env_config_path = config_file.parent / "envs" / f"{env}.yaml"
    if env_config_path.exists():
        logger.info(f"Loading {env} environment config")
        with open(env_config_path, encoding="utf-8") as f:
            env_config = yaml.safe_load(f)
        if env_config:
            _deep_merge(config, env_config)

    config = _expand_env_vars(config)

    if os.getenv("STRICT_CONFIG", "1") != "0":
        try:
            config = config_to_dict(validate_config(config))
        except ValidationError as e:
            raise ConfigError(f"Config validation failed: {e}") from e

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} environment variables in config.

    Args:
        obj: Config object (dict, list, str, or other)

    Returns:
        Object with environment variables expanded
    """
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):

        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.getenv(var_name, match.group(0))  # Keep original if not found

        return re.sub(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)", replace_env, obj)
    else:
        return obj


def _deep_merge(base: dict, override: dict):
    """Deep merge override dict into base dict in-place.

    Args:
        base: Base configuration dictionary (modified in-place)
        override: Override configuration dictionary
    """
    for key, value in override.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Get nested config value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'localization.primary_locale')
        default: Default value if path not found

    Returns:
        Config value or default

    Examples:
        >>> config = {'localization': {'primary_locale': 'en'}}
        >>> get_nested(config, 'localization.primary_locale')
        'en'
        >>> get_nested(config, 'localization.missing', default=[])
        []
    """
    value = config
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def set_nested(config: dict, path: str, value: Any):
    """Set nested config value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'logging.level')
        value: Value to set
    """
    keys = path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current:
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
