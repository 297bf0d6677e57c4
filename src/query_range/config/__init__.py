# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Configuration module for the query range package.

This module provides utilities for loading configuration from YAML files
shipped with the package and accessing individual settings.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Get the directory containing this module
CONFIG_DIR = Path(__file__).parent


def load_yaml_config(config_name: str = "settings.yaml") -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        config_name: Name of the configuration file (default: settings.yaml).

    Returns:
        Dict[str, Any]: The loaded configuration dictionary.

    Raises:
        FileNotFoundError: If the configuration file is not found.
    """
    config_path = CONFIG_DIR / config_name
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


# Cache for settings to avoid repeated file reads
_settings_cache: Optional[Dict[str, Any]] = None


def get_settings() -> Dict[str, Any]:
    """
    Load the package settings.

    Returns:
        Dict[str, Any]: The settings dictionary.
    """
    global _settings_cache

    if _settings_cache is None:
        _settings_cache = load_yaml_config("settings.yaml")

    return _settings_cache


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a single setting.

    Args:
        key: The setting name.
        default: Value returned when the setting is absent.

    Returns:
        Any: The configured value, or the default.
    """
    return get_settings().get(key, default)


__all__ = [
    "CONFIG_DIR",
    "load_yaml_config",
    "get_settings",
    "get_setting",
]
