#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

logger = logging.getLogger("gitminer")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GITMINER_CONFIG environment variable
    2. ~/.gitminer/ directory
    """
    if 'GITMINER_CONFIG' in os.environ:
        path = Path(os.environ['GITMINER_CONFIG'])
        if path.exists():
            return path

    gitminer_dir = Path.home() / '.gitminer'
    for filename in CONFIG_FILENAMES:
        path = gitminer_dir / filename
        if path.exists() and path.stat().st_size > 0:
            return path

    # If no file exists, return default path for saving
    return gitminer_dir / 'config.json'


def _read_config_file(config_path: Path) -> dict:
    """Read a config file in the format given by its suffix."""
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    elif suffix in ['.yaml', '.yml']:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    else:
        with open(config_path, 'r') as f:
            return json.load(f)


def load_config():
    """Load configuration from file.

    Raises:
        ConfigError: If the config file exists but cannot be read
    """
    config_path = get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            file_config = _read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        config = merge_configs(config, file_config)

    return apply_env_overrides(config)


def save_config(config, config_path=None):
    """Save configuration to file."""
    config_path = Path(config_path) if config_path else get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        import toml
        with open(config_path, 'w') as f:
            toml.dump(config, f)
    elif suffix in ['.yaml', '.yml']:
        with open(config_path, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False)
    else:
        with open(config_path, 'w') as f:
            json.dump(config, f, indent=2)

    logger.info(f"Configuration saved to {config_path}")
    return config_path


def get_default_config():
    """Get default configuration."""
    return {
        "parser": {
            "header_marker": "'",
            "strict_headers": False,
            "encoding": "utf-8"
        },
        "git": {
            "timeout_seconds": 120,
            "all_branches": True,
            "no_renames": True,
            "date_format": "short"
        },
        "output": {
            "pretty": False,
            "top": 10
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s"
        }
    }


def configure_logging(config=None, debug=False):
    """
    Configure the gitminer logger from the ``logging`` config section.

    Args:
        config: Loaded configuration (defaults used if None)
        debug: Force DEBUG level
    """
    settings = (config or get_default_config()).get("logging", {})
    level_name = "DEBUG" if debug else str(settings.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format=settings.get("format", "%(levelname)s: %(message)s"),
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )
    logger.setLevel(level)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: GITMINER_SECTION_KEY
    For example: GITMINER_PARSER_STRICT_HEADERS=true
    """
    env_prefix = "GITMINER_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "GITMINER_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if not matched_key:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict: env var is longer than the config path
                break

    return config
