"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from blaunch.config.defaults import CONFIG_FILE_NAMES, DEFAULT_CONFIG_YAML, SYSTEM_CONFIG_DIR
from blaunch.config.schema import Config

logger = logging.getLogger(__name__)

DROPIN_DIR_NAME = "conf.d"


class ConfigError(ValueError):
    """The configuration is missing or invalid."""


def user_config_dir() -> Path:
    """Get the per-user configuration directory (honours XDG_CONFIG_HOME)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "blaunch"
    return Path.home() / ".config" / "blaunch"


def config_search_paths() -> list[Path]:
    """List candidate configuration files, most specific first."""
    directories = [user_config_dir(), Path(SYSTEM_CONFIG_DIR)]
    return [directory / name for directory in directories for name in CONFIG_FILE_NAMES]


def find_config_file() -> Path:
    """Find the first existing configuration file.

    Raises:
        ConfigError: If none of the search paths exists
    """
    candidates = config_search_paths()
    for path in candidates:
        if path.is_file():
            logger.debug("Using configuration file %s", path)
            return path

    searched = ", ".join(str(path) for path in candidates)
    raise ConfigError(f"No configuration file found (searched {searched})")


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif key in result and isinstance(result[key], list) and isinstance(value, list):
            # Lists extend so drop-ins can append menu entries
            result[key] = result[key] + value
        else:
            result[key] = value

    return result


def parse_document(data: Any, source: str) -> dict[str, Any]:
    """Normalize a loaded document to a mapping.

    A bare list is accepted as the menu itself.
    """
    if data is None:
        return {}
    if isinstance(data, list):
        return {"menu": data}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping or a list of menu entries")
    return data


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML (or JSON) file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Can't open {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Can't parse {path}: {e}") from e
    return parse_document(data, str(path))


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all configuration files from drop-in directory."""
    if not dropin_dir.is_dir():
        return {}

    result: dict[str, Any] = {}
    files = sorted(
        path for path in dropin_dir.iterdir() if path.suffix in (".yaml", ".yml", ".json")
    )

    for path in files:
        logger.debug("Merging drop-in %s", path)
        result = deep_merge(result, load_yaml_file(path))

    return result


def build_config(data: dict[str, Any]) -> Config:
    """Apply defaults and validate a merged document."""
    defaults = yaml.safe_load(DEFAULT_CONFIG_YAML)
    try:
        return Config(**deep_merge(defaults, data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from file and drop-in directory.

    Args:
        config_path: Path to the main file (default: first of config_search_paths())
        dropin_dir: Path to drop-in directory (default: conf.d next to the main file)

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    if config_path is None:
        config_path = find_config_file()
    elif isinstance(config_path, str):
        config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    if dropin_dir is None:
        dropin_dir = config_path.parent / DROPIN_DIR_NAME
    elif isinstance(dropin_dir, str):
        dropin_dir = Path(dropin_dir)

    main_config = load_yaml_file(config_path)
    dropin_config = load_dropin_directory(dropin_dir)

    return build_config(deep_merge(main_config, dropin_config))


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigError(f"Can't parse configuration: {e}") from e
    return build_config(parse_document(data, "<string>"))
