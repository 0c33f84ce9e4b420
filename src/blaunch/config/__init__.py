"""Configuration loading and schema definitions."""

from blaunch.config.loader import ConfigError, load_config, load_config_from_string
from blaunch.config.schema import (
    Config,
    Group,
    Node,
    Terminal,
    Theme,
    find_prefix_conflicts,
    walk_nodes,
)

__all__ = [
    "Config",
    "ConfigError",
    "Group",
    "Node",
    "Terminal",
    "Theme",
    "find_prefix_conflicts",
    "load_config",
    "load_config_from_string",
    "walk_nodes",
]
