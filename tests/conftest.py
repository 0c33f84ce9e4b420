"""Pytest configuration and fixtures."""

import pytest

from blaunch.config.loader import load_config_from_string
from blaunch.config.schema import Config

SAMPLE_MENU_YAML = """
shell_prefix: "!"

menu:
  - shortcut: terminal
    description: terminal emulator
    command: xfce4-terminal
  - shortcut: web
    description: web browsers
    children:
      - shortcut: chrome
        description: Google Chrome
        command: chromium
      - shortcut: firefox
        description: Mozilla FireFox
        command: firefox
"""


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    return load_config_from_string(SAMPLE_MENU_YAML)


@pytest.fixture
def menu(sample_config):
    """Root entries of the sample configuration."""
    return sample_config.menu


@pytest.fixture
def nested_config() -> Config:
    """Configuration with groups nested two levels deep."""
    yaml_content = """
menu:
  - shortcut: dev
    description: development
    children:
      - shortcut: ed
        description: editors
        children:
          - shortcut: vim
            description: Vim
            command: xterm -e vim
          - shortcut: code
            description: VS Code
            command: code --new-window
      - shortcut: db
        description: database shell
        command: psql
  - shortcut: doc
    description: documentation
    command: zeal
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def menu_file(tmp_path):
    """Sample menu written to a temporary directory."""
    path = tmp_path / "menu.yaml"
    path.write_text(SAMPLE_MENU_YAML)
    return path
