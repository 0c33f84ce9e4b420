"""Core functionality: resolver, input interpreter and launcher."""

from blaunch.core.interpreter import ShellCommand, interpret
from blaunch.core.launcher import (
    LaunchError,
    command_argv,
    launch,
    launch_node,
    launch_shell,
    shell_argv,
)
from blaunch.core.resolver import Complete, Partial, Resolution, resolve

__all__ = [
    "Complete",
    "LaunchError",
    "Partial",
    "Resolution",
    "ShellCommand",
    "command_argv",
    "interpret",
    "launch",
    "launch_node",
    "launch_shell",
    "resolve",
    "shell_argv",
]
