"""Spawning of selected commands as detached processes."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from blaunch.config.schema import Node, Terminal

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """A command could not be started."""


def command_argv(node: Node) -> list[str]:
    """Split a terminal entry's command into an argument vector.

    Raises:
        LaunchError: If the entry has no command or it can't be split
    """
    if not isinstance(node, Terminal):
        raise LaunchError(f"No command for {node.shortcut}")

    try:
        argv = shlex.split(node.command)
    except ValueError as e:
        raise LaunchError(f"Can't parse command for {node.shortcut}: {e}") from e

    if not argv:
        raise LaunchError(f"No command for {node.shortcut}")
    return argv


def shell_argv(text: str, shell: str = "sh") -> list[str]:
    """Build the argument vector running text through a shell."""
    return [shell, "-c", text]


def launch(argv: Sequence[str]) -> int:
    """Start a process detached from the launcher.

    Args:
        argv: Program and arguments

    Returns:
        PID of the started process

    Raises:
        LaunchError: If the process can't be started
    """
    if not argv:
        raise LaunchError("Empty command")

    try:
        process = subprocess.Popen(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(f"Can't start process {argv[0]}: {e}") from e

    logger.info("Launched %s (pid %d)", shlex.join(argv), process.pid)
    return process.pid


def launch_node(node: Node) -> int:
    """Launch the command of a terminal entry."""
    return launch(command_argv(node))


def launch_shell(text: str, shell: str = "sh") -> int:
    """Launch a raw shell command."""
    return launch(shell_argv(text, shell))
