"""Command-line interface for blaunch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from blaunch.config.loader import ConfigError, load_config
from blaunch.config.schema import Config, Group, Terminal
from blaunch.core.interpreter import ShellCommand
from blaunch.core.launcher import LaunchError, launch_node, launch_shell
from blaunch.ui.app import run_launcher

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="blaunch",
        description="Keyboard-driven application launcher with nested shortcut menus",
        epilog="Example: blaunch --config ~/.config/blaunch/menu.yaml",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Menu file path (default: ~/.config/blaunch/menu.yaml, then /etc/blaunch/menu.json)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: conf.d next to the menu file)",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the configuration, list every entry and exit",
    )

    parser.add_argument(
        "--print",
        "-p",
        action="store_true",
        dest="print_result",
        help="Print the selected command instead of launching it",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version="%(prog)s 0.1.0",
    )

    return parser.parse_args(args)


def print_menu(config: Config) -> None:
    """Print every entry with the full text that selects it."""
    for path, node in config.iter_nodes():
        if isinstance(node, Group):
            print(f"{path}{config.group_marker}\t{node.description}")
        else:
            print(f"{path}\t{node.description}\t{node.command}")


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    if parsed.check:
        print_menu(config)
        return 0

    try:
        selection = run_launcher(config)

        if selection is None:
            return 0

        if isinstance(selection, ShellCommand):
            if parsed.print_result:
                print(selection.text)
            else:
                launch_shell(selection.text, config.shell)
        elif isinstance(selection, Terminal):
            if parsed.print_result:
                print(selection.command)
            else:
                launch_node(selection)

        return 0

    except KeyboardInterrupt:
        return 130
    except (LaunchError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
