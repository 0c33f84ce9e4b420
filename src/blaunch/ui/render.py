"""Formatted text for the candidate list and status messages."""

from __future__ import annotations

from collections.abc import Sequence

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.utils import get_cwidth

from blaunch.config.schema import Group, Node

SHELL_MODE_MESSAGE = "shell command mode"
NO_MATCH_MESSAGE = "no match"


def render_row(node: Node, width: int, group_marker: str = "/") -> StyleAndTextTuples:
    """Render one entry: shortcut on the left, description flush right."""
    marker = group_marker if isinstance(node, Group) else ""
    used = get_cwidth(node.shortcut) + get_cwidth(marker) + get_cwidth(node.description)
    padding = max(width - used, 1)

    row: StyleAndTextTuples = [("class:shortcut", node.shortcut)]
    if marker:
        row.append(("class:marker", marker))
    row.append(("", " " * padding))
    row.append(("class:description", node.description))
    return row


def render_nodes(
    nodes: Sequence[Node], width: int, group_marker: str = "/"
) -> StyleAndTextTuples:
    """Render entries one per line, in the given order."""
    lines: StyleAndTextTuples = []
    for i, node in enumerate(nodes):
        if i:
            lines.append(("", "\n"))
        lines.extend(render_row(node, width, group_marker))
    return lines


def render_status(message: str) -> StyleAndTextTuples:
    """Render an informational message in place of the list."""
    return [("class:status", message)]
