"""Incremental matching of typed text against the menu tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from blaunch.config.schema import Group, Node, Terminal


@dataclass(frozen=True)
class Partial:
    """The text is still a prefix of the listed entries (possibly none)."""

    nodes: tuple[Node, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes


@dataclass(frozen=True)
class Complete:
    """The text selects exactly one terminal entry."""

    node: Terminal


Resolution = Partial | Complete


def resolve(candidates: Sequence[Node], text: str) -> Resolution:
    """Resolve typed text against the entries at one menu level.

    Candidates are scanned in order. Every entry whose shortcut starts with
    ``text`` is collected. The first entry whose whole shortcut is a prefix
    of ``text`` takes over the rest of the input: a terminal completes if
    nothing is left and yields no match otherwise, a group resolves the
    remainder against its children.

    Args:
        candidates: Entries at the current level, in display order
        text: Input not yet consumed by enclosing groups

    Returns:
        Complete for an exact terminal match, Partial otherwise
    """
    if not text:
        return Partial(tuple(candidates))

    matches: list[Node] = []

    for node in candidates:
        if node.shortcut.startswith(text):
            matches.append(node)

        if not text.startswith(node.shortcut):
            continue

        remaining = text[len(node.shortcut) :]

        if isinstance(node, Group):
            return resolve(node.children, remaining)

        if remaining:
            # Typed past the end of a terminal
            return Partial()

        return Complete(node)

    return Partial(tuple(matches))
