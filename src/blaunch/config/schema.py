"""Pydantic models for the menu configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


NODE_CONFIG = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)


def check_entries(entries: Any) -> Any:
    """Check that every raw menu entry carries exactly one of command/children.

    Keys with a null value are dropped so that ``children:`` with nothing
    under it counts as absent.
    """
    if not isinstance(entries, (list, tuple)):
        return entries

    checked: list[Any] = []
    for entry in entries:
        if isinstance(entry, dict):
            entry = {key: value for key, value in entry.items() if value is not None}
            shortcut = entry.get("shortcut", "?")
            has_command = "command" in entry
            has_children = "children" in entry
            if has_command and has_children:
                raise ValueError(f"Menu entry '{shortcut}' has both a command and children")
            if not has_command and not has_children:
                raise ValueError(f"Menu entry '{shortcut}' has neither a command nor children")
        checked.append(entry)
    return checked


class Terminal(BaseModel):
    """A leaf entry that launches a command."""

    model_config = NODE_CONFIG

    shortcut: str = Field(min_length=1, description="Text typed to select this entry")
    description: str = Field(default="", description="Label shown next to the shortcut")
    command: str = Field(min_length=1, description="Command line to launch")


class Group(BaseModel):
    """An entry that opens a nested list of entries."""

    model_config = NODE_CONFIG

    shortcut: str = Field(min_length=1, description="Text typed to enter this group")
    description: str = Field(default="", description="Label shown next to the shortcut")
    children: tuple[Node, ...] = Field(min_length=1, description="Entries inside the group")

    @field_validator("children", mode="before")
    @classmethod
    def parse_children(cls, v: Any) -> Any:
        return check_entries(v)


Node = Terminal | Group

Group.model_rebuild()


def walk_nodes(nodes: Sequence[Node], prefix: str = "") -> Iterator[tuple[str, Node]]:
    """Yield ``(path, node)`` depth-first.

    The path is the text a user types to reach the node: the shortcuts of
    its ancestors followed by its own.
    """
    for node in nodes:
        path = prefix + node.shortcut
        yield path, node
        if isinstance(node, Group):
            yield from walk_nodes(node.children, path)


def find_prefix_conflicts(nodes: Sequence[Node]) -> list[tuple[str, str]]:
    """Find sibling pairs where one shortcut is a prefix of the other.

    Identical shortcuts are reported too.
    """
    conflicts: list[tuple[str, str]] = []
    for i, first in enumerate(nodes):
        for second in nodes[i + 1 :]:
            if first.shortcut.startswith(second.shortcut) or second.shortcut.startswith(
                first.shortcut
            ):
                conflicts.append((first.shortcut, second.shortcut))
    return conflicts


class Theme(BaseModel):
    """prompt_toolkit style strings for each part of the window."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = ""
    input: str = ""
    rule: str = ""
    shortcut: str = ""
    marker: str = ""
    description: str = ""
    status: str = ""

    def to_style_dict(self) -> dict[str, str]:
        """Get the non-empty styles keyed by class name."""
        return {name: style for name, style in self.model_dump().items() if style}


class Config(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(frozen=True)

    shell_prefix: str = Field(
        default="", description="Input prefix that switches to shell command mode ('' disables it)"
    )
    shell: str = Field(default="sh", description="Shell used for shell command mode")
    strict_shortcuts: bool = Field(
        default=False, description="Reject siblings whose shortcuts are prefixes of each other"
    )
    group_marker: str = Field(default="/", description="Suffix shown after group shortcuts")
    theme: Theme = Field(default_factory=Theme)
    keybindings: dict[str, str] = Field(
        default_factory=dict, description="Key specification to action mapping"
    )
    menu: tuple[Node, ...] = Field(min_length=1, description="Root menu entries")

    @field_validator("menu", mode="before")
    @classmethod
    def parse_menu(cls, v: Any) -> Any:
        return check_entries(v)

    @field_validator("keybindings")
    @classmethod
    def check_keybindings(cls, v: dict[str, str]) -> dict[str, str]:
        # Deferred: the UI package imports this module
        from blaunch.ui.keybindings import check_binding

        for key_spec, action_name in v.items():
            check_binding(key_spec, action_name)
        return v

    @model_validator(mode="after")
    def check_siblings(self) -> Config:
        """Reject duplicate sibling shortcuts and report overlapping ones."""
        self._check_level(self.menu, "")
        for path, node in walk_nodes(self.menu):
            if isinstance(node, Group):
                self._check_level(node.children, path)
        return self

    def _check_level(self, nodes: Sequence[Node], path: str) -> None:
        where = f"group '{path}'" if path else "the root menu"
        for first, second in find_prefix_conflicts(nodes):
            if first == second:
                raise ValueError(f"Duplicate shortcut '{first}' in {where}")
            if self.strict_shortcuts:
                raise ValueError(f"Shortcuts '{first}' and '{second}' overlap in {where}")
            logger.warning(
                "Shortcuts '%s' and '%s' overlap in %s; the first one listed wins",
                first,
                second,
                where,
            )

    def iter_nodes(self) -> Iterator[tuple[str, Node]]:
        """Iterate over every entry with the full path typed to reach it."""
        return walk_nodes(self.menu)
