"""Bindable actions for the launcher window."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blaunch.ui.app import LauncherApp


@dataclass
class ActionResult:
    """Result of executing an action."""

    success: bool = True
    message: str = ""
    exit_app: bool = False
    value: Any = None


class ActionRegistry:
    """Registry of bindable actions."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[..., ActionResult]] = {}

    def register(self, name: str) -> Callable[[Callable[..., ActionResult]], Callable[..., ActionResult]]:
        """Decorator to register an action."""
        def decorator(func: Callable[..., ActionResult]) -> Callable[..., ActionResult]:
            self._actions[name] = func
            return func
        return decorator

    def get(self, name: str) -> Callable[..., ActionResult] | None:
        """Get an action by name or abbreviation."""
        if name in self._actions:
            return self._actions[name]

        matches = self._match_abbreviation(name)
        if len(matches) == 1:
            return self._actions[matches[0]]
        elif len(matches) > 1:
            raise ValueError(f"Ambiguous action '{name}': matches {matches}")

        return None

    def _match_abbreviation(self, abbrev: str) -> list[str]:
        """Match an abbreviation like 'c-s' against dash-separated names."""
        abbrev_parts = abbrev.split("-")
        matches: list[str] = []

        for action_name in self._actions:
            name_parts = action_name.split("-")
            if len(abbrev_parts) > len(name_parts):
                continue
            if all(name_parts[i].startswith(part) for i, part in enumerate(abbrev_parts)):
                matches.append(action_name)

        return matches

    def list_actions(self) -> list[str]:
        """List all registered action names."""
        return sorted(self._actions.keys())

    def execute(self, name: str, app: LauncherApp) -> ActionResult:
        """Execute an action by name.

        Args:
            name: Action name or abbreviation
            app: The launcher instance

        Returns:
            ActionResult
        """
        action = self.get(name)
        if action is None:
            return ActionResult(success=False, message=f"Unknown action: {name}")
        return action(app)


# Global action registry
actions = ActionRegistry()


@actions.register("quit")
def quit_launcher(app: LauncherApp) -> ActionResult:
    """Close the launcher without launching anything."""
    return ActionResult(exit_app=True)


@actions.register("accept")
def accept(app: LauncherApp) -> ActionResult:
    """Run the shell command, or the only remaining entry if it is a terminal."""
    selected = app.accept()
    if selected is None:
        return ActionResult(success=False, message="Nothing to launch")
    return ActionResult(exit_app=True, value=selected)


@actions.register("clear")
def clear(app: LauncherApp) -> ActionResult:
    """Empty the input field."""
    app.clear()
    return ActionResult()
