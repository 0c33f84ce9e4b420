"""Key binding management for the launcher window."""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import TYPE_CHECKING

from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import ALL_KEYS, KEY_ALIASES, Keys

from blaunch.ui.actions import actions

if TYPE_CHECKING:
    from blaunch.config.schema import Config
    from blaunch.ui.app import LauncherApp


# Mapping of key names to prompt_toolkit Keys
KEY_MAPPING: dict[str, str | Keys | tuple[str | Keys, ...]] = {
    **{f"ctrl-{c}": Keys(f"c-{c}") for c in string.ascii_lowercase},
    **{f"alt-{c}": (Keys.Escape, c) for c in string.ascii_lowercase},
    "ctrl-space": Keys.ControlSpace,
    "alt-backspace": (Keys.Escape, Keys.ControlH),
    # Special keys
    "enter": Keys.ControlM,
    "return": Keys.ControlM,
    "tab": Keys.ControlI,
    "backspace": Keys.ControlH,
    "delete": Keys.Delete,
    "escape": Keys.Escape,
    "up": Keys.Up,
    "down": Keys.Down,
    "left": Keys.Left,
    "right": Keys.Right,
    "home": Keys.Home,
    "end": Keys.End,
    "pageup": Keys.PageUp,
    "pagedown": Keys.PageDown,
    **{f"f{n}": Keys(f"f{n}") for n in range(1, 13)},
}


def parse_key_spec(key_spec: str) -> str | Keys | tuple[str | Keys, ...]:
    """Parse a key specification string to prompt_toolkit key.

    Args:
        key_spec: Key specification like "ctrl-a", "alt-b", "enter"

    Returns:
        prompt_toolkit key specification
    """
    key_lower = key_spec.lower()

    if key_lower in KEY_MAPPING:
        return KEY_MAPPING[key_lower]

    # prompt_toolkit's own names ("c-x", "s-tab") pass through unchanged
    return key_spec


def check_key(key: str | Keys | tuple[str | Keys, ...]) -> None:
    """Check that prompt_toolkit accepts every part of a parsed key.

    Raises:
        ValueError: If a part is neither a known key name nor a single character
    """
    parts = key if isinstance(key, tuple) else (key,)
    for part in parts:
        if isinstance(part, Keys):
            continue
        name = KEY_ALIASES.get(part, part)
        if name in ALL_KEYS or name == "space" or len(name) == 1:
            continue
        raise ValueError(f"Invalid key: {part}")


def check_binding(key_spec: str, action_name: str) -> str | Keys | tuple[str | Keys, ...]:
    """Check one configured binding and get its prompt_toolkit key.

    Raises:
        ValueError: If the key is invalid or the action is unknown or ambiguous
    """
    key = parse_key_spec(key_spec)
    check_key(key)

    if actions.get(action_name) is None:
        available = ", ".join(actions.list_actions())
        raise ValueError(
            f"Unknown action '{action_name}' bound to {key_spec} (available: {available})"
        )
    return key


class KeyBindingManager:
    """Builds prompt_toolkit key bindings from the configured actions."""

    def __init__(self, config: Config, app: LauncherApp) -> None:
        """Initialize key binding manager.

        Args:
            config: Configuration with keybindings
            app: The launcher instance passed to actions
        """
        self.config = config
        self.app = app
        self._bindings = KeyBindings()

        for key_spec, action_name in config.keybindings.items():
            self._bind_key(self._bindings, key_spec, action_name)

    def _bind_key(self, kb: KeyBindings, key_spec: str, action_name: str) -> None:
        """Bind a key to an action.

        Raises:
            ValueError: If the action is unknown or the key is invalid
        """
        key = check_binding(key_spec, action_name)

        def make_handler(name: str) -> Callable:
            def handler(event) -> None:  # type: ignore
                result = actions.execute(name, self.app)
                if result.exit_app:
                    self.app.exit(result.value)
                elif not result.success:
                    self.app.show_status(result.message)

            return handler

        if isinstance(key, tuple):
            kb.add(*key)(make_handler(action_name))
        else:
            kb.add(key)(make_handler(action_name))

    def get_bindings(self) -> KeyBindings:
        """Get the key bindings."""
        return self._bindings
