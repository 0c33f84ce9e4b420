"""Input interpretation: shell escape or menu lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blaunch.core.resolver import Resolution, resolve

if TYPE_CHECKING:
    from blaunch.config.schema import Config


@dataclass(frozen=True)
class ShellCommand:
    """Raw shell command typed after the shell prefix."""

    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def interpret(config: Config, text: str) -> ShellCommand | Resolution:
    """Interpret the current input.

    Args:
        config: Loaded configuration
        text: Full contents of the input field

    Returns:
        ShellCommand when the text starts with the shell prefix, otherwise
        the resolution of the text against the root menu
    """
    prefix = config.shell_prefix
    if prefix and text.startswith(prefix):
        return ShellCommand(text[len(prefix) :])
    return resolve(config.menu, text)
