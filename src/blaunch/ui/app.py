"""Launcher window using prompt_toolkit."""

from __future__ import annotations

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.styles import Style

from blaunch.config.schema import Config, Terminal
from blaunch.core.interpreter import ShellCommand, interpret
from blaunch.core.resolver import Complete, Partial, Resolution
from blaunch.ui.keybindings import KeyBindingManager
from blaunch.ui.render import (
    NO_MATCH_MESSAGE,
    SHELL_MODE_MESSAGE,
    render_nodes,
    render_status,
)

DEFAULT_WIDTH = 80
PROMPT = "> "

Selection = Terminal | ShellCommand


class LauncherApp:
    """Input field above the list of entries matching what has been typed."""

    def __init__(self, config: Config) -> None:
        """Initialize the launcher.

        Args:
            config: Loaded configuration, shared with the key bindings
        """
        self.config = config
        self.state: Resolution | ShellCommand = interpret(config, "")
        self.selection: Selection | None = None
        self.status: str | None = None

        self.buffer = Buffer(
            multiline=False,
            name="input",
            on_text_changed=self._on_text_changed,
        )

        self._kb_manager = KeyBindingManager(config, self)

        # Application (created in run())
        self.app: Application | None = None

    def _on_text_changed(self, buffer: Buffer) -> None:
        self.update(buffer.text)

    def update(self, text: str) -> None:
        """Re-interpret the input and exit as soon as it selects a terminal."""
        self.status = None
        self.state = interpret(self.config, text)
        if isinstance(self.state, Complete):
            self.exit(self.state.node)

    def accept(self) -> Selection | None:
        """Get what Enter should launch in the current state, if anything."""
        state = self.state
        if isinstance(state, ShellCommand):
            return None if state.is_blank else state
        if isinstance(state, Complete):
            return state.node
        if len(state.nodes) == 1 and isinstance(state.nodes[0], Terminal):
            return state.nodes[0]
        return None

    def show_status(self, message: str) -> None:
        """Show a message in the list area until the input changes."""
        self.status = message

    def clear(self) -> None:
        """Empty the input field."""
        self.status = None
        self.buffer.text = ""

    def exit(self, selection: Selection | None = None) -> None:
        """Remember the selection and stop the application if it is running."""
        self.selection = selection
        if self.app is not None and self.app.future is not None and not self.app.future.done():
            self.app.exit(result=selection)

    def _width(self) -> int:
        if self.app is None:
            return DEFAULT_WIDTH
        return self.app.output.get_size().columns

    def get_output(self) -> StyleAndTextTuples:
        """Get the formatted content of the list area."""
        if self.status:
            return render_status(self.status)
        state = self.state
        if isinstance(state, ShellCommand):
            return render_status(SHELL_MODE_MESSAGE)
        if isinstance(state, Complete):
            return render_status(f"launching {state.node.shortcut}")
        if isinstance(state, Partial) and state.is_empty:
            return render_status(NO_MATCH_MESSAGE)
        return render_nodes(state.nodes, self._width(), self.config.group_marker)

    def _create_layout(self) -> Layout:
        """Create the launcher layout."""
        input_window = Window(
            content=BufferControl(buffer=self.buffer),
            height=1,
            style="class:input",
            get_line_prefix=lambda line, wrap_count: [("class:prompt", PROMPT)],
        )
        rule = Window(height=1, char="─", style="class:rule")
        output = Window(content=FormattedTextControl(self.get_output), wrap_lines=False)
        return Layout(HSplit([input_window, rule, output]), focused_element=input_window)

    def _create_style(self) -> Style:
        """Create prompt_toolkit style from theme."""
        return Style.from_dict(self.config.theme.to_style_dict())

    def run(self) -> Selection | None:
        """Run the launcher until something is selected or it is closed.

        Returns:
            The selected terminal entry or shell command, None if cancelled
        """
        self.app = Application(
            layout=self._create_layout(),
            key_bindings=self._kb_manager.get_bindings(),
            style=self._create_style(),
            full_screen=True,
            mouse_support=False,
        )
        return self.app.run()


def run_launcher(config: Config) -> Selection | None:
    """Show the launcher and return what the user selected.

    Args:
        config: Configuration object

    Returns:
        The selected terminal entry or shell command, None if cancelled
    """
    launcher = LauncherApp(config)
    return launcher.run()
