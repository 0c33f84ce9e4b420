"""Tests for the actions module."""

import pytest

from blaunch.ui.actions import ActionRegistry, actions
from blaunch.ui.app import LauncherApp


class TestActionRegistry:
    """Tests for ActionRegistry class."""

    def test_register_and_get(self):
        """Test registering and getting an action."""
        registry = ActionRegistry()

        @registry.register("test-action")
        def test_action(app):
            pass

        assert registry.get("test-action") is test_action

    def test_abbreviation_matching(self):
        """Test action abbreviation matching."""
        registry = ActionRegistry()

        @registry.register("clear-input")
        def clear_input(app):
            pass

        @registry.register("close-window")
        def close_window(app):
            pass

        assert registry.get("cl-i") is clear_input
        assert registry.get("clo") is close_window

    def test_ambiguous_abbreviation(self):
        """Test that ambiguous abbreviations raise error."""
        registry = ActionRegistry()

        @registry.register("clear-input")
        def clear_input(app):
            pass

        @registry.register("close-window")
        def close_window(app):
            pass

        with pytest.raises(ValueError, match="Ambiguous"):
            registry.get("c")

    def test_unknown_action(self):
        """Test executing an unknown action."""
        registry = ActionRegistry()

        result = registry.execute("nope", app=None)

        assert not result.success
        assert "Unknown action" in result.message

    def test_list_actions(self):
        """Test listing registered actions."""
        registry = ActionRegistry()

        @registry.register("b-action")
        def b_action(app):
            pass

        @registry.register("a-action")
        def a_action(app):
            pass

        assert registry.list_actions() == ["a-action", "b-action"]


class TestBuiltinActions:
    """Tests for builtin actions in the global registry."""

    def test_registered(self):
        """Test that the builtin actions are registered."""
        assert actions.list_actions() == ["accept", "clear", "quit"]

    def test_quit(self):
        """Test that quit exits without a value."""
        result = actions.execute("quit", app=None)

        assert result.exit_app
        assert result.value is None

    def test_accept_single_terminal(self, sample_config):
        """Test that accept exits with the only remaining terminal."""
        app = LauncherApp(sample_config)
        app.update("webf")

        result = actions.execute("accept", app)

        assert result.exit_app
        assert result.value.shortcut == "firefox"

    def test_accept_nothing(self, sample_config):
        """Test that accept does nothing while several entries match."""
        app = LauncherApp(sample_config)

        result = actions.execute("accept", app)

        assert not result.exit_app
        assert not result.success

    def test_clear(self, sample_config):
        """Test that clear empties the input."""
        app = LauncherApp(sample_config)
        app.buffer.text = "we"

        actions.execute("clear", app)

        assert app.buffer.text == ""
        assert [node.shortcut for node in app.state.nodes] == ["terminal", "web"]
