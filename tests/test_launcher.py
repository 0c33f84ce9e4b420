"""Tests for the launcher module."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from blaunch.config.schema import Group, Terminal
from blaunch.core.launcher import (
    LaunchError,
    command_argv,
    launch,
    launch_node,
    launch_shell,
    shell_argv,
)


@pytest.fixture
def popen():
    """Patched subprocess.Popen returning a fake process."""
    with patch("blaunch.core.launcher.subprocess.Popen") as mock_popen:
        mock_popen.return_value = MagicMock(pid=4242)
        yield mock_popen


class TestCommandArgv:
    """Tests for command_argv function."""

    def test_single_word(self):
        """Test a command without arguments."""
        node = Terminal(shortcut="t", command="xfce4-terminal")

        assert command_argv(node) == ["xfce4-terminal"]

    def test_arguments_and_quotes(self):
        """Test that arguments are split shell-style."""
        node = Terminal(shortcut="v", command="xterm -T 'my editor' -e vim")

        assert command_argv(node) == ["xterm", "-T", "my editor", "-e", "vim"]

    def test_group_has_no_command(self):
        """Test that a group can't be launched."""
        group = Group(shortcut="web", children=(Terminal(shortcut="ff", command="firefox"),))

        with pytest.raises(LaunchError, match="No command for web"):
            command_argv(group)

    def test_unbalanced_quotes(self):
        """Test that an unparsable command is a launch error."""
        node = Terminal(shortcut="x", command="xterm -T 'oops")

        with pytest.raises(LaunchError, match="Can't parse command for x"):
            command_argv(node)

    def test_blank_command(self):
        """Test that a whitespace-only command is a launch error."""
        node = Terminal(shortcut="x", command="   ")

        with pytest.raises(LaunchError, match="No command for x"):
            command_argv(node)


class TestShellArgv:
    """Tests for shell_argv function."""

    def test_default_shell(self):
        """Test wrapping text in sh -c."""
        assert shell_argv("ls | wc -l") == ["sh", "-c", "ls | wc -l"]

    def test_custom_shell(self):
        """Test wrapping text in another shell."""
        assert shell_argv("echo hi", "bash") == ["bash", "-c", "echo hi"]


class TestLaunch:
    """Tests for launch functions."""

    def test_launch_detached(self, popen):
        """Test that processes are started detached with closed stdio."""
        pid = launch(["firefox", "--new-window"])

        assert pid == 4242
        popen.assert_called_once_with(
            ["firefox", "--new-window"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    def test_launch_failure(self, popen):
        """Test that spawn errors become LaunchError."""
        popen.side_effect = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(LaunchError, match="Can't start process nonexistent"):
            launch(["nonexistent"])

    def test_launch_empty(self, popen):
        """Test that an empty argument vector is rejected."""
        with pytest.raises(LaunchError, match="Empty command"):
            launch([])

        popen.assert_not_called()

    def test_launch_node(self, popen):
        """Test launching a terminal entry."""
        launch_node(Terminal(shortcut="c", command="chromium --incognito"))

        assert popen.call_args.args[0] == ["chromium", "--incognito"]

    def test_launch_shell(self, popen):
        """Test launching a raw shell command."""
        launch_shell("htop -d 5")

        assert popen.call_args.args[0] == ["sh", "-c", "htop -d 5"]

    def test_launch_logged(self, popen, caplog):
        """Test that launches are logged."""
        with caplog.at_level("INFO", logger="blaunch.core.launcher"):
            launch(["xterm", "-e", "top"])

        assert "Launched xterm -e top (pid 4242)" in caplog.text
