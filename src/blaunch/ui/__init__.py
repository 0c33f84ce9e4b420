"""Interactive launcher window using prompt_toolkit."""

from blaunch.ui.app import LauncherApp, run_launcher

__all__ = ["LauncherApp", "run_launcher"]
