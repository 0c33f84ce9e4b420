"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
shell_prefix: ""
shell: sh
strict_shortcuts: false
group_marker: "/"

theme:
  prompt: "bold"
  rule: "fg:ansibrightblack"
  shortcut: "bold fg:ansicyan"
  marker: "fg:ansibrightblack"
  description: ""
  status: "italic fg:ansiyellow"

keybindings:
  escape: quit
  ctrl-c: quit
  ctrl-g: quit
  enter: accept
  ctrl-u: clear
"""

CONFIG_FILE_NAMES = ("menu.yaml", "menu.yml", "menu.json")

SYSTEM_CONFIG_DIR = "/etc/blaunch"
