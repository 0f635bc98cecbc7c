"""Constants for sesh."""

from pathlib import Path

# Config store location, relative to the user's home directory
CONFIG_DIR = Path(".config") / "sesh"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_MODE = 0o755
CONFIG_FILE_MODE = 0o644
CONFIG_INDENT = 2

DEFAULT_EDITOR = "nvim"

# External tools
FIND_COMMAND = "find"
FZF_COMMAND = "fzf"
TMUX_COMMAND = "tmux"

# fzf exits with 130 when the user aborts with ESC or CTRL-C
FZF_EXIT_CANCELLED = 130

EDITOR_WINDOW = "editor"
TERMINAL_WINDOW = "terminal"
TITLE_FORMAT = "#W"

# Logging
LOG_DIR_NAME = "logs"
DEFAULT_LOG_FILE = "sesh.log"
DEFAULT_LOG_MAX_BYTES = 1024 * 1024  # 1 MB
DEFAULT_LOG_BACKUP_COUNT = 3
LOG_FILE_ENV = "SESH_LOG_FILE"
LOG_LEVEL_ENV = "SESH_LOG_LEVEL"
