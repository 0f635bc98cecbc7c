"""Exception types raised by sesh."""


class SeshError(Exception):
    """Base exception for sesh errors."""


class ConfigError(SeshError):
    """Base exception for config store errors."""


class HomeResolutionError(ConfigError):
    """The user's home directory could not be determined."""


class ConfigReadError(ConfigError):
    """The config file exists but could not be read."""


class ConfigWriteError(ConfigError):
    """The config file could not be written."""


class ConfigParseError(ConfigError):
    """The config file is not a valid sesh configuration."""


class PathResolutionError(ConfigError):
    """A home-relative path could not be expanded."""


class PathNotFoundError(ConfigError):
    """A path slated for removal is not in the stored search paths."""

    def __init__(self, path: str):
        super().__init__(f"path not found: {path}")
        self.path = path


class ExternalToolError(SeshError):
    """Base exception for failures of fzf, find or tmux."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class SelectorError(ExternalToolError):
    """The interactive project picker failed."""


class LaunchError(ExternalToolError):
    """A tmux session could not be created or attached."""
