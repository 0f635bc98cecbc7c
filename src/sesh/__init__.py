"""
sesh: open project directories as persistent tmux sessions.
"""

from sesh.config import ConfigStore
from sesh.errors import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    HomeResolutionError,
    LaunchError,
    PathNotFoundError,
    PathResolutionError,
    SelectorError,
    SeshError,
)

__all__ = [
    "ConfigStore",
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigWriteError",
    "HomeResolutionError",
    "LaunchError",
    "PathNotFoundError",
    "PathResolutionError",
    "SelectorError",
    "SeshError",
]
