"""Home directory and path resolution helpers."""

import logging
import os

from collections.abc import Callable
from pathlib import Path

from sesh.errors import HomeResolutionError, PathResolutionError

logger = logging.getLogger(__name__)

HomeResolver = Callable[[], str]


def default_home_dir() -> str:
    """
    Look up the current user's home directory.

    Returns:
        Home directory path

    Raises:
        HomeResolutionError: If the home directory cannot be determined
    """
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeResolutionError(
            f"could not determine user home directory: {e}"
        ) from e

    if not home:
        raise HomeResolutionError("could not determine user home directory")
    return home


def expand_home(raw: str, home_resolver: HomeResolver = default_home_dir) -> str:
    """
    Replace a leading ``~`` with the home directory.

    The remainder is joined as a path segment, so ``~/`` is the home
    directory itself and ``~projects`` becomes ``<home>/projects``.

    Raises:
        HomeResolutionError: If ``raw`` starts with ``~`` and home is unknown
    """
    if not raw.startswith("~"):
        return raw

    home = home_resolver()
    if not home:
        raise HomeResolutionError("could not determine user home directory")
    remainder = raw[1:].lstrip(os.sep)
    return os.path.join(home, remainder) if remainder else home


def resolve_path(raw: str, home_resolver: HomeResolver = default_home_dir) -> str:
    """
    Resolve user input to the absolute form stored in the config.

    Resolution is purely syntactic: the path does not need to exist.

    Args:
        raw: Path as typed by the user
        home_resolver: Callable returning the home directory

    Returns:
        Normalized absolute path

    Raises:
        PathResolutionError: If home expansion is needed but home is unknown
    """
    try:
        expanded = expand_home(raw, home_resolver)
    except HomeResolutionError as e:
        raise PathResolutionError(f"failed to resolve path {raw!r}: {e}") from e
    resolved = os.path.abspath(expanded)
    # POSIX normpath keeps a leading double slash
    if resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return resolved


def is_valid_dir(raw: str, home_resolver: HomeResolver = default_home_dir) -> bool:
    """Check whether ``raw`` (after ``~`` expansion) is an existing directory."""
    try:
        expanded = expand_home(raw, home_resolver)
    except HomeResolutionError as e:
        logger.debug(f"Cannot expand {raw!r}: {e}")
        return False
    return os.path.isdir(expanded)
