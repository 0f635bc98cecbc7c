"""Interactive project picker built on find and fzf."""

import logging
import os
import shutil
import signal
import subprocess

from collections.abc import Sequence

from sesh.constants import FIND_COMMAND, FZF_COMMAND, FZF_EXIT_CANCELLED
from sesh.errors import SelectorError

logger = logging.getLogger(__name__)


def list_projects_command(search_paths: Sequence[str]) -> list[str]:
    """Build the find invocation listing visible project directories."""
    return [
        FIND_COMMAND,
        *search_paths,
        "-mindepth",
        "1",
        "-maxdepth",
        "1",
        "-type",
        "d",
        "!",
        "-name",
        ".*",
    ]


def select_project(search_paths: Sequence[str]) -> str | None:
    """
    Let the user pick a project directory with fzf.

    Immediate, non-hidden subdirectories of every search path are piped
    into fzf, which takes over the controlling terminal.

    Args:
        search_paths: Directories to list projects from

    Returns:
        The chosen absolute path, or None if nothing was chosen

    Raises:
        SelectorError: If find or fzf is missing or fails
    """
    if not search_paths:
        logger.warning("No search paths configured, nothing to select from")
        return None

    for command in (FIND_COMMAND, FZF_COMMAND):
        if shutil.which(command) is None:
            raise SelectorError(f"{command} not found in PATH")

    find_cmd = list_projects_command(search_paths)
    logger.debug(f"Running: {' '.join(find_cmd)} | {FZF_COMMAND}")

    find_proc = subprocess.Popen(find_cmd, stdout=subprocess.PIPE)
    try:
        fzf_proc = subprocess.Popen(
            [FZF_COMMAND], stdin=find_proc.stdout, stdout=subprocess.PIPE
        )
    except OSError as e:
        find_proc.kill()
        find_proc.wait()
        raise SelectorError(f"failed to start {FZF_COMMAND}: {e}") from e
    finally:
        # fzf holds its own copy of the pipe
        if find_proc.stdout is not None:
            find_proc.stdout.close()

    selected, _ = fzf_proc.communicate()
    find_returncode = find_proc.wait()

    if fzf_proc.returncode == FZF_EXIT_CANCELLED:
        logger.debug("Selection cancelled")
        return None
    if fzf_proc.returncode != 0:
        raise SelectorError(
            f"{FZF_COMMAND} exited with status {fzf_proc.returncode}",
            returncode=fzf_proc.returncode,
        )
    # find dies of SIGPIPE when fzf exits before reading the whole listing
    if find_returncode not in (0, -signal.SIGPIPE):
        raise SelectorError(
            f"{FIND_COMMAND} exited with status {find_returncode}",
            returncode=find_returncode,
        )

    choice = os.fsdecode(selected).strip()
    return choice or None
