"""tmux session management."""

import logging
import os
import shutil
import subprocess

from collections.abc import Mapping

from sesh.constants import EDITOR_WINDOW, TERMINAL_WINDOW, TITLE_FORMAT, TMUX_COMMAND
from sesh.errors import LaunchError

logger = logging.getLogger(__name__)


def session_name_for(project_path: str) -> str:
    """
    Derive the tmux session name for a project directory.

    tmux treats ``.`` in target names as a window/pane separator, so dots in
    the directory name become underscores.
    """
    stripped = project_path.rstrip(os.sep) or os.sep
    return os.path.basename(stripped).replace(".", "_") or stripped


class TmuxLauncher:
    """Create, attach to and switch between per-project tmux sessions."""

    def __init__(
        self, tmux: str = TMUX_COMMAND, environ: Mapping[str, str] | None = None
    ):
        self.tmux = tmux
        self.environ = os.environ if environ is None else environ

    def _run(self, *args: str, **kwargs) -> subprocess.CompletedProcess:
        cmd = [self.tmux, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(cmd, check=False, **kwargs)
        except FileNotFoundError as e:
            raise LaunchError(f"{self.tmux} not found in PATH") from e

    def has_session(self, name: str) -> bool:
        result = self._run("has-session", "-t", name, capture_output=True)
        return result.returncode == 0

    def create_session(self, name: str, project_path: str, editor: str) -> None:
        """
        Create a detached session with an editor and a terminal window.

        The editor window drops into an interactive shell once the editor
        exits.

        Raises:
            LaunchError: If either window cannot be created
        """
        result = self._run(
            "new-session",
            "-ds",
            name,
            "-c",
            project_path,
            "-n",
            EDITOR_WINDOW,
            "sh",
            "-c",
            f"{editor}; exec $SHELL",
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise LaunchError(
                f"failed to create tmux session {name}: {result.stderr.strip()}",
                returncode=result.returncode,
            )

        result = self._run(
            "new-window",
            "-t",
            name,
            "-c",
            project_path,
            "-n",
            TERMINAL_WINDOW,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise LaunchError(
                f"failed to create terminal window: {result.stderr.strip()}",
                returncode=result.returncode,
            )

        for args in (
            ("select-window", "-t", f"{name}:{EDITOR_WINDOW}"),
            ("set-option", "-t", name, "set-titles", "on"),
            ("set-option", "-t", name, "set-titles-string", TITLE_FORMAT),
        ):
            result = self._run(*args, capture_output=True, text=True)
            if result.returncode != 0:
                logger.warning(
                    f"tmux {args[0]} failed for {name}: {result.stderr.strip()}"
                )

        logger.info(f"Created tmux session {name} in {project_path}")

    def attach(self, name: str) -> None:
        """
        Attach the terminal to a session, or switch to it inside tmux.

        Raises:
            LaunchError: If tmux exits with a non-zero status
        """
        verb = "switch-client" if self.environ.get("TMUX") else "attach-session"
        result = self._run(verb, "-t", name)
        if result.returncode != 0:
            raise LaunchError(
                f"tmux {verb} -t {name} exited with status {result.returncode}",
                returncode=result.returncode,
            )

    def launch(self, project_path: str, editor: str) -> str:
        """
        Open the session for a project, creating it if needed.

        Args:
            project_path: Absolute project directory
            editor: Editor command for new sessions

        Returns:
            The session name
        """
        name = session_name_for(project_path)
        if not self.has_session(name):
            self.create_session(name, project_path, editor)
        self.attach(name)
        return name
