"""Configuration store for sesh.

Search paths and the editor command live in ``~/.config/sesh/config.json``.
A ``ConfigStore`` loads the file lazily on first access and rewrites the
whole file after every mutation.
"""

import json
import logging
import os

from pathlib import Path

from pydantic import ValidationError

from sesh.constants import (
    CONFIG_DIR,
    CONFIG_DIR_MODE,
    CONFIG_FILE_MODE,
    CONFIG_FILE_NAME,
    CONFIG_INDENT,
    DEFAULT_EDITOR,
)
from sesh.errors import (
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    HomeResolutionError,
    PathNotFoundError,
)
from sesh.paths import HomeResolver, default_home_dir, resolve_path
from sesh.types import Configuration, StoredConfiguration

logger = logging.getLogger(__name__)


def get_config_path(home: str) -> Path:
    """
    Get the path to the configuration file.

    Args:
        home: User home directory

    Returns:
        Path to <home>/.config/sesh/config.json
    """
    return Path(home) / CONFIG_DIR / CONFIG_FILE_NAME


class ConfigStore:
    """Per-process handle on the sesh configuration file."""

    def __init__(self, home_resolver: HomeResolver = default_home_dir):
        self._home_resolver = home_resolver
        self._config: Configuration | None = None

    def _home(self) -> str:
        home = self._home_resolver()
        if not home:
            raise HomeResolutionError("could not determine user home directory")
        return home

    @property
    def config_path(self) -> Path:
        """Location of the backing config file."""
        return get_config_path(self._home())

    @property
    def home_resolver(self) -> HomeResolver:
        return self._home_resolver

    @property
    def loaded(self) -> bool:
        return self._config is not None

    def resolve_path(self, raw: str) -> str:
        """Expand ``~`` and absolutize ``raw`` the way stored paths are."""
        return resolve_path(raw, self._home_resolver)

    def load(self) -> Configuration:
        """
        Load the configuration, once.

        A missing file is bootstrapped with the defaults and written out
        immediately. An existing file that cannot be read or parsed is an
        error; defaults are never substituted for it.

        Returns:
            The cached configuration

        Raises:
            HomeResolutionError: If the home directory cannot be determined
            ConfigReadError: If the file exists but cannot be read
            ConfigParseError: If the file is not valid configuration JSON
            ConfigWriteError: If the bootstrap file cannot be written
        """
        if self._config is not None:
            return self._config

        home = self._home()
        config_path = get_config_path(home)

        try:
            data = config_path.read_bytes()
        except FileNotFoundError:
            logger.info(f"No config at {config_path}, creating defaults")
            config = Configuration(paths=[home], editor=DEFAULT_EDITOR)
            self._commit(config)
            return config
        except OSError as e:
            raise ConfigReadError(
                f"failed to read config file {config_path}: {e}"
            ) from e

        try:
            stored = StoredConfiguration.model_validate_json(data)
        except ValidationError as e:
            raise ConfigParseError(
                f"failed to parse config {config_path}: {e}"
            ) from e

        self._config = Configuration(
            paths=[home] if stored.paths is None else stored.paths,
            editor=stored.editor or DEFAULT_EDITOR,
        )
        logger.debug(
            f"Loaded config from {config_path}: "
            f"{len(self._config.paths)} path(s), editor={self._config.editor!r}"
        )
        return self._config

    def reload(self) -> Configuration:
        """Discard the cached configuration and load it from disk again."""
        self._config = None
        return self.load()

    def save(self) -> None:
        """
        Write the in-memory configuration to disk.

        Raises:
            HomeResolutionError: If the home directory cannot be determined
            ConfigWriteError: If the directory or file cannot be written
        """
        self._write(self.load())

    def _write(self, config: Configuration) -> None:
        try:
            home = self._home()
        except HomeResolutionError as e:
            raise HomeResolutionError(f"could not save config: {e}") from e

        config_path = get_config_path(home)
        config_dir = config_path.parent
        try:
            os.makedirs(config_dir, mode=CONFIG_DIR_MODE, exist_ok=True)
        except OSError as e:
            raise ConfigWriteError(
                f"failed to create config directory {config_dir}: {e}"
            ) from e

        payload = json.dumps(config.model_dump(), indent=CONFIG_INDENT)
        temp_path = config_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            os.chmod(temp_path, CONFIG_FILE_MODE)
            os.replace(temp_path, config_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ConfigWriteError(
                f"failed to write config file {config_path}: {e}"
            ) from e

    def _commit(self, config: Configuration) -> None:
        """Persist ``config`` and make it the in-memory state."""
        self._write(config)
        self._config = config

    def get_search_paths(self) -> list[str]:
        """Return a copy of the stored search paths."""
        return list(self.load().paths)

    def get_editor_command(self) -> str:
        return self.load().editor

    def set_editor_command(self, command: str) -> None:
        """Replace the editor command and persist."""
        current = self.load()
        self._commit(current.model_copy(update={"editor": command}))
        logger.info(f"Editor set to {command!r}")

    def add_search_path(self, raw: str) -> None:
        """
        Append a search path.

        The path is resolved but neither deduplicated nor checked for
        existence; callers validate it first.

        Raises:
            PathResolutionError: If ``raw`` needs home expansion and home is unknown
        """
        current = self.load()
        path = self.resolve_path(raw)
        self._commit(current.model_copy(update={"paths": [*current.paths, path]}))
        logger.info(f"Added search path {path}")

    def remove_search_path(self, raw: str) -> None:
        """
        Remove every stored occurrence of a search path.

        Raises:
            PathResolutionError: If ``raw`` needs home expansion and home is unknown
            PathNotFoundError: If the resolved path is not stored; nothing changes
        """
        current = self.load()
        target = self.resolve_path(raw)

        remaining = [p for p in current.paths if p != target]
        if len(remaining) == len(current.paths):
            raise PathNotFoundError(target)

        self._commit(current.model_copy(update={"paths": remaining}))
        logger.info(
            f"Removed search path {target} "
            f"({len(current.paths) - len(remaining)} occurrence(s))"
        )
