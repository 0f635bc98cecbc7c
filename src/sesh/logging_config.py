"""Centralized logging configuration for sesh."""

import logging
import logging.config
import os
import sys

from pathlib import Path
from typing import Any

from sesh.constants import (
    CONFIG_DIR,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_MAX_BYTES,
    LOG_DIR_NAME,
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
)
from sesh.paths import default_home_dir

_logging_configured = False


def get_log_dir() -> Path:
    """
    Get log directory path, creating if needed.

    Returns:
        Path to ~/.config/sesh/logs

    Raises:
        HomeResolutionError: If the home directory cannot be determined
    """
    log_dir = Path(default_home_dir()) / CONFIG_DIR / LOG_DIR_NAME
    os.makedirs(log_dir, mode=0o700, exist_ok=True)
    return log_dir


def get_log_path() -> Path:
    """
    Get path to the active log file.

    Returns:
        Path to sesh.log
    """
    return get_log_dir() / DEFAULT_LOG_FILE


def _file_logging_enabled() -> bool:
    return os.environ.get(LOG_FILE_ENV, "1").lower() not in ("0", "false", "no")


def _build_logging_config(
    verbose: bool = False,
    console_format: str | None = None,
) -> dict[str, Any]:
    """
    Build the dictConfig configuration dictionary.

    Args:
        verbose: If True, set console to DEBUG level
        console_format: Override console format string

    Returns:
        Dictionary suitable for logging.config.dictConfig()
    """
    console_fmt = (
        console_format or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": console_fmt},
            "file": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if verbose else "WARNING",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
    }

    if _file_logging_enabled():
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper(),
            "formatter": "file",
            "filename": str(get_log_path()),
            "maxBytes": DEFAULT_LOG_MAX_BYTES,
            "backupCount": DEFAULT_LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        config["root"]["handlers"].append("file")

    return config


def setup_logging(
    *,
    verbose: bool = False,
    console_format: str | None = None,
) -> None:
    """
    Configure logging for sesh.

    Args:
        verbose: If True, set console to DEBUG level
        console_format: Override console format string. If None, uses full format.
    """
    global _logging_configured

    if _logging_configured:
        return

    try:
        config = _build_logging_config(verbose=verbose, console_format=console_format)
        logging.config.dictConfig(config)
    except Exception as e:
        sys.stderr.write(f"WARNING: Failed to configure logging: {e}\n")
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=console_format or "%(levelname)s: %(message)s",
        )

    _logging_configured = True
