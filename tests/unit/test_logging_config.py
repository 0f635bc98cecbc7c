"""Tests for logging configuration."""

import pytest

from sesh.errors import HomeResolutionError
from sesh.logging_config import _build_logging_config, get_log_path


def test_console_only_when_file_disabled(monkeypatch):
    monkeypatch.setenv("SESH_LOG_FILE", "0")

    config = _build_logging_config()

    assert config["root"]["handlers"] == ["console"]
    assert config["handlers"]["console"]["level"] == "WARNING"


def test_verbose_console(monkeypatch):
    monkeypatch.setenv("SESH_LOG_FILE", "0")

    config = _build_logging_config(verbose=True, console_format="%(message)s")

    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["formatters"]["console"]["format"] == "%(message)s"


def test_rotating_file_handler(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("SESH_LOG_FILE", "1")
    monkeypatch.setenv("SESH_LOG_LEVEL", "info")

    config = _build_logging_config()

    file_handler = config["handlers"]["file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert file_handler["level"] == "INFO"
    assert file_handler["filename"] == str(
        tmp_path / ".config" / "sesh" / "logs" / "sesh.log"
    )
    assert "file" in config["root"]["handlers"]


def test_log_path_creates_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    log_path = get_log_path()

    assert log_path.parent.is_dir()
    assert log_path.name == "sesh.log"


def test_log_dir_without_home(monkeypatch):
    def broken_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr("sesh.paths.Path.home", broken_home)

    with pytest.raises(HomeResolutionError):
        get_log_path()
