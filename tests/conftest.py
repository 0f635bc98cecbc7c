"""Pytest configuration and fixtures for sesh tests."""

import pytest

from sesh.config import ConfigStore


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that do not require external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests combining multiple components"
    )


def pytest_collection_modifyitems(items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        if "/unit/" in path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and log file."""
    monkeypatch.setenv("HOME", str(tmp_path / "real-home"))
    monkeypatch.setenv("SESH_LOG_FILE", "0")
    monkeypatch.delenv("TMUX", raising=False)


@pytest.fixture
def home(tmp_path):
    """Return a fake home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def home_resolver(home):
    """Return a resolver pointing at the fake home directory."""
    return lambda: str(home)


@pytest.fixture
def store(home_resolver):
    """Return a fresh ConfigStore rooted at the fake home directory."""
    return ConfigStore(home_resolver=home_resolver)


@pytest.fixture
def config_file(home):
    """Return the path the store writes to."""
    return home / ".config" / "sesh" / "config.json"
