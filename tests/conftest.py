"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tap.core.config import ConfigStore  # noqa: E402
from tap.core.timestamp import Timestamp  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Keep config and task store inside a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("TAP_CONFIG", str(home / ".config" / "tap" / "tap.conf"))
    monkeypatch.delenv("TAP_DEBUG", raising=False)
    yield home


@pytest.fixture
def config(isolated_home):
    """Config store under the temporary home."""
    return ConfigStore()


@pytest.fixture
def now():
    """Fixed reference time: 2024-06-15 12:00:00 local time."""
    return Timestamp.parse("2024-06-15 12:00:00")
