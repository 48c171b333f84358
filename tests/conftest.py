"""
Pytest configuration and shared fixtures for GodotEnv tests.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Generator

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.installations import (
    windows_dotnet_installation,
    linux_dotnet_installation,
    macos_installation,
)

from godotenv.core.platform import clear_platform_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unix_only: tests relying on POSIX permission bits"
    )


def pytest_collection_modifyitems(config, items):
    """Skip POSIX permission tests on Windows."""
    import os

    if os.name != "nt":
        return
    skip_unix = pytest.mark.skip(reason="requires POSIX permission bits")
    for item in items:
        if "unix_only" in item.keywords:
            item.add_marker(skip_unix)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_home(temp_dir: Path, monkeypatch) -> Path:
    """Create isolated home directory for tests."""
    fake_home = temp_dir / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("GODOTENV_SETTINGS", raising=False)

    return fake_home


@pytest.fixture(autouse=True)
def fresh_platform_cache():
    """Make every test start with undetected platform information."""
    clear_platform_cache()
    yield
    clear_platform_cache()
