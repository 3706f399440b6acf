"""
Shared pytest configuration and fixtures for vfsdriver tests.
"""

import sys
from pathlib import Path

import fsspec
import pytest

# Add python3/ to path for testing
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir / "python3"))

from vfsdriver.factory import DriverFactory  # noqa: E402


def _resetMemoryFS(m):
    m.store.clear()
    m.pseudo_dirs.clear()
    m.pseudo_dirs.append("")


@pytest.fixture
def memfs():
    """Empty fsspec memory filesystem (its store is class level state)."""
    m = fsspec.filesystem("memory")
    _resetMemoryFS(m)
    yield m
    _resetMemoryFS(m)


@pytest.fixture
def driver(memfs):
    """Fresh driver over the memory filesystem."""
    return DriverFactory(memfs).newDriver()


@pytest.fixture
def mockfs(mocker):
    """Backend double for checking the exact calls the driver makes."""
    fs = mocker.MagicMock()
    fs.sep = "/"
    return fs
