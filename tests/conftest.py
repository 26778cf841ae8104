"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(mocker, temp_dir):
    """Point the user config directory at a temporary location."""
    config_dir = temp_dir / ".commitrefs"
    mocker.patch("commitrefs.config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def mr_url():
    """A GitLab merge request URL."""
    return "https://gitlab.example.com/group1/proj1/merge_requests/42"
