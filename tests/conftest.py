"""Pytest configuration and fixtures for mgsconv tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from shared.constants import CONFIG_ENV_VAR  # noqa: E402


@pytest.fixture()
def isolated_config(tmp_path, monkeypatch):
    """No config from the environment or the real home directory."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))
    return tmp_path
