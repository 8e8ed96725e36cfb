"""Pytest configuration and fixtures for jsonknobs_validate tests."""

import os
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from jsonknobs_validate import ValidateSettings, reset_settings  # noqa: E402


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def env_vars(monkeypatch):
    """Helper to set environment variables."""

    def _set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, str(value))

    return _set_env


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from production settings read from a clean environment."""
    for key in list(os.environ.keys()):
        if key.startswith("JSONKNOBS_") or key == "ENVIRONMENT":
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def debug_settings():
    """Settings with human-readable messages."""
    return ValidateSettings(environment="development")


@pytest.fixture
def quiet_settings():
    """Settings with empty messages."""
    return ValidateSettings(environment="production")
