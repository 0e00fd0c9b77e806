"""
Pytest configuration and fixtures for tjportal tests.
"""

import pytest
from click.testing import CliRunner

from tjportal.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset the settings singleton around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click test runner."""
    return CliRunner()
