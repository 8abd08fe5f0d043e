"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from structcopy import CopySettings, get_settings


@pytest.fixture
def fresh_settings():
    """Re-read process-wide settings from the environment around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, independent of the process-wide instance."""
    return CopySettings()


@pytest.fixture
def mapping_settings():
    """Settings with mapping reconstruction enabled."""
    return CopySettings(reconstruct_mappings=True)
