"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from statekit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so env overrides never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def circular_state():
    """Mapping that contains itself: state["self"] is state."""
    state: dict = {"name": "root"}
    state["self"] = state
    return state
