"""Shared fixtures for the full_graphs test suite."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from full_graphs import config  # noqa: E402


@pytest.fixture
def small_buffer_limit(monkeypatch):
    """Cap edge buffers at 10 values for the duration of a test."""
    monkeypatch.setenv(config.MAX_EDGE_VALUES_ENV, "10")
    return 10
