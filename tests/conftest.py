"""Test configuration for map2d."""

import pytest

from map2d import create_instance


@pytest.fixture
def sample_map():
    """Map with three entries over two rows and two columns."""
    m = create_instance()
    m.put(1, "a", 10)
    m.put(1, "b", 20)
    m.put(2, "a", 30)
    return m


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without MAP2D_* settings."""
    monkeypatch.delenv("MAP2D_PRUNE_EMPTY_ROWS", raising=False)
    return monkeypatch
