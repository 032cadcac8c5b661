#!/usr/bin/env python3
"""Tests for the default Map2D factory."""

import pytest

from map2d import HashMap2D, Map2D, create_instance


@pytest.mark.unit
@pytest.mark.core
class TestCreateInstance:
    """Test factory construction and policy selection."""

    def test_parameterless_factory(self, clean_env):
        """Test that the factory returns a fresh empty Map2D."""
        m = create_instance()

        assert isinstance(m, Map2D)
        assert isinstance(m, HashMap2D)
        assert m.is_empty()
        assert m.size() == 0

    def test_instances_are_independent(self, clean_env):
        first = create_instance()
        second = create_instance()

        first.put(1, 1, "x")

        assert second.is_empty()

    def test_policy_from_environment(self, clean_env):
        """Test that MAP2D_PRUNE_EMPTY_ROWS selects the prune policy."""
        clean_env.setenv("MAP2D_PRUNE_EMPTY_ROWS", "true")
        m = create_instance()
        m.put(1, "a", 1)
        m.remove(1, "a")

        assert not m.has_row(1)

    def test_explicit_argument_overrides_environment(self, clean_env):
        clean_env.setenv("MAP2D_PRUNE_EMPTY_ROWS", "true")
        m = create_instance(prune_empty_rows=False)
        m.put(1, "a", 1)
        m.remove(1, "a")

        assert m.has_row(1)

    def test_abstract_contract_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Map2D()
