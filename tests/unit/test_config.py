#!/usr/bin/env python3
"""Tests for Map2DSettings environment loading."""

import logging

import pytest

from map2d.config import Map2DSettings


@pytest.mark.unit
@pytest.mark.config
class TestMap2DSettings:
    """Test settings defaults and MAP2D_* environment parsing."""

    def test_defaults(self):
        """Test that empty rows are retained by default."""
        assert Map2DSettings().prune_empty_rows is False

    def test_from_env_unset(self, clean_env):
        """Test fallback when the variable is not set."""
        assert Map2DSettings.from_env().prune_empty_rows is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " On "])
    def test_from_env_true_values(self, clean_env, raw):
        """Test accepted spellings of true."""
        clean_env.setenv("MAP2D_PRUNE_EMPTY_ROWS", raw)
        assert Map2DSettings.from_env().prune_empty_rows is True

    @pytest.mark.parametrize("raw", ["0", "False", "no", "off"])
    def test_from_env_false_values(self, clean_env, raw):
        """Test accepted spellings of false."""
        clean_env.setenv("MAP2D_PRUNE_EMPTY_ROWS", raw)
        assert Map2DSettings.from_env().prune_empty_rows is False

    def test_from_env_unrecognised_value(self, clean_env, caplog):
        """Test that an unknown value logs a warning and uses the default."""
        clean_env.setenv("MAP2D_PRUNE_EMPTY_ROWS", "sometimes")

        with caplog.at_level(logging.WARNING, logger="map2d.config"):
            settings = Map2DSettings.from_env()

        assert settings.prune_empty_rows is False
        assert "MAP2D_PRUNE_EMPTY_ROWS" in caplog.text

    def test_repr(self):
        assert repr(Map2DSettings(True)) == "Map2DSettings(prune_empty_rows=True)"
