"""Factory for the default Map2D implementation."""

import logging
from typing import Optional

from map2d.config import Map2DSettings
from map2d.core.hash_map2d import HashMap2D
from map2d.core.map2d import Map2D

logger = logging.getLogger(__name__)


def create_instance(prune_empty_rows: Optional[bool] = None) -> Map2D:
    """
    Create a new, empty Map2D with the default implementation.

    Args:
        prune_empty_rows: Drop a row once its last column is removed.
            Falls back to the MAP2D_PRUNE_EMPTY_ROWS environment variable.

    Returns:
        New empty Map2D instance
    """
    if prune_empty_rows is None:
        prune_empty_rows = Map2DSettings.from_env().prune_empty_rows

    logger.debug(f"Creating HashMap2D with prune_empty_rows={prune_empty_rows}")
    return HashMap2D(prune_empty_rows=prune_empty_rows)
