"""
Map2D

Two-dimensional map keyed by (row_key, column_key) with row and column views,
bulk merges and conversion copies.
"""

from map2d.config import Map2DSettings
from map2d.core import InvalidKeyError, Map2D, HashMap2D, create_instance

__version__ = "1.0.0"

__all__ = [
    # Contract
    "Map2D",
    "InvalidKeyError",
    # Implementation
    "HashMap2D",
    "create_instance",
    # Config
    "Map2DSettings",
]
