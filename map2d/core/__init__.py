"""Map2D contract, default implementation and factory."""

from map2d.core.errors import InvalidKeyError
from map2d.core.map2d import Map2D
from map2d.core.hash_map2d import HashMap2D
from map2d.core.factory import create_instance

__all__ = ["InvalidKeyError", "Map2D", "HashMap2D", "create_instance"]
