"""Runtime settings for Map2D containers."""

import logging
import os
from typing import Optional

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


class Map2DSettings:
    """
    Settings applied by the default factory.

    Environment Variables:
        MAP2D_PRUNE_EMPTY_ROWS: Drop a row's registration once its last column
            is removed. Defaults to false (empty rows are retained).
    """

    def __init__(self, prune_empty_rows: bool = False):
        self.prune_empty_rows = prune_empty_rows

    def __repr__(self):
        return f"Map2DSettings(prune_empty_rows={self.prune_empty_rows})"

    @classmethod
    def from_env(cls, logger: Optional[logging.Logger] = None) -> "Map2DSettings":
        """Build settings from MAP2D_* environment variables."""
        logger = logger or logging.getLogger(__name__)
        return cls(prune_empty_rows=cls._get_bool_from_env('MAP2D_PRUNE_EMPTY_ROWS', False, logger))

    @staticmethod
    def _get_bool_from_env(name: str, default: bool, logger: logging.Logger) -> bool:
        raw = os.environ.get(name)
        if raw is None:
            logger.debug(f"{name} environment variable not set, using {default}")
            return default

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False

        logger.warning(f"Unrecognised value for {name}: {raw!r}, using {default}")
        return default
