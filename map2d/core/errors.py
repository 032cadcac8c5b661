"""Errors raised by Map2D containers."""

from typing import Any


class InvalidKeyError(ValueError):
    """
    Raised when a row key or column key is absent (None).

    Only insertion paths raise this; lookups and removals on unknown
    coordinates return None instead.
    """

    def __init__(self, row_key: Any, column_key: Any):
        self.row_key = row_key
        self.column_key = column_key
        super().__init__(f"Invalid key ({row_key!r}, {column_key!r}): row and column keys must not be None")
