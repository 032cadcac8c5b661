"""Default Map2D implementation backed by nested dictionaries."""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional

from typing_extensions import Self

from map2d.core.errors import InvalidKeyError
from map2d.core.map2d import Map2D, R, C, V, R2, C2, V2

_EMPTY_VIEW = MappingProxyType({})


def _is_hashable(key: Any) -> bool:
    """Unhashable keys can never be stored, so read paths treat them as unknown."""
    try:
        hash(key)
    except TypeError:
        return False
    return True


class HashMap2D(Map2D[R, C, V]):
    """
    Map2D stored as row_key -> {column_key -> value}.

    No column index is kept, so column lookups scan every row. The entry
    count is maintained on every write, so size() does not scan.

    When the last column of a row is removed, the row stays registered
    (has_row() remains true) unless prune_empty_rows is set.
    """

    def __init__(self, prune_empty_rows: bool = False, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.prune_empty_rows = prune_empty_rows
        self._rows: Dict[R, Dict[C, V]] = {}
        self._size = 0

    def put(self, row_key: R, column_key: C, value: V) -> Optional[V]:
        self._check_key(row_key, column_key)
        row = self._rows.get(row_key)
        if row is None:
            # Hash the column before the row is registered
            hash(column_key)
            row = self._rows[row_key] = {}
        if column_key not in row:
            self._size += 1
        previous = row.get(column_key)
        row[column_key] = value
        return previous

    def get(self, row_key: R, column_key: C) -> Optional[V]:
        row = self._find_row(row_key)
        if row is None or not _is_hashable(column_key):
            return None
        return row.get(column_key)

    def get_or_default(self, row_key: R, column_key: C, default_value: V) -> V:
        value = self.get(row_key, column_key)
        return default_value if value is None else value

    def remove(self, row_key: R, column_key: C) -> Optional[V]:
        if not self.has_key(row_key, column_key):
            return None
        row = self._rows[row_key]

        previous = row.pop(column_key)
        self._size -= 1
        if not row and self.prune_empty_rows:
            del self._rows[row_key]
            self.logger.debug(f"Pruned empty row {row_key!r}")
        return previous

    def is_empty(self) -> bool:
        return self._size == 0

    def non_empty(self) -> bool:
        return not self.is_empty()

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self.logger.debug(f"Clearing {len(self._rows)} rows, {self._size} entries")
        self._rows.clear()
        self._size = 0

    def row_view(self, row_key: R) -> Mapping[C, V]:
        row = self._find_row(row_key)
        if row is None:
            return _EMPTY_VIEW
        return MappingProxyType(dict(row))

    def column_view(self, column_key: C) -> Mapping[R, V]:
        if not _is_hashable(column_key):
            return _EMPTY_VIEW
        column = {row_key: row[column_key] for row_key, row in self._rows.items() if column_key in row}
        return MappingProxyType(column)

    def has_value(self, value: V) -> bool:
        return any(value in row.values() for row in self._rows.values())

    def has_key(self, row_key: R, column_key: C) -> bool:
        row = self._find_row(row_key)
        return row is not None and _is_hashable(column_key) and column_key in row

    def has_row(self, row_key: R) -> bool:
        return self._find_row(row_key) is not None

    def has_column(self, column_key: C) -> bool:
        if not _is_hashable(column_key):
            return False
        return any(column_key in row for row in self._rows.values())

    def row_map_view(self) -> Mapping[R, Mapping[C, V]]:
        return MappingProxyType({row_key: MappingProxyType(dict(row)) for row_key, row in self._rows.items()})

    def column_map_view(self) -> Mapping[C, Mapping[R, V]]:
        columns: Dict[C, Dict[R, V]] = {}
        for row_key, row in self._rows.items():
            for column_key, value in row.items():
                columns.setdefault(column_key, {})[row_key] = value
        return MappingProxyType({column_key: MappingProxyType(column) for column_key, column in columns.items()})

    def fill_map_from_row(self, target: MutableMapping[Any, Any], row_key: R) -> Self:
        row = self._find_row(row_key)
        if row is not None:
            target.update(row)
        return self

    def fill_map_from_column(self, target: MutableMapping[Any, Any], column_key: C) -> Self:
        if not _is_hashable(column_key):
            return self
        for row_key, row in self._rows.items():
            if column_key in row:
                target[row_key] = row[column_key]
        return self

    def put_all(self, source: Map2D[R, C, V]) -> Self:
        # Snapshot first so that put_all(self) does not iterate live storage
        rows = source.row_map_view()
        self.logger.debug(f"Merging {len(rows)} rows from {type(source).__name__}")
        for row_key, row in rows.items():
            if not row and not self.prune_empty_rows:
                self._register_row(row_key)
            for column_key, value in row.items():
                self.put(row_key, column_key, value)
        return self

    def put_all_to_row(self, source: Mapping[C, V], row_key: R) -> Self:
        self.logger.debug(f"Merging {len(source)} columns into row {row_key!r}")
        if not source and not self.prune_empty_rows:
            self._register_row(row_key)
        for column_key, value in source.items():
            self.put(row_key, column_key, value)
        return self

    def put_all_to_column(self, source: Mapping[R, V], column_key: C) -> Self:
        self.logger.debug(f"Merging {len(source)} rows into column {column_key!r}")
        for row_key, value in source.items():
            self.put(row_key, column_key, value)
        return self

    def copy_with_conversion(
        self,
        row_function: Callable[[R], R2],
        column_function: Callable[[C], C2],
        value_function: Callable[[V], V2],
    ) -> "HashMap2D[R2, C2, V2]":
        result: HashMap2D[R2, C2, V2] = type(self)(prune_empty_rows=self.prune_empty_rows, logger=self.logger)
        # Insertion order decides collisions: the entry visited last wins
        for row_key, row in self._rows.items():
            converted_row = row_function(row_key)
            for column_key, value in row.items():
                result.put(converted_row, column_function(column_key), value_function(value))

        self.logger.debug(f"Converted {self._size} entries into {result.size()} entries")
        return result

    def _find_row(self, row_key: R) -> Optional[Dict[C, V]]:
        if not _is_hashable(row_key):
            return None
        return self._rows.get(row_key)

    def _check_key(self, row_key: R, column_key: C) -> None:
        if row_key is None or column_key is None:
            self.logger.warning(f"Rejected key ({row_key!r}, {column_key!r})")
            raise InvalidKeyError(row_key, column_key)

    def _register_row(self, row_key: R) -> None:
        if row_key is None:
            self.logger.warning("Rejected None row key")
            raise InvalidKeyError(row_key, None)
        self._rows.setdefault(row_key, {})
