"""
Map2D - two-dimensional map contract

A Map2D can be viewed as a sheet of rows and cells, addressed by a row key and
a column key. Keys are compared by equality and hashed; no ordering is exposed.

Views returned by the *_view methods are immutable snapshots: later changes to
the map do not show up in them, and they cannot be used to change the map.

None is a legal value. get() cannot tell a stored None from a missing entry;
use has_key() (or ``(row, column) in m``) when the difference matters.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, FrozenSet, Generic, Iterator, Mapping, MutableMapping, Optional, Tuple, TypeVar

from typing_extensions import Self

R = TypeVar('R')
C = TypeVar('C')
V = TypeVar('V')
R2 = TypeVar('R2')
C2 = TypeVar('C2')
V2 = TypeVar('V2')


class Map2D(ABC, Generic[R, C, V]):
    """
    Abstract two-dimensional map keyed by (row_key, column_key).

    Methods documented as returning "this map (floating)" mutate an argument or
    the map itself and return self only so that calls can be chained:

        m.put_all_to_row({'a': 1}, 1).put_all_to_column({2: 3}, 'b')
    """

    @abstractmethod
    def put(self, row_key: R, column_key: C, value: V) -> Optional[V]:
        """
        Put a value at the given coordinates, replacing any previous value.

        Args:
            row_key: Row part of the key
            column_key: Column part of the key
            value: Value to store; may be None

        Returns:
            The value previously stored at these coordinates, or None

        Raises:
            InvalidKeyError: If row_key or column_key is None
        """

    @abstractmethod
    def get(self, row_key: R, column_key: C) -> Optional[V]:
        """Return the value at the given coordinates, or None if there is none."""

    @abstractmethod
    def get_or_default(self, row_key: R, column_key: C, default_value: V) -> V:
        """Return the value at the given coordinates, or default_value if get() would return None."""

    @abstractmethod
    def remove(self, row_key: R, column_key: C) -> Optional[V]:
        """Remove the entry at the given coordinates and return its value, or None if it was empty."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Check whether the map holds no values."""

    @abstractmethod
    def non_empty(self) -> bool:
        """Check whether the map holds at least one value."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored values."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all rows and values."""

    @abstractmethod
    def row_view(self, row_key: R) -> Mapping[C, V]:
        """
        Return an immutable snapshot of one row as column -> value.

        An unknown row gives an empty mapping.
        """

    @abstractmethod
    def column_view(self, column_key: C) -> Mapping[R, V]:
        """
        Return an immutable snapshot of one column as row -> value.

        An unknown column gives an empty mapping.
        """

    @abstractmethod
    def has_value(self, value: V) -> bool:
        """Check whether any entry equals value."""

    @abstractmethod
    def has_key(self, row_key: R, column_key: C) -> bool:
        """Check whether an entry exists at the given coordinates, even if it stores None."""

    @abstractmethod
    def has_row(self, row_key: R) -> bool:
        """Check whether the row is registered."""

    @abstractmethod
    def has_column(self, column_key: C) -> bool:
        """Check whether any row holds an entry in the column."""

    @abstractmethod
    def row_map_view(self) -> Mapping[R, Mapping[C, V]]:
        """Return an immutable snapshot as row -> (column -> value)."""

    @abstractmethod
    def column_map_view(self) -> Mapping[C, Mapping[R, V]]:
        """Return an immutable snapshot as column -> (row -> value)."""

    @abstractmethod
    def fill_map_from_row(self, target: MutableMapping[Any, Any], row_key: R) -> Self:
        """
        Copy every column -> value pair of a row into target, overwriting existing keys.

        Returns:
            This map (floating)
        """

    @abstractmethod
    def fill_map_from_column(self, target: MutableMapping[Any, Any], column_key: C) -> Self:
        """
        Copy every row -> value pair of a column into target, overwriting existing keys.

        Returns:
            This map (floating)
        """

    @abstractmethod
    def put_all(self, source: "Map2D[R, C, V]") -> Self:
        """
        Put all content of source into this map, overwriting on collision.

        Returns:
            This map (floating)
        """

    @abstractmethod
    def put_all_to_row(self, source: Mapping[C, V], row_key: R) -> Self:
        """
        Put all content of source under row_key; each source key becomes a column key.

        Returns:
            This map (floating)
        """

    @abstractmethod
    def put_all_to_column(self, source: Mapping[R, V], column_key: C) -> Self:
        """
        Put all content of source under column_key; each source key becomes a row key.

        Returns:
            This map (floating)
        """

    @abstractmethod
    def copy_with_conversion(
        self,
        row_function: Callable[[R], R2],
        column_function: Callable[[C], C2],
        value_function: Callable[[V], V2],
    ) -> "Map2D[R2, C2, V2]":
        """
        Create a new map with every row key, column key and value converted.

        Rows or columns whose converted keys coincide are merged. If two
        entries land on the same converted coordinates, one of them wins;
        which one depends on the implementation's iteration order.

        Args:
            row_function: Converts the row part of each key
            column_function: Converts the column part of each key
            value_function: Converts each value

        Returns:
            New Map2D instance with converted content
        """

    # Python protocol, built on the operations above

    def items(self) -> Iterator[Tuple[R, C, V]]:
        """Iterate over (row_key, column_key, value) triples."""
        for row_key, row in self.row_map_view().items():
            for column_key, value in row.items():
                yield row_key, column_key, value

    def rows(self) -> FrozenSet[R]:
        """Return the row keys holding at least one entry."""
        return frozenset(row_key for row_key, row in self.row_map_view().items() if row)

    def columns(self) -> FrozenSet[C]:
        """Return the column keys holding at least one entry."""
        return frozenset(self.column_map_view())

    def __iter__(self) -> Iterator[Tuple[R, C]]:
        for row_key, column_key, _ in self.items():
            yield row_key, column_key

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.non_empty()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.has_key(*key)

    def __getitem__(self, key: Tuple[R, C]) -> V:
        row_key, column_key = self._split_key(key)
        if not self.has_key(row_key, column_key):
            raise KeyError(key)
        return self.get(row_key, column_key)

    def __setitem__(self, key: Tuple[R, C], value: V) -> None:
        row_key, column_key = self._split_key(key)
        self.put(row_key, column_key, value)

    def __delitem__(self, key: Tuple[R, C]) -> None:
        row_key, column_key = self._split_key(key)
        if not self.has_key(row_key, column_key):
            raise KeyError(key)
        self.remove(row_key, column_key)

    def __eq__(self, other):
        if not isinstance(other, Map2D):
            return NotImplemented
        return self._entries() == other._entries()

    # Mutable container
    __hash__ = None

    def __repr__(self):
        rows = {row_key: dict(row) for row_key, row in self.row_map_view().items()}
        return f"{type(self).__name__}({rows!r})"

    def _entries(self) -> dict:
        return {(row_key, column_key): value for row_key, column_key, value in self.items()}

    @staticmethod
    def _split_key(key) -> Tuple[Any, Any]:
        if isinstance(key, tuple) and len(key) == 2:
            return key
        raise TypeError("Map2D index must be a (row_key, column_key) tuple.")
