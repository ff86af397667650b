"""A sorted set with rank and select queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedSet:
    """Set of distinct, comparable values with order statistics."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(values))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def add(self, value: Any) -> None:
        """Insert ``value`` unless it is already present."""
        if value not in self._items:
            self._items.add(value)

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def order_of_key(self, value: Any) -> int:
        """Number of elements strictly smaller than ``value``."""
        return self._items.bisect_left(value)

    def find_by_order(self, k: int) -> Any:
        """The k-th smallest element, counting from 0."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"order {k} out of range for size {len(self._items)}")
        return self._items[k]