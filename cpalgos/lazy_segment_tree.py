"""Segment tree with lazy range addition and range sums."""

from __future__ import annotations

from collections.abc import Iterable


class LazySegmentTree:
    """Range add and range sum over a fixed-length array of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        slots = 4 * max(self._n, 1)
        self._sum = [0] * slots
        self._lazy = [0] * slots
        if items:
            self._build(0, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sum[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid, items)
        self._build(2 * node + 2, mid + 1, hi, items)
        self._sum[node] = self._sum[2 * node + 1] + self._sum[2 * node + 2]

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._sum[node] += pending * (hi - lo + 1)
            if lo != hi:
                self._lazy[2 * node + 1] += pending
                self._lazy[2 * node + 2] += pending
            self._lazy[node] = 0

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        self._push(node, lo, hi)
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        return self._query(2 * node + 1, lo, mid, left, right) + self._query(
            2 * node + 2, mid + 1, hi, left, right
        )

    def _add(
        self, node: int, lo: int, hi: int, left: int, right: int, value: int
    ) -> None:
        self._push(node, lo, hi)
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._lazy[node] += value
            self._push(node, lo, hi)
            return
        mid = (lo + hi) // 2
        self._add(2 * node + 1, lo, mid, left, right, value)
        self._add(2 * node + 2, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node + 1] + self._sum[2 * node + 2]

    def _check(self, left: int, right: int) -> None:
        for index in (left, right):
            if not 0 <= index < self._n:
                raise IndexError(f"index {index} out of range for length {self._n}")

    def query(self, left: int, right: int) -> int:
        """Sum of positions left..right, both inclusive."""
        if left > right:
            return 0
        self._check(left, right)
        return self._query(0, 0, self._n - 1, left, right)

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position left..right, both inclusive."""
        if left > right:
            return
        self._check(left, right)
        self._add(0, 0, self._n - 1, left, right, value)