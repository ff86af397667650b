"""Square-root decomposition over arrays and strings."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable


def _block_size(length: int) -> int:
    return math.isqrt(length) + 1


def _check_index(index: int, length: int) -> None:
    if not 0 <= index < length:
        raise IndexError(f"index {index} out of range for length {length}")


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


class SqrtSum:
    """Range sums with point assignment in O(sqrt n) per operation."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._size = _block_size(len(self._values))
        self._blocks = [
            sum(self._values[start:start + self._size])
            for start in range(0, len(self._values), self._size)
        ]

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        _check_index(index, len(self._values))
        return self._values[index]

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions left..right, both inclusive."""
        if left > right:
            return 0
        _check_index(left, len(self._values))
        _check_index(right, len(self._values))
        size = self._size
        first, last = left // size, right // size
        if first == last:
            return sum(self._values[left:right + 1])
        return (
            sum(self._values[left:(first + 1) * size])
            + sum(self._blocks[first + 1:last])
            + sum(self._values[last * size:right + 1])
        )

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        _check_index(index, len(self._values))
        self._blocks[index // self._size] += value - self._values[index]
        self._values[index] = value


class CharBlockCounter:
    """Counts occurrences of a character in a substring, with point updates."""

    def __init__(self, text: str) -> None:
        self._chars = list(text)
        self._size = _block_size(len(self._chars))
        self._blocks = [
            Counter(self._chars[start:start + self._size])
            for start in range(0, len(self._chars), self._size)
        ]

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        """The current contents."""
        return "".join(self._chars)

    def query(self, left: int, right: int, ch: str) -> int:
        """Occurrences of ``ch`` at positions left..right, both inclusive."""
        _check_char(ch)
        if left > right:
            return 0
        _check_index(left, len(self._chars))
        _check_index(right, len(self._chars))
        size = self._size
        first, last = left // size, right // size
        if first == last:
            return self._chars[left:right + 1].count(ch)
        return (
            self._chars[left:(first + 1) * size].count(ch)
            + sum(block[ch] for block in self._blocks[first + 1:last])
            + self._chars[last * size:right + 1].count(ch)
        )

    def update(self, index: int, ch: str) -> None:
        """Replace the character at ``index`` with ``ch``."""
        _check_char(ch)
        _check_index(index, len(self._chars))
        block = self._blocks[index // self._size]
        block[self._chars[index]] -= 1
        block[ch] += 1
        self._chars[index] = ch