"""Random integers and a seeded hash resistant to crafted collisions."""

from __future__ import annotations

import random
import time

_MASK64 = (1 << 64) - 1

_default_rng = random.Random(time.monotonic_ns())


def splitmix64(x: int) -> int:
    """The splitmix64 mixing function on a 64-bit unsigned value."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


def random_int(a: int, b: int, rng: random.Random | None = None) -> int:
    """A uniformly random integer in the inclusive range [a, b]."""
    if a > b:
        raise ValueError(f"empty range [{a}, {b}]")
    return (rng or _default_rng).randint(a, b)


class CustomHash:
    """Hash of integers salted with a per-instance seed."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.monotonic_ns() if seed is None else seed

    def __call__(self, x: int) -> int:
        return splitmix64((x + self.seed) & _MASK64)