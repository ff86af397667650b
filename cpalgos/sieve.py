"""Prime sieves and factorization by smallest prime factor."""

from __future__ import annotations

import math
from collections import Counter


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")


class PrimeSieve:
    """Eratosthenes sieve: primality of every integer in 0..limit."""

    def __init__(self, limit: int) -> None:
        _check_limit(limit)
        self.limit = limit
        flags = bytearray([1]) * (limit + 1)
        flags[0:2] = bytes(min(2, limit + 1))
        for i in range(2, math.isqrt(limit) + 1):
            if flags[i]:
                flags[i * i::i] = bytes(len(range(i * i, limit + 1, i)))
        self._flags = flags
        self.primes = [i for i, flag in enumerate(flags) if flag]

    def is_prime(self, x: int) -> bool:
        """Whether ``x`` is prime; ``x`` must lie in 0..limit."""
        if not 0 <= x <= self.limit:
            raise ValueError(f"{x} outside sieved range 0..{self.limit}")
        return bool(self._flags[x])


class SmallestPrimeFactorTable:
    """Linear sieve of smallest prime factors for fast factorization."""

    def __init__(self, limit: int) -> None:
        _check_limit(limit)
        self.limit = limit
        spf = [0] * (limit + 1)
        primes: list[int] = []
        for i in range(2, limit + 1):
            if spf[i] == 0:
                spf[i] = i
                primes.append(i)
            for p in primes:
                if p > spf[i] or p * i > limit:
                    break
                spf[p * i] = p
        self._spf = spf
        self.primes = primes

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.limit:
            raise ValueError(f"{x} outside table range 1..{self.limit}")

    def smallest_factor(self, x: int) -> int:
        """Smallest prime dividing ``x``, for 2 <= x <= limit."""
        if not 2 <= x <= self.limit:
            raise ValueError(f"{x} outside table range 2..{self.limit}")
        return self._spf[x]

    def prime_factors(self, x: int) -> list[int]:
        """Prime factors of ``x`` in ascending order, with repetition."""
        self._check(x)
        factors = []
        while x > 1:
            p = self._spf[x]
            factors.append(p)
            x //= p
        return factors

    def unique_primes(self, x: int) -> list[int]:
        """Distinct prime factors of ``x`` in ascending order."""
        return list(dict.fromkeys(self.prime_factors(x)))

    def factorization(self, x: int) -> dict[int, int]:
        """Map of prime to exponent, primes ascending."""
        return dict(Counter(self.prime_factors(x)))