import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.sieve import PrimeSieve, SmallestPrimeFactorTable

LIMIT = 5000


@pytest.fixture(scope="module")
def sieve():
    return PrimeSieve(LIMIT)


@pytest.fixture(scope="module")
def table():
    return SmallestPrimeFactorTable(LIMIT)


def test_small_primes():
    assert PrimeSieve(30).primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_zero_and_one_are_not_prime(sieve):
    assert sieve.is_prime(0) is False
    assert sieve.is_prime(1) is False
    assert sieve.is_prime(2) is True


def test_tiny_limits():
    assert PrimeSieve(0).primes == []
    assert PrimeSieve(1).primes == []
    assert SmallestPrimeFactorTable(1).primes == []


def test_negative_limit():
    with pytest.raises(ValueError):
        PrimeSieve(-1)
    with pytest.raises(ValueError):
        SmallestPrimeFactorTable(-1)


def test_out_of_range(sieve, table):
    with pytest.raises(ValueError):
        sieve.is_prime(LIMIT + 1)
    with pytest.raises(ValueError):
        table.prime_factors(LIMIT + 1)
    with pytest.raises(ValueError):
        table.prime_factors(0)


def test_both_sieves_agree(sieve, table):
    assert sieve.primes == table.primes
    for x in range(2, LIMIT + 1):
        assert sieve.is_prime(x) == (table.smallest_factor(x) == x)


def test_factorization_example(table):
    assert table.factorization(360) == {2: 3, 3: 2, 5: 1}


def test_one_has_no_factors(table):
    assert table.prime_factors(1) == []
    assert table.unique_primes(1) == []
    assert table.factorization(1) == {}


@given(st.integers(2, LIMIT))
def test_factor_invariants(x):
    table = SmallestPrimeFactorTable(LIMIT)
    factors = table.prime_factors(x)
    assert math.prod(factors) == x
    assert factors == sorted(factors)
    assert all(PrimeSieve(p).is_prime(p) for p in set(factors))
    assert table.unique_primes(x) == sorted(set(factors))
    assert math.prod(p**e for p, e in table.factorization(x).items()) == x
    assert table.smallest_factor(x) == factors[0]