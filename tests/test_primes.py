"""
Tests for the sieve, the shared prime table and the primality oracle.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from math import isqrt

import numpy as np
import pytest

from intfactor import primes
from intfactor.limits import SIEVE_LIMIT, U32_MAX
from intfactor.primes import (
    is_prime,
    prime_flags_upto,
    prime_table,
    primes_up_to,
    primes_upto,
)


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def naive_is_prime(n: int) -> bool:
    """Trial division by every integer in [2, isqrt(n)]."""
    if n < 2:
        return False
    candidates = np.arange(2, isqrt(n) + 1, dtype=np.int64)
    return not np.any(n % candidates == 0)


class TestSieve:
    """Sieve of Eratosthenes helpers."""

    def test_prime_flags_upto_matches_known_primes(self):
        flags = prime_flags_upto(100)

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_upto: {p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_upto: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_primes_upto_count(self):
        assert len(primes_upto(100)) == 25
        assert list(primes_upto(50)[:15]) == SMALL_PRIMES


class TestPrimeTable:
    """The cached table of primes <= 65536."""

    def test_table_contents(self):
        table = prime_table()
        assert table.dtype == np.uint32
        assert len(table) == 6542
        assert table[0] == 2
        assert table[-1] == 65521
        assert np.all(np.diff(table.astype(np.int64)) > 0)

    def test_table_matches_sieve(self):
        assert np.array_equal(prime_table(), primes_upto(SIEVE_LIMIT))

    def test_table_is_read_only(self):
        table = prime_table()
        with pytest.raises(ValueError):
            table[0] = 4

    def test_table_is_shared(self):
        assert prime_table() is prime_table()

    def test_concurrent_first_use_builds_once(self, monkeypatch):
        """Racing first callers must all see one fully built table."""
        monkeypatch.setattr(primes, "_PRIME_TABLE", None)
        monkeypatch.setattr(primes, "_PRIME_FLAGS", None)

        calls = []
        lock = threading.Lock()
        original = primes.prime_flags_upto

        def slow_flags(N):
            with lock:
                calls.append(N)
            time.sleep(0.05)
            return original(N)

        monkeypatch.setattr(primes, "prime_flags_upto", slow_flags)

        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: primes.prime_table(), range(16)))

        assert calls == [SIEVE_LIMIT]
        assert all(t is tables[0] for t in tables)
        assert len(tables[0]) == 6542


class TestPrimesUpTo:
    """primes_up_to over the whole u32 range."""

    def test_small_bounds(self):
        assert len(primes_up_to(0)) == 0
        assert len(primes_up_to(1)) == 0
        assert list(primes_up_to(2)) == [2]
        assert list(primes_up_to(47)) == SMALL_PRIMES

    def test_table_bound(self):
        assert np.array_equal(primes_up_to(SIEVE_LIMIT), prime_table())

    def test_beyond_table_matches_sieve(self):
        """The segmented extension agrees with a plain sieve."""
        N = 300000
        got = primes_up_to(N)
        assert got.dtype == np.uint32
        assert np.array_equal(got, primes_upto(N))

    def test_first_prime_above_table(self):
        got = primes_up_to(65537)
        assert got[-1] == 65537
        assert got[-2] == 65521


class TestIsPrime:
    """Primality oracle."""

    def test_zero_and_one(self):
        assert is_prime(0) is False
        assert is_prime(1) is False

    def test_small_values(self):
        for p in SMALL_PRIMES:
            assert is_prime(p), f"{p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not is_prime(n), f"{n} should not be prime"

    def test_boundaries(self):
        assert is_prime(2)
        assert is_prime(3)
        assert is_prime(65521)
        assert not is_prime(65536)
        assert is_prime(65537)
        assert is_prime(2147483647)
        assert is_prime(4294967291)
        assert not is_prime(U32_MAX)

    def test_large_composites(self):
        # Products of primes on either side of the table bound
        assert not is_prime(65521 * 65537)
        assert not is_prime(65521 ** 2)
        # Carmichael numbers
        for c in [561, 1105, 1729, 2465, 2821, 6601, 8911]:
            assert not is_prime(c), f"{c} is a Carmichael number"

    def test_matches_naive_trial_division(self):
        rng = np.random.default_rng(0)
        sample = np.concatenate([
            np.arange(0, 2000),
            rng.integers(SIEVE_LIMIT, U32_MAX, size=200, endpoint=True),
            [U32_MAX, U32_MAX - 4, SIEVE_LIMIT, SIEVE_LIMIT + 1],
        ])
        for n in sample:
            n = int(n)
            assert is_prime(n) == naive_is_prime(n), f"is_prime({n}) disagrees with trial division"

    def test_numpy_scalars(self):
        assert is_prime(np.uint32(17))
        assert not is_prime(np.int64(18))

    def test_out_of_range(self):
        with pytest.raises(OverflowError):
            is_prime(-1)
        with pytest.raises(OverflowError):
            is_prime(U32_MAX + 1)

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            is_prime(7.0)
        with pytest.raises(TypeError):
            is_prime(True)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
