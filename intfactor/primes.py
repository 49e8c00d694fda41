"""
Prime generation and primality testing.

Responsibility: the sieve, the cached prime table and the primality
oracle. No factorization logic.

The prime table holds every prime <= SIEVE_LIMIT (65536). It is built
once per process on first use and published read-only, so any number of
threads may share it without locking.
"""

import threading
from math import isqrt

import numpy as np

from .limits import SIEVE_LIMIT, as_u32

# Segment width for sieving beyond the cached table.
SEGMENT_SIZE = 1 << 20

# Cached table state, set exactly once under _TABLE_LOCK.
_PRIME_FLAGS = None
_PRIME_TABLE = None
_TABLE_LOCK = threading.Lock()


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


def _load_table():
    """Return (table, flags), building both on first call."""
    global _PRIME_FLAGS, _PRIME_TABLE
    table = _PRIME_TABLE
    if table is None:
        with _TABLE_LOCK:
            if _PRIME_TABLE is None:
                flags = prime_flags_upto(SIEVE_LIMIT)
                flags.setflags(write=False)
                primes = np.nonzero(flags)[0].astype(np.uint32)
                primes.setflags(write=False)
                # Flags first: readers test _PRIME_TABLE only.
                _PRIME_FLAGS = flags
                _PRIME_TABLE = primes
            table = _PRIME_TABLE
    return table, _PRIME_FLAGS


def prime_table() -> np.ndarray:
    """
    Return the shared table of all primes <= 65536.

    The array is read-only (uint32, 6542 entries, ascending). Concurrent
    first callers block until a single build completes.
    """
    return _load_table()[0]


def _sieve_segment(start: int, end: int, base_primes: np.ndarray) -> np.ndarray:
    """
    Return the primes in [start, end) using base_primes for striking.

    base_primes must contain every prime <= sqrt(end - 1).
    """
    is_prime = np.ones(end - start, dtype=bool)
    for p in base_primes:
        p = int(p)
        if p * p >= end:
            break

        # First multiple of p in [start, end), never below p^2
        first = ((start + p - 1) // p) * p
        if first < p * p:
            first = p * p
        is_prime[first - start::p] = False

    return np.nonzero(is_prime)[0].astype(np.int64) + start


def primes_up_to(n: int) -> np.ndarray:
    """
    Return all primes <= n in ascending order.

    Parameters
    ----------
    n : int
        Upper bound (inclusive), any unsigned 32-bit value.

    Returns
    -------
    np.ndarray
        uint32 array of primes. For n <= 65536 this is a read-only view
        of the shared table.
    """
    n = as_u32(n)
    table = prime_table()
    if n <= SIEVE_LIMIT:
        return table[:np.searchsorted(table, n, side='right')]

    chunks = [table]
    for start in range(SIEVE_LIMIT + 1, n + 1, SEGMENT_SIZE):
        end = min(start + SEGMENT_SIZE, n + 1)
        chunks.append(_sieve_segment(start, end, table).astype(np.uint32))
    return np.concatenate(chunks)


def is_prime(n: int) -> bool:
    """
    Return True iff n is prime.

    Values within the table range are a direct lookup. Larger values are
    trial-divided by every table prime <= isqrt(n); the table bound makes
    this exact for the whole u32 range. 0 and 1 are not prime.
    """
    n = as_u32(n)
    table, flags = _load_table()
    if n <= SIEVE_LIMIT:
        return bool(flags[n])

    k = np.searchsorted(table, isqrt(n), side='right')
    divisors = table[:k].astype(np.int64)
    return not bool(np.any(n % divisors == 0))
