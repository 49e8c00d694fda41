"""
Factorization engine.

Responsibility: turn an unsigned 32-bit integer into its canonical list
of (prime, exponent) pairs. Derived arithmetic lives in divisors.py and
multiplicative.py.
"""

import numpy as np
from numba import njit
from typing import Dict, Iterable, List, NamedTuple, Optional

from .errors import FactorError, FactorErrorKind
from .limits import MAX_DISTINCT_PRIMES, as_u32
from .primes import prime_table


class PrimePower(NamedTuple):
    """One (prime, exponent) pair of a factorization."""

    prime: int
    exponent: int


@njit
def _trial_divide(n, primes):
    """
    Trial-divide n by the table primes.

    Returns an int64 array of shape (k, 2) with rows (prime, exponent) in
    ascending prime order. n must be >= 1 and < 2**32.
    """
    out = np.zeros((MAX_DISTINCT_PRIMES + 1, 2), dtype=np.int64)
    count = 0
    rest = np.int64(n)

    for i in range(primes.shape[0]):
        p = np.int64(primes[i])
        if p * p > rest:
            break
        if rest % p == 0:
            exponent = 0
            while rest % p == 0:
                rest //= p
                exponent += 1
            out[count, 0] = p
            out[count, 1] = exponent
            count += 1

    # Any composite below 2**32 has a factor in the table, so what is
    # left over is 1 or prime.
    if rest > 1:
        out[count, 0] = rest
        out[count, 1] = 1
        count += 1

    return out[:count]


def factor_array(n: int) -> np.ndarray:
    """
    Return the factorization of n as an int64 array of (prime, exponent) rows.

    Raises
    ------
    FactorError
        If n is 0.
    """
    n = as_u32(n)
    if n == 0:
        raise FactorError(FactorErrorKind.ZERO, n)
    return _trial_divide(n, prime_table())


def factorize(n: int) -> List[PrimePower]:
    """
    Factor an unsigned 32-bit integer into primes.

    Parameters
    ----------
    n : int
        Value in [0, 2**32 - 1].

    Returns
    -------
    list of PrimePower
        Pairs with strictly increasing primes and exponents >= 1.
        factorize(1) is the empty list.

    Raises
    ------
    FactorError
        With kind ZERO if n is 0.
    """
    rows = factor_array(n)
    return [PrimePower(int(p), int(e)) for p, e in rows]


def factorize_dict(n: int) -> Dict[int, int]:
    """Return the factorization of n as an ordered {prime: exponent} dict."""
    return {p: e for p, e in factorize(n)}


def product(factors: Iterable) -> int:
    """Multiply a factorization back out. The empty product is 1."""
    result = 1
    for p, e in factors:
        result *= p ** e
    return result


def smallest_prime_factor(n: int) -> Optional[int]:
    """Return the smallest prime factor of n, or None for n = 1."""
    factors = factorize(n)
    return factors[0].prime if factors else None


def largest_prime_factor(n: int) -> Optional[int]:
    """Return the largest prime factor of n, or None for n = 1."""
    factors = factorize(n)
    return factors[-1].prime if factors else None
