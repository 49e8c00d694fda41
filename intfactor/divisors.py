"""
Divisor functions.

Responsibility: everything computed from the set of divisors of n:
enumeration, count (sigma_0), sum (sigma_1) and the general sigma_k.
"""

import operator

import numpy as np

from .factorization import factorize


def divisors(n: int) -> np.ndarray:
    """
    Return every positive divisor of n in ascending order.

    Built as the product of the power sets {p^0, ..., p^e} of each prime
    power, one outer product per prime.

    Parameters
    ----------
    n : int
        Value in [1, 2**32 - 1].

    Returns
    -------
    np.ndarray
        uint32 array of divisors, no duplicates.

    Raises
    ------
    FactorError
        If n is 0.
    """
    result = np.ones(1, dtype=np.uint64)
    for p, e in factorize(n):
        powers = np.uint64(p) ** np.arange(e + 1, dtype=np.uint64)
        result = np.outer(result, powers).ravel()
    result.sort()
    return result.astype(np.uint32)


def divisor_count(n: int) -> int:
    """Number of divisors of n, prod(e + 1)."""
    count = 1
    for _, e in factorize(n):
        count *= e + 1
    return count


def divisor_sum(n: int) -> int:
    """
    Sum of the divisors of n.

    Each prime power contributes (p^(e+1) - 1) / (p - 1). The result can
    exceed 2**32 - 1 near the top of the range but always fits in 64 bits;
    it is accumulated as an unbounded int.
    """
    return divisor_function(n, 1)


def divisor_function(n: int, k: int = 1) -> int:
    """
    Return sigma_k(n), the sum of the k-th powers of the divisors of n.

    Parameters
    ----------
    n : int
        Value in [1, 2**32 - 1].
    k : int
        Non-negative exponent. k = 0 counts divisors, k = 1 sums them.

    Returns
    -------
    int
        sigma_k(n), exact.
    """
    if isinstance(k, (bool, np.bool_)):
        raise TypeError("k must be an integer, got bool")
    k = operator.index(k)
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    total = 1
    for p, e in factorize(n):
        if k == 0:
            total *= e + 1
        else:
            q = p ** k
            total *= (q ** (e + 1) - 1) // (q - 1)
    return total
