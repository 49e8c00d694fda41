"""
Multiplicative and factor-shape functions.

Responsibility: quantities read directly off the prime/exponent pairs.
All integer arithmetic; nothing here goes through floating point.
"""

from .factorization import factorize
from .limits import as_u32


def euler_phi(n: int) -> int:
    """
    Euler's totient: count of integers in [1, n] coprime to n.

    Applies n * (1 - 1/p) as n // p * (p - 1) for each distinct prime,
    which stays exact because p divides the running value.
    """
    n = as_u32(n)
    result = n
    for p, _ in factorize(n):
        result = result // p * (p - 1)
    return result


def mobius(n: int) -> int:
    """
    Mobius function.

    Returns
    -------
    int
        0 if n has a squared prime factor, otherwise (-1)^k for k distinct
        primes. mobius(1) = 1.
    """
    factors = factorize(n)
    if any(e > 1 for _, e in factors):
        return 0
    return -1 if len(factors) % 2 else 1


def radical(n: int) -> int:
    """Product of the distinct primes dividing n (its squarefree kernel)."""
    result = 1
    for p, _ in factorize(n):
        result *= p
    return result


def is_prime_power(n: int) -> bool:
    """True iff n = p^e for a single prime p and e >= 1."""
    return len(factorize(n)) == 1


def is_squarefree(n: int) -> bool:
    """True iff no prime divides n more than once."""
    return all(e == 1 for _, e in factorize(n))


def omega(n: int) -> int:
    """Count distinct prime factors of n (little omega)."""
    return len(factorize(n))


def Omega(n: int) -> int:
    """Count prime factors of n with multiplicity (big Omega)."""
    return sum(e for _, e in factorize(n))
