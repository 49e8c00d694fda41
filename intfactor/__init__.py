"""
Exact prime factorization and arithmetic functions for unsigned 32-bit integers.
"""

from .errors import FactorError, FactorErrorKind
from .primes import is_prime, primes_up_to, prime_table
from .factorization import PrimePower, factorize, largest_prime_factor
from .divisors import divisors, divisor_count, divisor_sum, divisor_function
from .multiplicative import (
    euler_phi,
    mobius,
    radical,
    is_prime_power,
    is_squarefree,
)

__all__ = [
    "FactorError",
    "FactorErrorKind",
    "PrimePower",
    "is_prime",
    "primes_up_to",
    "prime_table",
    "factorize",
    "largest_prime_factor",
    "divisors",
    "divisor_count",
    "divisor_sum",
    "divisor_function",
    "euler_phi",
    "mobius",
    "radical",
    "is_prime_power",
    "is_squarefree",
]
