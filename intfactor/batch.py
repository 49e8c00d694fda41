"""
Vectorized arithmetic functions over integer arrays.

Each public function validates its input once, then runs the shared
trial-division kernel for every element in a numba prange loop.
Results agree element-wise with the scalar functions and keep the
input shape.
"""

import numpy as np
from numba import njit, prange

from .errors import FactorError, FactorErrorKind
from .factorization import _trial_divide
from .limits import as_u32_array
from .primes import prime_table


def _checked(values) -> np.ndarray:
    """Coerce to uint32 and reject zeros."""
    arr = as_u32_array(values)
    if np.any(arr == 0):
        raise FactorError(FactorErrorKind.ZERO, 0)
    return arr


def _apply(kernel, arr: np.ndarray) -> np.ndarray:
    """Run a 1-D kernel over arr and restore the input shape."""
    return kernel(arr.ravel(), prime_table()).reshape(arr.shape)


@njit
def _is_prime_scalar(n, primes):
    if n < 2:
        return False
    for i in range(primes.shape[0]):
        p = np.int64(primes[i])
        if p * p > n:
            return True
        if n % p == 0:
            return n == p
    return True


@njit(parallel=True)
def _is_prime_kernel(values, primes):
    out = np.zeros(values.shape[0], dtype=np.bool_)
    for i in prange(values.shape[0]):
        out[i] = _is_prime_scalar(np.int64(values[i]), primes)
    return out


@njit(parallel=True)
def _divisor_count_kernel(values, primes):
    out = np.zeros(values.shape[0], dtype=np.uint32)
    for i in prange(values.shape[0]):
        f = _trial_divide(np.int64(values[i]), primes)
        count = 1
        for j in range(f.shape[0]):
            count *= f[j, 1] + 1
        out[i] = count
    return out


@njit(parallel=True)
def _divisor_sum_kernel(values, primes):
    # sigma_1 of a u32 fits comfortably in int64; the result array is uint64.
    out = np.zeros(values.shape[0], dtype=np.uint64)
    for i in prange(values.shape[0]):
        f = _trial_divide(np.int64(values[i]), primes)
        total = np.int64(1)
        for j in range(f.shape[0]):
            p = f[j, 0]
            term = np.int64(1)
            pk = np.int64(1)
            for _ in range(f[j, 1]):
                pk *= p
                term += pk
            total *= term
        out[i] = total
    return out


@njit(parallel=True)
def _euler_phi_kernel(values, primes):
    out = np.zeros(values.shape[0], dtype=np.uint32)
    for i in prange(values.shape[0]):
        n = np.int64(values[i])
        f = _trial_divide(n, primes)
        result = n
        for j in range(f.shape[0]):
            p = f[j, 0]
            result = result // p * (p - 1)
        out[i] = result
    return out


@njit(parallel=True)
def _mobius_kernel(values, primes):
    out = np.zeros(values.shape[0], dtype=np.int8)
    for i in prange(values.shape[0]):
        f = _trial_divide(np.int64(values[i]), primes)
        sign = 1
        for j in range(f.shape[0]):
            if f[j, 1] > 1:
                sign = 0
                break
            sign = -sign
        out[i] = sign
    return out


def is_prime_array(values) -> np.ndarray:
    """Boolean array, True where the value is prime. Zeros are allowed."""
    return _apply(_is_prime_kernel, as_u32_array(values))


def divisor_count_array(values) -> np.ndarray:
    """Number of divisors of each value (uint32)."""
    return _apply(_divisor_count_kernel, _checked(values))


def divisor_sum_array(values) -> np.ndarray:
    """Sum of divisors of each value (uint64)."""
    return _apply(_divisor_sum_kernel, _checked(values))


def euler_phi_array(values) -> np.ndarray:
    """Euler's totient of each value (uint32)."""
    return _apply(_euler_phi_kernel, _checked(values))


def mobius_array(values) -> np.ndarray:
    """Mobius function of each value (int8)."""
    return _apply(_mobius_kernel, _checked(values))
