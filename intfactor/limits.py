"""
Domain constants for unsigned 32-bit arithmetic.

Responsibility: bounds and argument coercion only.
"""

import operator

import numpy as np

# Largest value representable as an unsigned 32-bit integer.
U32_MAX = 2**32 - 1

# ceil(sqrt(U32_MAX)). Every composite <= U32_MAX has a prime factor
# below this bound.
SIEVE_LIMIT = 65536

# 2*3*5*7*11*13*17*19*23 = 223092870; one more prime overflows u32.
MAX_DISTINCT_PRIMES = 9


def as_u32(n) -> int:
    """
    Coerce n to a Python int in the unsigned 32-bit range.

    Parameters
    ----------
    n : int or np.integer
        Value to check.

    Returns
    -------
    int
        n as a plain int.

    Raises
    ------
    TypeError
        If n is a bool or not an integer.
    OverflowError
        If n is outside [0, 2**32 - 1].
    """
    if isinstance(n, (bool, np.bool_)):
        raise TypeError("expected an integer, got bool")
    n = operator.index(n)
    if n < 0 or n > U32_MAX:
        raise OverflowError(f"{n} is outside the unsigned 32-bit range")
    return n


def as_u32_array(values) -> np.ndarray:
    """
    Coerce an array-like of integers to a uint32 array of the same shape.

    Raises TypeError for non-integer dtypes and OverflowError if any
    value falls outside [0, 2**32 - 1].
    """
    arr = np.asarray(values)
    if arr.dtype == bool or arr.dtype.kind not in 'iu':
        if arr.size == 0:
            return np.zeros(arr.shape, dtype=np.uint32)
        # Python ints too large for int64/uint64 land in object or float64
        items = np.asarray(values, dtype=object)
        if not all(isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))
                   for v in items.flat):
            raise TypeError(f"expected an integer array, got dtype {arr.dtype}")
        if any(int(v) < 0 or int(v) > U32_MAX for v in items.flat):
            raise OverflowError("values outside the unsigned 32-bit range")
        return items.astype(np.uint32)
    if arr.size and (int(arr.min()) < 0 or int(arr.max()) > U32_MAX):
        raise OverflowError("values outside the unsigned 32-bit range")
    return arr.astype(np.uint32)
