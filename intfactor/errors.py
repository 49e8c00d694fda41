"""
Error types.

Zero is the only input with no prime factorization; every entry point
that needs a factorization raises FactorError for it.
"""

import enum


class FactorErrorKind(enum.Enum):
    """Reason a factorization could not be produced."""

    ZERO = 'zero'


class FactorError(ValueError):
    """Raised when an input has no canonical prime factorization."""

    def __init__(self, kind: FactorErrorKind, value: int = 0):
        self.kind = kind
        self.value = value
        super().__init__(f"{value} has no prime factorization ({kind.value})")
