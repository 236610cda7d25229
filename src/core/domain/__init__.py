"""
Domain models and value objects.

Contains the HalfInteger value type and element-wise vector operations over it.
"""

from src.core.domain.errors import (
    LENGTH_MISMATCH_MESSAGE,
    HalfIntegerError,
    InvalidValue,
    LengthMismatch,
)
from src.core.domain.half_integer import (
    DENOMINATOR_HALF,
    DENOMINATOR_INTEGER,
    FRACTION_PATTERN,
    ZERO,
    HalfInteger,
)
from src.core.domain.vectors import add_half_integer_vectors, sum_half_integers

__all__ = [
    # Errors
    "LENGTH_MISMATCH_MESSAGE",
    "HalfIntegerError",
    "InvalidValue",
    "LengthMismatch",
    # HalfInteger model
    "DENOMINATOR_HALF",
    "DENOMINATOR_INTEGER",
    "FRACTION_PATTERN",
    "ZERO",
    "HalfInteger",
    # Vector operations
    "add_half_integer_vectors",
    "sum_half_integers",
]
