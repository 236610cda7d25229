"""
Core math modules для halflattice

Математические примитивы точного квантования на решётку полуцелых чисел.
"""

from src.core.math.numerical_safeguards import (
    # Lattice constants
    LATTICE_SCALE,
    # Finiteness checks
    is_finite_real,
    is_real_number,
    is_valid_float,
    # Exact rounding
    round_half_away_from_zero,
    round_to_lattice,
    to_exact,
)

__all__ = [
    # Numerical Safeguards — Lattice constants
    "LATTICE_SCALE",
    # Numerical Safeguards — Finiteness checks
    "is_finite_real",
    "is_real_number",
    "is_valid_float",
    # Numerical Safeguards — Exact rounding
    "round_half_away_from_zero",
    "round_to_lattice",
    "to_exact",
]
