"""
Core domain models, mathematical primitives, and contracts.

This module contains the half-integer value type and the exact lattice
arithmetic it is built on. Nothing here performs I/O.
"""
