"""
Contract Validation Module

Модуль для валидации JSON контрактов fraction string.
"""

from .validators import (
    ContractValidator,
    FractionValidator,
    FractionVectorValidator,
    SchemaLoader,
    validate_fraction,
    validate_fraction_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    "FractionVectorValidator",
    # Functions
    "validate_fraction",
    "validate_fraction_vector",
]
