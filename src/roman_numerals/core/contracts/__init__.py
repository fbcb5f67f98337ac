"""
Contract Validation Module

Валидация JSON представления RomanNumber.
"""

from .validators import (
    ContractValidator,
    RomanNumberValidator,
    SchemaLoader,
    validate_roman_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RomanNumberValidator",
    # Functions
    "validate_roman_number",
]
