"""
Domain models and value objects.

Содержит модель RomanNumber и классификацию входа конструктора.
"""

from roman_numerals.core.domain.roman_number import (
    IntegerInput,
    NumeralInput,
    RomanNumber,
    TextInput,
    classify_input,
)

__all__ = [
    "RomanNumber",
    "IntegerInput",
    "TextInput",
    "NumeralInput",
    "classify_input",
]
