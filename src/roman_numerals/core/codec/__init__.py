"""
Codec: integer ↔ Roman numeral.

Чистые функции поверх NUMERAL_TABLE. Не зависит от domain.
"""

from roman_numerals.core.codec.decoder import decode
from roman_numerals.core.codec.encoder import encode
from roman_numerals.core.codec.grammar import (
    PLACE_GROUPS,
    ROMAN_NUMERAL_PATTERN,
    FormatCheckResult,
    PlaceGroup,
    PlaceValue,
    check_format,
    ensure_well_formed,
    is_well_formed,
)
from roman_numerals.core.codec.numeral_table import (
    MAX_ROMAN_VALUE,
    MIN_ROMAN_VALUE,
    NUMERAL_TABLE,
    ROMAN_SYMBOLS,
    NumeralEntry,
    is_in_range,
)

__all__ = [
    # Numeral table
    "MIN_ROMAN_VALUE",
    "MAX_ROMAN_VALUE",
    "ROMAN_SYMBOLS",
    "NUMERAL_TABLE",
    "NumeralEntry",
    "is_in_range",
    # Encoder / Decoder
    "encode",
    "decode",
    # Grammar — Constants
    "PLACE_GROUPS",
    "ROMAN_NUMERAL_PATTERN",
    # Grammar — Types
    "PlaceValue",
    "PlaceGroup",
    "FormatCheckResult",
    # Grammar — Functions
    "check_format",
    "ensure_well_formed",
    "is_well_formed",
]
