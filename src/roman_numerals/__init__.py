"""
roman_numerals — конверсия между целыми числами (1-3999) и римской записью.

    >>> from roman_numerals import RomanNumber, encode, decode
    >>> encode(1968)
    'MCMLXVIII'
    >>> decode("MMDXXII")
    2522
    >>> RomanNumber("LXIX").to_int()
    69
"""

from roman_numerals.core.codec import (
    MAX_ROMAN_VALUE,
    MIN_ROMAN_VALUE,
    NUMERAL_TABLE,
    check_format,
    decode,
    encode,
    is_well_formed,
)
from roman_numerals.core.domain import RomanNumber
from roman_numerals.core.errors import (
    FormatError,
    InvalidTypeError,
    MissingValueError,
    NumeralInvariantError,
    RangeError,
    RomanNumeralError,
)

__all__ = [
    "encode",
    "decode",
    "is_well_formed",
    "check_format",
    "RomanNumber",
    "NUMERAL_TABLE",
    "MIN_ROMAN_VALUE",
    "MAX_ROMAN_VALUE",
    "RomanNumeralError",
    "MissingValueError",
    "InvalidTypeError",
    "RangeError",
    "FormatError",
    "NumeralInvariantError",
]
