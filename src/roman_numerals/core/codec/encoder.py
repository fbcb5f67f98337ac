"""
Encoder — Конверсия целого числа в римское

Жадная детерминированная редукция за один проход по NUMERAL_TABLE:
для каждой пары (symbol, value) символ повторяется quotient = remainder // value
раз, остаток переходит к следующей паре. Последняя пара ("I", 1) гарантирует
нулевой остаток. Без побочных эффектов.
"""

from roman_numerals.core.codec.numeral_table import (
    MAX_ROMAN_VALUE,
    MIN_ROMAN_VALUE,
    NUMERAL_TABLE,
    is_in_range,
)
from roman_numerals.core.errors import InvalidTypeError, RangeError


def encode(value: int) -> str:
    """
    Конверсия: целое → каноническая римская запись

    Args:
        value: Целое число в диапазоне [1, 3999]

    Returns:
        Римское число в канонической форме (верхний регистр)

    Raises:
        InvalidTypeError: Если value не int (bool тоже отклоняется)
        RangeError: Если value вне [1, 3999]

    Examples:
        >>> encode(1968)
        'MCMLXVIII'
        >>> encode(3999)
        'MMMCMXCIX'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTypeError(value)

    if not is_in_range(value):
        raise RangeError(value, MIN_ROMAN_VALUE, MAX_ROMAN_VALUE)

    remainder = value
    parts: list[str] = []

    for entry in NUMERAL_TABLE:
        quotient, remainder = divmod(remainder, entry.value)
        if quotient == 0:
            continue
        parts.append(entry.symbol * quotient)

    return "".join(parts)
