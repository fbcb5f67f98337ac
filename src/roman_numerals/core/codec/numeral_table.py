"""
NumeralTable — Таблица символов римских чисел

Единственный источник пар (символ, значение) для обоих направлений конверсии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица строго убывает по value
2. Двухбуквенные вычитательные символы (CM, CD, XC, XL, IX, IV) стоят перед
   однобуквенным символом с той же первой буквой меньшего разряда
3. Жадная редукция по таблице завершается с остатком 0 для любого n в [1, 3999]
"""

from typing import Final, NamedTuple


# =============================================================================
# ДИАПАЗОН
# =============================================================================

# Минимальное представимое значение (нуля в римской записи нет)
MIN_ROMAN_VALUE: Final[int] = 1

# Максимальное представимое значение: MMMCMXCIX
MAX_ROMAN_VALUE: Final[int] = 3999

# Допустимый алфавит, от старшего символа к младшему
ROMAN_SYMBOLS: Final[str] = "MDCLXVI"


# =============================================================================
# ТАБЛИЦА
# =============================================================================


class NumeralEntry(NamedTuple):
    """Пара (символ, значение)"""

    symbol: str
    value: int


NUMERAL_TABLE: Final[tuple[NumeralEntry, ...]] = (
    NumeralEntry("M", 1000),
    NumeralEntry("CM", 900),
    NumeralEntry("D", 500),
    NumeralEntry("CD", 400),
    NumeralEntry("C", 100),
    NumeralEntry("XC", 90),
    NumeralEntry("L", 50),
    NumeralEntry("XL", 40),
    NumeralEntry("X", 10),
    NumeralEntry("IX", 9),
    NumeralEntry("V", 5),
    NumeralEntry("IV", 4),
    NumeralEntry("I", 1),
)


def is_in_range(value: int) -> bool:
    """
    Проверка попадания в диапазон [MIN_ROMAN_VALUE, MAX_ROMAN_VALUE].

    Args:
        value: Целое число

    Returns:
        True если значение представимо римским числом
    """
    return MIN_ROMAN_VALUE <= value <= MAX_ROMAN_VALUE
