"""
Decoder — Конверсия римской записи в целое число

Сначала структурная проверка (grammar), затем сканирование курсором:
на каждом шаге берётся ПЕРВАЯ запись NUMERAL_TABLE, чей символ является
префиксом остатка строки. Предпочтение "CM" перед "C" обеспечивается
порядком таблицы, а не сравнением длин символов.
"""

from roman_numerals.core.codec.grammar import ensure_well_formed
from roman_numerals.core.codec.numeral_table import NUMERAL_TABLE, NumeralEntry
from roman_numerals.core.errors import NumeralInvariantError


def _match_entry(text: str, cursor: int) -> NumeralEntry:
    for entry in NUMERAL_TABLE:
        if text.startswith(entry.symbol, cursor):
            return entry

    # Грамматика уже приняла строку: отсутствие совпадения означает
    # расхождение таблицы и грамматики
    raise NumeralInvariantError(
        f"No numeral table entry matches {text[cursor:]!r} in {text!r}"
    )


def decode(text: str) -> int:
    """
    Конверсия: римская запись → целое

    Args:
        text: Римское число (только M, D, C, L, X, V, I в верхнем регистре)

    Returns:
        Целое число в диапазоне [1, 3999]

    Raises:
        InvalidTypeError: Если text не str
        FormatError: Если строка не соответствует грамматике
            (включая пустую строку, нижний регистр, лишние символы)

    Examples:
        >>> decode("MCDLXXIII")
        1473
        >>> decode("IV")
        4
    """
    ensure_well_formed(text)

    total = 0
    cursor = 0

    while cursor < len(text):
        entry = _match_entry(text, cursor)
        total += entry.value
        cursor += len(entry.symbol)

    return total
