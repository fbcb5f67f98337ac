"""
Grammar — Структурная проверка римской записи

Грамматика:
    Numeral   = Thousands Hundreds Tens Units
    Thousands = "M"{0,3}
    Hundreds  = "C"{0,3} | "CD" | "D" "C"{0,3} | "CM"
    Tens      = "X"{0,3} | "XL" | "L" "X"{0,3} | "XC"
    Units     = "I"{0,3} | "IV" | "V" "I"{0,3} | "IX"

Реализация — конечный автомат по четырём разрядным группам. В каждой группе
выбирается самая длинная каноническая форма, являющаяся префиксом остатка.
Первые символы младших групп никогда не встречаются в старших группах, поэтому
жадный выбор эквивалентен полному (якорному) совпадению с ROMAN_NUMERAL_PATTERN,
но дополнительно локализует ошибку: позиция и разряд, после которого
разбор остановился.

Проверка чисто структурная, арифметики здесь нет.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from roman_numerals.core.codec.numeral_table import ROMAN_SYMBOLS
from roman_numerals.core.errors import FormatError, InvalidTypeError


# =============================================================================
# РАЗРЯДЫ
# =============================================================================


class PlaceValue(str, Enum):
    """Разрядная группа римского числа"""

    THOUSANDS = "thousands"
    HUNDREDS = "hundreds"
    TENS = "tens"
    UNITS = "units"


@dataclass(frozen=True)
class PlaceGroup:
    """Разряд и его канонические формы для цифр 1..9 (пустая форма подразумевается)"""

    place: PlaceValue
    forms: tuple[str, ...]

    def longest_prefix(self, text: str, position: int) -> str:
        """
        Самая длинная каноническая форма, с которой начинается text[position:].

        Returns:
            Найденная форма или "" если разряд пропущен
        """
        best = ""
        for form in self.forms:
            if len(form) > len(best) and text.startswith(form, position):
                best = form
        return best


def _place_forms(one: str, five: str, ten: str) -> tuple[str, ...]:
    # 1..9: I II III IV V VI VII VIII IX
    return (
        one,
        one * 2,
        one * 3,
        one + five,
        five,
        five + one,
        five + one * 2,
        five + one * 3,
        one + ten,
    )


PLACE_GROUPS: Final[tuple[PlaceGroup, ...]] = (
    PlaceGroup(PlaceValue.THOUSANDS, ("M", "MM", "MMM")),
    PlaceGroup(PlaceValue.HUNDREDS, _place_forms("C", "D", "M")),
    PlaceGroup(PlaceValue.TENS, _place_forms("X", "L", "C")),
    PlaceGroup(PlaceValue.UNITS, _place_forms("I", "V", "X")),
)

# Та же грамматика в виде регулярного выражения (используется JSON Schema контрактом).
# Пустую строку выражение допускает, поэтому контракт дополнительно требует minLength=1.
# (?!\n) нужен потому, что в Python "$" совпадает и перед завершающим переводом строки.
ROMAN_NUMERAL_PATTERN: Final[str] = (
    r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})(?!\n)$"
)


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


@dataclass(frozen=True)
class FormatCheckResult:
    """Результат структурной проверки."""

    well_formed: bool

    # Индекс первого нераспознанного символа (len(text) при успехе, None для пустой строки)
    position: int | None

    # Последний распознанный разряд (None если ни один не распознан)
    place: PlaceValue | None

    reason: str
    details: str


# =============================================================================
# ПРОВЕРКА
# =============================================================================


def check_format(text: str) -> FormatCheckResult:
    """
    Разбор строки по разрядным группам.

    Args:
        text: Проверяемая строка

    Returns:
        FormatCheckResult с флагом well_formed и локализацией ошибки

    Raises:
        InvalidTypeError: Если text не str
    """
    if not isinstance(text, str):
        raise InvalidTypeError(text)

    if not text:
        return FormatCheckResult(
            well_formed=False,
            position=None,
            place=None,
            reason="empty_numeral",
            details="empty string is not a numeral",
        )

    position = 0
    last_place: PlaceValue | None = None

    for group in PLACE_GROUPS:
        form = group.longest_prefix(text, position)
        if form:
            position += len(form)
            last_place = group.place

    if position == len(text):
        return FormatCheckResult(
            well_formed=True,
            position=position,
            place=last_place,
            reason="ok",
            details="",
        )

    symbol = text[position]
    if symbol not in ROMAN_SYMBOLS:
        return FormatCheckResult(
            well_formed=False,
            position=position,
            place=last_place,
            reason="invalid_character",
            details=f"character {symbol!r} at position {position} is not a Roman symbol",
        )

    after = f"after {last_place.value} group" if last_place else "at start"
    return FormatCheckResult(
        well_formed=False,
        position=position,
        place=last_place,
        reason="unexpected_symbol",
        details=f"symbol {symbol!r} at position {position} not allowed {after}",
    )


def is_well_formed(text: str) -> bool:
    """
    Проверка соответствия строки грамматике римских чисел.

    Args:
        text: Проверяемая строка

    Returns:
        True если вся строка является корректной римской записью
    """
    return check_format(text).well_formed


def ensure_well_formed(text: str) -> None:
    """
    Raises:
        FormatError: Если строка не соответствует грамматике
        InvalidTypeError: Если text не str
    """
    result = check_format(text)
    if not result.well_formed:
        raise FormatError(text, result.position, result.reason, result.details)
