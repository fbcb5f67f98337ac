"""
Тесты для структурной проверки римской записи (grammar)

Проверяет:
1. Приём всех канонических записей
2. Отклонение неверного алфавита, порядка и числа повторов
3. Локализацию ошибки (позиция, разряд, код причины)
4. Эквивалентность автомата и ROMAN_NUMERAL_PATTERN
"""

import re
from itertools import product

import pytest

from roman_numerals.core.codec import (
    PLACE_GROUPS,
    ROMAN_NUMERAL_PATTERN,
    ROMAN_SYMBOLS,
    FormatCheckResult,
    PlaceValue,
    check_format,
    encode,
    ensure_well_formed,
    is_well_formed,
)
from roman_numerals.core.errors import FormatError, InvalidTypeError


INVALID_NUMERALS = [
    "IIII",
    "VV",
    "XMI",
    "MCMLLLLII",
    "DCDC",
    "VIVIVI",
    "MMMMCIX",
    "iv",
    "CD1X",
    "IC",
    "IL",
    "VX",
    "XXXX",
    "CCCC",
    "LL",
    "DD",
    " IV",
    "IV ",
    "XIIA",
]


class TestPlaceGroups:
    """Тесты разрядных групп"""

    def test_group_order(self) -> None:
        """Группы идут от тысяч к единицам"""
        assert [g.place for g in PLACE_GROUPS] == [
            PlaceValue.THOUSANDS,
            PlaceValue.HUNDREDS,
            PlaceValue.TENS,
            PlaceValue.UNITS,
        ]

    def test_hundreds_forms(self) -> None:
        """Четыре канонические формы разряда: C{1,3}, CD, DC{0,3}, CM"""
        hundreds = PLACE_GROUPS[1]
        assert hundreds.forms == ("C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")

    def test_thousands_forms(self) -> None:
        assert PLACE_GROUPS[0].forms == ("M", "MM", "MMM")

    def test_longest_prefix(self) -> None:
        """В группе выбирается самая длинная подходящая форма"""
        hundreds = PLACE_GROUPS[1]
        assert hundreds.longest_prefix("MCMX", 1) == "CM"
        assert hundreds.longest_prefix("DCCL", 0) == "DCC"
        assert hundreds.longest_prefix("XC", 0) == ""


class TestWellFormed:
    """Приём корректных записей"""

    def test_all_canonical_numerals_accepted(self) -> None:
        for n in range(1, 4000):
            assert is_well_formed(encode(n))

    @pytest.mark.parametrize("numeral", ["I", "MMMCMXCIX", "MCMLXVIII", "MCDLXXIII", "MMDXXII"])
    def test_result_fields(self, numeral: str) -> None:
        result = check_format(numeral)
        assert isinstance(result, FormatCheckResult)
        assert result.well_formed
        assert result.position == len(numeral)
        assert result.place == PlaceValue.UNITS
        assert result.reason == "ok"

    def test_last_place_reported(self) -> None:
        """При успехе place — последний распознанный разряд"""
        assert check_format("MMM").place == PlaceValue.THOUSANDS
        assert check_format("MCM").place == PlaceValue.HUNDREDS
        assert check_format("XL").place == PlaceValue.TENS

    def test_ensure_well_formed_passes(self) -> None:
        ensure_well_formed("MMDXXII")  # Не должно быть исключений


class TestMalformed:
    """Отклонение некорректных записей"""

    @pytest.mark.parametrize("numeral", INVALID_NUMERALS)
    def test_rejected(self, numeral: str) -> None:
        assert not is_well_formed(numeral)

    @pytest.mark.parametrize("numeral", INVALID_NUMERALS)
    def test_ensure_raises_format_error(self, numeral: str) -> None:
        with pytest.raises(FormatError, match="invalid format"):
            ensure_well_formed(numeral)

    def test_empty_string_rejected(self) -> None:
        """Пустая строка не является числом"""
        result = check_format("")
        assert not result.well_formed
        assert result.position is None
        assert result.reason == "empty_numeral"

    @pytest.mark.parametrize("value", [4, None, b"IV", ["I", "V"]])
    def test_non_string_raises(self, value: object) -> None:
        with pytest.raises(InvalidTypeError):
            check_format(value)  # type: ignore


class TestFailureLocalization:
    """Локализация ошибки"""

    @pytest.mark.parametrize(
        "numeral, position, place, reason",
        [
            ("IIII", 3, PlaceValue.UNITS, "unexpected_symbol"),
            ("VV", 1, PlaceValue.UNITS, "unexpected_symbol"),
            ("XMI", 1, PlaceValue.TENS, "unexpected_symbol"),
            ("MCMLLLLII", 4, PlaceValue.TENS, "unexpected_symbol"),
            ("DCDC", 2, PlaceValue.HUNDREDS, "unexpected_symbol"),
            ("VIVIVI", 2, PlaceValue.UNITS, "unexpected_symbol"),
            ("MMMMCIX", 3, PlaceValue.THOUSANDS, "unexpected_symbol"),
            ("CD1X", 2, PlaceValue.HUNDREDS, "invalid_character"),
            ("iv", 0, None, "invalid_character"),
        ],
    )
    def test_position_and_place(
        self, numeral: str, position: int, place: PlaceValue | None, reason: str
    ) -> None:
        result = check_format(numeral)
        assert not result.well_formed
        assert result.position == position
        assert result.place == place
        assert result.reason == reason

    def test_format_error_carries_diagnostics(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            ensure_well_formed("XMI")
        error = exc_info.value
        assert error.text == "XMI"
        assert error.position == 1
        assert error.reason == "unexpected_symbol"
        assert "after tens group" in str(error)

    def test_invalid_character_details(self) -> None:
        result = check_format("CD1X")
        assert "'1'" in result.details
        assert "position 2" in result.details


class TestPatternEquivalence:
    """Автомат и регулярное выражение описывают один язык

    Pattern проверяется через re.search: так его применяет jsonschema.
    """

    # Алфавит + перевод строки и пробел: "$" в Python совпадает перед завершающим "\n"
    EXTENDED_ALPHABET = ROMAN_SYMBOLS + "\n "

    def test_exhaustive_short_strings(self) -> None:
        """Все непустые строки длины до 4 над MDCLXVI, "\\n" и пробелом"""
        pattern = re.compile(ROMAN_NUMERAL_PATTERN)
        for length in range(1, 5):
            for letters in product(self.EXTENDED_ALPHABET, repeat=length):
                text = "".join(letters)
                assert is_well_formed(text) == bool(pattern.search(text)), repr(text)

    @pytest.mark.parametrize(
        "text", ["IV\n", "\n", "I\nV", "IV ", "\nIV", "MMMCMXCIX\n", "IV\r", "IV\n\n"]
    )
    def test_whitespace_and_control_characters(self, text: str) -> None:
        """Завершающий перевод строки и прочие пробельные символы отклоняются обоими"""
        assert not is_well_formed(text)
        assert re.search(ROMAN_NUMERAL_PATTERN, text) is None

    @pytest.mark.parametrize("numeral", INVALID_NUMERALS)
    def test_pattern_rejects_invalid(self, numeral: str) -> None:
        assert re.search(ROMAN_NUMERAL_PATTERN, numeral) is None

    def test_pattern_accepts_canonical(self) -> None:
        pattern = re.compile(ROMAN_NUMERAL_PATTERN)
        for n in range(1, 4000):
            assert pattern.search(encode(n))
