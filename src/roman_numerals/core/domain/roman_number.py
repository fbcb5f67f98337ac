"""
RomanNumber — Значение римского числа

Immutable Pydantic модель, хранящая синхронизированную пару
(int_value, string_value). Вызывающий передаёт одно представление,
второе выводится сразу при создании:

    RomanNumber(1968).to_string()   -> 'MCMLXVIII'
    RomanNumber("MCDLXXIII").to_int() -> 1473

Вход классифицируется один раз в tagged union NumeralInput
(IntegerInput | TextInput), дальше разбор идёт через match.

ИНВАРИАНТ: encode(int_value) == string_value и decode(string_value) == int_value.
"""

from dataclasses import dataclass
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from roman_numerals.core.codec.decoder import decode
from roman_numerals.core.codec.encoder import encode
from roman_numerals.core.codec.numeral_table import MAX_ROMAN_VALUE, MIN_ROMAN_VALUE
from roman_numerals.core.errors import InvalidTypeError, MissingValueError


# =============================================================================
# ВХОД
# =============================================================================


@dataclass(frozen=True)
class IntegerInput:
    """Целочисленный вход"""

    number: int


@dataclass(frozen=True)
class TextInput:
    """Строковый вход (римская запись)"""

    text: str


NumeralInput = IntegerInput | TextInput


def classify_input(value: object) -> NumeralInput:
    """
    Классификация входа конструктора.

    Args:
        value: Произвольное значение

    Returns:
        IntegerInput или TextInput

    Raises:
        MissingValueError: Если value is None или пустая строка
        InvalidTypeError: Для bool, float и любых других типов
    """
    match value:
        case None | "":
            raise MissingValueError()
        case bool():
            raise InvalidTypeError(value)
        case int():
            return IntegerInput(value)
        case str():
            return TextInput(value)
        case _:
            raise InvalidTypeError(value)


def _derive_fields(value: object) -> dict[str, Any]:
    match classify_input(value):
        case IntegerInput(number):
            return {"int_value": number, "string_value": encode(number)}
        case TextInput(text):
            return {"int_value": decode(text), "string_value": text}


# Маркер "значение не передано" (None является допустимым, но пустым входом)
_ABSENT: Final = object()


# =============================================================================
# ROMAN NUMBER MODEL
# =============================================================================


class RomanNumber(BaseModel):
    """
    Римское число.

    Immutable модель (frozen=True). Создание:
    - RomanNumber(42) / RomanNumber("XLII") — одно представление, второе выводится
    - RomanNumber(int_value=42, string_value="XLII") и model_validate/model_validate_json —
      оба поля, проверяется их согласованность

    Ошибки позиционного создания пробрасываются как есть:
    MissingValueError, InvalidTypeError, RangeError, FormatError.
    """

    int_value: int = Field(
        ...,
        ge=MIN_ROMAN_VALUE,
        le=MAX_ROMAN_VALUE,
        strict=True,
        description="Целое значение (1-3999)",
    )
    string_value: str = Field(
        ..., min_length=1, description="Каноническая римская запись"
    )

    model_config = {"frozen": True}

    def __init__(self, value: Any = _ABSENT, /, **data: Any) -> None:
        unknown = sorted(set(data) - set(type(self).model_fields))
        if unknown:
            raise TypeError(
                f"RomanNumber got unexpected keyword(s): {', '.join(unknown)}; "
                "pass the value positionally or use int_value/string_value"
            )
        if value is not _ABSENT and data:
            raise TypeError(
                "RomanNumber accepts either a single value or field keywords, not both"
            )
        if value is not _ABSENT or not data:
            data = _derive_fields(None if value is _ABSENT else value)
        super().__init__(**data)

    @model_validator(mode="after")
    def validate_representations_synchronized(self) -> "RomanNumber":
        """Проверка, что string_value — каноническая запись int_value"""
        expected = encode(self.int_value)
        if self.string_value != expected:
            raise ValueError(
                f"string_value {self.string_value!r} does not match "
                f"int_value {self.int_value} (expected {expected!r})"
            )
        return self

    def to_int(self) -> int:
        return self.int_value

    def to_string(self) -> str:
        return self.string_value

    def __int__(self) -> int:
        return self.int_value

    def __str__(self) -> str:
        return self.string_value
