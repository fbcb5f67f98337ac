"""
Errors — Таксономия ошибок конвертера римских чисел

Четыре непересекающихся вида ошибок пользовательского ввода:
- MissingValueError: значение отсутствует (None / пустая строка)
- InvalidTypeError: тип не int и не str
- RangeError: целое вне диапазона [1, 3999]
- FormatError: строка не соответствует грамматике римских чисел

Все ошибки терминальны для вызова: частичных результатов нет,
повторов и восстановления внутри нет.
"""


class RomanNumeralError(Exception):
    """Базовый класс всех ошибок конвертера"""


class MissingValueError(RomanNumeralError, ValueError):
    """Значение не передано (None или пустая строка)"""

    def __init__(self, message: str = "value required"):
        super().__init__(message)


class InvalidTypeError(RomanNumeralError, TypeError):
    """
    Тип значения не является ни целым числом, ни строкой.

    bool и float (даже 4.0) тоже считаются недопустимыми типами.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"invalid type: expected int or str, got {type(value).__name__}"
        )


class RangeError(RomanNumeralError, ValueError):
    """Целое значение вне представимого диапазона"""

    def __init__(self, value: int, min_value: int, max_value: int):
        self.value = value
        super().__init__(
            f"invalid range: {value} is outside [{min_value}, {max_value}]"
        )


class FormatError(RomanNumeralError, ValueError):
    """
    Строка не является корректной записью римского числа.

    Attributes:
        text: Исходная строка
        position: Индекс первого недопустимого символа (None для пустой строки)
        reason: Код причины (например, 'unexpected_symbol')
    """

    def __init__(self, text: str, position: int | None, reason: str, details: str = ""):
        self.text = text
        self.position = position
        self.reason = reason
        message = f"invalid format: {text!r} ({reason})"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


class NumeralInvariantError(RomanNumeralError, RuntimeError):
    """
    Нарушение внутреннего инварианта: таблица символов и грамматика разошлись.

    Это ошибка программирования, а не пользовательского ввода.
    """
