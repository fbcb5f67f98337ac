"""
JSON Schema Contract Validators

Валидация сериализованных RomanNumber: структура по JSON Schema контракту,
затем согласованность int_value и string_value (схема её выразить не может).
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (schema/ рядом с этим модулем):
- roman_number.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from roman_numerals.core.codec import encode


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ внутри пакета contracts.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'roman_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор контракта: ошибки схемы, затем ошибки связей между полями.

    Подклассы переопределяют _iter_cross_field_errors. Связи проверяются только
    для данных, уже прошедших схему.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self._schema_validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки валидации (jsonschema.ValidationError)"""
        schema_errors = list(self._schema_validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return
        yield from self._iter_cross_field_errors(data)

    def _iter_cross_field_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return iter(())

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первая найденная ошибка
        """
        error = next(self.iter_errors(data), None)
        if error is not None:
            raise error


class RomanNumberValidator(ContractValidator):
    """
    Валидатор для roman_number контракта.

    Кроме схемы требует, чтобы string_value был канонической записью int_value:
    {"int_value": 4, "string_value": "V"} структурно корректен, но отклоняется.
    """

    def __init__(self):
        super().__init__("roman_number")

    def _iter_cross_field_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        # "integer" в JSON Schema допускает 4.0
        expected = encode(int(data["int_value"]))
        if data["string_value"] != expected:
            yield ValidationError(
                f"string_value {data['string_value']!r} does not match "
                f"int_value {data['int_value']} (expected {expected!r})",
                validator="synchronized",
                path=["string_value"],
                instance=data["string_value"],
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_roman_number(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного RomanNumber (например, RomanNumber.model_dump()).

    Проверяет схему и согласованность int_value/string_value.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    RomanNumberValidator().validate(data)
