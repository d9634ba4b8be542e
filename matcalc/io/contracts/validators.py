"""
JSON Schema Contract Validators

Модуль для валидации JSON payload матриц согласно формальному JSON Schema
контракту. Использует библиотеку jsonschema для проверки соответствия данных схеме.

Payload:
    {"rows": 2, "cols": 2, "values": [1.0, 2.0, 3.0, 4.0]}

Схема описывает только структуру; совпадение len(values) == rows * cols
проверяется при построении матрицы (DimensionMismatch).
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from matcalc.core.domain.matrix import Matrix, make_matrix


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (устанавливаются как package data).
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
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
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
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, False иначе (без exception)"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class MatrixPayloadValidator(ContractValidator):
    """Валидатор для matrix контракта."""

    def __init__(self):
        super().__init__("matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_payload(data: Dict[str, Any]) -> None:
    """
    Валидация matrix payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixPayloadValidator().validate(data)


def matrix_to_payload(matrix: Matrix) -> Dict[str, Any]:
    """
    Сериализация матрицы в JSON-совместимый payload (values row-major).

    Examples:
        >>> matrix_to_payload(make_matrix(1, 2, [1, 2]))
        {'rows': 1, 'cols': 2, 'values': [1.0, 2.0]}
    """
    return {
        "rows": matrix.row_count,
        "cols": matrix.col_count,
        "values": matrix.to_flat(),
    }


def matrix_from_payload(data: Dict[str, Any]) -> Matrix:
    """
    Построение матрицы из payload после валидации схемой.

    Raises:
        ValidationError: Если payload не соответствует схеме
        DimensionMismatch: Если len(values) != rows * cols
    """
    validate_matrix_payload(data)
    # jsonschema допускает integer-valued float (2.0) для "integer"
    return make_matrix(int(data["rows"]), int(data["cols"]), data["values"])
