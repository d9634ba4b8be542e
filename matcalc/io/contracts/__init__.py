"""
Contract Validation Module

Модуль для валидации JSON контрактов matcalc.

Сериализация матриц на стороне коллабораторов: ядро (matcalc.core) не зависит
от формата payload.
"""

from .validators import (
    ContractValidator,
    MatrixPayloadValidator,
    SchemaLoader,
    matrix_from_payload,
    matrix_to_payload,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixPayloadValidator",
    # Functions
    "validate_matrix_payload",
    "matrix_to_payload",
    "matrix_from_payload",
]
