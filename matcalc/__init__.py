"""
matcalc — dense matrix arithmetic

Immutable Matrix values, shape compatibility checks, elementwise ops,
matrix multiplication and a recursive cofactor-expansion determinant.
"""

import logging as _logging

from matcalc.core.domain import (
    DeterminantTooLarge,
    DimensionMismatch,
    IncompatibleDimensions,
    IndexOutOfRange,
    Matrix,
    MatrixError,
    NotSquare,
    identity,
    make_matrix,
    to_flat,
    to_rows,
    zeros,
)
from matcalc.core.math import (
    CofactorConfig,
    add,
    add_subtract,
    can_add_or_subtract,
    can_multiply,
    determinant,
    determinant_elimination,
    dot_entry,
    matrices_close,
    multiply,
    scalar_multiply,
    sub_matrix,
    subtract,
    transpose,
)

# Библиотека не настраивает handlers; это задача приложения
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Matrix model
    "Matrix",
    "make_matrix",
    "identity",
    "zeros",
    "to_rows",
    "to_flat",
    # Exceptions
    "MatrixError",
    "DimensionMismatch",
    "IncompatibleDimensions",
    "NotSquare",
    "IndexOutOfRange",
    "DeterminantTooLarge",
    # Compatibility
    "can_multiply",
    "can_add_or_subtract",
    # Elementwise
    "scalar_multiply",
    "add_subtract",
    "add",
    "subtract",
    "transpose",
    # Multiplication
    "multiply",
    "dot_entry",
    # Determinant
    "CofactorConfig",
    "determinant",
    "determinant_elimination",
    "sub_matrix",
    # Comparison
    "matrices_close",
]
