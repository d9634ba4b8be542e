"""
Domain models and value objects.

Contains the Matrix value type, its constructors and the error taxonomy.
"""

from matcalc.core.domain.matrix import (
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
    validate_dimensions,
    zeros,
)

__all__ = [
    # Matrix model
    "Matrix",
    # Constructors
    "make_matrix",
    "identity",
    "zeros",
    "validate_dimensions",
    # Export
    "to_rows",
    "to_flat",
    # Exceptions
    "MatrixError",
    "DimensionMismatch",
    "IncompatibleDimensions",
    "NotSquare",
    "IndexOutOfRange",
    "DeterminantTooLarge",
]
