"""
Core math modules для matcalc

Арифметическое ядро: предикаты совместимости, поэлементные операции,
матричное умножение и рекурсивный определитель.
"""

# Numerical Safeguards
from matcalc.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT,
    # NaN/Inf checks
    is_finite_matrix,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    matrices_close,
    # Validation
    validate_positive_int,
)

# Compatibility Checks
from matcalc.core.math.compatibility import can_add_or_subtract, can_multiply

# Elementwise Ops
from matcalc.core.math.elementwise import (
    add,
    add_subtract,
    scalar_multiply,
    subtract,
    transpose,
)

# Matrix Multiplication
from matcalc.core.math.multiplication import dot_entry, multiply

# Determinant Engine
from matcalc.core.math.determinant import (
    DEFAULT_COFACTOR_WARN_SIZE,
    CofactorConfig,
    determinant,
    determinant_elimination,
    sub_matrix,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT",
    # Numerical Safeguards — NaN/Inf checks
    "is_finite_matrix",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    "matrices_close",
    # Numerical Safeguards — Validation
    "validate_positive_int",
    # Compatibility Checks
    "can_add_or_subtract",
    "can_multiply",
    # Elementwise Ops
    "add",
    "add_subtract",
    "scalar_multiply",
    "subtract",
    "transpose",
    # Matrix Multiplication
    "dot_entry",
    "multiply",
    # Determinant Engine — Constants
    "DEFAULT_COFACTOR_WARN_SIZE",
    # Determinant Engine — Types
    "CofactorConfig",
    # Determinant Engine — Functions
    "determinant",
    "determinant_elimination",
    "sub_matrix",
]
