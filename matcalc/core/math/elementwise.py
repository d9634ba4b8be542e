"""
Elementwise Ops — поэлементные преобразования матриц

Операции:
- scalar_multiply: k * A
- add_subtract: A ± B (с проверкой форм)
- add / subtract: удобные обёртки над add_subtract
- transpose: A^T (определено и для неквадратных матриц)

Все операции возвращают новую матрицу, операнды не изменяются.
NaN/Inf распространяются по правилам IEEE-754.
"""

import logging

from matcalc.core.domain.matrix import DimensionMismatch, Matrix
from matcalc.core.math.compatibility import can_add_or_subtract

logger = logging.getLogger(__name__)


def scalar_multiply(matrix: Matrix, scalar: float) -> Matrix:
    """
    Умножение матрицы на число.

    Args:
        matrix: Исходная матрица
        scalar: Множитель

    Returns:
        Новая матрица той же формы, элемент (i, j) = scalar * A(i, j)

    Examples:
        >>> scalar_multiply(Matrix.from_rows([[1, 2], [3, 4]]), -1).to_rows()
        [[-1.0, -2.0], [-3.0, -4.0]]
    """
    return Matrix(rows=tuple(tuple(scalar * value for value in row) for row in matrix.rows))


def add_subtract(a: Matrix, b: Matrix, subtract: bool) -> Matrix:
    """
    Поэлементное сложение или вычитание.

    Элемент (i, j) = A(i, j) + s * B(i, j), где s = -1 при subtract, иначе +1.

    Args:
        a: Первый операнд
        b: Второй операнд
        subtract: True для A - B, False для A + B

    Returns:
        Новая матрица той же формы

    Raises:
        DimensionMismatch: Если формы операндов различаются
    """
    if not can_add_or_subtract(a, b):
        raise DimensionMismatch(
            f"cannot {'subtract' if subtract else 'add'} "
            f"{a.row_count}x{a.col_count} and {b.row_count}x{b.col_count} matrices"
        )

    sign = -1.0 if subtract else 1.0
    logger.debug("add_subtract: %dx%d, subtract=%s", a.row_count, a.col_count, subtract)

    return Matrix(
        rows=tuple(
            tuple(x + sign * y for x, y in zip(row_a, row_b))
            for row_a, row_b in zip(a.rows, b.rows)
        )
    )


def add(a: Matrix, b: Matrix) -> Matrix:
    """A + B"""
    return add_subtract(a, b, subtract=False)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """A - B"""
    return add_subtract(a, b, subtract=True)


def transpose(matrix: Matrix) -> Matrix:
    """
    Транспонирование: результат имеет форму cols x rows, элемент (j, i) = A(i, j).

    Examples:
        >>> transpose(Matrix.from_rows([[1, 2, 3]])).to_rows()
        [[1.0], [2.0], [3.0]]
    """
    return Matrix(rows=tuple(zip(*matrix.rows)))
