"""
Matrix Multiplication — композиция двух матриц через скалярные произведения

ФОРМУЛА:
    result(i, j) = Σ_{t=0}^{A.col_count-1} A(i, t) * B(t, j)

Форма результата: A.row_count × B.col_count.
Сложность: O(rows_A × cols_B × cols_A).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Умножение НЕ коммутативно: multiply(a, b) и multiply(b, a) являются разными вычислениями
2. Несовместимые формы → IncompatibleDimensions (никогда не мусорный результат)
3. Операнды не изменяются
"""

import logging

from matcalc.core.domain.matrix import IncompatibleDimensions, IndexOutOfRange, Matrix
from matcalc.core.math.compatibility import can_multiply

logger = logging.getLogger(__name__)


def _require_multipliable(a: Matrix, b: Matrix) -> None:
    if not can_multiply(a, b):
        raise IncompatibleDimensions(
            f"cannot multiply {a.row_count}x{a.col_count} by {b.row_count}x{b.col_count}: "
            f"left column count {a.col_count} != right row count {b.row_count}"
        )


def _dot(row: tuple[float, ...], b: Matrix, col: int) -> float:
    total = 0.0
    for t, value in enumerate(row):
        total += value * b.rows[t][col]
    return total


def dot_entry(a: Matrix, b: Matrix, row: int, col: int) -> float:
    """
    Один элемент произведения A × B: скалярное произведение строки row
    матрицы A и столбца col матрицы B.

    Args:
        a: Левый операнд
        b: Правый операнд
        row: Индекс строки A (0 <= row < A.row_count)
        col: Индекс столбца B (0 <= col < B.col_count)

    Returns:
        Значение (A × B)(row, col)

    Raises:
        IncompatibleDimensions: Если A.col_count != B.row_count
        IndexOutOfRange: Если row или col вне границ
    """
    _require_multipliable(a, b)

    if not 0 <= row < a.row_count:
        raise IndexOutOfRange(f"row index {row} out of range for {a.row_count} rows")
    if not 0 <= col < b.col_count:
        raise IndexOutOfRange(f"column index {col} out of range for {b.col_count} columns")

    return _dot(a.rows[row], b, col)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение A × B.

    Args:
        a: Левый операнд (m × k)
        b: Правый операнд (k × n)

    Returns:
        Новая матрица m × n

    Raises:
        IncompatibleDimensions: Если A.col_count != B.row_count

    Examples:
        >>> a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        >>> b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
        >>> multiply(a, b).to_rows()
        [[58.0, 64.0], [139.0, 154.0]]
    """
    _require_multipliable(a, b)

    logger.debug(
        "multiply: %dx%d by %dx%d", a.row_count, a.col_count, b.row_count, b.col_count
    )

    return Matrix(
        rows=tuple(
            tuple(_dot(row, b, col) for col in range(b.col_count)) for row in a.rows
        )
    )
