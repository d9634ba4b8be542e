"""
Determinant Engine — Recursive Cofactor (Laplace) Expansion

Модуль вычисляет определитель квадратной матрицы точным разложением Лапласа
по первой строке:
- size 1: единственный элемент
- size 2: a00*a11 - a01*a10
- size n >= 3: Σ_i (-1)^i * A(0, i) * det(sub_matrix(A, 0, i))

Рекурсия естественна, глубина ограничена размером матрицы.
Сложность O(n!) является принятой стоимостью алгоритма. Для больших матриц
есть отдельная процедура determinant_elimination (Gaussian elimination
с partial pivoting, O(n^3)); determinant() никогда не делегирует ей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Неквадратная матрица → NotSquare (никогда не число)
2. Знаки чередуются +, -, +, ... начиная с i = 0
3. Подматрица сохраняет относительный порядок строк и столбцов
4. NaN/Inf распространяются без специальной обработки
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Optional

from matcalc.core.domain.matrix import (
    DeterminantTooLarge,
    DimensionMismatch,
    Grid,
    IndexOutOfRange,
    Matrix,
    NotSquare,
)
from matcalc.core.math.numerical_safeguards import EPS_PIVOT, is_zero, validate_positive_int

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Размер, начиная с которого cofactor expansion логирует предупреждение
# 9! = 362880 слагаемых на нижнем уровне рекурсии
DEFAULT_COFACTOR_WARN_SIZE: Final[int] = 9


@dataclass(frozen=True)
class CofactorConfig:
    """Конфигурация cofactor expansion.

    - max_size: жёсткий лимит размера (None = без лимита)
    - warn_size: размер, начиная с которого пишется warning в лог
    """

    max_size: Optional[int] = None
    warn_size: int = DEFAULT_COFACTOR_WARN_SIZE

    def __post_init__(self) -> None:
        if self.max_size is not None:
            validate_positive_int(self.max_size, "max_size")
        validate_positive_int(self.warn_size, "warn_size")


_DEFAULT_CONFIG = CofactorConfig()


# =============================================================================
# SUB-MATRIX
# =============================================================================


def _minor_grid(grid: Grid, row: int, col: int) -> Grid:
    return tuple(
        tuple(value for j, value in enumerate(line) if j != col)
        for i, line in enumerate(grid)
        if i != row
    )


def sub_matrix(matrix: Matrix, row: int, col: int) -> Matrix:
    """
    Подматрица: удаление строки row и столбца col.

    Args:
        matrix: Исходная матрица (минимум 2×2)
        row: Удаляемая строка
        col: Удаляемый столбец

    Returns:
        Новая матрица (rows-1) × (cols-1), относительный порядок сохранён

    Raises:
        DimensionMismatch: Если результат был бы пустым (строка или столбец единственные)
        IndexOutOfRange: Если row или col вне границ
    """
    if matrix.row_count < 2 or matrix.col_count < 2:
        raise DimensionMismatch(
            f"cannot remove a row and column from a {matrix.row_count}x{matrix.col_count} matrix"
        )
    if not 0 <= row < matrix.row_count:
        raise IndexOutOfRange(f"row index {row} out of range for {matrix.row_count} rows")
    if not 0 <= col < matrix.col_count:
        raise IndexOutOfRange(f"column index {col} out of range for {matrix.col_count} columns")

    return Matrix(rows=_minor_grid(matrix.rows, row, col))


# =============================================================================
# COFACTOR EXPANSION
# =============================================================================


def _require_square(matrix: Matrix) -> None:
    if not matrix.is_square:
        raise NotSquare(
            f"determinant requires a square matrix, got {matrix.row_count}x{matrix.col_count}"
        )


def _expand(grid: Grid) -> float:
    n = len(grid)

    if n == 1:
        return grid[0][0]

    if n == 2:
        return grid[0][0] * grid[1][1] - grid[0][1] * grid[1][0]

    total = 0.0
    sign = 1.0
    for i in range(n):
        total += sign * grid[0][i] * _expand(_minor_grid(grid, 0, i))
        sign = -sign
    return total


def determinant(matrix: Matrix, config: Optional[CofactorConfig] = None) -> float:
    """
    Определитель разложением Лапласа по первой строке.

    Args:
        matrix: Квадратная матрица
        config: Лимиты cofactor expansion (default: без лимита)

    Returns:
        Определитель

    Raises:
        NotSquare: Если матрица не квадратная
        DeterminantTooLarge: Если размер превышает config.max_size

    Examples:
        >>> determinant(Matrix.from_rows([[1, 2], [3, 4]]))
        -2.0
        >>> determinant(identity(3))
        1.0
    """
    _require_square(matrix)
    config = config or _DEFAULT_CONFIG
    size = matrix.row_count

    if config.max_size is not None and size > config.max_size:
        raise DeterminantTooLarge(
            f"cofactor expansion of a {size}x{size} matrix exceeds max_size={config.max_size}"
        )

    if size >= config.warn_size:
        logger.warning("determinant(): cofactor expansion on %dx%d matrix, O(n!)", size, size)

    return _expand(matrix.rows)


# =============================================================================
# GAUSSIAN ELIMINATION (отдельная процедура)
# =============================================================================


def determinant_elimination(matrix: Matrix, pivot_eps: float = EPS_PIVOT) -> float:
    """
    Определитель через Gaussian elimination с partial pivoting.

    Отдельная, независимо тестируемая процедура O(n^3). Не заменяет
    determinant() и может отличаться от него в пределах погрешности float.
    Матрица не изменяется: исключение выполняется на копии строк.

    Args:
        matrix: Квадратная матрица
        pivot_eps: Относительный порог нулевого pivot
            (|pivot| <= eps * max|a_ij| → det = 0.0)

    Returns:
        Определитель

    Raises:
        NotSquare: Если матрица не квадратная
    """
    _require_square(matrix)

    n = matrix.row_count
    work = [list(row) for row in matrix.rows]
    sign = 1.0

    # Порог масштабируется по наибольшему элементу: scale * A имеет те же нулевые pivot, что и A
    scale = max(abs(value) for row in work for value in row)
    if scale == 0.0:
        return 0.0
    tol = pivot_eps * scale if math.isfinite(scale) else pivot_eps

    for pivot_index in range(n):
        pivot_row = max(range(pivot_index, n), key=lambda r: abs(work[r][pivot_index]))
        if is_zero(work[pivot_row][pivot_index], tol=tol):
            return 0.0
        if pivot_row != pivot_index:
            work[pivot_index], work[pivot_row] = work[pivot_row], work[pivot_index]
            sign = -sign

        pivot_value = work[pivot_index][pivot_index]
        for row in range(pivot_index + 1, n):
            factor = work[row][pivot_index] / pivot_value
            if factor == 0.0:
                continue
            for col in range(pivot_index, n):
                work[row][col] -= factor * work[pivot_index][col]

    result = sign
    for i in range(n):
        result *= work[i][i]
    return result
