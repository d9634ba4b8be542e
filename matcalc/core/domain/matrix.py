"""
Matrix — Модель плотной прямоугольной матрицы

Immutable Pydantic модель, представляющая матрицу вещественных чисел (float64).
Матрица создаётся один раз (из внешних данных или как результат операции)
и никогда не изменяется: все операции возвращают новый экземпляр.

ИНВАРИАНТЫ:
1. row_count >= 1, col_count >= 1
2. Все строки имеют ровно col_count элементов (без jagged rows)
3. Элементы: обычные IEEE-754 float, NaN/Inf не отклоняются
4. Индексация zero-based, отрицательные индексы вне диапазона
"""

from collections.abc import Sequence
from typing import Union

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовая ошибка матричных операций (нарушение структурного precondition)."""

    pass


class DimensionMismatch(MatrixError, ValueError):
    """
    Неверное количество значений при создании матрицы,
    либо различные формы операндов сложения/вычитания.
    """

    pass


class IncompatibleDimensions(MatrixError, ValueError):
    """Формы операндов несовместимы для умножения (A.col_count != B.row_count)."""

    pass


class NotSquare(MatrixError, ValueError):
    """Операция определена только для квадратной матрицы (определитель)."""

    pass


class IndexOutOfRange(MatrixError, IndexError):
    """Обращение к элементу вне границ матрицы."""

    pass


class DeterminantTooLarge(MatrixError):
    """
    Размер матрицы превышает настроенный лимит cofactor expansion.

    Разложение Лапласа стоит O(n!), лимит задаётся через CofactorConfig.max_size.
    """

    pass


# =============================================================================
# MATRIX MODEL
# =============================================================================

Grid = tuple[tuple[float, ...], ...]
MatrixValues = Union[Sequence[float], Sequence[Sequence[float]]]


class Matrix(BaseModel):
    """
    Модель плотной матрицы.

    Immutable модель (frozen=True). Равенство структурное (по элементам),
    экземпляр hashable и безопасен для параллельного чтения.
    """

    rows: Grid = Field(..., min_length=1, description="Строки матрицы (row-major)")

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_rectangular(cls, v: Grid) -> Grid:
        """Проверка, что матрица непустая и прямоугольная"""
        width = len(v[0])
        if width == 0:
            raise ValueError("matrix rows must contain at least one entry")
        for index, row in enumerate(v):
            if len(row) != width:
                raise ValueError(
                    f"row {index} has {len(row)} entries, expected {width} (jagged rows)"
                )
        return v

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из вложенной последовательности, форма выводится из данных.

        Raises:
            DimensionMismatch: Если данные пустые или строки разной длины
        """
        if len(rows) == 0 or not _is_row(rows[0]) or len(rows[0]) == 0:
            raise DimensionMismatch("from_rows expects a non-empty sequence of non-empty rows")
        return make_matrix(len(rows), len(rows[0]), rows)

    # -------------------------------------------------------------------------
    # Размеры
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.col_count)

    @property
    def is_square(self) -> bool:
        return self.row_count == self.col_count

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def get(self, row: int, col: int) -> float:
        """
        Элемент (row, col).

        Args:
            row: Индекс строки, 0 <= row < row_count
            col: Индекс столбца, 0 <= col < col_count

        Returns:
            Значение элемента

        Raises:
            IndexOutOfRange: Если индекс вне границ (в т.ч. отрицательный)
        """
        self._check_row(row)
        self._check_col(col)
        return self.rows[row][col]

    def row(self, index: int) -> tuple[float, ...]:
        """Строка index (tuple)"""
        self._check_row(index)
        return self.rows[index]

    def column(self, index: int) -> tuple[float, ...]:
        """Столбец index (tuple)"""
        self._check_col(index)
        return tuple(row[index] for row in self.rows)

    def to_rows(self) -> list[list[float]]:
        """
        Экспорт в список строк (row-major) для отображения/сериализации.

        Возвращает новую копию, изменение результата не затрагивает матрицу.
        """
        return [list(row) for row in self.rows]

    def to_flat(self) -> list[float]:
        """Экспорт в плоский список значений (row-major)"""
        return [value for row in self.rows for value in row]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.row_count:
            raise IndexOutOfRange(
                f"row index {row} out of range for {self.row_count}x{self.col_count} matrix"
            )

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.col_count:
            raise IndexOutOfRange(
                f"column index {col} out of range for {self.row_count}x{self.col_count} matrix"
            )

    def __str__(self) -> str:
        return f"Matrix({self.row_count}x{self.col_count})"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def validate_dimensions(rows: int, cols: int) -> None:
    """
    Валидация размеров матрицы: оба должны быть целыми >= 1.

    Raises:
        DimensionMismatch: Если размер не int (bool тоже отклоняется) или < 1
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise DimensionMismatch(f"{name} must be an integer, got {value!r}")
    if rows < 1 or cols < 1:
        raise DimensionMismatch(f"matrix dimensions must be positive, got {rows}x{cols}")


def _is_row(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def make_matrix(rows: int, cols: int, values: MatrixValues) -> Matrix:
    """
    Создание матрицы rows x cols из плоской или вложенной последовательности.

    Плоская последовательность читается row-major и должна содержать ровно
    rows * cols значений. Вложенная должна содержать rows строк по cols значений.

    Args:
        rows: Количество строк (>= 1)
        cols: Количество столбцов (>= 1)
        values: Значения (плоские row-major или вложенные по строкам)

    Returns:
        Новая матрица

    Raises:
        DimensionMismatch: Если размеры неположительные или число значений не совпадает

    Examples:
        >>> make_matrix(2, 2, [1, 2, 3, 4]).to_rows()
        [[1.0, 2.0], [3.0, 4.0]]
        >>> make_matrix(1, 2, [[5, 6]]).to_rows()
        [[5.0, 6.0]]
    """
    validate_dimensions(rows, cols)

    nested = [_is_row(value) for value in values]

    if values and all(nested):
        if len(values) != rows:
            raise DimensionMismatch(f"expected {rows} rows, got {len(values)}")
        for index, row in enumerate(values):
            if len(row) != cols:
                raise DimensionMismatch(
                    f"row {index} has {len(row)} values, expected {cols}"
                )
        return Matrix(rows=tuple(tuple(row) for row in values))

    if any(nested):
        raise DimensionMismatch("values mix nested rows and scalar entries")

    if len(values) != rows * cols:
        raise DimensionMismatch(
            f"expected {rows * cols} values for a {rows}x{cols} matrix, got {len(values)}"
        )

    flat = list(values)
    return Matrix(rows=tuple(tuple(flat[r * cols : (r + 1) * cols]) for r in range(rows)))


def identity(size: int) -> Matrix:
    """Единичная матрица size x size"""
    validate_dimensions(size, size)
    return Matrix(
        rows=tuple(tuple(1.0 if i == j else 0.0 for j in range(size)) for i in range(size))
    )


def zeros(rows: int, cols: int) -> Matrix:
    """Нулевая матрица rows x cols"""
    validate_dimensions(rows, cols)
    return make_matrix(rows, cols, [0.0] * (rows * cols))


def to_rows(matrix: Matrix) -> list[list[float]]:
    """Экспорт матрицы в список строк (row-major)"""
    return matrix.to_rows()


def to_flat(matrix: Matrix) -> list[float]:
    """Экспорт матрицы в плоский список (row-major)"""
    return matrix.to_flat()
