"""
Matrix Loader — чтение матриц из текстовых файлов

Формат файла: числа, разделённые пробельными символами (пробелы, табы,
переводы строк), читаются row-major. Берутся первые rows * cols значений,
остаток файла игнорируется.

Ошибки ввода (нет файла, нечисловой токен, мало значений) НЕ выбрасываются
наружу, а возвращаются как MatrixLoadResult с ok=False. Вызывающий код
решает: запросить другой путь, прервать работу или подставить значение.
Арифметическое ядро никогда не выполняет I/O.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from matcalc.core.domain.matrix import (
    DimensionMismatch,
    Matrix,
    make_matrix,
    validate_dimensions,
)

logger = logging.getLogger(__name__)


class LoadErrorKind(str, Enum):
    """Причина неуспешной загрузки."""

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    READ_ERROR = "READ_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"


@dataclass(frozen=True)
class MatrixLoadResult:
    """Результат загрузки матрицы."""

    ok: bool
    matrix: Optional[Matrix]
    error: Optional[LoadErrorKind]

    # Детали (путь, сообщение об ошибке)
    details: str

    @classmethod
    def success(cls, matrix: Matrix, details: str = "") -> "MatrixLoadResult":
        return cls(ok=True, matrix=matrix, error=None, details=details)

    @classmethod
    def failure(cls, error: LoadErrorKind, details: str) -> "MatrixLoadResult":
        return cls(ok=False, matrix=None, error=error, details=details)


def parse_matrix_text(text: str, rows: int, cols: int) -> Matrix:
    """
    Разбор текста в матрицу rows x cols.

    Args:
        text: Числа, разделённые пробельными символами
        rows: Количество строк
        cols: Количество столбцов

    Returns:
        Новая матрица

    Raises:
        DimensionMismatch: Если размеры не целые положительные или значений меньше rows * cols
        ValueError: Если один из первых rows * cols токенов не является числом
    """
    validate_dimensions(rows, cols)

    needed = rows * cols
    tokens = text.split()
    if len(tokens) < needed:
        raise DimensionMismatch(
            f"expected {needed} values for a {rows}x{cols} matrix, found {len(tokens)}"
        )

    values = []
    for position, token in enumerate(tokens[:needed]):
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"token {position} is not a number: {token!r}") from None

    return make_matrix(rows, cols, values)


def load_matrix(path: Union[str, Path], rows: int, cols: int) -> MatrixLoadResult:
    """
    Загрузка матрицы rows x cols из текстового файла.

    Args:
        path: Путь к .txt файлу
        rows: Количество строк
        cols: Количество столбцов

    Returns:
        MatrixLoadResult (ok=True с матрицей, либо ok=False с причиной)
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("load_matrix: file not found: %s", path)
        return MatrixLoadResult.failure(
            LoadErrorKind.FILE_NOT_FOUND, f"File not found: {path}"
        )
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("load_matrix: cannot read %s: %s", path, e)
        return MatrixLoadResult.failure(LoadErrorKind.READ_ERROR, f"Cannot read {path}: {e}")

    try:
        matrix = parse_matrix_text(text, rows, cols)
    except DimensionMismatch as e:
        logger.warning("load_matrix: %s: %s", path, e)
        return MatrixLoadResult.failure(LoadErrorKind.DIMENSION_MISMATCH, f"{path}: {e}")
    except ValueError as e:
        logger.warning("load_matrix: %s: %s", path, e)
        return MatrixLoadResult.failure(LoadErrorKind.PARSE_ERROR, f"{path}: {e}")

    logger.debug("load_matrix: loaded %dx%d matrix from %s", rows, cols, path)
    return MatrixLoadResult.success(matrix, details=str(path))
