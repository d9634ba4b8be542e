"""Text rendering of matrices for console output."""

from collections.abc import Sequence

from matcalc.core.domain.matrix import Matrix


def format_row(row: Sequence[float]) -> str:
    """
    Одна строка в виде "[1.0, 2.0, 3.0]".

    Examples:
        >>> format_row((1.0, -2.5))
        '[1.0, -2.5]'
    """
    return "[" + ", ".join(repr(float(value)) for value in row) + "]"


def format_matrix(matrix: Matrix) -> str:
    """Матрица построчно, строки разделены переводом строки"""
    return "\n".join(format_row(row) for row in matrix.rows)
