"""
Numerical Safeguards — Float Tolerances & Validation Primitives

Модуль собирает численные примитивы, общие для всего арифметического ядра:
- Epsilon-параметры для сравнений float
- Проверка валидности float (NaN/Inf)
- Epsilon-сравнения скаляров и матриц
- Валидация параметров конфигурации

ВАЖНО: ядро НЕ санитизирует NaN/Inf в элементах матриц. Они распространяются
по стандартным правилам IEEE-754; проверки ниже предназначены для тестов,
диагностики и валидации конфигурации.
"""

import math
from typing import Final

from matcalc.core.domain.matrix import Matrix

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close / matrices_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Относительный порог нулевого pivot в determinant_elimination
# Если |pivot| <= EPS_PIVOT * max|a_ij| → матрица считается вырожденной (det = 0)
EPS_PIVOT: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_finite_matrix(matrix: Matrix) -> bool:
    """True если все элементы матрицы конечны"""
    return all(is_valid_float(value) for row in matrix.rows for value in row)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def matrices_close(
    a: Matrix,
    b: Matrix,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение матриц с учётом толерантности.

    Матрицы разной формы никогда не близки. NaN не близок ничему
    (как в math.isclose).

    Args:
        a: Первая матрица
        b: Вторая матрица
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если формы совпадают и все пары элементов близки
    """
    if a.shape != b.shape:
        return False

    return all(
        is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol)
        for row_a, row_b in zip(a.rows, b.rows)
        for x, y in zip(row_a, row_b)
    )


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение является положительным целым числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
