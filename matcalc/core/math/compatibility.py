"""
Compatibility Checks — предикаты совместимости форм матриц

Advisory предикаты: вызывающий код может использовать их, чтобы избежать
ветки с ошибкой. Сами операции проверяют те же условия независимо и
никогда не доверяют непроверенному вызову.
"""

from matcalc.core.domain.matrix import Matrix


def can_multiply(a: Matrix, b: Matrix) -> bool:
    """
    Можно ли вычислить A × B.

    Число столбцов A должно совпадать с числом строк B. Порядок важен:
    can_multiply(a, b) и can_multiply(b, a) в общем случае различны.

    Examples:
        >>> can_multiply(make_matrix(2, 3, [0] * 6), make_matrix(3, 2, [0] * 6))
        True
        >>> can_multiply(make_matrix(2, 3, [0] * 6), make_matrix(2, 2, [0] * 4))
        False
    """
    return a.col_count == b.row_count


def can_add_or_subtract(a: Matrix, b: Matrix) -> bool:
    """Можно ли сложить/вычесть A и B (одинаковые формы)"""
    return a.row_count == b.row_count and a.col_count == b.col_count
