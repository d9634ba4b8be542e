"""
Тесты для Determinant Engine — Recursive Cofactor Expansion

Проверяемые инварианты:
1. Базовые случаи size 1 и size 2
2. Разложение по первой строке с чередованием знаков для n >= 3
3. NotSquare для неквадратных матриц (никогда не число)
4. sub_matrix: удаление строки/столбца с сохранением порядка
5. CofactorConfig: лимит размера и warning в лог
6. determinant_elimination согласуется с determinant
"""

import logging
import math

import pytest

from matcalc.core.domain import (
    DeterminantTooLarge,
    DimensionMismatch,
    IndexOutOfRange,
    Matrix,
    NotSquare,
    identity,
    make_matrix,
)
from matcalc.core.math import (
    DEFAULT_COFACTOR_WARN_SIZE,
    CofactorConfig,
    determinant,
    determinant_elimination,
    is_close,
    scalar_multiply,
    sub_matrix,
)


@pytest.fixture
def m3() -> Matrix:
    """Матрица 3x3 с det = -306"""
    return Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])


@pytest.fixture
def m4() -> Matrix:
    """Матрица 4x4 с det = 30"""
    return Matrix.from_rows(
        [
            [1, 0, 2, -1],
            [3, 0, 0, 5],
            [2, 1, 4, -3],
            [1, 0, 5, 0],
        ]
    )


# =============================================================================
# ТЕСТЫ: базовые случаи
# =============================================================================


class TestDeterminantBaseCases:
    """Тесты size 1 и size 2."""

    def test_size_one(self) -> None:
        assert determinant(make_matrix(1, 1, [-4.5])) == -4.5

    def test_size_two(self) -> None:
        """[[1,2],[3,4]] → 1*4 - 2*3 = -2"""
        assert determinant(Matrix.from_rows([[1, 2], [3, 4]])) == -2.0

    def test_size_two_singular(self) -> None:
        assert determinant(Matrix.from_rows([[2, 4], [1, 2]])) == 0.0


# =============================================================================
# ТЕСТЫ: cofactor expansion
# =============================================================================


class TestCofactorExpansion:
    """Тесты рекурсивного разложения для n >= 3."""

    def test_identity_three(self) -> None:
        assert determinant(identity(3)) == 1.0

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
    def test_identity_any_size(self, size: int) -> None:
        assert determinant(identity(size)) == 1.0

    def test_three_by_three(self, m3: Matrix) -> None:
        # 6*(-14-40) - 1*(28-10) + 1*(32+4) = -324 - 18 + 36
        assert determinant(m3) == -306.0

    def test_four_by_four(self, m4: Matrix) -> None:
        assert determinant(m4) == 30.0

    def test_sign_alternation(self) -> None:
        """Первая строка [0, 1, 0]: единственный член идёт со знаком минус"""
        m = Matrix.from_rows([[0, 1, 0], [1, 0, 0], [0, 0, 1]])
        assert determinant(m) == -1.0

    def test_row_swap_flips_sign(self, m3: Matrix) -> None:
        rows = m3.to_rows()
        swapped = Matrix.from_rows([rows[1], rows[0], rows[2]])
        assert determinant(swapped) == -determinant(m3)

    def test_zero_row_gives_zero(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [0, 0, 0], [7, 8, 9]])
        assert determinant(m) == 0.0

    def test_linearly_dependent_rows(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert determinant(m) == 0.0

    def test_triangular_is_diagonal_product(self) -> None:
        m = Matrix.from_rows([[2, 5, 7, 1], [0, 3, 4, 2], [0, 0, -1, 8], [0, 0, 0, 4]])
        assert determinant(m) == 2.0 * 3.0 * -1.0 * 4.0

    def test_nan_propagates(self) -> None:
        m = Matrix.from_rows([[float("nan"), 1, 0], [0, 1, 0], [0, 0, 1]])
        assert math.isnan(determinant(m))

    def test_operand_unchanged(self, m4: Matrix) -> None:
        before = m4.to_rows()
        determinant(m4)
        assert m4.to_rows() == before


class TestNotSquare:
    """Тесты NotSquare."""

    @pytest.mark.parametrize("rows,cols", [(2, 3), (3, 2), (1, 4), (4, 1)])
    def test_non_square_raises(self, rows: int, cols: int) -> None:
        with pytest.raises(NotSquare):
            determinant(make_matrix(rows, cols, [1.0] * (rows * cols)))

    def test_not_square_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            determinant(make_matrix(1, 2, [1, 2]))


# =============================================================================
# ТЕСТЫ: sub_matrix
# =============================================================================


class TestSubMatrix:
    """Тесты sub_matrix."""

    def test_remove_first_row_and_column(self, m3: Matrix) -> None:
        assert sub_matrix(m3, 0, 0).to_rows() == [[-2.0, 5.0], [8.0, 7.0]]

    def test_remove_middle_column(self, m3: Matrix) -> None:
        """Относительный порядок столбцов сохраняется"""
        assert sub_matrix(m3, 0, 1).to_rows() == [[4.0, 5.0], [2.0, 7.0]]

    def test_remove_last_row_and_column(self, m3: Matrix) -> None:
        assert sub_matrix(m3, 2, 2).to_rows() == [[6.0, 1.0], [4.0, -2.0]]

    def test_non_square_input(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert sub_matrix(m, 1, 0).to_rows() == [[2.0, 3.0]]

    def test_too_small(self) -> None:
        with pytest.raises(DimensionMismatch):
            sub_matrix(make_matrix(1, 3, [1, 2, 3]), 0, 0)

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0)])
    def test_out_of_range(self, m3: Matrix, row: int, col: int) -> None:
        with pytest.raises(IndexOutOfRange):
            sub_matrix(m3, row, col)

    def test_manual_expansion_matches(self, m4: Matrix) -> None:
        """Разложение по первой строке через публичный sub_matrix"""
        total = 0.0
        for i in range(4):
            total += (-1) ** i * m4.get(0, i) * determinant(sub_matrix(m4, 0, i))
        assert total == determinant(m4)


# =============================================================================
# ТЕСТЫ: CofactorConfig
# =============================================================================


class TestCofactorConfig:
    """Тесты лимита размера и предупреждений."""

    def test_defaults(self) -> None:
        config = CofactorConfig()
        assert config.max_size is None
        assert config.warn_size == DEFAULT_COFACTOR_WARN_SIZE

    def test_max_size_exceeded(self, m4: Matrix) -> None:
        with pytest.raises(DeterminantTooLarge):
            determinant(m4, config=CofactorConfig(max_size=3))

    def test_max_size_boundary(self, m4: Matrix) -> None:
        assert determinant(m4, config=CofactorConfig(max_size=4)) == 30.0

    def test_warning_logged(self, m4: Matrix, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="matcalc.core.math.determinant"):
            determinant(m4, config=CofactorConfig(warn_size=4))
        assert "cofactor expansion on 4x4" in caplog.text

    def test_no_warning_below_threshold(
        self, m3: Matrix, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="matcalc.core.math.determinant"):
            determinant(m3)
        assert caplog.records == []

    @pytest.mark.parametrize("kwargs", [{"max_size": 0}, {"warn_size": 0}, {"max_size": -2}])
    def test_invalid_config(self, kwargs) -> None:
        with pytest.raises(ValueError):
            CofactorConfig(**kwargs)


# =============================================================================
# ТЕСТЫ: determinant_elimination
# =============================================================================


class TestDeterminantElimination:
    """Тесты отдельной процедуры Gaussian elimination."""

    def test_two_by_two(self) -> None:
        assert is_close(determinant_elimination(Matrix.from_rows([[1, 2], [3, 4]])), -2.0)

    @pytest.mark.parametrize("fixture_name", ["m3", "m4"])
    def test_agrees_with_cofactor(self, fixture_name: str, request) -> None:
        m = request.getfixturevalue(fixture_name)
        assert is_close(determinant_elimination(m), determinant(m))

    def test_pivoting_on_zero_leading_entry(self) -> None:
        m = Matrix.from_rows([[0, 1, 0], [1, 0, 0], [0, 0, 1]])
        assert is_close(determinant_elimination(m), -1.0)

    def test_singular_returns_zero(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [2, 4, 6], [7, 8, 9]])
        assert determinant_elimination(m) == 0.0

    def test_small_scale_identity_not_treated_as_singular(self) -> None:
        """Порог pivot относительный: масштаб 1e-13 не делает матрицу вырожденной"""
        m = scalar_multiply(identity(3), 1e-13)
        result = determinant_elimination(m)
        assert result != 0.0
        assert result == pytest.approx(determinant(m), rel=1e-12, abs=0)

    def test_small_single_entry(self) -> None:
        assert determinant_elimination(make_matrix(1, 1, [1e-13])) == 1e-13

    def test_small_scale_singular_returns_zero(self) -> None:
        m = scalar_multiply(Matrix.from_rows([[1, 2, 3], [2, 4, 6], [7, 8, 9]]), 1e-13)
        assert determinant_elimination(m) == 0.0

    def test_zero_matrix_returns_zero(self) -> None:
        assert determinant_elimination(make_matrix(2, 2, [0, 0, 0, 0])) == 0.0

    def test_infinite_entry_propagates(self) -> None:
        m = Matrix.from_rows([[math.inf, 0], [0, 1]])
        assert math.isinf(determinant_elimination(m))

    def test_non_square_raises(self) -> None:
        with pytest.raises(NotSquare):
            determinant_elimination(make_matrix(2, 3, [1] * 6))

    def test_operand_unchanged(self, m4: Matrix) -> None:
        before = m4.to_rows()
        determinant_elimination(m4)
        assert m4.to_rows() == before
