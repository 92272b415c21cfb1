"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Округление half-up (совпадение с Math.round на границах .5)
2. Округление до шага
3. Валидацию параметров и InputContractViolation
4. Процент изменения и защиту от деления на ноль
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_CALC,
    InputContractViolation,
    is_valid_float,
    is_zero,
    percent_change,
    round_half_up,
    round_to_step,
    validate_finite,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_half_rounds_up(self) -> None:
        """Половина округляется вверх, в отличие от round()"""
        assert round_half_up(4.5) == 5
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round(4.5) == 4  # banker's rounding встроенного round

    def test_negative_half_rounds_toward_plus_infinity(self) -> None:
        """Отрицательная половина округляется в сторону +inf"""
        assert round_half_up(-2.5) == -2
        assert round_half_up(-0.5) == 0
        assert round_half_up(-2.6) == -3

    def test_largest_float_below_half(self) -> None:
        """0.49999999999999994 → 0 (floor(x + 0.5) дал бы 1)"""
        assert round_half_up(0.49999999999999994) == 0
        assert round_half_up(-0.5000000000000001) == -1

    def test_regular_values(self) -> None:
        """Обычные значения округляются к ближайшему"""
        assert round_half_up(133.333) == 133
        assert round_half_up(66.67) == 67
        assert round_half_up(0.0) == 0

    def test_returns_int(self) -> None:
        """Результат — int"""
        assert isinstance(round_half_up(1.2), int)

    def test_nan_raises(self) -> None:
        """NaN/Inf вызывают InputContractViolation"""
        with pytest.raises(InputContractViolation):
            round_half_up(float("nan"))
        with pytest.raises(InputContractViolation):
            round_half_up(float("inf"))


class TestRoundToStep:
    """Тесты для round_to_step"""

    def test_tenths(self) -> None:
        """Округление до 0.1 без артефактов float"""
        assert round_to_step(24.691, 0.1) == 24.7
        assert round_to_step(3.7615, 0.1) == 3.8
        assert round_to_step(0.04, 0.1) == 0.0

    def test_half_away_from_zero(self) -> None:
        """Половина округляется от нуля"""
        assert round_to_step(125.0, 10.0) == 130.0
        assert round_to_step(-125.0, 10.0) == -130.0

    def test_invalid_step_raises(self) -> None:
        """Невалидный step вызывает ошибку"""
        with pytest.raises(ValueError, match="step must be positive"):
            round_to_step(1.0, 0.0)
        with pytest.raises(ValueError, match="step must be positive"):
            round_to_step(1.0, -0.1)


# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestChecks:
    """Тесты is_valid_float / is_zero"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.0)
        assert is_valid_float(0.0)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_is_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(EPS_CALC / 2)
        assert not is_zero(1e-6)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты validate_*"""

    def test_contract_violation_is_value_error(self) -> None:
        """InputContractViolation совместима с ValueError"""
        assert issubclass(InputContractViolation, ValueError)

    def test_validate_finite(self) -> None:
        validate_finite(1.0, "x")
        with pytest.raises(InputContractViolation, match="x must be a valid float"):
            validate_finite(math.nan, "x")

    def test_validate_positive(self) -> None:
        validate_positive(0.1, "height_cm")
        with pytest.raises(InputContractViolation, match="height_cm must be positive"):
            validate_positive(0.0, "height_cm")
        with pytest.raises(InputContractViolation, match="height_cm must be positive"):
            validate_positive(-170.0, "height_cm")

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0.0, "weight")
        with pytest.raises(InputContractViolation, match="weight must be non-negative"):
            validate_non_negative(-1.0, "weight")

    def test_validate_in_range(self) -> None:
        validate_in_range(1, "reps", min_value=1, max_value=36)
        validate_in_range(36, "reps", min_value=1, max_value=36)
        with pytest.raises(InputContractViolation, match="reps must be >= 1"):
            validate_in_range(0, "reps", min_value=1, max_value=36)
        with pytest.raises(InputContractViolation, match="reps must be <= 36"):
            validate_in_range(37, "reps", min_value=1, max_value=36)


# =============================================================================
# ТЕСТЫ ПРОЦЕНТА ИЗМЕНЕНИЯ
# =============================================================================


class TestPercentChange:
    """Тесты percent_change"""

    def test_basic(self) -> None:
        assert percent_change(110.0, 100.0) == 10.0
        assert percent_change(89.0, 100.0) == -11.0
        assert percent_change(100.0, 100.0) == 0.0

    def test_negative_previous(self) -> None:
        """Отрицательная база допустима (знак по формуле)"""
        assert percent_change(-90.0, -100.0) == pytest.approx(-10.0)

    def test_zero_previous_raises(self) -> None:
        """Деление на ноль не происходит"""
        with pytest.raises(InputContractViolation, match="previous must be non-zero"):
            percent_change(10.0, 0.0)

    def test_nan_raises(self) -> None:
        with pytest.raises(InputContractViolation):
            percent_change(float("nan"), 100.0)
