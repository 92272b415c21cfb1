"""
Тесты для BodyMetrics — BMI & Category

Проверяемые инварианты:
1. BMI = weight_kg / height_m²
2. Четыре полуоткрытых интервала, нижняя граница включительно
3. Рост <= 0 и отрицательный вес → InputContractViolation (без Inf/NaN)
"""

import pytest

from src.core.domain import BMIAssessment, BMICategory, WeightUnit
from src.core.math.body_metrics import (
    BMI_NORMAL_MIN,
    BMI_OBESE_MIN,
    BMI_OVERWEIGHT_MIN,
    assess_bmi,
    calculate_bmi,
    calculate_bmi_category,
    resolve_weight_kg,
)
from src.core.math.numerical_safeguards import InputContractViolation


# =============================================================================
# ТЕСТЫ: calculate_bmi
# =============================================================================


class TestCalculateBMI:
    """Тесты calculate_bmi"""

    def test_basic(self) -> None:
        """70 kg, 175 cm → 22.857"""
        assert calculate_bmi(70.0, 175.0) == pytest.approx(22.857142857, abs=1e-6)

    def test_exact_value(self) -> None:
        """100 kg, 200 cm → 25.0"""
        assert calculate_bmi(100.0, 200.0) == pytest.approx(25.0)

    def test_pounds(self) -> None:
        """Вес в фунтах приводится к kg"""
        bmi_lb = calculate_bmi(220.46226218, 200.0, weight_unit=WeightUnit.LB)
        assert bmi_lb == pytest.approx(25.0, abs=1e-6)

    def test_zero_weight(self) -> None:
        assert calculate_bmi(0.0, 170.0) == 0.0

    def test_zero_height_raises(self) -> None:
        """Нулевой рост не даёт Infinity"""
        with pytest.raises(InputContractViolation, match="height_cm must be positive"):
            calculate_bmi(70.0, 0.0)

    def test_negative_height_raises(self) -> None:
        with pytest.raises(InputContractViolation, match="height_cm must be positive"):
            calculate_bmi(70.0, -175.0)

    def test_negative_weight_raises(self) -> None:
        with pytest.raises(InputContractViolation, match="weight must be non-negative"):
            calculate_bmi(-70.0, 175.0)

    def test_nan_raises(self) -> None:
        with pytest.raises(InputContractViolation):
            calculate_bmi(float("nan"), 175.0)

    def test_unknown_unit_raises(self) -> None:
        with pytest.raises(InputContractViolation, match="Unknown weight unit"):
            calculate_bmi(70.0, 175.0, weight_unit="stone")


# =============================================================================
# ТЕСТЫ: calculate_bmi_category
# =============================================================================


class TestCalculateBMICategory:
    """Тесты calculate_bmi_category: границы интервалов"""

    def test_underweight(self) -> None:
        assert calculate_bmi_category(0.0) == BMICategory.UNDERWEIGHT
        assert calculate_bmi_category(18.49) == BMICategory.UNDERWEIGHT

    def test_normal_lower_bound_inclusive(self) -> None:
        """BMI 18.5 → Normal"""
        assert calculate_bmi_category(18.5) == BMICategory.NORMAL
        assert calculate_bmi_category(24.99) == BMICategory.NORMAL

    def test_overweight_lower_bound_inclusive(self) -> None:
        """BMI 25.0 → Overweight"""
        assert calculate_bmi_category(25.0) == BMICategory.OVERWEIGHT
        assert calculate_bmi_category(29.99) == BMICategory.OVERWEIGHT

    def test_obese_lower_bound_inclusive(self) -> None:
        """BMI 30.0 → Obese"""
        assert calculate_bmi_category(30.0) == BMICategory.OBESE
        assert calculate_bmi_category(55.0) == BMICategory.OBESE

    def test_thresholds_ordered(self) -> None:
        assert 0 < BMI_NORMAL_MIN < BMI_OVERWEIGHT_MIN < BMI_OBESE_MIN

    def test_category_string_values(self) -> None:
        """Строковые значения совпадают с отображаемыми подписями"""
        assert calculate_bmi_category(22.0).value == "Normal"
        assert calculate_bmi_category(22.0) == "Normal"

    def test_negative_bmi_raises(self) -> None:
        with pytest.raises(InputContractViolation):
            calculate_bmi_category(-1.0)

    def test_non_finite_bmi_raises(self) -> None:
        with pytest.raises(InputContractViolation):
            calculate_bmi_category(float("inf"))
        with pytest.raises(InputContractViolation):
            calculate_bmi_category(float("nan"))


# =============================================================================
# ТЕСТЫ: assess_bmi
# =============================================================================


class TestAssessBMI:
    """Тесты assess_bmi"""

    def test_rounded_value_and_category(self) -> None:
        result = assess_bmi(70.0, 175.0)
        assert isinstance(result, BMIAssessment)
        assert result.bmi == 22.9
        assert result.category == BMICategory.NORMAL

    def test_category_uses_unrounded_value(self) -> None:
        """24.96 отображается как 25.0, но остаётся Normal"""
        # 24.96 * 1.8² = 80.8704
        result = assess_bmi(80.8704, 180.0)
        assert result.bmi == 25.0
        assert result.category == BMICategory.NORMAL


class TestResolveWeightKg:
    """Тесты resolve_weight_kg"""

    def test_kg_passthrough(self) -> None:
        assert resolve_weight_kg(70.0) == 70.0

    def test_lb(self) -> None:
        assert resolve_weight_kg(100.0, "lb") == pytest.approx(45.359237)
