"""
Тесты для моделей результатов: BMIAssessment, StepsMetrics, MacroTargets, ...

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Сериализацию/десериализацию JSON
4. str Enum значения
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import (
    BMIAssessment,
    BMICategory,
    ChartBounds,
    Direction,
    Intensity,
    MacroTargets,
    MeasurementChange,
    NutritionTotals,
    ProgressTrend,
    SleepSummary,
    StepsMetrics,
    WeightUnit,
)


# =============================================================================
# ENUM TESTS
# =============================================================================


def test_enum_values_are_strings():
    """Enum сравнимы со строками и сериализуются как строки."""
    assert BMICategory.NORMAL == "Normal"
    assert Intensity.HIGH == "high"
    assert ProgressTrend.STABLE == "stable"
    assert Direction.DOWN == "down"
    assert WeightUnit.LB == "lb"


def test_enum_from_string():
    assert Intensity("medium") is Intensity.MEDIUM
    assert BMICategory("Obese") is BMICategory.OBESE

    with pytest.raises(ValueError):
        Intensity("extreme")


# =============================================================================
# BMI ASSESSMENT TESTS
# =============================================================================


def test_bmi_assessment_creation():
    assessment = BMIAssessment(bmi=22.9, category=BMICategory.NORMAL)

    assert assessment.bmi == 22.9
    assert assessment.category is BMICategory.NORMAL


def test_bmi_assessment_category_from_string():
    assessment = BMIAssessment(bmi=31.2, category="Obese")
    assert assessment.category is BMICategory.OBESE


def test_bmi_assessment_immutability():
    """Тест immutability (frozen=True)."""
    assessment = BMIAssessment(bmi=22.9, category=BMICategory.NORMAL)

    with pytest.raises(ValidationError, match="frozen"):
        assessment.bmi = 25.0  # type: ignore


def test_bmi_assessment_rejects_negative():
    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        BMIAssessment(bmi=-1.0, category=BMICategory.UNDERWEIGHT)


def test_bmi_assessment_rejects_unknown_category():
    with pytest.raises(ValidationError):
        BMIAssessment(bmi=22.9, category="Healthy")


def test_bmi_assessment_json_roundtrip():
    assessment = BMIAssessment(bmi=27.4, category=BMICategory.OVERWEIGHT)

    data = json.loads(assessment.model_dump_json())
    assert data == {"bmi": 27.4, "category": "Overweight"}
    assert BMIAssessment.model_validate_json(assessment.model_dump_json()) == assessment


# =============================================================================
# ACTIVITY / NUTRITION TESTS
# =============================================================================


def test_steps_metrics_requires_positive_goal():
    with pytest.raises(ValidationError, match="greater than 0"):
        StepsMetrics(
            steps=100,
            goal=0,
            percentage=0,
            distance_miles=0.1,
            calories=4,
            active_minutes=1,
        )


def test_macro_targets_immutability():
    targets = MacroTargets(daily_calories=2000, protein_g=150, carbs_g=200, fat_g=67)

    with pytest.raises(ValidationError, match="frozen"):
        targets.fat_g = 70  # type: ignore


def test_nutrition_totals_defaults():
    totals = NutritionTotals()
    assert totals.model_dump() == {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}


def test_nutrition_totals_rejects_negative():
    with pytest.raises(ValidationError):
        NutritionTotals(calories=-1.0)


# =============================================================================
# PROGRESS TESTS
# =============================================================================


def test_measurement_change_amount_non_negative():
    with pytest.raises(ValidationError):
        MeasurementChange(amount=-1.6, is_positive=False)


def test_chart_bounds_allows_negative_lower():
    """Границы оси могут быть отрицательными (например, для изменений)."""
    bounds = ChartBounds(lower=-5, upper=10)
    assert bounds.lower == -5


def test_sleep_summary_defaults():
    summary = SleepSummary()
    assert (summary.avg_hours, summary.avg_quality, summary.nights) == (0.0, 0.0, 0)


def test_models_are_hashable():
    """Frozen модели можно использовать как ключи словаря."""
    a = ChartBounds(lower=73, upper=85)
    b = ChartBounds(lower=73, upper=85)
    assert {a: "weight"}[b] == "weight"
