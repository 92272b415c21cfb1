"""
BodyMetrics — Body Mass Index & Category

Модуль вычисляет BMI по весу и росту и классифицирует его:
- BMI = weight_kg / height_m²
- Категории по полуоткрытым интервалам, нижняя граница включительно
  (клиническая конвенция): 18.5 → Normal, 25.0 → Overweight, 30.0 → Obese

Нарушения входного контракта (рост <= 0, отрицательный вес, NaN/Inf)
не пропагируют Infinity/NaN, а поднимают InputContractViolation.
"""

from typing import Final

from src.core.domain.metrics import BMIAssessment, BMICategory
from src.core.domain.units import WeightUnit, cm_to_m, to_kilograms
from src.core.math.numerical_safeguards import (
    InputContractViolation,
    round_to_step,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ПОРОГИ КАТЕГОРИЙ
# =============================================================================

# Нижняя граница Normal (включительно)
BMI_NORMAL_MIN: Final[float] = 18.5

# Нижняя граница Overweight (включительно)
BMI_OVERWEIGHT_MIN: Final[float] = 25.0

# Нижняя граница Obese (включительно)
BMI_OBESE_MIN: Final[float] = 30.0

# Шаг округления BMI для отображения
BMI_DISPLAY_STEP: Final[float] = 0.1


# =============================================================================
# WEIGHT
# =============================================================================


def resolve_weight_kg(weight: float, unit: WeightUnit | str = WeightUnit.KG) -> float:
    """
    Валидация веса и приведение к килограммам.

    Args:
        weight: Вес в единицах unit (>= 0)
        unit: Единица веса ("kg" / "lb")

    Returns:
        Вес в kg

    Raises:
        InputContractViolation: Если вес отрицательный, NaN/Inf или unit неизвестна
    """
    validate_non_negative(weight, "weight")

    try:
        return to_kilograms(weight, unit)
    except ValueError:
        raise InputContractViolation(f"Unknown weight unit: {unit!r}") from None


# =============================================================================
# BMI
# =============================================================================


def calculate_bmi(
    weight: float,
    height_cm: float,
    weight_unit: WeightUnit | str = WeightUnit.KG,
) -> float:
    """
    Вычисление Body Mass Index.

    Формула: weight_kg / (height_cm / 100)²

    Args:
        weight: Вес (kg по умолчанию)
        height_cm: Рост в сантиметрах (> 0)
        weight_unit: Единица веса

    Returns:
        BMI (kg/m²), без округления

    Raises:
        InputContractViolation: Если height_cm <= 0 или weight < 0

    Examples:
        >>> round(calculate_bmi(70.0, 175.0), 2)
        22.86
    """
    validate_positive(height_cm, "height_cm")
    weight_kg = resolve_weight_kg(weight, weight_unit)

    height_m = cm_to_m(height_cm)
    return weight_kg / (height_m * height_m)


def calculate_bmi_category(bmi: float) -> BMICategory:
    """
    Классификация BMI по четырём полуоткрытым интервалам.

    Args:
        bmi: Значение BMI (finite, >= 0)

    Returns:
        BMICategory

    Raises:
        InputContractViolation: Если bmi отрицательный или NaN/Inf

    Examples:
        >>> calculate_bmi_category(18.5)
        <BMICategory.NORMAL: 'Normal'>
        >>> calculate_bmi_category(30.0)
        <BMICategory.OBESE: 'Obese'>
    """
    validate_non_negative(bmi, "bmi")

    if bmi < BMI_NORMAL_MIN:
        return BMICategory.UNDERWEIGHT
    if bmi < BMI_OVERWEIGHT_MIN:
        return BMICategory.NORMAL
    if bmi < BMI_OBESE_MIN:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def assess_bmi(
    weight: float,
    height_cm: float,
    weight_unit: WeightUnit | str = WeightUnit.KG,
) -> BMIAssessment:
    """
    BMI для профиля пользователя: значение с шагом 0.1 и категория.

    Категория определяется по неокруглённому значению, поэтому
    BMI 24.96 отображается как 25.0, но остаётся Normal.

    Args:
        weight: Вес
        height_cm: Рост в сантиметрах
        weight_unit: Единица веса

    Returns:
        BMIAssessment
    """
    bmi = calculate_bmi(weight, height_cm, weight_unit)
    return BMIAssessment(
        bmi=round_to_step(bmi, BMI_DISPLAY_STEP),
        category=calculate_bmi_category(bmi),
    )
