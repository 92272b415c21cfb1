"""
Nutrition — Macro Targets & Daily Totals

ФОРМУЛЫ:
    protein_g = round(daily_kcal × protein_pct / 400)   (4 kcal/g, pct в %)
    carbs_g   = round(daily_kcal × carbs_pct / 400)     (4 kcal/g)
    fat_g     = round(daily_kcal × fat_pct / 900)       (9 kcal/g)
"""

from typing import Any, Dict, Final, Iterable

from src.core.contracts import MealEntryValidator
from src.core.domain.metrics import MacroTargets, NutritionTotals
from src.core.math.numerical_safeguards import (
    round_half_up,
    validate_in_range,
    validate_non_negative,
)

# Калорийность макронутриентов (kcal на грамм)
KCAL_PER_G_PROTEIN: Final[float] = 4.0
KCAL_PER_G_CARBS: Final[float] = 4.0
KCAL_PER_G_FAT: Final[float] = 9.0

NUTRIENT_FIELDS: Final[tuple[str, ...]] = ("calories", "protein", "carbs", "fat")


def _grams(daily_calories: float, pct: float, kcal_per_g: float) -> int:
    return round_half_up(daily_calories * pct / (kcal_per_g * 100.0))


def calculate_macro_targets(
    daily_calories: float,
    protein_pct: float,
    carbs_pct: float,
    fat_pct: float,
) -> MacroTargets:
    """
    Дневные цели по макронутриентам в граммах из плана питания.

    Сумма процентов не проверяется: план может распределять не всю
    калорийность.

    Args:
        daily_calories: Дневная норма (kcal, >= 0)
        protein_pct: Доля белков (%, 0..100)
        carbs_pct: Доля углеводов (%, 0..100)
        fat_pct: Доля жиров (%, 0..100)

    Returns:
        MacroTargets

    Raises:
        InputContractViolation: Если калорийность отрицательная или доли вне 0..100

    Examples:
        >>> t = calculate_macro_targets(2000, 30, 40, 30)
        >>> (t.protein_g, t.carbs_g, t.fat_g)
        (150, 200, 67)
    """
    validate_non_negative(daily_calories, "daily_calories")
    validate_in_range(protein_pct, "protein_pct", min_value=0, max_value=100)
    validate_in_range(carbs_pct, "carbs_pct", min_value=0, max_value=100)
    validate_in_range(fat_pct, "fat_pct", min_value=0, max_value=100)

    return MacroTargets(
        daily_calories=round_half_up(daily_calories),
        protein_g=_grams(daily_calories, protein_pct, KCAL_PER_G_PROTEIN),
        carbs_g=_grams(daily_calories, carbs_pct, KCAL_PER_G_CARBS),
        fat_g=_grams(daily_calories, fat_pct, KCAL_PER_G_FAT),
    )


def sum_nutrition(meals: Iterable[Dict[str, Any]]) -> NutritionTotals:
    """
    Суммарные калории и макронутриенты по приёмам пищи.

    Отсутствующие или null поля считаются нулём.

    Raises:
        ValidationError: Если запись не соответствует контракту meal_entry
    """
    validator = MealEntryValidator()
    totals = dict.fromkeys(NUTRIENT_FIELDS, 0.0)

    for meal in meals:
        validator.validate(meal)
        for field in NUTRIENT_FIELDS:
            totals[field] += meal.get(field) or 0

    return NutritionTotals(**totals)
