"""
Training — Calories Burned, One-Rep-Max & Activity Estimates

Модуль вычисляет тренировочные метрики:
- Сожжённые калории по весу, длительности и интенсивности
- One-Rep-Max по формуле Brzycki
- Процент выполнения цели (вода, шаги)
- Производные метрики по шагам (дистанция, калории, активные минуты)

ФОРМУЛЫ:
    calories = round(weight_kg × multiplier(intensity) × duration_min / 60)
        multiplier: low=3, medium=5, high=8
    1RM = round(weight × 36 / (37 − reps)),  reps ∈ [1, 36]

Округление везде через round_half_up (4.5 → 5).
"""

import math
from typing import Final

from src.core.domain.metrics import Intensity, StepsMetrics
from src.core.domain.units import WeightUnit
from src.core.math.body_metrics import resolve_weight_kg
from src.core.math.numerical_safeguards import (
    InputContractViolation,
    round_half_up,
    round_to_step,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Множители интенсивности (kcal на kg в час)
INTENSITY_MULTIPLIERS: Final[dict[Intensity, int]] = {
    Intensity.LOW: 3,
    Intensity.MEDIUM: 5,
    Intensity.HIGH: 8,
}

MINUTES_PER_HOUR: Final[float] = 60.0

# Brzycki: 1RM = weight × BRZYCKI_NUMERATOR / (BRZYCKI_DENOMINATOR − reps)
BRZYCKI_NUMERATOR: Final[float] = 36.0
BRZYCKI_DENOMINATOR: Final[float] = 37.0

# Допустимый диапазон повторений для Brzycki (при reps = 37 деление на ноль)
REPS_MIN: Final[int] = 1
REPS_MAX: Final[int] = 36

# Оценки по шагам
STEPS_PER_MILE: Final[float] = 2000.0
CALORIES_PER_STEP: Final[float] = 0.04
STEPS_PER_ACTIVE_MINUTE: Final[float] = 100.0
STEPS_GOAL_DEFAULT: Final[int] = 10_000
DISTANCE_DISPLAY_STEP: Final[float] = 0.1


# =============================================================================
# CALORIES
# =============================================================================


def resolve_intensity(intensity: Intensity | str) -> Intensity:
    """
    Приведение интенсивности к Intensity.

    Raises:
        InputContractViolation: Если значение не low/medium/high
    """
    try:
        return Intensity(intensity)
    except ValueError:
        raise InputContractViolation(
            f"intensity must be one of low/medium/high, got {intensity!r}"
        ) from None


def calculate_calories_burned(
    weight: float,
    duration_minutes: float,
    intensity: Intensity | str,
    weight_unit: WeightUnit | str = WeightUnit.KG,
) -> int:
    """
    Оценка сожжённых калорий за тренировку.

    Args:
        weight: Вес (kg по умолчанию, lb через weight_unit)
        duration_minutes: Длительность в минутах (>= 0)
        intensity: Intensity или "low" / "medium" / "high"
        weight_unit: Единица веса

    Returns:
        Калории (kcal), округлённые half-up

    Raises:
        InputContractViolation: Если вес/длительность отрицательные или NaN/Inf,
            либо интенсивность неизвестна

    Examples:
        >>> calculate_calories_burned(70, 60, "medium")
        350
        >>> calculate_calories_burned(1.5, 60, "low")  # 4.5 → 5
        5
    """
    validate_non_negative(duration_minutes, "duration_minutes")
    weight_kg = resolve_weight_kg(weight, weight_unit)
    multiplier = INTENSITY_MULTIPLIERS[resolve_intensity(intensity)]

    return round_half_up(weight_kg * multiplier * duration_minutes / MINUTES_PER_HOUR)


# =============================================================================
# ONE-REP-MAX
# =============================================================================


def calculate_one_rep_max(weight: float, reps: int) -> int:
    """
    Оценка One-Rep-Max по формуле Brzycki.

    Единица результата совпадает с единицей weight.

    Args:
        weight: Рабочий вес подхода (>= 0)
        reps: Количество повторений, целое в [1, 36]

    Returns:
        Оценка 1RM, округлённая half-up

    Raises:
        InputContractViolation: Если reps вне [1, 36] или не целое,
            либо weight отрицательный или NaN/Inf

    Examples:
        >>> calculate_one_rep_max(100, 1)
        100
        >>> calculate_one_rep_max(100, 10)
        133
    """
    validate_non_negative(weight, "weight")
    validate_in_range(reps, "reps", min_value=REPS_MIN, max_value=REPS_MAX)

    if reps != math.floor(reps):
        raise InputContractViolation(f"reps must be a whole number, got {reps}")

    return round_half_up(weight * (BRZYCKI_NUMERATOR / (BRZYCKI_DENOMINATOR - reps)))


# =============================================================================
# GOALS & STEPS
# =============================================================================


def calculate_goal_percentage(current: float, goal: float) -> int:
    """
    Процент выполнения цели (вода, шаги).

    Значение не ограничено сверху: перевыполнение даёт > 100.

    Raises:
        InputContractViolation: Если goal <= 0 или current < 0
    """
    validate_non_negative(current, "current")
    validate_positive(goal, "goal")

    return round_half_up(current / goal * 100.0)


def estimate_steps_metrics(steps: int, goal: int = STEPS_GOAL_DEFAULT) -> StepsMetrics:
    """
    Производные метрики по количеству шагов за день.

    Args:
        steps: Количество шагов (>= 0)
        goal: Цель по шагам (> 0)

    Returns:
        StepsMetrics с дистанцией, калориями, активными минутами и процентом цели

    Examples:
        >>> m = estimate_steps_metrics(7523)
        >>> (m.percentage, m.distance_miles, m.calories, m.active_minutes)
        (75, 3.8, 301, 75)
    """
    percentage = calculate_goal_percentage(steps, goal)

    return StepsMetrics(
        steps=steps,
        goal=goal,
        percentage=percentage,
        distance_miles=round_to_step(steps / STEPS_PER_MILE, DISTANCE_DISPLAY_STEP),
        calories=round_half_up(steps * CALORIES_PER_STEP),
        active_minutes=round_half_up(steps / STEPS_PER_ACTIVE_MINUTE),
    )
