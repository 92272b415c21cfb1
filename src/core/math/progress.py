"""
Progress — Trends, Measurement Changes & Chart Helpers

Модуль сравнивает последовательные замеры пользователя:
- Тренд прогресса по порогам процента изменения (±1%)
- Направление изменения без порогов (вес: up / down / stable)
- Абсолютное изменение замера с шагом 0.1
- Подпись процента изменения ("+12%")
- Границы оси графика с отступом 5%
- Средние показатели сна

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_progress_trend(current, 0) → InputContractViolation (без Infinity/NaN)
2. Пороги строгие: ровно +1% / -1% → STABLE
"""

import math
from typing import Any, Dict, Final, Iterable

from src.core.contracts import SleepEntryValidator
from src.core.domain.metrics import (
    ChartBounds,
    Direction,
    MeasurementChange,
    ProgressTrend,
    SleepSummary,
)
from src.core.math.numerical_safeguards import (
    percent_change,
    round_half_up,
    round_to_step,
    validate_finite,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог процента изменения для тренда (строгое сравнение)
TREND_THRESHOLD_PCT: Final[float] = 1.0

# Шаг округления изменения замера
CHANGE_DISPLAY_STEP: Final[float] = 0.1

# Отступы оси графика
CHART_LOWER_PADDING: Final[float] = 0.95
CHART_UPPER_PADDING: Final[float] = 1.05

# Границы оси графика без данных
CHART_EMPTY_LOWER: Final[int] = 0
CHART_EMPTY_UPPER: Final[int] = 100


# =============================================================================
# TREND
# =============================================================================


def get_progress_trend(current: float, previous: float) -> ProgressTrend:
    """
    Направление прогресса между двумя последовательными замерами.

    Args:
        current: Текущий замер
        previous: Предыдущий замер (не ноль)

    Returns:
        INCREASING если изменение > 1%, DECREASING если < -1%, иначе STABLE

    Raises:
        InputContractViolation: Если previous == 0 или входы NaN/Inf

    Examples:
        >>> get_progress_trend(110, 100)
        <ProgressTrend.INCREASING: 'increasing'>
        >>> get_progress_trend(100, 100)
        <ProgressTrend.STABLE: 'stable'>
        >>> get_progress_trend(89, 100)
        <ProgressTrend.DECREASING: 'decreasing'>
    """
    change = percent_change(current, previous)

    if change > TREND_THRESHOLD_PCT:
        return ProgressTrend.INCREASING
    if change < -TREND_THRESHOLD_PCT:
        return ProgressTrend.DECREASING
    return ProgressTrend.STABLE


def get_direction(latest: float | None, previous: float | None) -> Direction:
    """
    Направление изменения замера без порогов.

    Отсутствующий замер с любой стороны даёт STABLE.
    """
    if latest is None or previous is None:
        return Direction.STABLE

    if latest > previous:
        return Direction.UP
    if latest < previous:
        return Direction.DOWN
    return Direction.STABLE


def format_percent_change(current: float, previous: float) -> str:
    """
    Подпись процента изменения для карточек ("+12%", "-5%", "+0%").

    При previous <= 0 изменение не определено и подпись равна "+0%".

    Examples:
        >>> format_percent_change(8400, 7500)
        '+12%'
        >>> format_percent_change(7000, 0)
        '+0%'
    """
    validate_finite(current, "current")
    validate_finite(previous, "previous")

    if previous <= 0:
        pct = 0
    else:
        pct = round_half_up(percent_change(current, previous))

    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct}%"


# =============================================================================
# MEASUREMENTS
# =============================================================================


def get_measurement_change(
    current: float | None,
    previous: float | None,
) -> MeasurementChange:
    """
    Абсолютное изменение замера (вес, % жира) между двумя записями.

    Отсутствующий current считается нулём. Отсутствующий или нулевой
    previous означает "нет базы для сравнения": изменение 0.0, знак +.

    Returns:
        MeasurementChange(amount=|current - previous| с шагом 0.1,
                          is_positive=current >= previous)
    """
    if not previous:
        return MeasurementChange(amount=0.0, is_positive=True)

    current = current or 0.0
    validate_finite(current, "current")
    validate_finite(previous, "previous")

    diff = current - previous
    return MeasurementChange(
        amount=round_to_step(abs(diff), CHANGE_DISPLAY_STEP),
        is_positive=diff >= 0,
    )


def calculate_chart_bounds(values: Iterable[float]) -> ChartBounds:
    """
    Границы оси Y: floor(min × 0.95) и ceil(max × 1.05).

    Без значений возвращает ось 0..100.

    Examples:
        >>> calculate_chart_bounds([80.5, 78.5, 77.2])
        ChartBounds(lower=73, upper=85)
    """
    values = list(values)
    if not values:
        return ChartBounds(lower=CHART_EMPTY_LOWER, upper=CHART_EMPTY_UPPER)

    for value in values:
        validate_finite(value, "values")

    return ChartBounds(
        lower=math.floor(min(values) * CHART_LOWER_PADDING),
        upper=math.ceil(max(values) * CHART_UPPER_PADDING),
    )


# =============================================================================
# SLEEP
# =============================================================================


def summarize_sleep(entries: Iterable[Dict[str, Any]]) -> SleepSummary:
    """
    Средние длительность и качество сна.

    Записи с hours == 0 считаются заглушками и не учитываются.
    Отсутствующее качество считается нулём.

    Args:
        entries: Записи сна (контракт sleep_entry)

    Returns:
        SleepSummary; без учтённых ночей все поля нулевые

    Raises:
        ValidationError: Если запись не соответствует контракту sleep_entry
    """
    validator = SleepEntryValidator()

    nights = []
    for entry in entries:
        validator.validate(entry)
        if entry["hours"] > 0:
            nights.append(entry)

    if not nights:
        return SleepSummary()

    total_hours = sum(entry["hours"] for entry in nights)
    total_quality = sum(entry.get("quality") or 0 for entry in nights)

    return SleepSummary(
        avg_hours=total_hours / len(nights),
        avg_quality=total_quality / len(nights),
        nights=len(nights),
    )
