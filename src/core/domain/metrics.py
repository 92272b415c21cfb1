"""
Metrics — Модели результатов фитнес-расчётов

Immutable Pydantic модели и перечисления, которые возвращают функции
src.core.math. Презентационный слой получает готовые значения и не
выполняет собственных вычислений.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class BMICategory(str, Enum):
    """
    Категория BMI.

    Полуоткрытые интервалы (нижняя граница включительно):
    [0, 18.5) → UNDERWEIGHT, [18.5, 25) → NORMAL,
    [25, 30) → OVERWEIGHT, [30, inf) → OBESE
    """

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class Intensity(str, Enum):
    """Интенсивность тренировки"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProgressTrend(str, Enum):
    """Направление прогресса по порогам процента изменения"""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Direction(str, Enum):
    """Направление изменения замера (вес, шаги) без порогов"""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


# =============================================================================
# BODY METRICS
# =============================================================================


class BMIAssessment(BaseModel):
    """BMI, округлённый до 0.1, и его категория."""

    bmi: float = Field(..., ge=0, description="Body Mass Index (kg/m²), шаг 0.1")
    category: BMICategory = Field(..., description="Категория BMI")

    model_config = {"frozen": True}


# =============================================================================
# ACTIVITY
# =============================================================================


class StepsMetrics(BaseModel):
    """
    Производные метрики по количеству шагов.

    Оценки грубые: 2000 шагов на милю, 0.04 kcal на шаг,
    100 шагов на активную минуту.
    """

    steps: int = Field(..., ge=0, description="Количество шагов")
    goal: int = Field(..., gt=0, description="Цель по шагам")
    percentage: int = Field(..., ge=0, description="Процент выполнения цели")
    distance_miles: float = Field(..., ge=0, description="Дистанция (мили), шаг 0.1")
    calories: int = Field(..., ge=0, description="Сожжённые калории (kcal)")
    active_minutes: int = Field(..., ge=0, description="Активные минуты")

    model_config = {"frozen": True}


# =============================================================================
# NUTRITION
# =============================================================================


class MacroTargets(BaseModel):
    """Дневные цели по макронутриентам в граммах."""

    daily_calories: int = Field(..., ge=0, description="Дневная норма (kcal)")
    protein_g: int = Field(..., ge=0, description="Белки (g)")
    carbs_g: int = Field(..., ge=0, description="Углеводы (g)")
    fat_g: int = Field(..., ge=0, description="Жиры (g)")

    model_config = {"frozen": True}


class NutritionTotals(BaseModel):
    """Суммарные калории и макронутриенты по набору приёмов пищи."""

    calories: float = Field(0.0, ge=0, description="Калории (kcal)")
    protein: float = Field(0.0, ge=0, description="Белки (g)")
    carbs: float = Field(0.0, ge=0, description="Углеводы (g)")
    fat: float = Field(0.0, ge=0, description="Жиры (g)")

    model_config = {"frozen": True}


# =============================================================================
# PROGRESS
# =============================================================================


class MeasurementChange(BaseModel):
    """Абсолютное изменение замера (шаг 0.1) и его знак."""

    amount: float = Field(..., ge=0, description="abs(current - previous), шаг 0.1")
    is_positive: bool = Field(..., description="True если current >= previous")

    model_config = {"frozen": True}


class ChartBounds(BaseModel):
    """Границы оси Y для графика прогресса."""

    lower: int = Field(..., description="Нижняя граница оси")
    upper: int = Field(..., description="Верхняя граница оси")

    model_config = {"frozen": True}


class SleepSummary(BaseModel):
    """Средние показатели сна по записям с ненулевой длительностью."""

    avg_hours: float = Field(0.0, ge=0, description="Средняя длительность сна (часы)")
    avg_quality: float = Field(0.0, ge=0, description="Среднее качество сна (%)")
    nights: int = Field(0, ge=0, description="Количество учтённых ночей")

    model_config = {"frozen": True}
