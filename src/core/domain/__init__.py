"""
Domain models and value objects.

Contains unit conversions, enumerations and result models returned by
the calculation functions.
"""

from src.core.domain.metrics import (
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
)
from src.core.domain.units import (
    CM_PER_INCH,
    CM_PER_M,
    KG_PER_LB,
    WeightUnit,
    cm_to_m,
    inches_to_cm,
    kg_to_lb,
    lb_to_kg,
    to_kilograms,
)

__all__ = [
    # Units module
    "KG_PER_LB",
    "CM_PER_INCH",
    "CM_PER_M",
    "WeightUnit",
    "lb_to_kg",
    "kg_to_lb",
    "inches_to_cm",
    "cm_to_m",
    "to_kilograms",
    # Enums
    "BMICategory",
    "Intensity",
    "ProgressTrend",
    "Direction",
    # Result models
    "BMIAssessment",
    "StepsMetrics",
    "MacroTargets",
    "NutritionTotals",
    "MeasurementChange",
    "ChartBounds",
    "SleepSummary",
]
