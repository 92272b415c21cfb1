"""
Core math modules

Расчётные функции фитнес-трекера с единой политикой входных контрактов.
"""

# Numerical Safeguards
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

# Body Metrics
from src.core.math.body_metrics import (
    BMI_NORMAL_MIN,
    BMI_OBESE_MIN,
    BMI_OVERWEIGHT_MIN,
    assess_bmi,
    calculate_bmi,
    calculate_bmi_category,
    resolve_weight_kg,
)

# Training
from src.core.math.training import (
    INTENSITY_MULTIPLIERS,
    REPS_MAX,
    REPS_MIN,
    STEPS_GOAL_DEFAULT,
    calculate_calories_burned,
    calculate_goal_percentage,
    calculate_one_rep_max,
    estimate_steps_metrics,
    resolve_intensity,
)

# Progress
from src.core.math.progress import (
    TREND_THRESHOLD_PCT,
    calculate_chart_bounds,
    format_percent_change,
    get_direction,
    get_measurement_change,
    get_progress_trend,
    summarize_sleep,
)

# Nutrition
from src.core.math.nutrition import (
    calculate_macro_targets,
    sum_nutrition,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_CALC",
    # Numerical Safeguards — Exceptions
    "InputContractViolation",
    # Numerical Safeguards — Functions
    "is_valid_float",
    "is_zero",
    "percent_change",
    "round_half_up",
    "round_to_step",
    "validate_finite",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Body Metrics — Constants
    "BMI_NORMAL_MIN",
    "BMI_OVERWEIGHT_MIN",
    "BMI_OBESE_MIN",
    # Body Metrics — Functions
    "assess_bmi",
    "calculate_bmi",
    "calculate_bmi_category",
    "resolve_weight_kg",
    # Training — Constants
    "INTENSITY_MULTIPLIERS",
    "REPS_MIN",
    "REPS_MAX",
    "STEPS_GOAL_DEFAULT",
    # Training — Functions
    "calculate_calories_burned",
    "calculate_goal_percentage",
    "calculate_one_rep_max",
    "estimate_steps_metrics",
    "resolve_intensity",
    # Progress — Constants
    "TREND_THRESHOLD_PCT",
    # Progress — Functions
    "calculate_chart_bounds",
    "format_percent_change",
    "get_direction",
    "get_measurement_change",
    "get_progress_trend",
    "summarize_sleep",
    # Nutrition — Functions
    "calculate_macro_targets",
    "sum_nutrition",
]
