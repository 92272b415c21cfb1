"""
Contract Validation Module

Модуль для валидации JSON записей (приёмы пищи, сон) перед агрегацией.
"""

from .validators import (
    ContractValidator,
    MealEntryValidator,
    SchemaLoader,
    SleepEntryValidator,
    validate_meal_entry,
    validate_sleep_entry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MealEntryValidator",
    "SleepEntryValidator",
    # Functions
    "validate_meal_entry",
    "validate_sleep_entry",
]
