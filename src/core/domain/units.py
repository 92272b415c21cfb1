"""
BodyUnits — Централизованный модуль конверсии единиц тела

Единственный допустимый способ преобразований между:
- weight в килограммах (kg) и фунтах (lb)
- height в сантиметрах (cm) и дюймах (in)

Все расчётные функции (BMI, calories) работают в kg / cm.
Пользовательские данные в фунтах приводятся к kg через to_kilograms().
"""

from enum import Enum
from typing import Final


# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ
# =============================================================================

# Международный фунт (точное определение)
KG_PER_LB: Final[float] = 0.45359237

# Дюйм (точное определение)
CM_PER_INCH: Final[float] = 2.54

# Сантиметров в метре
CM_PER_M: Final[float] = 100.0


# =============================================================================
# ТИПЫ
# =============================================================================


class WeightUnit(str, Enum):
    """Единица измерения веса"""

    KG = "kg"
    LB = "lb"


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def lb_to_kg(weight_lb: float) -> float:
    """Конверсия: фунты → килограммы"""
    return weight_lb * KG_PER_LB


def kg_to_lb(weight_kg: float) -> float:
    """Конверсия: килограммы → фунты"""
    return weight_kg / KG_PER_LB


def inches_to_cm(height_in: float) -> float:
    """Конверсия: дюймы → сантиметры"""
    return height_in * CM_PER_INCH


def cm_to_m(height_cm: float) -> float:
    """Конверсия: сантиметры → метры"""
    return height_cm / CM_PER_M


def to_kilograms(weight: float, unit: WeightUnit | str = WeightUnit.KG) -> float:
    """
    Приведение веса к килограммам.

    Args:
        weight: Вес в единицах unit
        unit: WeightUnit или его строковое значение ("kg" / "lb")

    Returns:
        Вес в kg

    Raises:
        ValueError: Если unit не является известной единицей
    """
    unit = WeightUnit(unit)

    if unit is WeightUnit.LB:
        return lb_to_kg(weight)
    return weight
