"""
Numerical Safeguards — Input Contracts & Reference Rounding

Модуль обеспечивает единые правила для всех расчётов библиотеки:
- Валидация входных параметров (finite / positive / non-negative / range)
- Единая ошибка нарушения входного контракта (InputContractViolation)
- Округление как у Math.round (half toward +inf), а не banker's rounding
- Округление до шага (0.1 для BMI, дистанции, изменений замеров)
- Безопасный процент изменения с защитой от деления на ноль

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют: невалидный вход → InputContractViolation
2. Деление на ноль никогда не происходит (ошибка до деления)
3. round_half_up(x) == floor(x + 0.5) для всех finite x
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений и сравнений с нулём
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InputContractViolation(ValueError):
    """
    Нарушение входного контракта расчётной функции.

    Примеры: рост <= 0, reps вне [1, 36], previous == 0 для тренда,
    NaN/Inf во входных данных, неизвестная интенсивность.

    Наследуется от ValueError, поэтому вызывающий код, ловящий ValueError,
    продолжает работать.
    """

    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_CALC) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_CALC)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до целого с половиной в сторону +inf (семантика Math.round).

    Встроенный round() использует round-half-to-even (round(4.5) == 4),
    что расходится с Math.round на границах .5.

    Args:
        value: Finite значение

    Returns:
        floor(value), +1 если дробная часть >= 0.5

    Raises:
        InputContractViolation: Если value NaN/Inf

    Examples:
        >>> round_half_up(4.5)
        5
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(133.33)
        133
    """
    validate_finite(value, "value")
    whole = math.floor(value)

    # value + 0.5 теряет точность у 0.49999999999999994
    if value - whole >= 0.5:
        return whole + 1
    return whole


def round_to_step(value: float, step: float) -> float:
    """
    Округление значения до ближайшего кратного step.

    Использует математическое округление (round half away from zero).
    Результат дополнительно нормализуется по числу знаков шага, чтобы
    24.7 не превращалось в 24.700000000000003.

    Args:
        value: Значение для округления
        step: Шаг квантования (например, 0.1)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> round_to_step(24.691, 0.1)
        24.7
        >>> round_to_step(125.0, 10.0)
        130.0
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    ratio = value / step

    # Половина от нуля: добавляем/вычитаем 0.5 и берём floor/ceil
    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    decimals = max(0, -math.floor(math.log10(step)))
    return round(steps * step, decimals)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение является finite числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InputContractViolation: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise InputContractViolation(
            f"{name} must be a valid float (not NaN/Inf), got {value}"
        )


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InputContractViolation: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise InputContractViolation(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InputContractViolation: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise InputContractViolation(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        InputContractViolation: Если value вне диапазона или NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise InputContractViolation(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InputContractViolation(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# ПРОЦЕНТ ИЗМЕНЕНИЯ
# =============================================================================


def percent_change(current: float, previous: float) -> float:
    """
    Процент изменения между двумя последовательными замерами.

    Формула: (current - previous) * 100 / previous

    Args:
        current: Текущее значение
        previous: Предыдущее значение (не ноль)

    Returns:
        Изменение в процентах (может быть отрицательным)

    Raises:
        InputContractViolation: Если previous ≈ 0 или входы NaN/Inf

    Examples:
        >>> percent_change(110.0, 100.0)
        10.0
        >>> percent_change(89.0, 100.0)
        -11.0
    """
    validate_finite(current, "current")
    validate_finite(previous, "previous")

    if is_zero(previous):
        raise InputContractViolation(
            f"previous must be non-zero for a percent change, got {previous}"
        )

    return (current - previous) * 100.0 / previous
