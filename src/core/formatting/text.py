"""
Text — Number & Text Formatting

- format_number: группировка разрядов по правилам локали (Babel),
  до 3 знаков после запятой
- truncate_text: обрезка по длине с многоточием
"""

import decimal
from typing import Final

from babel import Locale
from babel.numbers import format_decimal

from src.core.formatting.locale_settings import DEFAULT_LOCALE, resolve_locale

ELLIPSIS: Final[str] = "..."


def format_number(value: float, locale: str | Locale = DEFAULT_LOCALE) -> str:
    """
    Форматирование числа по правилам локали.

    NaN и ±Infinity выводятся символами локали ("NaN", "∞", "-∞" для en_US).
    Третий знак после запятой округляется half away from zero
    (0.0125 → "0.013"), как в Intl.NumberFormat.

    Args:
        value: Число
        locale: Идентификатор локали или babel.Locale

    Returns:
        Строка с разделителями разрядов локали

    Examples:
        >>> format_number(1234567.891)
        '1,234,567.891'
        >>> format_number(1234567.891, locale="de_DE")
        '1.234.567,891'
    """
    loc = resolve_locale(locale)

    with decimal.localcontext() as ctx:
        ctx.rounding = decimal.ROUND_HALF_UP
        return format_decimal(value, locale=loc)


def truncate_text(text: str, max_length: int) -> str:
    """
    Обрезка текста до max_length символов с добавлением "...".

    Текст не длиннее max_length возвращается без изменений.
    При max_length <= 0 префикс пустой и результат равен "...".

    Examples:
        >>> truncate_text("Grilled salmon", 20)
        'Grilled salmon'
        >>> truncate_text("Grilled salmon with quinoa", 14)
        'Grilled salmon...'
    """
    if len(text) <= max_length:
        return text

    return text[: max(max_length, 0)] + ELLIPSIS
