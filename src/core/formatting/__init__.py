"""
Formatting helpers: locale-aware numbers, text truncation, calendar-relative dates.
"""

from src.core.formatting.dates import (
    Clock,
    InvalidDateError,
    fixed_clock,
    format_date,
    format_schedule_date,
    format_time,
    get_day_of_week,
    is_today,
    is_tomorrow,
    is_yesterday,
    parse_time_of_day,
    resolve_timezone,
    system_clock,
    to_local,
)
from src.core.formatting.locale_settings import (
    DEFAULT_LOCALE,
    DEFAULT_TIMEZONE,
    resolve_locale,
)
from src.core.formatting.text import ELLIPSIS, format_number, truncate_text

__all__ = [
    # Settings
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEZONE",
    "resolve_locale",
    # Text
    "ELLIPSIS",
    "format_number",
    "truncate_text",
    # Dates — Clock
    "Clock",
    "system_clock",
    "fixed_clock",
    # Dates — Exceptions
    "InvalidDateError",
    # Dates — Functions
    "resolve_timezone",
    "to_local",
    "get_day_of_week",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "format_date",
    "format_schedule_date",
    "parse_time_of_day",
    "format_time",
]
