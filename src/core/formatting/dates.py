"""
Dates — Calendar-Relative Date & Time Formatting

Модуль форматирует даты для карточек расписания и истории:
- День недели ("Monday")
- Проверки is_today / is_tomorrow / is_yesterday
- "Today" / "Tomorrow" / "Monday, Mar 24"
- Время в 12-часовом формате ("3:05 PM")

Текущий момент берётся из Clock (вызываемый объект без аргументов,
возвращающий datetime), а не из глобального времени. Тесты передают
fixed_clock(...).

ПРАВИЛА ЧАСОВЫХ ПОЯСОВ:
1. Aware datetime переводится в часовой пояс tz
2. Naive datetime считается локальным временем в tz (без конверсии)
3. date и ISO-строка "YYYY-MM-DD" — календарная дата без времени
4. tz=None — часовой пояс хоста на момент вызова

Сравнение "сегодня/завтра" идёт по календарным компонентам
(year, month, day), а не по прошедшим часам.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable, Final, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import format_time as babel_format_time

from src.core.formatting.locale_settings import (
    DEFAULT_LOCALE,
    DEFAULT_TIMEZONE,
    resolve_locale,
)

# =============================================================================
# ТИПЫ И КОНСТАНТЫ
# =============================================================================

Clock = Callable[[], datetime]

DateLike = Union[datetime, date, str]

TimezoneLike = Union[tzinfo, str, None]

LABEL_TODAY: Final[str] = "Today"
LABEL_TOMORROW: Final[str] = "Tomorrow"
LABEL_YESTERDAY: Final[str] = "Yesterday"

# CLDR паттерны Babel
WEEKDAY_PATTERN: Final[str] = "EEEE"
DATE_PATTERN: Final[str] = "EEEE, MMM d"
SCHEDULE_DATE_PATTERN: Final[str] = "EEEE, MMMM d"
TIME_PATTERN: Final[str] = "h:mm a"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDateError(ValueError):
    """
    Значение не может быть интерпретировано как дата/время.

    Примеры: None, число, нераспознаваемая строка, неизвестный часовой пояс.
    """

    pass


# =============================================================================
# CLOCK
# =============================================================================


def system_clock() -> datetime:
    """Текущий момент в UTC (aware datetime)."""
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """
    Clock, всегда возвращающий instant.

    Examples:
        >>> clock = fixed_clock(datetime(2025, 3, 24, 9, 30))
        >>> clock()
        datetime.datetime(2025, 3, 24, 9, 30)
    """

    def clock() -> datetime:
        return instant

    return clock


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def resolve_timezone(tz: TimezoneLike = DEFAULT_TIMEZONE) -> tzinfo:
    """
    Приведение часового пояса к tzinfo.

    Для None возвращается фиксированное смещение хоста на текущий момент;
    to_local для None берёт смещение каждого момента отдельно.

    Args:
        tz: tzinfo, имя IANA ("Europe/Moscow") или None (пояс хоста)

    Raises:
        InvalidDateError: Если имя часового пояса неизвестно
    """
    if tz is None:
        return datetime.now().astimezone().tzinfo

    if isinstance(tz, tzinfo):
        return tz

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidDateError(f"Unknown timezone: {tz!r}") from e


def to_local(value: DateLike, tz: TimezoneLike = DEFAULT_TIMEZONE) -> datetime:
    """
    Приведение значения к локальному datetime в часовом поясе tz.

    Args:
        value: datetime, date или ISO-8601 строка
        tz: Часовой пояс вычисления

    Returns:
        datetime в поясе tz (naive значения остаются naive)

    Raises:
        InvalidDateError: Если value не дата или строка не распознана
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            raise InvalidDateError(f"Unparsable date string: {value!r}") from None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value
        if tz is None:
            # Смещение хоста для этого момента, с учётом DST
            return value.astimezone()
        return value.astimezone(resolve_timezone(tz))

    if isinstance(value, date):
        return datetime.combine(value, time())

    raise InvalidDateError(
        f"Expected a date, datetime or ISO-8601 string, got {type(value).__name__}"
    )


def _local_today(clock: Clock, tz: TimezoneLike) -> date:
    return to_local(clock(), tz).date()


def _calendar_offset(value: DateLike, clock: Clock, tz: TimezoneLike) -> int:
    """Разница в календарных днях между value и сегодняшним днём."""
    return (to_local(value, tz).date() - _local_today(clock, tz)).days


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_today(
    value: DateLike,
    clock: Clock = system_clock,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> bool:
    """
    Совпадает ли календарный день value с сегодняшним.

    Examples:
        >>> now = datetime(2025, 3, 24, 23, 59)
        >>> is_today(datetime(2025, 3, 24, 0, 1), clock=fixed_clock(now))
        True
    """
    return _calendar_offset(value, clock, tz) == 0


def is_tomorrow(
    value: DateLike,
    clock: Clock = system_clock,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> bool:
    """Совпадает ли календарный день value с сегодняшним + 1 день."""
    return _calendar_offset(value, clock, tz) == 1


def is_yesterday(
    value: DateLike,
    clock: Clock = system_clock,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> bool:
    """Совпадает ли календарный день value с сегодняшним − 1 день."""
    return _calendar_offset(value, clock, tz) == -1


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def get_day_of_week(
    value: DateLike,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
    locale: str | Locale = DEFAULT_LOCALE,
) -> str:
    """
    Полное название дня недели.

    Examples:
        >>> get_day_of_week(date(2025, 3, 24))
        'Monday'
    """
    local = to_local(value, tz)
    return babel_format_date(local.date(), format=WEEKDAY_PATTERN, locale=resolve_locale(locale))


def format_date(
    value: DateLike,
    clock: Clock = system_clock,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
    locale: str | Locale = DEFAULT_LOCALE,
) -> str:
    """
    Дата для карточек тренировок и приёмов пищи.

    Returns:
        "Today", "Tomorrow" или "Monday, Mar 24"

    Raises:
        InvalidDateError: Если value не дата
    """
    offset = _calendar_offset(value, clock, tz)

    if offset == 0:
        return LABEL_TODAY
    if offset == 1:
        return LABEL_TOMORROW

    local = to_local(value, tz)
    return babel_format_date(local.date(), format=DATE_PATTERN, locale=resolve_locale(locale))


def format_schedule_date(
    value: DateLike,
    clock: Clock = system_clock,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
    locale: str | Locale = DEFAULT_LOCALE,
) -> str:
    """
    Заголовок дня в планировщике питания.

    Returns:
        "Today", "Tomorrow", "Yesterday" или "Monday, March 24"
    """
    offset = _calendar_offset(value, clock, tz)

    if offset == 0:
        return LABEL_TODAY
    if offset == 1:
        return LABEL_TOMORROW
    if offset == -1:
        return LABEL_YESTERDAY

    local = to_local(value, tz)
    return babel_format_date(
        local.date(), format=SCHEDULE_DATE_PATTERN, locale=resolve_locale(locale)
    )


def parse_time_of_day(text: str) -> time:
    """
    Разбор времени приёма пищи в формате "HH:MM".

    Raises:
        InvalidDateError: Если строка не в формате HH:MM
    """
    if not isinstance(text, str):
        raise InvalidDateError(f"Expected an HH:MM string, got {type(text).__name__}")

    try:
        return time.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(f"Unparsable time of day: {text!r}") from None


def format_time(
    value: DateLike | time,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
    locale: str | Locale = DEFAULT_LOCALE,
) -> str:
    """
    Время в 12-часовом формате с минутами из двух цифр.

    Examples:
        >>> format_time(time(15, 5))
        '3:05 PM'
        >>> format_time(datetime(2025, 3, 24, 0, 0))
        '12:00 AM'
    """
    if isinstance(value, time):
        wall_time = value.replace(tzinfo=None)
    else:
        wall_time = to_local(value, tz).time()

    return babel_format_time(wall_time, format=TIME_PATTERN, locale=resolve_locale(locale))
