"""
LocaleSettings — Locale & Timezone Defaults

Все функции форматирования принимают locale и tz явными параметрами.
Значения по умолчанию собраны здесь:
- DEFAULT_LOCALE: "en_US" (разделители и названия дней/месяцев)
- DEFAULT_TIMEZONE: None → часовой пояс хоста на момент вызова
"""

from typing import Final

from babel import Locale

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_LOCALE: Final[str] = "en_US"

# None означает локальный часовой пояс хоста
DEFAULT_TIMEZONE: Final[str | None] = None


# =============================================================================
# RESOLUTION
# =============================================================================


def resolve_locale(locale: str | Locale = DEFAULT_LOCALE) -> Locale:
    """
    Приведение идентификатора локали к babel.Locale.

    Принимает как "en_US", так и BCP 47 форму "en-US".

    Raises:
        babel.UnknownLocaleError: Если локаль неизвестна
        ValueError: Если идентификатор синтаксически некорректен
    """
    if isinstance(locale, Locale):
        return locale

    sep = "-" if "-" in locale else "_"
    return Locale.parse(locale, sep=sep)
