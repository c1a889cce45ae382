"""Internal locale capability interface.

This module is not part of the public API. Import :class:`LocaleProvider`
and :class:`EnglishLocale` from ``smart_date_compare`` directly.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocaleProvider(Protocol):
    """Formatting and naming capabilities a locale must provide.

    ``week_starts_on`` is the locale's default first weekday (0=Sunday),
    used when the picker configuration does not set one.
    """

    week_starts_on: int

    def weekday_short(self, day: date) -> str: ...

    def month_title(self, day: date) -> str: ...

    def format_date(self, day: date) -> str: ...


_WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class EnglishLocale:
    """Built-in English locale.

    Names are fixed English strings rather than :mod:`calendar` lookups, so
    the output does not depend on the process ``LC_TIME`` setting.

    :param week_starts_on: Default first weekday, 0=Sunday.
    """

    def __init__(self, week_starts_on: int = 0):
        self.week_starts_on = week_starts_on

    def __repr__(self) -> str:
        return f"EnglishLocale(week_starts_on={self.week_starts_on})"

    def weekday_short(self, day: date) -> str:
        """Two-letter weekday name, e.g. ``"Mo"``."""
        return _WEEKDAYS[day.weekday()]

    def month_title(self, day: date) -> str:
        """Month heading, e.g. ``"March 2024"``."""
        return f"{_MONTHS[day.month - 1]} {day.year}"

    def format_date(self, day: date) -> str:
        """Short date, e.g. ``"Mar 10, 2024"``."""
        return f"{_MONTHS[day.month - 1][:3]} {day.day}, {day.year}"
