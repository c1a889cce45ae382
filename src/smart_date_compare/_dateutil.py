"""Internal day-granularity date helpers.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Union

from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime]
Clock = Callable[[], date]


def _as_date(value: DateLike) -> date:
    """Strip the time-of-day component from *value*.

    Aware datetimes are converted to UTC before the calendar day is taken;
    naive datetimes keep their own calendar day.

    :param value: A :class:`~datetime.date` or :class:`~datetime.datetime`.
    :return: The calendar day.
    :raises TypeError: If *value* is not a date or datetime.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def _today(clock: Clock | None = None) -> date:
    return clock() if clock is not None else date.today()


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _add_months(day: date, months: int) -> date:
    """Shift *day* by whole calendar months, clamping to the month's last day."""
    return day + relativedelta(months=months)


def _parse_date(value: str) -> date:
    """Parse a ``"YYYY-MM-DD"`` string.

    :raises ValueError: If the format is invalid.
    """
    try:
        return date.fromisoformat(value)
    except (ValueError, TypeError) as err:
        raise ValueError(
            f"Invalid date format: expected 'YYYY-MM-DD', got {value!r}"
        ) from err


def _parse_month(value: str) -> date:
    """Parse a ``"YYYY-MM"`` string into the first day of that month.

    :raises ValueError: If the format is invalid.
    """
    try:
        year, month = (int(x) for x in value.split("-"))
        return date(year, month, 1)
    except (ValueError, AttributeError) as err:
        raise ValueError(
            f"Invalid month format: expected 'YYYY-MM', got {value!r}"
        ) from err
