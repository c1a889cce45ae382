"""Internal calendar grid generation.

This module is not part of the public API. Import :func:`month_grid` and
friends from ``smart_date_compare`` directly.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from smart_date_compare._dateutil import DateLike, _add_months, _as_date, _month_start

if TYPE_CHECKING:
    import pandas

    from smart_date_compare._locale import LocaleProvider

GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7


def _check_week_start(week_starts_on: int) -> None:
    if not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise ValueError(
            f"week_starts_on must be an integer 0-6 (0=Sunday), got {week_starts_on!r}"
        )


def _week_start(day: date, week_starts_on: int) -> date:
    """Return the first week-start day on or before *day*.

    ``week_starts_on`` counts from Sunday (0) like the host API; Python's
    :meth:`date.weekday` counts from Monday, hence the shift.
    """
    sunday_based = (day.weekday() + 1) % 7
    return day - timedelta(days=(sunday_based - week_starts_on) % 7)


def month_grid(month: DateLike, week_starts_on: int = 0) -> list[date]:
    """Generate the 42-day grid for the month containing *month*.

    The grid starts on the first week-start day on or before the 1st and
    always spans six full weeks, so it covers the whole month plus leading
    and trailing days from the neighbouring months.

    :param month: Any day within the target month.
    :param week_starts_on: First column of the grid, 0=Sunday ... 6=Saturday.
    :return: List of 42 consecutive days.
    :raises ValueError: If *week_starts_on* is outside 0-6.
    """
    _check_week_start(week_starts_on)
    first = _week_start(_month_start(_as_date(month)), week_starts_on)
    return [first + timedelta(days=i) for i in range(GRID_DAYS)]


def grid_weeks(grid: list[date]) -> list[list[date]]:
    """Split a grid into rows of seven days."""
    return [grid[i : i + 7] for i in range(0, len(grid), 7)]


def visible_months(view_month: DateLike) -> tuple[date, date]:
    """Return the first days of the two months shown side by side."""
    left = _month_start(_as_date(view_month))
    return left, _add_months(left, 1)


def weekday_headers(week_starts_on: int, locale: LocaleProvider) -> list[str]:
    """Short weekday names for the grid columns, in column order."""
    _check_week_start(week_starts_on)
    # 2023-01-01 was a Sunday.
    first = date(2023, 1, 1) + timedelta(days=week_starts_on)
    return [locale.weekday_short(first + timedelta(days=i)) for i in range(7)]


def grid_to_dataframe(month: DateLike, week_starts_on: int = 0) -> pandas.DataFrame:
    """Convert a month grid to a :class:`pandas.DataFrame`.

    One row per week, one column per weekday (``"Sun"`` ... ``"Sat"`` in
    column order). Cells outside the target month are ``None``.

    Requires ``pandas`` (``pip install smart_date_compare[dataframe]``).

    :param month: Any day within the target month.
    :param week_starts_on: First column of the grid, 0=Sunday ... 6=Saturday.
    :return: DataFrame of shape (6, 7).
    :raises ImportError: If pandas is not installed.
    """
    try:
        import pandas as pd
    except ImportError as err:
        raise ImportError(
            "pandas is required for grid_to_dataframe(). "
            "Install it with: pip install smart_date_compare[dataframe]"
        ) from err

    from smart_date_compare._locale import EnglishLocale

    target = _month_start(_as_date(month))
    grid = month_grid(target, week_starts_on)
    rows = [
        [d if d.month == target.month else None for d in week]
        for week in grid_weeks(grid)
    ]
    return pd.DataFrame(rows, columns=weekday_headers(week_starts_on, EnglishLocale()))
