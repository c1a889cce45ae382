"""Internal compare-range calculation.

This module is not part of the public API. Import the calculators from
``smart_date_compare`` directly.
"""

from __future__ import annotations

from datetime import timedelta

from dateutil.relativedelta import relativedelta

from smart_date_compare._dateutil import DateLike, _as_date
from smart_date_compare._types import CompareMode, DateRange

COMPARE_MODE_OPTIONS: tuple[tuple[CompareMode, str], ...] = (
    (CompareMode.PREVIOUS_PERIOD_MATCH_DAY, "Previous period (match day of week)"),
    (CompareMode.PREVIOUS_PERIOD, "Previous period"),
    (CompareMode.SAME_PERIOD_LAST_YEAR, "Previous year"),
    (CompareMode.CUSTOM, "Custom"),
)


def _duration(start: DateLike, end: DateLike) -> int:
    return (_as_date(end) - _as_date(start)).days + 1


def _shift_back(start: DateLike, end: DateLike, days: int) -> DateRange:
    delta = timedelta(days=days)
    return DateRange(_as_date(start) - delta, _as_date(end) - delta)


def previous_period(start: DateLike, end: DateLike) -> DateRange:
    """The interval of equal length ending the day before *start*."""
    return _shift_back(start, end, _duration(start, end))


def previous_period_match_day(start: DateLike, end: DateLike) -> DateRange:
    """Shift back by the smallest multiple of 7 days not shorter than the range.

    Keeps each compare day on the same weekday as its primary counterpart.
    """
    duration = _duration(start, end)
    return _shift_back(start, end, -(-duration // 7) * 7)


def same_period_last_year(start: DateLike, end: DateLike) -> DateRange:
    """Subtract one calendar year from both endpoints.

    Feb 29 maps to Feb 28 of the previous year.
    """
    year = relativedelta(years=1)
    return DateRange(_as_date(start) - year, _as_date(end) - year)


_CALCULATORS = {
    CompareMode.PREVIOUS_PERIOD: previous_period,
    CompareMode.PREVIOUS_PERIOD_MATCH_DAY: previous_period_match_day,
    CompareMode.SAME_PERIOD_LAST_YEAR: same_period_last_year,
}


def compute_compare_range(
    mode: CompareMode | str, start: DateLike, end: DateLike
) -> DateRange | None:
    """Derive the compare range for *mode*.

    :param mode: Compare mode or its wire value.
    :param start: Primary range start.
    :param end: Primary range end.
    :return: The derived range, or ``None`` for ``custom`` mode, where the
        compare range is selected by hand.
    :raises ValueError: If *mode* is not a known compare mode.
    """
    calculator = _CALCULATORS.get(CompareMode.parse(mode))
    if calculator is None:
        return None
    return calculator(start, end)
