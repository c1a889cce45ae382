"""Shared fixtures for benchmarks — synthetic interaction streams."""

from datetime import date, timedelta

import pytest

from smart_date_compare import Constraints


def make_click_days(n_ranges: int, start: date = date(2024, 1, 1)) -> list[date]:
    """Simulate a user committing n_ranges ranges, two clicks each.

    Every other range is clicked end-first to exercise the swap path.
    """
    days = []
    for i in range(n_ranges):
        a = start + timedelta(days=i % 300)
        b = a + timedelta(days=(i % 45) + 1)
        days.extend([b, a] if i % 2 else [a, b])
    return days


def make_constraints(n_disabled: int) -> Constraints:
    """Constraints with n_disabled scattered disabled days."""
    base = date(2024, 1, 1)
    return Constraints(
        min_date=date(2023, 1, 1),
        max_date=date(2025, 12, 31),
        disabled_dates=[base + timedelta(days=i * 3) for i in range(n_disabled)],
    )


@pytest.fixture(params=[10, 100, 1000], ids=["10ranges", "100ranges", "1000ranges"])
def click_days(request):
    """Parametrized click stream fixture."""
    return make_click_days(request.param)


@pytest.fixture(params=[0, 50, 500], ids=["0disabled", "50disabled", "500disabled"])
def constraints(request):
    """Parametrized constraint set fixture."""
    return make_constraints(request.param)
