"""Benchmarks for the selection engine — pure CPU.

Measures grid generation, day classification for a full two-month view,
compare-range derivation, and replaying click streams through the state
machine. These run on every pointer event in an interactive picker.

Run:
    uv run pytest benchmarks/test_bench_engine.py -v --benchmark-sort=mean
"""

from datetime import date

from smart_date_compare import (
    CompareMode,
    DateRange,
    click,
    compute_compare_range,
    hover,
    initial_state,
    month_cells,
    month_grid,
    toggle_compare,
)

PRIMARY = DateRange(date(2024, 3, 10), date(2024, 3, 20))

# ---------------------------------------------------------------------------
# Grid generation
# ---------------------------------------------------------------------------


class TestGrid:
    """Benchmark month_grid — 42 date objects per call."""

    def test_month_grid(self, benchmark):
        benchmark(month_grid, date(2024, 3, 1), 1)

    def test_year_of_grids(self, benchmark):
        months = [date(2024, m, 1) for m in range(1, 13)]
        benchmark(lambda: [month_grid(m) for m in months])


# ---------------------------------------------------------------------------
# Day classification
# ---------------------------------------------------------------------------


class TestCells:
    """Benchmark month_cells — what a renderer calls per repaint."""

    def test_two_month_view(self, benchmark, constraints):
        state = toggle_compare(initial_state(PRIMARY), True)
        state = hover(click(state, date(2024, 3, 5), constraints), date(2024, 4, 2))
        benchmark(
            lambda: [
                month_cells(state, m, 0, constraints, date(2024, 6, 15))
                for m in (date(2024, 3, 1), date(2024, 4, 1))
            ]
        )


# ---------------------------------------------------------------------------
# Compare derivation and click replay
# ---------------------------------------------------------------------------


class TestStateMachine:
    """Benchmark reducer throughput."""

    def test_compare_modes(self, benchmark):
        modes = [m for m in CompareMode if m is not CompareMode.CUSTOM]
        benchmark(
            lambda: [
                compute_compare_range(m, PRIMARY.start_date, PRIMARY.end_date)
                for m in modes
            ]
        )

    def test_click_replay(self, benchmark, click_days):
        def replay():
            state = toggle_compare(initial_state(), True)
            for day in click_days:
                state = click(state, day)
            return state

        result = benchmark(replay)
        assert not result.selecting
