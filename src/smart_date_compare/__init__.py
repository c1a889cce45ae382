"""Date-range selection and period comparison engine for calendar pickers."""

from ._compare import (
    COMPARE_MODE_OPTIONS,
    compute_compare_range,
    previous_period,
    previous_period_match_day,
    same_period_last_year,
)
from ._config import ClassNames, Labels, PickerConfig
from ._constraints import Constraints
from ._controller import RangeChange, RangeController
from ._grid import grid_to_dataframe, grid_weeks, month_grid, visible_months, weekday_headers
from ._locale import EnglishLocale, LocaleProvider
from ._presets import DEFAULT_PRESETS, find_preset, resolve_preset
from ._selection import (
    DayCell,
    SelectionState,
    click,
    hover,
    initial_state,
    month_cells,
    navigate,
    preview_range,
    reset,
    select_preset,
    set_compare_mode,
    set_selection_target,
    toggle_compare,
    toggle_group,
)
from ._types import CompareMode, DateRange, Preset, SelectionTarget

__all__ = [
    "COMPARE_MODE_OPTIONS",
    "DEFAULT_PRESETS",
    "ClassNames",
    "CompareMode",
    "Constraints",
    "DateRange",
    "DayCell",
    "EnglishLocale",
    "Labels",
    "LocaleProvider",
    "PickerConfig",
    "Preset",
    "RangeChange",
    "RangeController",
    "SelectionState",
    "SelectionTarget",
    "__version__",
    "click",
    "compute_compare_range",
    "find_preset",
    "grid_to_dataframe",
    "grid_weeks",
    "hover",
    "initial_state",
    "month_cells",
    "month_grid",
    "navigate",
    "preview_range",
    "previous_period",
    "previous_period_match_day",
    "reset",
    "resolve_preset",
    "same_period_last_year",
    "select_preset",
    "set_compare_mode",
    "set_selection_target",
    "toggle_compare",
    "toggle_group",
    "visible_months",
    "weekday_headers",
]


def _get_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("smart_date_compare")
    except PackageNotFoundError:
        return "unknown"


__version__ = _get_version()
del _get_version
