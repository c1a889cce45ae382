"""Internal click/hover selection state machine.

The picker state is an immutable :class:`SelectionState`; every operation
is a pure function taking a state and returning the next one. Operations
that do not apply (disabled day, hover while idle, ...) return the input
state unchanged.

This module is not part of the public API. Import the operations from
``smart_date_compare`` directly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from smart_date_compare._compare import compute_compare_range
from smart_date_compare._constraints import NO_CONSTRAINTS, Constraints
from smart_date_compare._dateutil import DateLike, _add_months, _as_date, _month_start
from smart_date_compare._grid import month_grid
from smart_date_compare._presets import (
    CUSTOM_PRESET,
    DEFAULT_PRESETS,
    group_for,
    is_group,
    resolve_preset,
)
from smart_date_compare._types import (
    CompareMode,
    DateRange,
    Preset,
    SelectionTarget,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of one open picker.

    ``selecting`` is True between the first and second click of a range
    (the *anchored* state); ``anchor`` is the first clicked day and
    ``hover`` the last hovered day while anchored.
    """

    primary_start: Optional[date] = None
    primary_end: Optional[date] = None
    compare_start: Optional[date] = None
    compare_end: Optional[date] = None
    anchor: Optional[date] = None
    hover: Optional[date] = None
    selecting: bool = False
    selection_target: SelectionTarget = SelectionTarget.PRIMARY
    active_preset: str = ""
    compare_enabled: bool = False
    compare_mode: CompareMode = CompareMode.PREVIOUS_PERIOD
    view_month: Optional[date] = None
    expanded_groups: frozenset[str] = field(default_factory=frozenset)

    @property
    def primary_range(self) -> DateRange | None:
        """The primary range, or None until both endpoints are set."""
        if self.primary_start is None or self.primary_end is None:
            return None
        return DateRange(self.primary_start, self.primary_end)

    @property
    def compare_range(self) -> DateRange | None:
        """The compare range, or None when disabled or incomplete."""
        if not self.compare_enabled:
            return None
        if self.compare_start is None or self.compare_end is None:
            return None
        return DateRange(self.compare_start, self.compare_end)


@dataclass(frozen=True)
class DayCell:
    """Render-ready classification of one grid day."""

    day: date
    in_month: bool
    disabled: bool
    is_today: bool = False
    is_start: bool = False
    is_end: bool = False
    in_range: bool = False
    is_compare_start: bool = False
    is_compare_end: bool = False
    in_compare_range: bool = False
    in_preview: bool = False
    is_preview_endpoint: bool = False

    @property
    def interactive(self) -> bool:
        return self.in_month and not self.disabled


def _target_for(compare_enabled: bool, mode: CompareMode) -> SelectionTarget:
    if compare_enabled and mode is CompareMode.CUSTOM:
        return SelectionTarget.COMPARE
    return SelectionTarget.PRIMARY


def _retarget(state: SelectionState, target: SelectionTarget) -> SelectionState:
    """Switch the active cursor, abandoning any half-made selection."""
    if state.selection_target is target:
        return state
    return replace(
        state, selection_target=target, anchor=None, hover=None, selecting=False
    )


def _recompute(state: SelectionState) -> SelectionState:
    """Re-derive the compare range from a fully committed primary range."""
    if not state.compare_enabled or state.selecting:
        return state
    primary = state.primary_range
    if primary is None:
        return state
    derived = compute_compare_range(
        state.compare_mode, primary.start_date, primary.end_date
    )
    if derived is None:
        return state
    return replace(
        state, compare_start=derived.start_date, compare_end=derived.end_date
    )


def view_month_for(day: date) -> date:
    # The range end lands in the right-hand month of the two-month view.
    return _add_months(_month_start(day), -1)


def initial_state(
    primary: DateRange | None = None,
    compare: DateRange | None = None,
    compare_enabled: bool = False,
    compare_mode: CompareMode | str = CompareMode.PREVIOUS_PERIOD,
    today: DateLike | None = None,
) -> SelectionState:
    """Seed a picker from the committed ranges.

    When compare is enabled in an automatic mode, the compare range is
    derived from *primary* and *compare* is ignored.
    """
    mode = CompareMode.parse(compare_mode)
    if primary is not None:
        shown = primary.end_date
    else:
        shown = _as_date(today) if today is not None else date.today()
    state = SelectionState(
        primary_start=primary.start_date if primary else None,
        primary_end=primary.end_date if primary else None,
        compare_start=compare.start_date if compare else None,
        compare_end=compare.end_date if compare else None,
        selection_target=_target_for(compare_enabled, mode),
        compare_enabled=compare_enabled,
        compare_mode=mode,
        view_month=view_month_for(shown),
    )
    return _recompute(state)


def click(
    state: SelectionState,
    day: DateLike,
    constraints: Constraints = NO_CONSTRAINTS,
    today: DateLike | None = None,
) -> SelectionState:
    """Handle a click on *day* for the active selection target.

    The first click anchors a new range on *day*; the second commits the
    range between the anchor and *day*, in chronological order.
    """
    day = _as_date(day)
    if constraints.is_disabled(day, today):
        logger.debug(f"Ignoring click on disabled day {day}")
        return state

    on_compare = state.selection_target is SelectionTarget.COMPARE
    if not state.selecting:
        if on_compare:
            endpoints = {"compare_start": day, "compare_end": None}
        else:
            endpoints = {"primary_start": day, "primary_end": None}
        return replace(
            state,
            anchor=day,
            hover=None,
            selecting=True,
            active_preset=CUSTOM_PRESET,
            **endpoints,
        )

    anchor = state.anchor if state.anchor is not None else day
    start, end = min(anchor, day), max(anchor, day)
    if on_compare:
        endpoints = {"compare_start": start, "compare_end": end}
    else:
        endpoints = {"primary_start": start, "primary_end": end}
    committed = replace(state, anchor=None, hover=None, selecting=False, **endpoints)
    return _recompute(committed)


def hover(
    state: SelectionState,
    day: DateLike,
    constraints: Constraints = NO_CONSTRAINTS,
    today: DateLike | None = None,
) -> SelectionState:
    """Record *day* as the preview endpoint while a range is anchored."""
    if not state.selecting:
        return state
    day = _as_date(day)
    if constraints.is_disabled(day, today):
        return state
    return replace(state, hover=day)


def preview_range(state: SelectionState) -> DateRange | None:
    """The uncommitted range between the anchor and the hovered day."""
    if not state.selecting or state.anchor is None or state.hover is None:
        return None
    return DateRange.ordered(state.anchor, state.hover)


def select_preset(
    state: SelectionState,
    value: str,
    presets: Sequence[Preset] | None = None,
    constraints: Constraints = NO_CONSTRAINTS,
    today: DateLike | None = None,
) -> SelectionState:
    """Commit the primary range of preset *value*.

    Selecting a group header only toggles its expansion. A preset whose
    start or end day is disabled is ignored.
    """
    presets = DEFAULT_PRESETS if presets is None else presets
    if is_group(presets, value):
        return toggle_group(state, value)

    resolved = resolve_preset(value, presets, today)
    resolved = DateRange.ordered(resolved.start_date, resolved.end_date)
    if constraints.is_disabled(resolved.start_date, today) or constraints.is_disabled(
        resolved.end_date, today
    ):
        logger.debug(f"Ignoring preset {value!r}: {resolved} hits a disabled day")
        return state

    expanded = state.expanded_groups
    group = group_for(presets, value)
    if group is not None:
        expanded = expanded | {group.value}

    committed = replace(
        state,
        primary_start=resolved.start_date,
        primary_end=resolved.end_date,
        anchor=None,
        hover=None,
        selecting=False,
        selection_target=SelectionTarget.PRIMARY,
        active_preset=value,
        view_month=view_month_for(resolved.end_date),
        expanded_groups=expanded,
    )
    return _recompute(committed)


def toggle_compare(state: SelectionState, enabled: bool) -> SelectionState:
    """Turn comparison on or off."""
    state = replace(state, compare_enabled=enabled)
    state = _retarget(state, _target_for(enabled, state.compare_mode))
    return _recompute(state)


def set_compare_mode(state: SelectionState, mode: CompareMode | str) -> SelectionState:
    """Change how the compare range is obtained.

    Automatic modes re-derive the compare range right away. Switching to
    ``custom`` keeps the current compare range until the user selects a
    new one.

    :raises ValueError: If *mode* is not a known compare mode.
    """
    mode = CompareMode.parse(mode)
    state = replace(state, compare_mode=mode)
    state = _retarget(state, _target_for(state.compare_enabled, mode))
    return _recompute(state)


def set_selection_target(
    state: SelectionState, target: SelectionTarget | str
) -> SelectionState:
    return _retarget(state, SelectionTarget(target))


def reset(state: SelectionState) -> SelectionState:
    """Clear every endpoint and the active preset, and disable compare."""
    return replace(
        state,
        primary_start=None,
        primary_end=None,
        compare_start=None,
        compare_end=None,
        anchor=None,
        hover=None,
        selecting=False,
        selection_target=SelectionTarget.PRIMARY,
        active_preset="",
        compare_enabled=False,
    )


def navigate(
    state: SelectionState, months: int, today: DateLike | None = None
) -> SelectionState:
    """Move the two-month view by *months* (negative goes back).

    A state without a view month starts from the month of *today*.
    """
    view = state.view_month
    if view is None:
        view = _month_start(_as_date(today) if today is not None else date.today())
    return replace(state, view_month=_add_months(view, months))


def toggle_group(state: SelectionState, value: str) -> SelectionState:
    """Expand or collapse the preset group header *value*."""
    return replace(state, expanded_groups=state.expanded_groups ^ {value})


def classify_day(
    state: SelectionState,
    day: date,
    month: date,
    constraints: Constraints = NO_CONSTRAINTS,
    today: DateLike | None = None,
) -> DayCell:
    """Describe how *day* should be drawn in the grid of *month*.

    Preview flags mark every day between the anchor and the hovered day,
    disabled days included; those keep ``disabled=True``.
    """
    ref = _as_date(today) if today is not None else date.today()
    flags: dict[str, bool] = {}

    if state.primary_start is not None:
        flags["is_start"] = day == state.primary_start
    if state.primary_end is not None:
        flags["is_end"] = day == state.primary_end
    primary = state.primary_range
    if primary is not None:
        flags["in_range"] = primary.contains(day)

    if state.compare_enabled:
        if state.compare_start is not None:
            flags["is_compare_start"] = day == state.compare_start
        if state.compare_end is not None:
            flags["is_compare_end"] = day == state.compare_end
        compare = state.compare_range
        if compare is not None:
            flags["in_compare_range"] = compare.contains(day)

    preview = preview_range(state)
    if preview is not None:
        flags["in_preview"] = preview.contains(day)
        flags["is_preview_endpoint"] = day in (state.anchor, state.hover)

    return DayCell(
        day=day,
        in_month=(day.year, day.month) == (month.year, month.month),
        disabled=constraints.is_disabled(day, ref),
        is_today=day == ref,
        **flags,
    )


def month_cells(
    state: SelectionState,
    month: DateLike,
    week_starts_on: int = 0,
    constraints: Constraints = NO_CONSTRAINTS,
    today: DateLike | None = None,
) -> list[DayCell]:
    """Classify all 42 grid days of *month*."""
    month = _month_start(_as_date(month))
    return [
        classify_day(state, day, month, constraints, today)
        for day in month_grid(month, week_starts_on)
    ]
