"""Internal picker controller implementation.

This module is not part of the public API. Import
:class:`~smart_date_compare.RangeController` from ``smart_date_compare``
directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from smart_date_compare import _selection
from smart_date_compare._config import PickerConfig
from smart_date_compare._dateutil import Clock, DateLike, _today
from smart_date_compare._grid import visible_months, weekday_headers
from smart_date_compare._selection import DayCell, SelectionState
from smart_date_compare._types import CompareMode, DateRange, SelectionTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeChange:
    """Payload of a change notification. Any endpoint may be unset."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    compare_start_date: Optional[date] = None
    compare_end_date: Optional[date] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        def iso(d: Optional[date]) -> Optional[str]:
            return d.isoformat() if d is not None else None

        return {
            "startDate": iso(self.start_date),
            "endDate": iso(self.end_date),
            "compareStartDate": iso(self.compare_start_date),
            "compareEndDate": iso(self.compare_end_date),
        }


def _change_of(state: SelectionState) -> RangeChange:
    if state.compare_enabled:
        compare_start, compare_end = state.compare_start, state.compare_end
    else:
        compare_start = compare_end = None
    return RangeChange(state.primary_start, state.primary_end, compare_start, compare_end)


class RangeController:
    """Open/close, apply and cancel handling for one date-range picker.

    Keeps the committed primary (and optional compare) range between
    sessions and owns the :class:`SelectionState` of the open picker.
    Interaction methods forward to the selection state machine and are
    ignored while the picker is closed::

        picker = RangeController(PickerConfig(enable_compare=True), on_apply=save)
        picker.open()
        picker.click(date(2024, 5, 5))
        picker.click(date(2024, 5, 1))
        picker.apply()

    :param config: Picker configuration.
    :param on_change: Called with a :class:`RangeChange` whenever a
        committed endpoint changes, including half-finished selections.
    :param on_apply: Called with ``(range, compare_range)`` when the user
        confirms; ``compare_range`` is None when compare is off.
    :param on_cancel: Called when the picker is cancelled or dismissed.
    :param today: Clock returning the current day; defaults to
        :meth:`date.today`.
    """

    def __init__(
        self,
        config: PickerConfig | None = None,
        on_change: Callable[[RangeChange], Any] | None = None,
        on_apply: Callable[[DateRange, Optional[DateRange]], Any] | None = None,
        on_cancel: Callable[[], Any] | None = None,
        today: Clock | None = None,
    ):
        self.config = config if config is not None else PickerConfig()
        self.on_change = on_change
        self.on_apply = on_apply
        self.on_cancel = on_cancel
        self._clock = today
        seed = self.config.value or self.config.default_value
        if seed is None:
            now = self.today()
            seed = DateRange(now, now)
        self._range = DateRange.ordered(seed.start_date, seed.end_date, seed.key)
        self._compare_range: DateRange | None = None
        self._compare_enabled = self.config.enable_compare
        self._compare_mode = self.config.compare_mode
        self._state: SelectionState | None = None

    def __repr__(self) -> str:
        return (
            f"RangeController(range={self._range!r}, "
            f"compare={self._compare_range!r}, open={self.is_open})"
        )

    def today(self) -> date:
        return _today(self._clock)

    @property
    def is_open(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> SelectionState | None:
        """Selection state of the open picker, or None when closed."""
        return self._state

    @property
    def value(self) -> DateRange:
        """Last committed primary range."""
        return self._range

    @property
    def compare_value(self) -> DateRange | None:
        """Last committed compare range, or None."""
        return self._compare_range

    @property
    def compare_enabled(self) -> bool:
        return self._compare_enabled

    @property
    def compare_mode(self) -> CompareMode:
        return self._compare_mode

    # --- host-driven updates ---

    def set_value(self, value: DateRange) -> None:
        """Overwrite the committed primary range from the host.

        Endpoints given in reverse order are swapped. An open picker is
        re-seeded from the new value.
        """
        self._range = DateRange.ordered(value.start_date, value.end_date, value.key)
        if self._state is not None:
            self._state = self._seed()

    def sync_compare(
        self, enabled: bool | None = None, mode: CompareMode | str | None = None
    ) -> None:
        """Apply host-side changes to the compare toggle or mode.

        An open picker follows the change immediately.

        :raises ValueError: If *mode* is not a known compare mode.
        """
        if mode is not None:
            self._compare_mode = CompareMode.parse(mode)
            if self._state is not None:
                self._transition(
                    _selection.set_compare_mode(self._state, self._compare_mode)
                )
        if enabled is not None:
            self._compare_enabled = enabled
            if self._state is not None:
                self._transition(_selection.toggle_compare(self._state, enabled))

    # --- open / close ---

    def open(self) -> None:
        """Open the picker, seeding it from the committed ranges."""
        if self._state is not None:
            return
        self._state = self._seed()
        logger.debug(f"Picker opened on {self._range}")

    def toggle(self) -> None:
        """Open a closed picker, or close an open one without events."""
        if self._state is None:
            self.open()
        else:
            self._state = None

    def apply(self) -> bool:
        """Commit the picker's ranges and close it.

        Inert unless both primary endpoints are set.

        :return: True if the selection was applied.
        """
        if self._state is None:
            return False
        primary = self._state.primary_range
        if primary is None:
            logger.debug("Apply ignored: primary range is incomplete")
            return False

        compare = self._state.compare_range
        self._range = primary
        self._compare_range = compare
        self._compare_enabled = compare is not None
        if compare is not None:
            self._compare_mode = self._state.compare_mode
        self._state = None

        if self.on_change is not None:
            self.on_change(
                RangeChange(
                    primary.start_date,
                    primary.end_date,
                    compare.start_date if compare else None,
                    compare.end_date if compare else None,
                )
            )
        if self.on_apply is not None:
            self.on_apply(primary, compare)
        return True

    def cancel(self) -> None:
        """Discard the in-progress selection and close the picker."""
        if self._state is None:
            return
        self._state = None
        if self.on_cancel is not None:
            self.on_cancel()

    def dismiss(self) -> None:
        """Close after an interaction outside the picker; same as :meth:`cancel`."""
        self.cancel()

    # --- interactions ---

    def click(self, day: DateLike) -> None:
        self._dispatch(_selection.click, day, self.config.constraints, self.today())

    def hover(self, day: DateLike) -> None:
        self._dispatch(_selection.hover, day, self.config.constraints, self.today())

    def select_preset(self, value: str) -> None:
        self._dispatch(
            _selection.select_preset,
            value,
            self.config.presets,
            self.config.constraints,
            self.today(),
        )

    def toggle_compare(self, enabled: bool) -> None:
        self._dispatch(_selection.toggle_compare, enabled)

    def set_compare_mode(self, mode: CompareMode | str) -> None:
        self._dispatch(_selection.set_compare_mode, mode)

    def set_selection_target(self, target: SelectionTarget | str) -> None:
        self._dispatch(_selection.set_selection_target, target)

    def reset(self) -> None:
        self._dispatch(_selection.reset)

    def navigate(self, months: int) -> None:
        self._dispatch(_selection.navigate, months, self.today())

    def toggle_group(self, value: str) -> None:
        self._dispatch(_selection.toggle_group, value)

    # --- view helpers ---

    def visible_months(self) -> tuple[date, date]:
        if self._state is not None and self._state.view_month is not None:
            return visible_months(self._state.view_month)
        return visible_months(_selection.view_month_for(self._range.end_date))

    def weekday_headers(self) -> list[str]:
        return weekday_headers(self.config.first_weekday, self.config.locale)

    def cells(self, month: DateLike) -> list[DayCell]:
        """Classify the grid days of *month* against the current selection."""
        state = self._state if self._state is not None else self._seed()
        return _selection.month_cells(
            state,
            month,
            self.config.first_weekday,
            self.config.constraints,
            self.today(),
        )

    def trigger_label(self) -> str:
        """Text for the closed picker's button, from the committed ranges."""
        fmt = self.config.locale.format_date
        text = f"{fmt(self._range.start_date)} - {fmt(self._range.end_date)}"
        if self._compare_range is not None:
            text += (
                f" {self.config.labels.vs} {fmt(self._compare_range.start_date)}"
                f" - {fmt(self._compare_range.end_date)}"
            )
        return text

    def header_label(self) -> str:
        """Text for the open picker's header, from the in-progress selection."""
        if self._state is None:
            return self.trigger_label()
        fmt = self.config.locale.format_date
        primary = self._state.primary_range
        if primary is None:
            text = self.config.labels.select_date_range
        else:
            text = f"{fmt(primary.start_date)} - {fmt(primary.end_date)}"
        compare = self._state.compare_range
        if compare is not None:
            text += (
                f" {self.config.labels.vs} {fmt(compare.start_date)}"
                f" - {fmt(compare.end_date)}"
            )
        return text

    # --- internals ---

    def _seed(self) -> SelectionState:
        return _selection.initial_state(
            self._range,
            self._compare_range,
            self._compare_enabled,
            self._compare_mode,
            self.today(),
        )

    def _dispatch(self, operation: Callable[..., SelectionState], *args: Any) -> None:
        if self._state is None:
            logger.debug(f"{operation.__name__} ignored: picker is closed")
            return
        self._transition(operation(self._state, *args))

    def _transition(self, new: SelectionState) -> None:
        old, self._state = self._state, new
        if old is None or self.on_change is None:
            return
        change = _change_of(new)
        if change != _change_of(old):
            self.on_change(change)
