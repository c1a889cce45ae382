"""Internal date constraint evaluation.

This module is not part of the public API. Import :class:`Constraints`
from ``smart_date_compare`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from smart_date_compare._dateutil import DateLike, _as_date


@dataclass(frozen=True)
class Constraints:
    """Rules deciding which calendar days can be selected.

    All rules compare whole calendar days; time-of-day components of the
    inputs are discarded. ``disable_future`` and ``disable_past`` behave as
    an implicit ``max_date`` / ``min_date`` of today, evaluated on each call.

    ``min_date > max_date`` is not rejected: each day is evaluated against
    both bounds independently, which disables every day.

    :param min_date: Earliest selectable day.
    :param max_date: Latest selectable day.
    :param disable_future: Disable days after today.
    :param disable_past: Disable days before today.
    :param disabled_dates: Individual days that cannot be selected. Any
        iterable (or None) is accepted and stored as a frozenset of days.
    """

    min_date: Optional[date] = None
    max_date: Optional[date] = None
    disable_future: bool = False
    disable_past: bool = False
    disabled_dates: frozenset[date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.min_date is not None:
            object.__setattr__(self, "min_date", _as_date(self.min_date))
        if self.max_date is not None:
            object.__setattr__(self, "max_date", _as_date(self.max_date))
        disabled = frozenset(_as_date(d) for d in self.disabled_dates or ())
        object.__setattr__(self, "disabled_dates", disabled)

    def is_disabled(self, day: DateLike, today: DateLike | None = None) -> bool:
        """Return True if *day* cannot be selected.

        :param day: Candidate day (a datetime is truncated to its day).
        :param today: Reference day for ``disable_future`` / ``disable_past``.
            Defaults to :meth:`date.today`.
        """
        day = _as_date(day)
        if self.min_date is not None and day < self.min_date:
            return True
        if self.max_date is not None and day > self.max_date:
            return True
        if self.disable_future or self.disable_past:
            ref = _as_date(today) if today is not None else date.today()
            if self.disable_future and day > ref:
                return True
            if self.disable_past and day < ref:
                return True
        return day in self.disabled_dates


NO_CONSTRAINTS = Constraints()
