"""Internal value types shared by the engine modules.

This module is not part of the public API. Import the types from
``smart_date_compare`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Optional, Union

from smart_date_compare._dateutil import DateLike, _as_date


class CompareMode(str, Enum):
    """How the compare range is obtained from the primary range."""

    PREVIOUS_PERIOD = "previousPeriod"
    PREVIOUS_PERIOD_MATCH_DAY = "previousPeriodMatchDay"
    SAME_PERIOD_LAST_YEAR = "samePeriodLastYear"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: CompareMode | str) -> CompareMode:
        """Coerce a wire value (e.g. ``"previousPeriod"``) to a member.

        :raises ValueError: If *value* names no compare mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as err:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown compare mode {value!r}; expected one of: {choices}"
            ) from err


class SelectionTarget(str, Enum):
    """Which logical cursor receives click and hover events."""

    PRIMARY = "primary"
    COMPARE = "compare"


@dataclass(frozen=True)
class DateRange:
    """An inclusive interval of calendar days.

    Datetimes are accepted and normalized to their calendar day.

    :param start_date: First day of the interval.
    :param end_date: Last day of the interval.
    :param key: Optional host-defined identifier.
    """

    start_date: date
    end_date: date
    key: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", _as_date(self.start_date))
        object.__setattr__(self, "end_date", _as_date(self.end_date))

    @classmethod
    def ordered(cls, a: DateLike, b: DateLike, key: str | None = None) -> DateRange:
        """Build a range from two endpoints given in either order."""
        a, b = _as_date(a), _as_date(b)
        return cls(min(a, b), max(a, b), key)

    @property
    def days(self) -> int:
        """Inclusive duration in days."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: DateLike) -> bool:
        return self.start_date <= _as_date(day) <= self.end_date

    def to_dict(self) -> dict[str, str]:
        return {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }


RangeFn = Callable[[], DateRange]


@dataclass(frozen=True)
class Preset:
    """A named shortcut in the preset sidebar.

    A preset with ``children`` is a group header: it only toggles expansion
    in the sidebar and never resolves to a range itself. One level of nesting
    is supported.

    :param label: Text shown in the sidebar.
    :param value: Identifier, unique within its sibling scope.
    :param range_fn: Optional callable producing the preset's range.
    :param children: Sub-presets, making this node a group header.
    """

    label: str
    value: str
    range_fn: Optional[RangeFn] = field(default=None, compare=False)
    children: Optional[tuple[Preset, ...]] = None

    def __post_init__(self) -> None:
        if self.children is not None:
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_group(self) -> bool:
        return self.children is not None


@dataclass(frozen=True)
class PresetLeaf:
    preset: Preset


@dataclass(frozen=True)
class PresetGroup:
    preset: Preset
    children: tuple[PresetLeaf, ...]


PresetNode = Union[PresetLeaf, PresetGroup]
