"""Internal preset tree lookup and named-range resolution.

This module is not part of the public API. Import :func:`resolve_preset`
and :data:`DEFAULT_PRESETS` from ``smart_date_compare`` directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from datetime import date, timedelta
from typing import Callable, Optional

from smart_date_compare._dateutil import DateLike, _add_months, _as_date, _month_start
from smart_date_compare._grid import _week_start
from smart_date_compare._types import DateRange, Preset, PresetGroup, PresetLeaf, PresetNode

logger = logging.getLogger(__name__)

CUSTOM_PRESET = "custom"

DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset("Today", "today"),
    Preset("Yesterday", "yesterday"),
    Preset(
        "This week",
        "__group_thisWeek",
        children=(
            Preset("Sun – Today", "thisWeekSunToday"),
            Preset("Mon – Today", "thisWeekMonToday"),
        ),
    ),
    Preset("Last 7 days", "last7days"),
    Preset(
        "Last week",
        "__group_lastWeek",
        children=(
            Preset("Sun – Sat", "lastWeekSunSat"),
            Preset("Mon – Sun", "lastWeekMonSun"),
        ),
    ),
    Preset("Last 28 days", "last28Days"),
    Preset("Last 30 days", "last30days"),
    Preset("This month", "thisMonth"),
    Preset("Last month", "lastMonth"),
    Preset("Year to Date", "ytd"),
    Preset("Custom", CUSTOM_PRESET),
)


def _trailing(days: int) -> Callable[[date], DateRange]:
    return lambda today: DateRange(today - timedelta(days=days - 1), today)


def _this_week(week_starts_on: int) -> Callable[[date], DateRange]:
    return lambda today: DateRange(_week_start(today, week_starts_on), today)


def _last_week(week_starts_on: int) -> Callable[[date], DateRange]:
    def resolve(today: date) -> DateRange:
        start = _week_start(today, week_starts_on) - timedelta(days=7)
        return DateRange(start, start + timedelta(days=6))

    return resolve


def _this_month(today: date) -> DateRange:
    start = _month_start(today)
    return DateRange(start, _add_months(start, 1) - timedelta(days=1))


def _last_month(today: date) -> DateRange:
    start = _add_months(_month_start(today), -1)
    return DateRange(start, _month_start(today) - timedelta(days=1))


NAMED_RANGES: dict[str, Callable[[date], DateRange]] = {
    "today": lambda today: DateRange(today, today),
    "yesterday": lambda today: DateRange(
        today - timedelta(days=1), today - timedelta(days=1)
    ),
    "last7days": _trailing(7),
    "thisWeekSunToday": _this_week(0),
    "thisWeekMonToday": _this_week(1),
    "lastWeekSunSat": _last_week(0),
    "lastWeekMonSun": _last_week(1),
    "last28Days": _trailing(28),
    "last30days": _trailing(30),
    "thisMonth": _this_month,
    "lastMonth": _last_month,
    "ytd": lambda today: DateRange(today.replace(month=1, day=1), today),
}


def preset_nodes(presets: Sequence[Preset]) -> list[PresetNode]:
    """Tag each top-level preset as a leaf or a group of leaves.

    Nesting deeper than one level is flattened away: grandchildren are not
    reachable.
    """
    nodes: list[PresetNode] = []
    for preset in presets:
        if preset.is_group:
            leaves = tuple(
                PresetLeaf(child) for child in preset.children or () if not child.is_group
            )
            nodes.append(PresetGroup(preset, leaves))
        else:
            nodes.append(PresetLeaf(preset))
    return nodes


def _walk(presets: Sequence[Preset]) -> Iterator[tuple[Optional[Preset], Preset]]:
    """Depth-first ``(group, leaf)`` pairs; ``group`` is None at top level."""
    for node in preset_nodes(presets):
        if isinstance(node, PresetGroup):
            for leaf in node.children:
                yield node.preset, leaf.preset
        else:
            yield None, node.preset


def find_preset(presets: Sequence[Preset], value: str) -> Preset | None:
    """Find the selectable preset with identifier *value*.

    Group headers never match.
    """
    for _, preset in _walk(presets):
        if preset.value == value:
            return preset
    return None


def group_for(presets: Sequence[Preset], value: str) -> Preset | None:
    """Return the group header containing the leaf *value*, if any."""
    for group, preset in _walk(presets):
        if preset.value == value:
            return group
    return None


def is_group(presets: Sequence[Preset], value: str) -> bool:
    return any(p.value == value and p.is_group for p in presets)


def resolve_preset(
    value: str,
    presets: Sequence[Preset] | None = None,
    today: DateLike | None = None,
) -> DateRange:
    """Resolve a preset identifier to a concrete range.

    A matching preset's ``range_fn`` wins. Otherwise *value* is looked up
    in :data:`NAMED_RANGES`. Identifiers found nowhere resolve to today.

    :param value: Preset identifier (e.g. ``"last7days"``).
    :param presets: Preset tree to search; defaults to :data:`DEFAULT_PRESETS`.
    :param today: Reference day; defaults to :meth:`date.today`.
    :return: The resolved range.
    """
    ref = _as_date(today) if today is not None else date.today()
    preset = find_preset(DEFAULT_PRESETS if presets is None else presets, value)
    if preset is not None and preset.range_fn is not None:
        return preset.range_fn()

    named = NAMED_RANGES.get(value)
    if named is not None:
        return named(ref)

    if value != CUSTOM_PRESET:
        logger.warning(f"Unknown preset {value!r}, falling back to today")
    return DateRange(ref, ref)
