"""Internal picker configuration records.

This module is not part of the public API. Import :class:`PickerConfig`,
:class:`Labels` and :class:`ClassNames` from ``smart_date_compare`` directly.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional, TypeVar

from smart_date_compare._constraints import NO_CONSTRAINTS, Constraints
from smart_date_compare._dateutil import _parse_date
from smart_date_compare._grid import _check_week_start
from smart_date_compare._locale import EnglishLocale, LocaleProvider
from smart_date_compare._types import CompareMode, DateRange, Preset

logger = logging.getLogger(__name__)

ENV_PREFIX = "SDC_"

_T = TypeVar("_T")


def _snake(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _from_mapping(cls: type[_T], overrides: Mapping[str, Optional[str]]) -> _T:
    """Build a record from host-style camelCase keys, skipping unknown ones."""
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    kwargs: dict[str, str] = {}
    for key, text in overrides.items():
        name = _snake(key)
        if name not in known:
            logger.warning(f"Ignoring unknown {cls.__name__} key {key!r}")
            continue
        if text is not None:
            kwargs[name] = text
    return cls(**kwargs)


@dataclass(frozen=True)
class Labels:
    """User-facing strings, English by default."""

    apply: str = "Apply"
    cancel: str = "Cancel"
    clear: str = "Reset"
    compare: str = "Compare"
    to: str = "to"
    custom: str = "Custom"
    select_date_range: str = "Select date range"
    vs: str = "vs"
    preceding_period: str = "Previous period"
    same_period_last_year: str = "Previous year"

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Optional[str]]) -> Labels:
        """Build labels from keys such as ``"selectDateRange"``.

        ``None`` values keep the default; unknown keys are logged and ignored.
        """
        return _from_mapping(cls, overrides)


DEFAULT_CLASS_NAMES: dict[str, str] = {
    "root": "sdc-root",
    "container": "sdc-container",
    "sidebar": "sdc-sidebar",
    "calendar": "sdc-calendar",
    "day": "sdc-day",
    "day_selected": "sdc-day-selected",
    "day_in_range": "sdc-day-in-range",
    "day_compare": "sdc-day-compare",
    "footer": "sdc-footer",
    "button_apply": "sdc-button-apply",
    "button_cancel": "sdc-button-cancel",
    "preset_active": "sdc-preset-active",
}


@dataclass(frozen=True)
class ClassNames:
    """Per-element style class overrides for a renderer.

    Each field is an override slot; :meth:`resolve` falls back to the entry
    of :data:`DEFAULT_CLASS_NAMES` when the slot is empty.
    """

    root: Optional[str] = None
    container: Optional[str] = None
    sidebar: Optional[str] = None
    calendar: Optional[str] = None
    day: Optional[str] = None
    day_selected: Optional[str] = None
    day_in_range: Optional[str] = None
    day_compare: Optional[str] = None
    footer: Optional[str] = None
    button_apply: Optional[str] = None
    button_cancel: Optional[str] = None
    preset_active: Optional[str] = None

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Optional[str]]) -> ClassNames:
        return _from_mapping(cls, overrides)

    def resolve(self, key: str) -> str:
        """Return the override for *key*, or its default.

        :raises KeyError: If *key* is not a recognized element.
        """
        name = _snake(key)
        if name not in DEFAULT_CLASS_NAMES:
            raise KeyError(key)
        override = getattr(self, name)
        return override if override else DEFAULT_CLASS_NAMES[name]


def _env_bool(name: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("", "0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class PickerConfig:
    """Configuration surface of a :class:`~smart_date_compare.RangeController`.

    :param value: Controlled primary range; overrides the internal state.
    :param default_value: Initial primary range when uncontrolled.
    :param presets: Preset tree for the sidebar; defaults to the built-ins.
    :param enable_compare: Whether comparison starts enabled.
    :param compare_mode: Initial compare mode.
    :param constraints: Selectable-day rules.
    :param week_starts_on: First grid column, 0=Sunday. ``None`` uses the
        locale's default.
    :param locale: Day and month naming provider.
    :param labels: User-facing strings.
    :param class_names: Renderer style overrides.
    """

    value: Optional[DateRange] = None
    default_value: Optional[DateRange] = None
    presets: Optional[Sequence[Preset]] = None
    enable_compare: bool = False
    compare_mode: CompareMode = CompareMode.PREVIOUS_PERIOD
    constraints: Constraints = NO_CONSTRAINTS
    week_starts_on: Optional[int] = None
    locale: LocaleProvider = field(default_factory=EnglishLocale)
    labels: Labels = field(default_factory=Labels)
    class_names: ClassNames = field(default_factory=ClassNames)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compare_mode", CompareMode.parse(self.compare_mode))
        if self.presets is not None:
            object.__setattr__(self, "presets", tuple(self.presets))
        if self.week_starts_on is not None:
            _check_week_start(self.week_starts_on)

    @property
    def first_weekday(self) -> int:
        """Effective first grid column."""
        if self.week_starts_on is not None:
            return self.week_starts_on
        return self.locale.week_starts_on

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> PickerConfig:
        """Build a config from ``SDC_*`` environment variables.

        Recognized variables: ``SDC_WEEK_STARTS_ON``, ``SDC_COMPARE_MODE``,
        ``SDC_ENABLE_COMPARE``, ``SDC_DISABLE_FUTURE``, ``SDC_DISABLE_PAST``,
        ``SDC_MIN_DATE`` and ``SDC_MAX_DATE`` (``YYYY-MM-DD``). Keyword
        *overrides* take precedence over the environment, except that a
        ``constraints`` override is the base the constraint variables are
        applied on.

        :param environ: Mapping to read instead of :data:`os.environ`.
        :raises ValueError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            raw = env.get(ENV_PREFIX + name)
            return raw if raw not in (None, "") else None

        kwargs: dict[str, Any] = {}
        constraint_kwargs: dict[str, Any] = {}

        raw = get("WEEK_STARTS_ON")
        if raw is not None:
            try:
                kwargs["week_starts_on"] = int(raw)
            except ValueError as err:
                raise ValueError(
                    f"{ENV_PREFIX}WEEK_STARTS_ON must be an integer 0-6, got {raw!r}"
                ) from err
        raw = get("COMPARE_MODE")
        if raw is not None:
            kwargs["compare_mode"] = CompareMode.parse(raw)
        raw = get("ENABLE_COMPARE")
        if raw is not None:
            kwargs["enable_compare"] = _env_bool(ENV_PREFIX + "ENABLE_COMPARE", raw)

        for name in ("DISABLE_FUTURE", "DISABLE_PAST"):
            raw = get(name)
            if raw is not None:
                constraint_kwargs[name.lower()] = _env_bool(ENV_PREFIX + name, raw)
        for name in ("MIN_DATE", "MAX_DATE"):
            raw = get(name)
            if raw is not None:
                constraint_kwargs[name.lower()] = _parse_date(raw)

        if constraint_kwargs:
            base = overrides.pop("constraints", NO_CONSTRAINTS)
            kwargs["constraints"] = replace(base, **constraint_kwargs)

        kwargs.update(overrides)
        return cls(**kwargs)
