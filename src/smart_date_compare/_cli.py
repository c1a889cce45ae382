"""Internal CLI entry point for the ``smart-date-compare`` command.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

import argparse
import json
import sys

from smart_date_compare._compare import compute_compare_range
from smart_date_compare._config import PickerConfig
from smart_date_compare._dateutil import _parse_date, _parse_month
from smart_date_compare._grid import grid_weeks, month_grid, weekday_headers
from smart_date_compare._presets import resolve_preset
from smart_date_compare._types import CompareMode


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Date range and period comparison command line interface"
    )
    parser.add_argument(
        "--today", help="Reference day as YYYY-MM-DD (default: the system date)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    grid = sub.add_parser("grid", help="Print the 6-week calendar grid of a month")
    grid.add_argument("month", help="Month as YYYY-MM (e.g., 2024-03)")
    grid.add_argument(
        "--week-starts-on",
        type=int,
        help="First weekday column, 0=Sunday ... 6=Saturday",
    )

    compare = sub.add_parser("compare", help="Derive a compare range")
    compare.add_argument("start", help="Primary start as YYYY-MM-DD")
    compare.add_argument("end", help="Primary end as YYYY-MM-DD")
    compare.add_argument(
        "--mode",
        choices=[m.value for m in CompareMode if m is not CompareMode.CUSTOM],
        help="Compare mode (default: SDC_COMPARE_MODE or previousPeriod)",
    )

    preset = sub.add_parser("preset", help="Resolve a named preset")
    preset.add_argument("value", help="Preset identifier (e.g., last7days)")

    check = sub.add_parser("check", help="Check days against the configured constraints")
    check.add_argument("days", nargs="+", help="Days as YYYY-MM-DD")
    return parser


def _run(args: argparse.Namespace, config: PickerConfig) -> dict:
    today = _parse_date(args.today) if args.today else None

    if args.command == "grid":
        week_start = (
            args.week_starts_on
            if args.week_starts_on is not None
            else config.first_weekday
        )
        month = _parse_month(args.month)
        return {
            "month": args.month,
            "headers": weekday_headers(week_start, config.locale),
            "weeks": [
                [d.isoformat() for d in week]
                for week in grid_weeks(month_grid(month, week_start))
            ],
        }

    if args.command == "compare":
        mode = CompareMode.parse(args.mode) if args.mode else config.compare_mode
        start, end = _parse_date(args.start), _parse_date(args.end)
        if start > end:
            start, end = end, start
        derived = compute_compare_range(mode, start, end)
        result = {"mode": mode.value, "startDate": start.isoformat(), "endDate": end.isoformat()}
        if derived is not None:
            result["compareStartDate"] = derived.start_date.isoformat()
            result["compareEndDate"] = derived.end_date.isoformat()
        return result

    if args.command == "preset":
        resolved = resolve_preset(args.value, config.presets, today)
        return {"preset": args.value, **resolved.to_dict()}

    days = [_parse_date(d) for d in args.days]
    return {
        d.isoformat(): {"disabled": config.constraints.is_disabled(d, today)}
        for d in days
    }


def cli(argv: list[str] | None = None):
    """CLI entry point for the ``smart-date-compare`` command.

    Reads defaults from ``SDC_*`` environment variables (see
    :meth:`PickerConfig.from_env`). If ``python-dotenv`` is installed,
    also loads ``.env`` from the current directory.
    """
    try:
        from dotenv import load_dotenv

        load_dotenv()
    except ImportError:
        pass

    args = _build_parser().parse_args(argv)

    try:
        config = PickerConfig.from_env()
        result = _run(args, config)
    except ValueError as e:
        print(json.dumps({"error": str(e)}, indent=4))
        sys.exit(1)

    print(json.dumps(result, indent=4))


if __name__ == "__main__":
    cli()
