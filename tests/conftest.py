import os
from datetime import date
from unittest.mock import patch

import pytest

from smart_date_compare import PickerConfig, RangeController

TODAY = date(2024, 6, 15)


@pytest.fixture
def events():
    """Collects controller notifications as ``(name, payload)`` tuples."""
    return []


@pytest.fixture
def make_controller(events):
    def factory(config=None):
        return RangeController(
            config if config is not None else PickerConfig(),
            on_change=lambda change: events.append(("change", change)),
            on_apply=lambda rng, cmp: events.append(("apply", (rng, cmp))),
            on_cancel=lambda: events.append(("cancel", None)),
            today=lambda: TODAY,
        )

    return factory


@pytest.fixture
def clean_env():
    """Remove SDC_* variables so tests do not depend on the shell."""
    cleared = {k: v for k, v in os.environ.items() if not k.startswith("SDC_")}
    with patch.dict(os.environ, cleared, clear=True):
        yield
