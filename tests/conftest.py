from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from itertools import count
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nugget_forecast.domain.entities.activity import (  # noqa: E402
    ActivityRecord,
    ActivityType,
)

FIXED_NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def birth_date_for(now: datetime) -> Callable[[int], datetime]:
    """Birth date making the baby ``days`` old at ``now``."""

    def _birth_date(days: int) -> datetime:
        return now - timedelta(days=days)

    return _birth_date


@pytest.fixture()
def make_activity(now: datetime) -> Callable[..., ActivityRecord]:
    """Build an activity that started ``hours_ago`` hours before ``now``."""
    ids = count(1)

    def _make(
        activity_type: ActivityType,
        hours_ago: float,
        amount_ml: Optional[float] = None,
        duration_minutes: Optional[float] = None,
        **kwargs: Any,
    ) -> ActivityRecord:
        return ActivityRecord(
            id=f"act_{next(ids)}",
            start_time=now - timedelta(hours=hours_ago),
            type=activity_type,
            amount_ml=amount_ml,
            duration_minutes=duration_minutes,
            **kwargs,
        )

    return _make
