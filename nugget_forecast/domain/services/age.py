"""Baby age helpers."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

BirthDate = Union[date, datetime]


def _as_datetime(value: BirthDate, reference: datetime) -> datetime:
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.combine(value, time.min)
    if moment.tzinfo is None and reference.tzinfo is not None:
        moment = moment.replace(tzinfo=reference.tzinfo)
    elif moment.tzinfo is not None and reference.tzinfo is None:
        moment = moment.replace(tzinfo=None)
    return moment


def baby_age_days(birth_date: Optional[BirthDate], now: datetime) -> Optional[int]:
    """
    Whole days between ``birth_date`` and ``now``.

    Returns None when no birth date is known. The difference is taken as an
    absolute value, so a birth date after ``now`` counts the days until it.
    """
    if birth_date is None:
        return None
    birth = _as_datetime(birth_date, now)
    return abs(now - birth).days
