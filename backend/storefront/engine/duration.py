from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime]

DEFAULT_NIGHTS = 1
_ONE_DAY = timedelta(days=1)


def nights(check_in: Optional[DateLike], check_out: Optional[DateLike]) -> int:
    """
    Number of nights between check-in and check-out.

    Falls back to a single night when a date is missing or the range is not
    positive, so a price can always be shown. Datetimes round partial days up.
    """
    if not check_in or not check_out:
        return DEFAULT_NIGHTS
    diff_days = math.ceil((_as_datetime(check_out) - _as_datetime(check_in)) / _ONE_DAY)
    return diff_days if diff_days > 0 else DEFAULT_NIGHTS


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)
