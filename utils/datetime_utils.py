"""Helpers for the epoch-second timestamps stored by the repositories."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional, Tuple

UTC = timezone.utc
SECONDS_PER_DAY = 86400


def now_ts() -> int:
    """Current time as integer seconds since the epoch."""

    return int(time.time())


def day_bounds(ts: int) -> Tuple[int, int]:
    """Return the UTC day ``[start, end)`` containing ``ts``."""

    start = (int(ts) // SECONDS_PER_DAY) * SECONDS_PER_DAY
    return start, start + SECONDS_PER_DAY


def days_ago(days: int, *, now: Optional[int] = None) -> int:
    reference = now_ts() if now is None else int(now)
    return reference - int(days) * SECONDS_PER_DAY


def to_millis(ts: Optional[int]) -> Optional[int]:
    if not ts:
        return None
    return int(ts) * 1000


def iso_date(ts: int) -> str:
    """Render ``ts`` as a ``YYYY-MM-DD`` UTC calendar date."""

    return datetime.fromtimestamp(int(ts), tz=UTC).date().isoformat()


__all__ = [
    "SECONDS_PER_DAY",
    "UTC",
    "day_bounds",
    "days_ago",
    "iso_date",
    "now_ts",
    "to_millis",
]
