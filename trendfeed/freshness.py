"""Staleness policy: decide when the working set needs a network refresh."""

from __future__ import annotations

from datetime import datetime, timedelta

from trendfeed.models import EPOCH

DEFAULT_REFRESH_INTERVAL = timedelta(days=15)

__all__ = ["DEFAULT_REFRESH_INTERVAL", "EPOCH", "is_refresh_due", "next_refresh_due"]


def is_refresh_due(
    last_fetch_date: datetime,
    now: datetime,
    interval: timedelta = DEFAULT_REFRESH_INTERVAL,
) -> bool:
    """True once at least ``interval`` has passed since the last refresh."""
    return now - last_fetch_date >= interval


def next_refresh_due(
    last_fetch_date: datetime,
    interval: timedelta = DEFAULT_REFRESH_INTERVAL,
) -> datetime:
    return last_fetch_date + interval
