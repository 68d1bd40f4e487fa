"""Sanity window for absolute timestamps in milliseconds since the epoch."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pytimeutils._constants import VALID_MAX_TIME, VALID_MIN_TIME

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)

VALID_MIN_TIME_MILLIS: int = (VALID_MIN_TIME - _EPOCH) // _ONE_MILLI
VALID_MAX_TIME_MILLIS: int = (VALID_MAX_TIME - _EPOCH) // _ONE_MILLI


def valid_min_time_millis() -> int:
    """Return the earliest valid time (start of 1971 UTC) in milliseconds."""
    return VALID_MIN_TIME_MILLIS


def valid_max_time_millis() -> int:
    """Return the latest valid time (start of 2071 UTC) in milliseconds."""
    return VALID_MAX_TIME_MILLIS


def in_valid_range(time_millis: int) -> bool:
    """Return True if the time lies in the valid window, endpoints included."""
    return VALID_MIN_TIME_MILLIS <= time_millis <= VALID_MAX_TIME_MILLIS


def both_in_valid_range(start_millis: int, end_millis: int) -> bool:
    """Return True if both start and end times lie in the valid window.

    The two values are checked independently: ``start_millis`` may be later
    than ``end_millis``. Callers that need ``start <= end`` must check it
    themselves. Both values must already be in milliseconds since the epoch.
    """
    return in_valid_range(start_millis) and in_valid_range(end_millis)
