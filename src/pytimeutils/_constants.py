"""Unit weights and validity window constants."""

from datetime import datetime, timezone

SECONDS_PER_SUFFIX: dict[str, int] = {
    "d": 86400,
    "h": 3600,
    "m": 60,
    "s": 1,
}
"""Weight of each period suffix, in seconds. Insertion order is the print order."""

MILLIS_PER_SECOND = 1000

MAX_LONG = 2**63 - 1
"""Largest value a period may take, in milliseconds (signed 64-bit)."""

VALID_MIN_TIME = datetime(1971, 1, 1, tzinfo=timezone.utc)
"""Lower bound (inclusive) of the timestamp sanity window."""

VALID_MAX_TIME = datetime(2071, 1, 1, tzinfo=timezone.utc)
"""Upper bound (inclusive) of the timestamp sanity window."""
