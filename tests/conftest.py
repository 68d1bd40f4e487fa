"""Shared test fixtures."""

import pytest

from pytimeutils import TimeUnit

ALIASES = [
    ("DAYS", TimeUnit.DAYS),
    ("DAYSSINCEEPOCH", TimeUnit.DAYS),
    ("HOURS", TimeUnit.HOURS),
    ("HOURSSINCEEPOCH", TimeUnit.HOURS),
    ("MINUTES", TimeUnit.MINUTES),
    ("MINUTESSINCEEPOCH", TimeUnit.MINUTES),
    ("SECONDS", TimeUnit.SECONDS),
    ("SECONDSSINCEEPOCH", TimeUnit.SECONDS),
    ("MILLISECONDS", TimeUnit.MILLISECONDS),
    ("MILLISSINCEEPOCH", TimeUnit.MILLISECONDS),
    ("MILLISECONDSSINCEEPOCH", TimeUnit.MILLISECONDS),
    ("MICROSECONDS", TimeUnit.MICROSECONDS),
    ("MICROSSINCEEPOCH", TimeUnit.MICROSECONDS),
    ("MICROSECONDSSINCEEPOCH", TimeUnit.MICROSECONDS),
    ("NANOSECONDS", TimeUnit.NANOSECONDS),
    ("NANOSSINCEEPOCH", TimeUnit.NANOSECONDS),
    ("NANOSECONDSSINCEEPOCH", TimeUnit.NANOSECONDS),
]

MAX_LONG = 2**63 - 1


def mixed_case(s: str) -> str:
    """Alternate lower/upper case, starting lower."""
    return "".join(c.upper() if i % 2 else c.lower() for i, c in enumerate(s))


@pytest.fixture
def alias_table():
    return dict(ALIASES)
