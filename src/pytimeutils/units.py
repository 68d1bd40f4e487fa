"""Canonical time units and lookup of their textual aliases."""

from __future__ import annotations

import enum
import logging
import string
from types import MappingProxyType

from pytimeutils._errors import UnsupportedUnitError

logger = logging.getLogger(__name__)


class TimeUnit(enum.StrEnum):
    DAYS = "DAYS"
    HOURS = "HOURS"
    MINUTES = "MINUTES"
    SECONDS = "SECONDS"
    MILLISECONDS = "MILLISECONDS"
    MICROSECONDS = "MICROSECONDS"
    NANOSECONDS = "NANOSECONDS"

    @property
    def nanos(self) -> int:
        """Length of one unit in nanoseconds."""
        return _NANOS_PER_UNIT[self]

    def convert(self, duration: int, source: TimeUnit) -> int:
        """Convert ``duration`` expressed in ``source`` units into this unit.

        Conversions to a coarser unit truncate toward zero, so
        ``TimeUnit.HOURS.convert(90, TimeUnit.MINUTES)`` is ``1``.
        """
        total = duration * source.nanos
        quotient = abs(total) // self.nanos
        return quotient if total >= 0 else -quotient

    def to_millis(self, duration: int) -> int:
        return TimeUnit.MILLISECONDS.convert(duration, self)


_NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.DAYS: 86_400_000_000_000,
    TimeUnit.HOURS: 3_600_000_000_000,
    TimeUnit.MINUTES: 60_000_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.NANOSECONDS: 1,
}

# Upper-cased alias -> unit. Entries may be added but never removed or remapped.
TIME_UNIT_ALIASES: MappingProxyType[str, TimeUnit] = MappingProxyType({
    "DAYS": TimeUnit.DAYS,
    "DAYSSINCEEPOCH": TimeUnit.DAYS,
    "HOURS": TimeUnit.HOURS,
    "HOURSSINCEEPOCH": TimeUnit.HOURS,
    "MINUTES": TimeUnit.MINUTES,
    "MINUTESSINCEEPOCH": TimeUnit.MINUTES,
    "SECONDS": TimeUnit.SECONDS,
    "SECONDSSINCEEPOCH": TimeUnit.SECONDS,
    "MILLISECONDS": TimeUnit.MILLISECONDS,
    "MILLISSINCEEPOCH": TimeUnit.MILLISECONDS,
    "MILLISECONDSSINCEEPOCH": TimeUnit.MILLISECONDS,
    "MICROSECONDS": TimeUnit.MICROSECONDS,
    "MICROSSINCEEPOCH": TimeUnit.MICROSECONDS,
    "MICROSECONDSSINCEEPOCH": TimeUnit.MICROSECONDS,
    "NANOSECONDS": TimeUnit.NANOSECONDS,
    "NANOSSINCEEPOCH": TimeUnit.NANOSECONDS,
    "NANOSECONDSSINCEEPOCH": TimeUnit.NANOSECONDS,
})

# Only a-z are folded; str.upper() would also map e.g. dotless i to "I".
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def resolve_time_unit(name: str | None) -> TimeUnit | None:
    """Convert a time unit name into a :class:`TimeUnit`, ignoring case.

    Besides the unit names themselves, the "...SinceEpoch" spellings used in
    schema time columns are accepted, e.g. ``"daysSinceEpoch"`` resolves to
    ``DAYS`` and both ``"millisSinceEpoch"`` and ``"millisecondsSinceEpoch"``
    resolve to ``MILLISECONDS``.

    Args:
        name: The unit name, e.g. ``"DAYS"`` or ``"secondsSinceEpoch"``.

    Returns:
        The matching unit, or None when ``name`` is None or empty.

    Raises:
        UnsupportedUnitError: If a non-empty name matches no alias.
    """
    # None and "" mean "unspecified", not "unrecognized"
    if not name:
        return None

    unit = TIME_UNIT_ALIASES.get(name.translate(_ASCII_UPPER))
    if unit is None:
        logger.debug("units.unsupported_time_unit", extra={"value": name})
        raise UnsupportedUnitError(
            name,
            f"'{name}' is not one of {len(TIME_UNIT_ALIASES)} known time unit aliases",
        )
    return unit
