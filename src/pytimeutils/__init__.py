"""pytimeutils - Time unit aliases, compact period strings and timestamp sanity checks."""

from __future__ import annotations

try:
    from pytimeutils._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pytimeutils._errors import MalformedPeriodError, TimeUtilsError, UnsupportedUnitError
from pytimeutils._period import format_period, parse_period
from pytimeutils._window import (
    VALID_MAX_TIME_MILLIS,
    VALID_MIN_TIME_MILLIS,
    both_in_valid_range,
    in_valid_range,
    valid_max_time_millis,
    valid_min_time_millis,
)
from pytimeutils.units import TIME_UNIT_ALIASES, TimeUnit, resolve_time_unit

__all__ = [
    "resolve_time_unit",
    "parse_period",
    "format_period",
    "valid_min_time_millis",
    "valid_max_time_millis",
    "in_valid_range",
    "both_in_valid_range",
    "TimeUnit",
    "TIME_UNIT_ALIASES",
    "VALID_MIN_TIME_MILLIS",
    "VALID_MAX_TIME_MILLIS",
    "TimeUtilsError",
    "MalformedPeriodError",
    "UnsupportedUnitError",
]
