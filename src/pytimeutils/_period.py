"""Compact period strings such as ``1d`` or ``4h30m``.

A period is a run of ``<digits><suffix>`` segments with no separators, where
the suffix is one of ``d``, ``h``, ``m`` or ``s``. Segments are normally
written in descending order but parsing accepts any order and repeats; each
segment simply adds to the total.
"""

from __future__ import annotations

import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from pytimeutils._constants import MAX_LONG, MILLIS_PER_SECOND, SECONDS_PER_SUFFIX
from pytimeutils._errors import MalformedPeriodError

logger = logging.getLogger(__name__)

PERIOD_GRAMMAR = r"""
start: segment*
segment: UINT SUFFIX

UINT: /[0-9]+/
SUFFIX: "d" | "h" | "m" | "s"
"""

_parser = Lark(PERIOD_GRAMMAR, parser="lalr")

# Any segment value with more digits than this overflows a signed 64-bit total.
_MAX_SIGNIFICANT_DIGITS = len(str(MAX_LONG))


def parse_period(text: str | None) -> int:
    """Convert a period string into milliseconds.

    For example ``"1d"`` returns ``86400000``. None and the empty string
    both return 0.

    Args:
        text: The period string, e.g. ``"3h"`` or ``"4h30m"``.

    Returns:
        The period length in milliseconds.

    Raises:
        MalformedPeriodError: If the text does not follow the period grammar
            or the total does not fit in a signed 64-bit integer.
    """
    if text is None:
        return 0

    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        logger.debug(
            "period.parse_failed",
            extra={"value": text, "line": e.line, "column": e.column},
        )
        raise MalformedPeriodError(
            text,
            f"unexpected input at column {e.column} of period '{text}'",
            wrapped=e,
        ) from e

    return _total_millis(text, tree)


def _total_millis(text: str, tree: Tree) -> int:
    total_seconds = 0
    for segment in tree.children:
        digits, suffix = segment.children
        digits = digits.lstrip("0") or "0"
        if len(digits) > _MAX_SIGNIFICANT_DIGITS:
            _raise_overflow(text)
        total_seconds += int(digits) * SECONDS_PER_SUFFIX[str(suffix)]
        if total_seconds * MILLIS_PER_SECOND > MAX_LONG:
            _raise_overflow(text)
    return total_seconds * MILLIS_PER_SECOND


def _raise_overflow(text: str) -> None:
    logger.debug("period.overflow", extra={"value": text})
    raise MalformedPeriodError(
        text,
        f"period '{text}' exceeds {MAX_LONG} milliseconds",
    )


def format_period(value: int | None) -> str | None:
    """Convert milliseconds into a period string.

    For example ``86400000`` returns ``"1d"``. Zero components are left out
    and any sub-second remainder is dropped, so ``0`` and ``999`` both
    return ``""``. None returns None.

    Raises:
        MalformedPeriodError: If ``value`` is negative.
    """
    if value is None:
        return None
    if value < 0:
        logger.debug("period.format_negative", extra={"value": value})
        raise MalformedPeriodError(value, f"cannot format negative period {value}")

    remaining = value // MILLIS_PER_SECOND
    parts: list[str] = []
    for suffix, weight in SECONDS_PER_SUFFIX.items():
        count, remaining = divmod(remaining, weight)
        if count:
            parts.append(f"{count}{suffix}")
    return "".join(parts)
