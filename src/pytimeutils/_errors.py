"""Exception hierarchy for time unit and period handling."""

from __future__ import annotations


class TimeUtilsError(Exception):
    """Base exception for time utility errors.

    Provides dual messaging: a user-facing message and internal
    details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedUnitError(TimeUtilsError, ValueError):
    """Raised when a time unit name matches no known alias."""

    def __init__(self, value: str, internal_details: str = "") -> None:
        super().__init__(f"{ERR_MSG_UNSUPPORTED_UNIT}: {value}", internal_details)
        self.value = value


class MalformedPeriodError(TimeUtilsError, ValueError):
    """Raised when a period string or value cannot be handled."""

    def __init__(
        self,
        value: object,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(
            f"{ERR_MSG_INVALID_PERIOD} '{value}' ({PERIOD_HINT})",
            internal_details,
            wrapped,
        )
        self.value = value
        self.hint = PERIOD_HINT


# User-facing error message prefixes
ERR_MSG_UNSUPPORTED_UNIT = "Unsupported time unit"
ERR_MSG_INVALID_PERIOD = "Invalid time spec"
PERIOD_HINT = "Valid examples: '3h', '4h30m'"
