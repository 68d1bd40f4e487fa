"""Error class hierarchy tests."""

import pytest

from pytimeutils import MalformedPeriodError, TimeUtilsError, UnsupportedUnitError


class TestTimeUtilsErrorBase:
    def test_str_returns_user_message(self):
        err = TimeUtilsError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = TimeUtilsError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = TimeUtilsError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = TimeUtilsError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(TimeUtilsError("test"), Exception)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [UnsupportedUnitError, MalformedPeriodError]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_time_utils_error(self, cls):
        assert issubclass(cls, TimeUtilsError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_value_error(self, cls):
        assert issubclass(cls, ValueError)

    def test_unsupported_unit(self):
        err = UnsupportedUnitError("fortnights", "internal detail")
        assert str(err) == "Unsupported time unit: fortnights"
        assert err.value == "fortnights"
        assert err.internal() == "internal detail"
        assert err.wrapped is None

    def test_malformed_period(self):
        err = MalformedPeriodError("1w")
        assert str(err) == "Invalid time spec '1w' (Valid examples: '3h', '4h30m')"
        assert err.value == "1w"
        assert err.internal() == str(err)

    def test_malformed_period_wrapped(self):
        cause = RuntimeError("lexer")
        err = MalformedPeriodError("1w", "detail", wrapped=cause)
        assert err.wrapped is cause
        assert err.internal() == "detail"
