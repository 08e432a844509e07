"""Tests for datetime_format, the Python implementation of FTL DATETIME()."""

import logging
from datetime import date, datetime

import pytest
from babel import dates as babel_dates

from ftldatetime.diagnostics import (
    DiagnosticCode,
    FluentOptionError,
    FluentResolutionError,
    FormattingError,
)
from ftldatetime.enums import DateStyle, HourCycle, TimeStyle
from ftldatetime.runtime.functions import datetime_format
from ftldatetime.runtime.value_types import FluentDateTime, FluentDateTimeOptions


class TestDatetimeFormatValues:
    """Test accepted and rejected positional values."""

    def test_wrapper(self, berlin_wall: datetime) -> None:
        """FluentDateTime is the primary input."""
        assert datetime_format(FluentDateTime(berlin_wall), "en-US") == "11/9/89"

    def test_plain_datetime(self, berlin_wall: datetime) -> None:
        """A bare datetime is wrapped with empty options."""
        assert datetime_format(berlin_wall, "en-US", dateStyle="long") == "November 9, 1989"

    def test_plain_date(self) -> None:
        """A bare date is accepted."""
        assert datetime_format(date(1989, 11, 9), "en-US", dateStyle="medium") == "Nov 9, 1989"

    def test_default_locale(self, berlin_wall: datetime) -> None:
        """Locale defaults to en-US when called from Python."""
        assert datetime_format(berlin_wall) == "11/9/89"

    @pytest.mark.parametrize("bad", ["1989-11-09", 626657400, 1.5, None, True])
    def test_non_datetime_rejected(self, bad: object) -> None:
        """Anything else is a type mismatch."""
        with pytest.raises(FluentResolutionError) as exc_info:
            datetime_format(bad, "en-US")  # type: ignore[arg-type]

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.TYPE_MISMATCH
        assert diagnostic.function_name == "DATETIME"
        assert diagnostic.expected_type == "FluentDateTime"
        assert diagnostic.received_type == type(bad).__name__

    def test_type_mismatch_is_not_formatting_error(self) -> None:
        """A wrong type has no formatted text to fall back on."""
        with pytest.raises(FluentResolutionError) as exc_info:
            datetime_format("yesterday", "en-US")  # type: ignore[arg-type]

        assert not isinstance(exc_info.value, FormattingError)


class TestDatetimeFormatMerge:
    """Test stored options merged with call-site overrides."""

    def test_stored_options_used(self, berlin_wall: datetime) -> None:
        """Wrapper defaults apply when no override is given."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        assert datetime_format(value, "en-US") == "Thursday, November 9, 1989"

    def test_override_wins(self, berlin_wall: datetime) -> None:
        """A call-site value replaces the stored one."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        assert datetime_format(value, "en-US", dateStyle="short") == "11/9/89"

    def test_override_adds_to_stored(self, berlin_wall: datetime) -> None:
        """Overrides for other keys combine with stored ones."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        result = datetime_format(value, "en-US", timeStyle="short")

        assert result == "Thursday, November 9, 1989, 11:30\u202fPM"

    def test_stored_hour_cycle_with_override_time_style(self, berlin_wall: datetime) -> None:
        """Stored hourCycle applies to a time requested at the call site."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(hour_cycle=HourCycle.H23))

        assert datetime_format(value, "en-US", timeStyle="short") == "23:30"

    def test_wrapper_not_mutated(self, berlin_wall: datetime) -> None:
        """Formatting never changes the wrapper's options."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        datetime_format(value, "en-US", dateStyle="short", timeStyle="medium")

        assert value.options == FluentDateTimeOptions(date_style=DateStyle.FULL)

    def test_snake_case_from_python(self, berlin_wall: datetime) -> None:
        """Python callers may use snake_case names."""
        result = datetime_format(berlin_wall, "en-US", time_style="short", hour_cycle="h23")

        assert result == "23:30"

    def test_enum_members_accepted(self, berlin_wall: datetime) -> None:
        """StrEnum members are strings and pass validation."""
        result = datetime_format(berlin_wall, "en-US", timeStyle=TimeStyle.MEDIUM)

        assert result == "11:30:00\u202fPM"

    def test_locale_argument(self, berlin_wall: datetime) -> None:
        """The injected locale selects CLDR data."""
        assert datetime_format(berlin_wall, "de-DE", dateStyle="long") == "9. November 1989"


class TestDatetimeFormatInvalidOptions:
    """Test non-fatal handling of invalid options."""

    def test_unknown_option_raises_option_error(self, berlin_wall: datetime) -> None:
        """Unknown keys are reported but the valid part is formatted."""
        with pytest.raises(FluentOptionError) as exc_info:
            datetime_format(berlin_wall, "en-US", dateStyle="full", era="long")

        error = exc_info.value
        assert error.fallback_value == "Thursday, November 9, 1989"
        assert [r.name for r in error.rejected] == ["era"]
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.INVALID_ARGUMENT
        assert error.diagnostic.severity == "warning"
        assert "era" in error.diagnostic.message

    def test_invalid_value_falls_back_to_default(self, berlin_wall: datetime) -> None:
        """An invalid value leaves the key unset, so the default applies."""
        with pytest.raises(FluentOptionError) as exc_info:
            datetime_format(berlin_wall, "en-US", dateStyle="enormous")

        assert exc_info.value.fallback_value == "11/9/89"

    def test_invalid_override_keeps_stored_value(self, berlin_wall: datetime) -> None:
        """A rejected override does not erase the stored option."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        with pytest.raises(FluentOptionError) as exc_info:
            datetime_format(value, "en-US", dateStyle="enormous")

        assert exc_info.value.fallback_value == "Thursday, November 9, 1989"

    def test_all_rejections_in_one_error(self, berlin_wall: datetime) -> None:
        """Several bad options produce one error listing them all."""
        with pytest.raises(FluentOptionError) as exc_info:
            datetime_format(berlin_wall, "en-US", era="long", hourCycle="h25", weekday=1)

        assert [r.name for r in exc_info.value.rejected] == ["era", "hourCycle", "weekday"]

    def test_option_error_is_formatting_error(self, berlin_wall: datetime) -> None:
        """Resolvers handle it like any FormattingError."""
        with pytest.raises(FormattingError):
            datetime_format(berlin_wall, "en-US", era="long")

    def test_rejections_logged_at_debug(
        self, berlin_wall: datetime, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Rejected options are logged for troubleshooting."""
        with (
            caplog.at_level(logging.DEBUG, logger="ftldatetime.runtime.functions"),
            pytest.raises(FluentOptionError),
        ):
            datetime_format(berlin_wall, "en-US", era="long")

        assert "era='long'" in caplog.text

    def test_rejections_survive_backend_failure(
        self, berlin_wall: datetime, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A Babel failure still reports the skipped options."""

        def broken(*_args: object, **_kwargs: object) -> str:
            msg = "no data"
            raise ValueError(msg)

        monkeypatch.setattr(babel_dates, "format_date", broken)

        with pytest.raises(FluentOptionError) as exc_info:
            datetime_format(berlin_wall, "en-US", era="long")

        assert [r.name for r in exc_info.value.rejected] == ["era"]
        assert exc_info.value.fallback_value == "1989-11-09T23:30:00"
        assert isinstance(exc_info.value.__cause__, FormattingError)

    def test_backend_failure_without_rejections(
        self, berlin_wall: datetime, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """With valid options the plain FormattingError propagates."""

        def broken(*_args: object, **_kwargs: object) -> str:
            msg = "no data"
            raise ValueError(msg)

        monkeypatch.setattr(babel_dates, "format_date", broken)

        with pytest.raises(FormattingError) as exc_info:
            datetime_format(berlin_wall, "en-US", dateStyle="long")

        assert not isinstance(exc_info.value, FluentOptionError)
        assert exc_info.value.fallback_value == "1989-11-09T23:30:00"


class TestDatetimeFormatMarker:
    """Test the locale-injection marker."""

    def test_marked_for_locale_injection(self) -> None:
        """The resolver must append the bundle locale."""
        assert getattr(datetime_format, "_ftl_requires_locale", False) is True
        assert getattr(datetime_format, "_ftl_positional_args", None) == 1
