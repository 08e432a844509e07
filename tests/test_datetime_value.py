"""Tests for the FluentDateTime value wrapper."""

import copy
from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from ftldatetime.enums import DateStyle, HourCycle, TimeStyle
from ftldatetime.runtime.value_types import FluentDateTime, FluentDateTimeOptions


class TestFluentDateTimeConstruction:
    """Test construction from datetime, date and ISO text."""

    def test_from_datetime_has_empty_options(self, berlin_wall: datetime) -> None:
        """A new wrapper starts with no preferences."""
        value = FluentDateTime(berlin_wall)

        assert value.value == berlin_wall
        assert value.options.is_empty()

    def test_from_date_is_midnight(self) -> None:
        """A plain date becomes midnight of that day."""
        value = FluentDateTime(date(1989, 11, 9))

        assert value.value == datetime(1989, 11, 9, 0, 0)

    def test_aware_datetime_kept(self) -> None:
        """Timezone-aware values are stored unchanged."""
        aware = datetime(1989, 11, 9, 23, 30, tzinfo=UTC)

        assert FluentDateTime(aware).value.tzinfo is UTC

    def test_options_are_copied(self, berlin_wall: datetime) -> None:
        """The wrapper owns its options; the caller's record is not shared."""
        options = FluentDateTimeOptions(date_style=DateStyle.FULL)
        value = FluentDateTime(berlin_wall, options)

        options.set_date_style(DateStyle.SHORT)

        assert value.options.date_style is DateStyle.FULL

    @pytest.mark.parametrize("bad", ["1989-11-09", 626657400, 1.5, None])
    def test_non_date_rejected(self, bad: object) -> None:
        """Strings and timestamps are not date/times."""
        with pytest.raises(TypeError, match="expects datetime or date"):
            FluentDateTime(bad)  # type: ignore[arg-type]

    def test_from_isoformat(self, berlin_wall: datetime) -> None:
        """ISO 8601 text is parsed with datetime.fromisoformat."""
        value = FluentDateTime.from_isoformat(
            "1989-11-09T23:30:00", FluentDateTimeOptions(time_style=TimeStyle.SHORT)
        )

        assert value.value == berlin_wall
        assert value.options.time_style is TimeStyle.SHORT

    def test_from_isoformat_malformed(self) -> None:
        """Malformed text raises ValueError."""
        with pytest.raises(ValueError):
            FluentDateTime.from_isoformat("not a date")

    def test_value_is_read_only(self, berlin_wall: datetime) -> None:
        """The wrapped datetime cannot be reassigned."""
        value = FluentDateTime(berlin_wall)

        with pytest.raises(AttributeError):
            value.value = datetime(2000, 1, 1)  # type: ignore[misc]


class TestFluentDateTimeValueModel:
    """Test equality, duplication and display."""

    def test_equal_when_value_and_options_equal(self, berlin_wall: datetime) -> None:
        """Equality compares both fields."""
        a = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))
        b = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        assert a == b

    def test_not_equal_when_options_differ(self, berlin_wall: datetime) -> None:
        """Same datetime with different options are different values."""
        a = FluentDateTime(berlin_wall)
        b = FluentDateTime(berlin_wall, FluentDateTimeOptions(hour_cycle=HourCycle.H23))

        assert a != b

    def test_not_equal_when_value_differs(self, berlin_wall: datetime) -> None:
        """Different datetimes are different values."""
        assert FluentDateTime(berlin_wall) != FluentDateTime(datetime(1990, 10, 3))

    def test_same_instant_other_offset_not_equal(self) -> None:
        """Equal instants with different wall-clock times differ."""
        berlin = datetime(1989, 11, 9, 23, 30, tzinfo=timezone(timedelta(hours=2)))
        london = datetime(1989, 11, 9, 21, 30, tzinfo=UTC)

        assert berlin == london
        assert FluentDateTime(berlin) != FluentDateTime(london)

    def test_same_wall_clock_and_offset_equal(self) -> None:
        """Separate tzinfo objects with the same offset compare equal."""
        a = datetime(1989, 11, 9, 23, 30, tzinfo=timezone(timedelta(hours=1)))
        b = datetime(1989, 11, 9, 23, 30, tzinfo=timezone(timedelta(hours=1)))

        assert FluentDateTime(a) == FluentDateTime(b)

    def test_naive_not_equal_to_aware(self, berlin_wall: datetime) -> None:
        """A naive value never equals an aware one with the same fields."""
        aware = berlin_wall.replace(tzinfo=UTC)

        assert FluentDateTime(berlin_wall) != FluentDateTime(aware)

    def test_not_equal_to_raw_datetime(self, berlin_wall: datetime) -> None:
        """A wrapper never equals the bare datetime."""
        assert FluentDateTime(berlin_wall) != berlin_wall

    def test_unhashable(self, berlin_wall: datetime) -> None:
        """Mutable options make wrappers unhashable."""
        with pytest.raises(TypeError):
            hash(FluentDateTime(berlin_wall))

    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy, FluentDateTime.duplicate])
    def test_duplicate_is_deep(self, berlin_wall: datetime, duplicate: object) -> None:
        """Every copy path gives the copy its own options."""
        original = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL))

        clone = duplicate(original)  # type: ignore[operator]
        clone.options.set_date_style(DateStyle.SHORT)

        assert clone is not original
        assert clone.value == original.value
        assert original.options.date_style is DateStyle.FULL

    def test_with_options(self, berlin_wall: datetime) -> None:
        """with_options returns a new wrapper with the given options."""
        original = FluentDateTime(berlin_wall)
        options = FluentDateTimeOptions(time_style=TimeStyle.MEDIUM)

        changed = original.with_options(options)

        assert changed.options == options
        assert changed.options is not options
        assert original.options.is_empty()

    def test_str_is_isoformat(self, berlin_wall: datetime) -> None:
        """The human-readable fallback is ISO 8601."""
        assert str(FluentDateTime(berlin_wall)) == "1989-11-09T23:30:00"

    def test_repr_shows_options(self, berlin_wall: datetime) -> None:
        """repr names the class, the datetime and the options."""
        text = repr(FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.FULL)))

        assert text.startswith("FluentDateTime(datetime.datetime(1989, 11, 9, 23, 30)")
        assert "DateStyle.FULL" in text


class TestFluentDateTimeFormat:
    """Test FluentDateTime.format with stored options."""

    def test_default_is_short_date(self, berlin_wall: datetime) -> None:
        """No options: short numeric date."""
        assert FluentDateTime(berlin_wall).format("en-US") == "11/9/89"

    def test_stored_date_style(self, berlin_wall: datetime) -> None:
        """Stored dateStyle is used."""
        value = FluentDateTime(berlin_wall)
        value.options.set_date_style(DateStyle.FULL)

        assert value.format("en-US") == "Thursday, November 9, 1989"

    def test_mutation_after_construction_applies(self, berlin_wall: datetime) -> None:
        """Options set later are used by later formatting calls."""
        value = FluentDateTime(berlin_wall)
        before = value.format("en-US")
        value.options.set_time_style(TimeStyle.SHORT)

        assert before == "11/9/89"
        assert value.format("en-US") == "11:30\u202fPM"

    def test_same_wrapper_across_locales(self, berlin_wall: datetime) -> None:
        """One wrapper, one set of defaults, many locales."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(date_style=DateStyle.LONG))

        assert value.format("en-US") == "November 9, 1989"
        assert value.format("de-DE") == "9. November 1989"

    def test_deterministic(self, berlin_wall: datetime) -> None:
        """Formatting twice gives the same text."""
        value = FluentDateTime(berlin_wall, FluentDateTimeOptions(time_style=TimeStyle.MEDIUM))

        assert value.format("en-US") == value.format("en-US")
