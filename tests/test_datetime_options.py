"""Tests for FluentDateTimeOptions and merge_options.

Validates setters, argument parsing at the FTL boundary, and merge precedence.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftldatetime.diagnostics import RejectedOption
from ftldatetime.enums import DateStyle, DateTimeOption, HourCycle, TimeStyle
from ftldatetime.runtime.value_types import FluentDateTimeOptions, merge_options

# ============================================================================
# STRATEGIES
# ============================================================================

options_strategy = st.builds(
    FluentDateTimeOptions,
    date_style=st.none() | st.sampled_from(DateStyle),
    time_style=st.none() | st.sampled_from(TimeStyle),
    hour_cycle=st.none() | st.sampled_from(HourCycle),
)


# ============================================================================
# SETTERS AND GETTERS
# ============================================================================


class TestOptionsSetGet:
    """Test FluentDateTimeOptions.set/get and typed setters."""

    def test_new_options_are_empty(self) -> None:
        """A fresh record has every preference unset."""
        options = FluentDateTimeOptions()

        assert options.date_style is None
        assert options.time_style is None
        assert options.hour_cycle is None
        assert options.is_empty()

    def test_set_and_get_each_key(self) -> None:
        """set() stores a value that get() returns."""
        options = FluentDateTimeOptions()
        options.set(DateTimeOption.DATE_STYLE, DateStyle.FULL)
        options.set(DateTimeOption.TIME_STYLE, TimeStyle.SHORT)
        options.set(DateTimeOption.HOUR_CYCLE, HourCycle.H23)

        assert options.get(DateTimeOption.DATE_STYLE) is DateStyle.FULL
        assert options.get(DateTimeOption.TIME_STYLE) is TimeStyle.SHORT
        assert options.get(DateTimeOption.HOUR_CYCLE) is HourCycle.H23
        assert not options.is_empty()

    def test_set_accepts_ftl_key_string(self) -> None:
        """StrEnum keys can be given by their FTL name."""
        options = FluentDateTimeOptions()
        options.set("dateStyle", DateStyle.LONG)  # type: ignore[arg-type]

        assert options.date_style is DateStyle.LONG

    def test_set_none_clears(self) -> None:
        """Setting None clears a previously set preference."""
        options = FluentDateTimeOptions(date_style=DateStyle.FULL)
        options.set(DateTimeOption.DATE_STYLE, None)

        assert options.date_style is None

    def test_set_wrong_enum_type_raises(self) -> None:
        """A TimeStyle is not a valid dateStyle."""
        options = FluentDateTimeOptions()

        with pytest.raises(TypeError, match="dateStyle expects DateStyle"):
            options.set(DateTimeOption.DATE_STYLE, TimeStyle.FULL)  # type: ignore[arg-type]

    def test_set_plain_string_raises(self) -> None:
        """Plain strings are rejected at the Python API."""
        options = FluentDateTimeOptions()

        with pytest.raises(TypeError):
            options.set(DateTimeOption.HOUR_CYCLE, "h23")  # type: ignore[arg-type]

    def test_set_unknown_key_raises(self) -> None:
        """Keys outside the closed set are not representable."""
        options = FluentDateTimeOptions()

        with pytest.raises(ValueError, match="era"):
            options.set("era", DateStyle.FULL)  # type: ignore[arg-type]

    def test_typed_setters(self) -> None:
        """set_date_style/set_time_style/set_hour_cycle delegate to set()."""
        options = FluentDateTimeOptions()
        options.set_date_style(DateStyle.MEDIUM)
        options.set_time_style(TimeStyle.LONG)
        options.set_hour_cycle(HourCycle.H11)

        assert options == FluentDateTimeOptions(
            date_style=DateStyle.MEDIUM,
            time_style=TimeStyle.LONG,
            hour_cycle=HourCycle.H11,
        )

    def test_options_equality_is_by_value(self) -> None:
        """Two records with the same preferences are equal."""
        assert FluentDateTimeOptions(date_style=DateStyle.FULL) == FluentDateTimeOptions(
            date_style=DateStyle.FULL
        )
        assert FluentDateTimeOptions(date_style=DateStyle.FULL) != FluentDateTimeOptions()


# ============================================================================
# FTL ARGUMENT BOUNDARY
# ============================================================================


class TestOptionsFromArgs:
    """Test FluentDateTimeOptions.from_args."""

    def test_camel_case_keys(self) -> None:
        """FTL camelCase names are accepted."""
        options, rejected = FluentDateTimeOptions.from_args(
            {"dateStyle": "full", "timeStyle": "short", "hourCycle": "h12"}
        )

        assert rejected == ()
        assert options.date_style is DateStyle.FULL
        assert options.time_style is TimeStyle.SHORT
        assert options.hour_cycle is HourCycle.H12

    def test_snake_case_keys(self) -> None:
        """Python snake_case names are accepted."""
        options, rejected = FluentDateTimeOptions.from_args(
            {"date_style": "long", "hour_cycle": "h24"}
        )

        assert rejected == ()
        assert options.date_style is DateStyle.LONG
        assert options.hour_cycle is HourCycle.H24

    def test_empty_args(self) -> None:
        """No arguments produce an empty record."""
        options, rejected = FluentDateTimeOptions.from_args({})

        assert options.is_empty()
        assert rejected == ()

    def test_none_value_leaves_unset(self) -> None:
        """None is treated as 'not given', not as an error."""
        options, rejected = FluentDateTimeOptions.from_args({"dateStyle": None})

        assert options.date_style is None
        assert rejected == ()

    def test_unknown_key_rejected(self) -> None:
        """Unrecognized keys are skipped and reported."""
        options, rejected = FluentDateTimeOptions.from_args(
            {"dateStyle": "full", "era": "long"}
        )

        assert options.date_style is DateStyle.FULL
        assert rejected == (RejectedOption("era", "long", "unknown option"),)

    def test_invalid_enum_value_rejected(self) -> None:
        """Values outside the enumeration are skipped and reported."""
        options, rejected = FluentDateTimeOptions.from_args({"dateStyle": "huge"})

        assert options.date_style is None
        assert len(rejected) == 1
        assert rejected[0].name == "dateStyle"
        assert rejected[0].value == "huge"
        assert "full, long, medium, short" in rejected[0].reason

    def test_non_string_value_rejected(self) -> None:
        """Numbers are not valid style names."""
        options, rejected = FluentDateTimeOptions.from_args({"hourCycle": 23})

        assert options.hour_cycle is None
        assert len(rejected) == 1
        assert "int" in rejected[0].reason

    def test_values_are_case_sensitive(self) -> None:
        """'FULL' is not 'full'."""
        _, rejected = FluentDateTimeOptions.from_args({"dateStyle": "FULL"})

        assert [r.name for r in rejected] == ["dateStyle"]

    def test_rejections_keep_call_order(self) -> None:
        """Rejected options are reported in the order they were given."""
        _, rejected = FluentDateTimeOptions.from_args(
            {"zeta": 1, "timeStyle": "tiny", "alpha": 2}
        )

        assert [r.name for r in rejected] == ["zeta", "timeStyle", "alpha"]

    @given(st.sampled_from(DateStyle), st.sampled_from(TimeStyle), st.sampled_from(HourCycle))
    def test_every_member_parses(
        self, date_style: DateStyle, time_style: TimeStyle, hour_cycle: HourCycle
    ) -> None:
        """Every enumeration member is accepted by its FTL string."""
        options, rejected = FluentDateTimeOptions.from_args(
            {
                "dateStyle": str(date_style),
                "timeStyle": str(time_style),
                "hourCycle": str(hour_cycle),
            }
        )

        assert rejected == ()
        assert options == FluentDateTimeOptions(date_style, time_style, hour_cycle)


# ============================================================================
# MERGE
# ============================================================================


class TestMergeOptions:
    """Test merge_options precedence and purity."""

    def test_override_wins(self) -> None:
        """A set override replaces the base value."""
        base = FluentDateTimeOptions(date_style=DateStyle.FULL)
        override = FluentDateTimeOptions(date_style=DateStyle.SHORT)

        assert merge_options(base, override).date_style is DateStyle.SHORT

    def test_base_kept_when_override_unset(self) -> None:
        """Unset overrides leave the base value in place."""
        base = FluentDateTimeOptions(date_style=DateStyle.FULL, hour_cycle=HourCycle.H23)
        override = FluentDateTimeOptions(time_style=TimeStyle.SHORT)

        merged = merge_options(base, override)

        assert merged == FluentDateTimeOptions(
            date_style=DateStyle.FULL,
            time_style=TimeStyle.SHORT,
            hour_cycle=HourCycle.H23,
        )

    def test_both_empty(self) -> None:
        """Merging two empty records yields an empty record."""
        assert merge_options(FluentDateTimeOptions(), FluentDateTimeOptions()).is_empty()

    def test_inputs_not_modified(self) -> None:
        """merge_options returns a new record."""
        base = FluentDateTimeOptions(date_style=DateStyle.FULL)
        override = FluentDateTimeOptions(date_style=DateStyle.SHORT)

        merged = merge_options(base, override)

        assert merged is not base
        assert merged is not override
        assert base.date_style is DateStyle.FULL
        assert override.date_style is DateStyle.SHORT

    @given(options_strategy, options_strategy)
    def test_precedence_property(
        self, base: FluentDateTimeOptions, override: FluentDateTimeOptions
    ) -> None:
        """PROPERTY: merged[k] == override[k] if set else base[k]."""
        merged = merge_options(base, override)

        for key in DateTimeOption:
            expected = override.get(key) if override.get(key) is not None else base.get(key)
            assert merged.get(key) == expected

    @given(options_strategy)
    def test_empty_override_is_identity(self, base: FluentDateTimeOptions) -> None:
        """PROPERTY: merging an empty override returns an equal record."""
        assert merge_options(base, FluentDateTimeOptions()) == base

    @given(options_strategy)
    def test_empty_base_yields_override(self, override: FluentDateTimeOptions) -> None:
        """PROPERTY: merging onto an empty base returns the override's values."""
        assert merge_options(FluentDateTimeOptions(), override) == override
