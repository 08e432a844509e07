"""Core value types for the Fluent runtime.

Defines the types that flow through resolution:
    - FluentDateTimeOptions: Optional dateStyle/timeStyle/hourCycle preferences
    - FluentDateTime: A datetime paired with its own formatting preferences
    - merge_options: Call-site overrides applied on top of stored preferences
    - FluentValue: Union of all Fluent-compatible argument types
    - FluentFunction: Protocol for Fluent-callable functions
    - FunctionSignature: Immutable function metadata with calling conventions

Python 3.13+. Uses Babel (via LocaleContext) for FluentDateTime.format().
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType
from typing import Protocol

from ftldatetime.diagnostics import RejectedOption
from ftldatetime.enums import DateStyle, DateTimeOption, HourCycle, TimeStyle

from .locale_context import LocaleContext

__all__ = [
    "FluentDateTime",
    "FluentDateTimeOptions",
    "FluentFunction",
    "FluentValue",
    "FunctionSignature",
    "merge_options",
]

# Attribute name for marking functions that require locale injection.
# Used by FunctionRegistry.should_inject_locale() and @fluent_function decorator.
FTL_REQUIRES_LOCALE_ATTR: str = "_ftl_requires_locale"

# Number of positional FTL arguments a locale-injected function expects.
FTL_POSITIONAL_ARGS_ATTR: str = "_ftl_positional_args"

type OptionValue = DateStyle | TimeStyle | HourCycle

_OPTION_FIELDS: dict[DateTimeOption, str] = {
    DateTimeOption.DATE_STYLE: "date_style",
    DateTimeOption.TIME_STYLE: "time_style",
    DateTimeOption.HOUR_CYCLE: "hour_cycle",
}

_OPTION_TYPES: dict[DateTimeOption, type[OptionValue]] = {
    DateTimeOption.DATE_STYLE: DateStyle,
    DateTimeOption.TIME_STYLE: TimeStyle,
    DateTimeOption.HOUR_CYCLE: HourCycle,
}

# Accepted argument names: FTL camelCase and Python snake_case.
_ARGUMENT_KEYS: dict[str, DateTimeOption] = {
    **{option.value: option for option in DateTimeOption},
    **{name: option for option, name in _OPTION_FIELDS.items()},
}


@dataclass(slots=True)
class FluentDateTimeOptions:
    """Locale-formatting preferences for a date/time value.

    Every field is optional. An unset field is passed to the formatter as
    None and the formatter applies its own default.

    Attributes:
        date_style: Verbosity of the date portion
        time_style: Verbosity of the time portion
        hour_cycle: 12/24-hour convention and hour numbering

    Example:
        >>> options = FluentDateTimeOptions()
        >>> options.set(DateTimeOption.DATE_STYLE, DateStyle.FULL)
        >>> options.get(DateTimeOption.DATE_STYLE)
        <DateStyle.FULL: 'full'>
    """

    date_style: DateStyle | None = None
    time_style: TimeStyle | None = None
    hour_cycle: HourCycle | None = None

    def get(self, key: DateTimeOption) -> OptionValue | None:
        """Read one preference."""
        option = DateTimeOption(key)
        value: OptionValue | None = getattr(self, _OPTION_FIELDS[option])
        return value

    def set(self, key: DateTimeOption, value: OptionValue | None) -> None:
        """Set or clear (value=None) one preference.

        Raises:
            ValueError: If key is not a recognized option name
            TypeError: If value is not a member of the key's enumeration
        """
        option = DateTimeOption(key)
        expected = _OPTION_TYPES[option]
        if value is not None and not isinstance(value, expected):
            msg = (
                f"{option.value} expects {expected.__name__} or None, "
                f"got {type(value).__name__}"
            )
            raise TypeError(msg)
        setattr(self, _OPTION_FIELDS[option], value)

    def set_date_style(self, value: DateStyle | None) -> None:
        """Set or clear the date style."""
        self.set(DateTimeOption.DATE_STYLE, value)

    def set_time_style(self, value: TimeStyle | None) -> None:
        """Set or clear the time style."""
        self.set(DateTimeOption.TIME_STYLE, value)

    def set_hour_cycle(self, value: HourCycle | None) -> None:
        """Set or clear the hour cycle."""
        self.set(DateTimeOption.HOUR_CYCLE, value)

    def is_empty(self) -> bool:
        """True when no preference is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    @classmethod
    def from_args(
        cls, named: Mapping[str, object]
    ) -> tuple["FluentDateTimeOptions", tuple[RejectedOption, ...]]:
        """Build options from FTL named arguments, skipping invalid ones.

        Keys may be camelCase (dateStyle) or snake_case (date_style). Values
        must be strings naming a member of the key's enumeration; None leaves
        the preference unset.

        Returns:
            Tuple of (options built from accepted pairs, rejected pairs in order)

        Example:
            >>> options, rejected = FluentDateTimeOptions.from_args(
            ...     {"dateStyle": "full", "era": "long"}
            ... )
            >>> options.date_style
            <DateStyle.FULL: 'full'>
            >>> [r.name for r in rejected]
            ['era']
        """
        options = cls()
        rejected: list[RejectedOption] = []

        for name, value in named.items():
            option = _ARGUMENT_KEYS.get(name)
            if option is None:
                rejected.append(RejectedOption(name, value, "unknown option"))
                continue
            if value is None:
                continue

            enum_type = _OPTION_TYPES[option]
            allowed = ", ".join(member.value for member in enum_type)
            if not isinstance(value, str):
                reason = f"expected a string ({allowed}), got {type(value).__name__}"
                rejected.append(RejectedOption(name, value, reason))
                continue
            try:
                member = enum_type(value)
            except ValueError:
                rejected.append(RejectedOption(name, value, f"expected one of {allowed}"))
                continue
            setattr(options, _OPTION_FIELDS[option], member)

        return options, tuple(rejected)


def merge_options(
    base: FluentDateTimeOptions, override: FluentDateTimeOptions
) -> FluentDateTimeOptions:
    """Combine stored preferences with call-site overrides.

    For every key the override's value wins if set, else the base's value
    is kept. Neither argument is modified.

    Example:
        >>> base = FluentDateTimeOptions(date_style=DateStyle.FULL)
        >>> override = FluentDateTimeOptions(time_style=TimeStyle.SHORT)
        >>> merged = merge_options(base, override)
        >>> (merged.date_style, merged.time_style)
        (<DateStyle.FULL: 'full'>, <TimeStyle.SHORT: 'short'>)
    """
    return FluentDateTimeOptions(
        date_style=override.date_style if override.date_style is not None else base.date_style,
        time_style=override.time_style if override.time_style is not None else base.time_style,
        hour_cycle=override.hour_cycle if override.hour_cycle is not None else base.hour_cycle,
    )


class FluentDateTime:
    """A calendar date/time carrying its own formatting preferences.

    Pass instances as message arguments. DATETIME() formats them with
    their stored options merged with any call-site overrides; a bare
    { $date } placeable formats them with the stored options alone.

    A plain date is converted to midnight of that day. The datetime is
    read-only; options are mutable and owned by this wrapper.

    Aware values are formatted in their own zone. Naive values have no
    zone, so a long or full timeStyle renders them like medium.

    Equality compares wall-clock fields, zone and UTC offset, not the instant:
    23:30+02:00 and 21:30+00:00 format differently and are unequal.

    Example:
        >>> from datetime import datetime
        >>> value = FluentDateTime(datetime(1989, 11, 9, 23, 30))
        >>> value.options.set_date_style(DateStyle.FULL)
        >>> value.format("en-US")
        'Thursday, November 9, 1989'
        >>> str(value)
        '1989-11-09T23:30:00'
    """

    __slots__ = ("_value", "options")

    # Options are mutable
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: datetime | date,
        options: FluentDateTimeOptions | None = None,
    ) -> None:
        if isinstance(value, datetime):
            self._value = value
        elif isinstance(value, date):
            self._value = datetime.combine(value, time())
        else:
            msg = f"FluentDateTime expects datetime or date, got {type(value).__name__}"
            raise TypeError(msg)
        self.options = replace(options) if options is not None else FluentDateTimeOptions()

    @classmethod
    def from_isoformat(
        cls, text: str, options: FluentDateTimeOptions | None = None
    ) -> "FluentDateTime":
        """Construct from ISO 8601 text (raises ValueError if malformed)."""
        return cls(datetime.fromisoformat(text), options)

    @property
    def value(self) -> datetime:
        """The wrapped datetime."""
        return self._value

    def with_options(self, options: FluentDateTimeOptions) -> "FluentDateTime":
        """Return a new wrapper for the same datetime with a copy of options."""
        return FluentDateTime(self._value, options)

    def duplicate(self) -> "FluentDateTime":
        """Return an independent copy (options are copied too)."""
        return FluentDateTime(self._value, self.options)

    def __copy__(self) -> "FluentDateTime":
        return self.duplicate()

    def __deepcopy__(self, memo: dict[int, object]) -> "FluentDateTime":
        return self.duplicate()

    def format(self, locale_code: str = "en-US") -> str:
        """Format with the stored options for the given locale.

        Raises:
            FormattingError: If Babel cannot format the value
        """
        return LocaleContext.create(locale_code).format_datetime(
            self._value,
            date_style=self.options.date_style,
            time_style=self.options.time_style,
            hour_cycle=self.options.hour_cycle,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FluentDateTime):
            return NotImplemented
        return (
            self._value.replace(tzinfo=None) == other._value.replace(tzinfo=None)
            and self._value.tzinfo == other._value.tzinfo
            and self._value.utcoffset() == other._value.utcoffset()
            and self.options == other.options
        )

    def __str__(self) -> str:
        return self._value.isoformat()

    def __repr__(self) -> str:
        return f"FluentDateTime({self._value!r}, {self.options!r})"


# Type alias for Fluent-compatible argument and function return values.
type FluentValue = (
    str
    | int
    | float
    | bool
    | Decimal
    | datetime
    | date
    | FluentDateTime
    | None
)


class FluentFunction(Protocol):
    """Protocol for Fluent-compatible functions.

    Functions must accept:
    - value: The primary value to format (positional)
    - locale_code: The locale code (positional, injected by the resolver)
    - **kwargs: Named arguments (keyword-only)
    """

    def __call__(
        self,
        value: FluentValue,
        locale_code: str,
        /,
        **kwargs: FluentValue,
    ) -> FluentValue:
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class FunctionSignature:
    """Function metadata with calling convention mappings.

    Attributes:
        python_name: Function name in Python (snake_case)
        ftl_name: Function name in FTL files (UPPERCASE)
        param_mapping: FTL camelCase to Python snake_case pairs, sorted
        callable: The actual Python function
        param_dict: Read-only dict view of param_mapping for O(1) lookup
    """

    python_name: str
    ftl_name: str
    param_mapping: tuple[tuple[str, str], ...]
    callable: Callable[..., FluentValue]
    param_dict: MappingProxyType[str, str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Compute cached dict view from param_mapping."""
        object.__setattr__(
            self, "param_dict", MappingProxyType(dict(self.param_mapping))
        )
