"""The DATETIME function and its registration entry point.

Architecture:
    - datetime_format: Python implementation of FTL DATETIME()
    - Named arguments arrive camelCase (dateStyle) from FTL or snake_case
      (date_style) from Python and are validated by FluentDateTimeOptions.from_args
    - Stored wrapper options are merged with call-site overrides (override wins)
    - Locale-aware via LocaleContext (thread-safe, CLDR-based)
    - add_datetime_support: Installs DATETIME into a bundle's function table

Example:
    # Python API:
    datetime_format(FluentDateTime(dt), "en-US", dateStyle="full")

    # FTL file:
    today = { DATETIME($date, dateStyle: "full") }

Python 3.13+. Uses Babel for i18n.
"""

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from ftldatetime.constants import DATETIME_FUNCTION_NAME
from ftldatetime.diagnostics import (
    ErrorTemplate,
    FluentOptionError,
    FluentResolutionError,
    FormattingError,
    RejectedOption,
)

from .function_bridge import fluent_function
from .locale_context import LocaleContext
from .value_types import FluentDateTime, FluentDateTimeOptions, FluentValue, merge_options

if TYPE_CHECKING:
    from .bundle import FluentBundle

__all__ = ["add_datetime_support", "datetime_format"]

logger = logging.getLogger(__name__)


def _coerce_datetime(value: FluentValue) -> FluentDateTime:
    match value:
        case FluentDateTime():
            return value
        case datetime() | date():
            return FluentDateTime(value)
        case _:
            diagnostic = ErrorTemplate.type_mismatch(
                DATETIME_FUNCTION_NAME, "value", "FluentDateTime", type(value).__name__
            )
            raise FluentResolutionError(diagnostic)


@fluent_function(inject_locale=True)
def datetime_format(
    value: FluentValue,
    locale_code: str = "en-US",
    /,
    **options: FluentValue,
) -> str:
    """Format a date/time with locale-specific CLDR styles.

    Stored options of a FluentDateTime are merged with the named arguments;
    a named argument overrides the stored option with the same key. Plain
    datetime and date values are accepted and start with no stored options.

    Args:
        value: FluentDateTime, datetime or date
        locale_code: BCP 47 locale identifier (injected by the resolver)
        **options: dateStyle/timeStyle/hourCycle (or date_style, ...) as strings

    Returns:
        Formatted text (the resolver adds bidi isolation)

    Raises:
        FluentResolutionError: If value is not a date/time
        FormattingError: If Babel cannot format the value
        FluentOptionError: If some options were skipped. Its fallback_value
            is the text formatted from the valid options, or the ISO 8601
            text when Babel cannot format the value.

    Examples:
        >>> from datetime import datetime
        >>> dt = datetime(1989, 11, 9, 23, 30)
        >>> datetime_format(dt, "en-US")
        '11/9/89'
        >>> datetime_format(FluentDateTime(dt), "en-US", dateStyle="full")
        'Thursday, November 9, 1989'

    FTL Usage:
        born = Born { DATETIME($date, dateStyle: "long") }
        alarm = { DATETIME($time, timeStyle: "short", hourCycle: "h23") }
    """
    wrapper = _coerce_datetime(value)
    overrides, rejected = FluentDateTimeOptions.from_args(options)
    merged = merge_options(wrapper.options, overrides)

    try:
        formatted = LocaleContext.create(locale_code).format_datetime(
            wrapper.value,
            date_style=merged.date_style,
            time_style=merged.time_style,
            hour_cycle=merged.hour_cycle,
        )
    except FormattingError as e:
        if not rejected:
            raise
        # Keep the rejected options; the ISO fallback replaces the text
        logger.debug("%s() formatting failed: %s", DATETIME_FUNCTION_NAME, e)
        raise _option_error(rejected, e.fallback_value) from e

    if rejected:
        raise _option_error(rejected, formatted)

    return formatted


def _option_error(rejected: tuple[RejectedOption, ...], fallback: str) -> FluentOptionError:
    logger.debug(
        "%s() ignored options: %s",
        DATETIME_FUNCTION_NAME,
        "; ".join(f"{o.name}={o.value!r} ({o.reason})" for o in rejected),
    )
    names = [option.name for option in rejected]
    return FluentOptionError(
        ErrorTemplate.invalid_options(DATETIME_FUNCTION_NAME, names),
        fallback_value=fallback,
        rejected=rejected,
    )


def add_datetime_support(bundle: "FluentBundle") -> None:
    """Install DATETIME into bundle's function table.

    Equivalent to bundle.add_datetime_support().

    Raises:
        FluentRegistrationError: If another function already uses the name DATETIME
    """
    bundle.add_datetime_support()
