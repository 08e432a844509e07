"""ftldatetime - Locale-aware DATETIME() for Fluent (FTL) messages.

Lets a calendar date/time take part in Fluent message formatting as a
first-class value that carries its own formatting preferences, and
formats it with CLDR rules at resolution time.

Public API:
    FluentBundle - Single-locale message formatting
    FluentDateTime - A datetime paired with its own formatting options
    FluentDateTimeOptions - dateStyle/timeStyle/hourCycle preferences
    merge_options - Call-site overrides applied on top of stored options
    datetime_format - The DATETIME() implementation
    add_datetime_support - Install DATETIME() into a bundle
    parse_ftl - Parse FTL source to AST
    FluentValue - Type alias for values accepted by formatting functions
    fluent_function - Decorator for custom functions (locale injection support)

Enumerations:
    DateStyle, TimeStyle, HourCycle, DateTimeOption

Exceptions:
    FluentError - Base exception class
    FluentSyntaxError - Parse errors
    FluentReferenceError - Unknown message/variable references
    FluentResolutionError - Runtime resolution errors
    FormattingError - Formatting failed; carries fallback text
    FluentOptionError - DATETIME() skipped invalid options
    FluentRegistrationError - DATETIME name already taken

Submodules:
    ftldatetime.syntax.ast - AST node types
    ftldatetime.diagnostics - Error types and diagnostic formatting
    ftldatetime.runtime.locale_context - Thread-safe LocaleContext for formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    FluentError,
    FluentOptionError,
    FluentReferenceError,
    FluentRegistrationError,
    FluentResolutionError,
    FluentSyntaxError,
    FormattingError,
)
from .enums import DateStyle, DateTimeOption, HourCycle, TimeStyle
from .runtime import (
    FluentBundle,
    FluentDateTime,
    FluentDateTimeOptions,
    FluentValue,
    add_datetime_support,
    datetime_format,
    fluent_function,
    merge_options,
)
from .syntax import parse as parse_ftl

# Version information - auto-populated from package metadata
try:
    __version__ = _get_version("ftldatetime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateStyle",
    "DateTimeOption",
    "FluentBundle",
    "FluentDateTime",
    "FluentDateTimeOptions",
    "FluentError",
    "FluentOptionError",
    "FluentReferenceError",
    "FluentRegistrationError",
    "FluentResolutionError",
    "FluentSyntaxError",
    "FluentValue",
    "FormattingError",
    "HourCycle",
    "TimeStyle",
    "__version__",
    "add_datetime_support",
    "datetime_format",
    "fluent_function",
    "merge_options",
    "parse_ftl",
]
