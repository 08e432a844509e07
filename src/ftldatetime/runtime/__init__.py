"""Fluent runtime package.

Provides date/time values, the DATETIME function, message resolution,
and the FluentBundle API. Depends on syntax package for parsing.

Python 3.13+.
"""

from .bundle import FluentBundle
from .function_bridge import FunctionRegistry, fluent_function
from .functions import add_datetime_support, datetime_format
from .locale_context import LocaleContext
from .resolver import FluentResolver, ResolutionContext
from .value_types import (
    FluentDateTime,
    FluentDateTimeOptions,
    FluentFunction,
    FluentValue,
    FunctionSignature,
    merge_options,
)

__all__ = [
    "FluentBundle",
    "FluentDateTime",
    "FluentDateTimeOptions",
    "FluentFunction",
    "FluentResolver",
    "FluentValue",
    "FunctionRegistry",
    "FunctionSignature",
    "LocaleContext",
    "ResolutionContext",
    "add_datetime_support",
    "datetime_format",
    "fluent_function",
    "merge_options",
]
