"""Enumerations for ftldatetime type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so DateStyle.FULL == "full" and
the FTL literal "full" converts with DateStyle("full").

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DateStyle",
    "DateTimeOption",
    "HourCycle",
    "TimeStyle",
]


class DateStyle(StrEnum):
    """Verbosity of the date portion, per CLDR dateFormats.

    Examples for 1989-11-09 in en-US:
    """

    FULL = "full"
    """Thursday, November 9, 1989"""

    LONG = "long"
    """November 9, 1989"""

    MEDIUM = "medium"
    """Nov 9, 1989"""

    SHORT = "short"
    """11/9/89"""


class TimeStyle(StrEnum):
    """Verbosity of the time portion, per CLDR timeFormats."""

    FULL = "full"
    """11:30:00 PM Coordinated Universal Time"""

    LONG = "long"
    """11:30:00 PM UTC"""

    MEDIUM = "medium"
    """11:30:00 PM"""

    SHORT = "short"
    """11:30 PM"""


class HourCycle(StrEnum):
    """Hour numbering convention, per Intl.DateTimeFormat hourCycle."""

    H11 = "h11"
    """12-hour clock, hours 0-11"""

    H12 = "h12"
    """12-hour clock, hours 1-12"""

    H23 = "h23"
    """24-hour clock, hours 0-23"""

    H24 = "h24"
    """24-hour clock, hours 1-24"""


class DateTimeOption(StrEnum):
    """Closed set of DATETIME() options, by FTL (camelCase) name.

    StrEnum provides automatic string conversion: str(DateTimeOption.DATE_STYLE) == "dateStyle"
    """

    DATE_STYLE = "dateStyle"
    TIME_STYLE = "timeStyle"
    HOUR_CYCLE = "hourCycle"
