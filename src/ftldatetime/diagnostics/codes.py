"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing messages, variables)
        2000-2999: Resolution errors (runtime evaluation failures)
        3000-3999: Syntax errors (parser failures)
        6000-6999: Registration errors (function table conflicts)
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    VARIABLE_NOT_PROVIDED = 1005

    # Resolution errors (2000-2999)
    CYCLIC_REFERENCE = 2001
    FUNCTION_NOT_FOUND = 2003
    FUNCTION_FAILED = 2004
    UNKNOWN_EXPRESSION = 2005
    TYPE_MISMATCH = 2006
    INVALID_ARGUMENT = 2007
    MAX_DEPTH_EXCEEDED = 2010
    FUNCTION_ARITY_MISMATCH = 2011
    FORMATTING_FAILED = 2014

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    PARSE_JUNK = 3004
    PARSE_NESTING_DEPTH_EXCEEDED = 3005

    # Registration errors (6000-6999)
    FUNCTION_ALREADY_REGISTERED = 6001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        function_name: Function name where error occurred (format errors)
        argument_name: Argument name that caused error (format errors)
        expected_type: Expected type for argument (format errors)
        received_type: Actual type received (format errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TYPE_MISMATCH]: Type mismatch in DATETIME(): expected datetime, got str
              = function: DATETIME
              = argument: value
              = help: Pass a FluentDateTime, datetime or date value

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
