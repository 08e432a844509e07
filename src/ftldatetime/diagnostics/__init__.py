"""Diagnostic system for Fluent errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FluentCyclicReferenceError,
    FluentError,
    FluentOptionError,
    FluentReferenceError,
    FluentRegistrationError,
    FluentResolutionError,
    FluentSyntaxError,
    FormattingError,
    RejectedOption,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FluentCyclicReferenceError",
    "FluentError",
    "FluentOptionError",
    "FluentReferenceError",
    "FluentRegistrationError",
    "FluentResolutionError",
    "FluentSyntaxError",
    "FormattingError",
    "OutputFormat",
    "RejectedOption",
]
