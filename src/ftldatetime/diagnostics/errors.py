"""Fluent exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Hierarchy:
    FluentError
    ├── FluentSyntaxError
    ├── FluentReferenceError
    │   └── FluentCyclicReferenceError
    ├── FluentResolutionError
    │   └── FormattingError
    │       └── FluentOptionError
    └── FluentRegistrationError

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = [
    "FluentCyclicReferenceError",
    "FluentError",
    "FluentOptionError",
    "FluentReferenceError",
    "FluentRegistrationError",
    "FluentResolutionError",
    "FluentSyntaxError",
    "FormattingError",
    "RejectedOption",
]


class FluentError(Exception):
    """Base exception for all Fluent errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FluentError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class FluentSyntaxError(FluentError):
    """FTL syntax error during parsing.

    Parser continues after syntax errors (robustness principle).
    Errors become Junk entries in AST.
    """


class FluentReferenceError(FluentError):
    """Unknown message or variable reference.

    Fallback: the reference rendered back in FTL syntax, e.g. {$date}.
    """


class FluentCyclicReferenceError(FluentReferenceError):
    """Cyclic reference detected (message references itself).

    Example:
        hello = { hello }  <- Infinite loop!
    """


class FluentResolutionError(FluentError):
    """Runtime error during message resolution.

    Examples:
    - Function not found
    - Wrong argument type passed to a function
    - Wrong number of positional arguments
    """


class FormattingError(FluentResolutionError):
    """Raised when locale-aware formatting does not fully succeed.

    Unlike silent fallbacks, this error propagates to the resolver for
    collection while still providing a usable value for the output.

    Attributes:
        fallback_value: String to use in output in place of the formatted value
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


@dataclass(frozen=True, slots=True)
class RejectedOption:
    """A named argument that DATETIME() skipped.

    Attributes:
        name: Argument name as written in FTL (or passed from Python)
        value: The value that was supplied
        reason: Why the argument was skipped
    """

    name: str
    value: object
    reason: str


class FluentOptionError(FormattingError):
    """Some named arguments were skipped; the value was formatted without them.

    The fallback_value holds the text produced from the accepted options,
    so the output stays correct for every option that was valid.

    Attributes:
        rejected: The skipped arguments, in call order
    """

    def __init__(
        self,
        message: str | Diagnostic,
        fallback_value: str,
        *,
        rejected: tuple[RejectedOption, ...] = (),
    ) -> None:
        super().__init__(message, fallback_value)
        self.rejected = rejected


class FluentRegistrationError(FluentError):
    """A function cannot be installed under a name that is already taken."""
