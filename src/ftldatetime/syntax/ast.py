"""Fluent AST (Abstract Syntax Tree) node definitions.

Covers the message subset understood by this package: messages whose
values mix text with placeables (literals, variables, message references
and function calls). Everything else the parser meets becomes Junk.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    "Annotation",
    "Identifier",
    # Resource structure
    "Resource",
    "Message",
    "Junk",
    # Pattern elements
    "Pattern",
    "TextElement",
    "Placeable",
    # Expressions
    "StringLiteral",
    "NumberLiteral",
    "VariableReference",
    "MessageReference",
    "FunctionReference",
    "CallArguments",
    "NamedArgument",
    # Type aliases
    "Entry",
    "PatternElement",
    "InlineExpression",
    "Literal",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "hello = world"
        Message span: Span(start=0, end=13)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Annotation:
    """Parse error annotation attached to Junk nodes.

    Attributes:
        code: DiagnosticCode name (e.g., "PARSE_JUNK")
        message: Human-readable error message
        span: Location of the error (optional)
    """

    code: str
    message: str
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class Identifier:
    """Identifier: [a-zA-Z][a-zA-Z0-9_-]*"""

    name: str


# ============================================================================
# TOP-LEVEL ENTRIES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Resource:
    """Root AST node containing all entries."""

    entries: tuple["Entry", ...]


@dataclass(frozen=True, slots=True)
class Message:
    """Message definition.

    Examples:
        hello = Hello, world!
        today = Today is { DATETIME($date, dateStyle: "full") }
    """

    id: Identifier
    value: "Pattern"
    span: Span | None = None

    @staticmethod
    def guard(entry: object) -> TypeIs["Message"]:
        """Type guard for Message (used in entry filtering)."""
        return isinstance(entry, Message)


@dataclass(frozen=True, slots=True)
class Junk:
    """Unparseable content (syntax error recovery).

    Attributes:
        content: The unparseable source text
        annotations: Parse errors with positions and messages
        span: Location of junk content in source

    Example:
        Junk(
            content="broken = { $date",
            annotations=(
                Annotation(
                    code="PARSE_JUNK",
                    message="Expected '}'",
                    span=Span(start=16, end=16),
                ),
            ),
            span=Span(start=0, end=16),
        )
    """

    content: str
    annotations: tuple[Annotation, ...] = ()
    span: Span | None = None

    @staticmethod
    def guard(entry: object) -> TypeIs["Junk"]:
        """Type guard for Junk (used in entry filtering)."""
        return isinstance(entry, Junk)


# ============================================================================
# PATTERNS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Pattern:
    """Text pattern with optional placeables."""

    elements: tuple["PatternElement", ...]


@dataclass(frozen=True, slots=True)
class TextElement:
    """Plain text segment."""

    value: str


@dataclass(frozen=True, slots=True)
class Placeable:
    """Dynamic content: { expression }"""

    expression: "InlineExpression"


# ============================================================================
# LITERALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """String literal: "text"

    Supports escape sequences:
        \\" → "
        \\\\ → \\
        \\u0000 → Unicode
    """

    value: str


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Number literal: 42 or 3.14

    Decimal keeps the source precision of fractional literals.
    """

    value: int | Decimal
    """Parsed numeric value."""

    raw: str
    """Original source representation."""


# ============================================================================
# REFERENCES
# ============================================================================


@dataclass(frozen=True, slots=True)
class VariableReference:
    """Variable reference: $variable"""

    id: Identifier


@dataclass(frozen=True, slots=True)
class MessageReference:
    """Message reference: message-id"""

    id: Identifier


@dataclass(frozen=True, slots=True)
class FunctionReference:
    """Function call: FUNCTION(arg1, key: "value")"""

    id: Identifier
    arguments: "CallArguments"


@dataclass(frozen=True, slots=True)
class CallArguments:
    """Function call arguments."""

    positional: tuple["InlineExpression", ...]
    named: tuple["NamedArgument", ...]


@dataclass(frozen=True, slots=True)
class NamedArgument:
    """Named argument: name: "literal" """

    name: Identifier
    value: "Literal"


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Entry = Message | Junk
type PatternElement = TextElement | Placeable
type Literal = StringLiteral | NumberLiteral
type InlineExpression = (
    StringLiteral
    | NumberLiteral
    | VariableReference
    | MessageReference
    | FunctionReference
    | Placeable
)
