"""Fluent syntax parsing package.

Provides the parser and AST definitions. Separate from runtime so that
resources can be inspected without a bundle.

Python 3.13+.
"""

from .ast import (
    Annotation,
    CallArguments,
    Entry,
    FunctionReference,
    Identifier,
    InlineExpression,
    Junk,
    Message,
    MessageReference,
    NamedArgument,
    NumberLiteral,
    Pattern,
    PatternElement,
    Placeable,
    Resource,
    Span,
    StringLiteral,
    TextElement,
    VariableReference,
)
from .cursor import Cursor, ParseResult
from .parser import FluentParserV1

__all__ = [
    "Annotation",
    "CallArguments",
    "Cursor",
    "Entry",
    "FluentParserV1",
    "FunctionReference",
    "Identifier",
    "InlineExpression",
    "Junk",
    "Message",
    "MessageReference",
    "NamedArgument",
    "NumberLiteral",
    "ParseResult",
    "Pattern",
    "PatternElement",
    "Placeable",
    "Resource",
    "Span",
    "StringLiteral",
    "TextElement",
    "VariableReference",
    "parse",
]


def parse(source: str) -> Resource:
    """Parse FTL source into AST.

    Convenience function for FluentParserV1.parse().

    Example:
        >>> from ftldatetime.syntax import parse
        >>> resource = parse("hello = Hello, world!")
        >>> resource.entries[0].id.name
        'hello'
    """
    parser = FluentParserV1()
    return parser.parse(source)
