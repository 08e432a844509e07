"""Primitive parsing utilities for Fluent FTL parser.

This module provides low-level parsers for identifiers, numbers,
and string literals.

Error Context:
    Parsers record why they failed via set_parse_error().
    Retrieve with get_last_parse_error() to annotate Junk entries.
"""

from dataclasses import dataclass
from decimal import Decimal
from threading import local as thread_local

from ftldatetime.diagnostics import DiagnosticCode
from ftldatetime.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ASCII_DIGITS",
    "ParseErrorContext",
    "clear_parse_error",
    "get_last_parse_error",
    "is_identifier_char",
    "is_identifier_start",
    "parse_identifier",
    "parse_number",
    "parse_number_value",
    "parse_string_literal",
    "set_parse_error",
]

# \uXXXX = 4 hex digits (BMP characters U+0000 to U+FFFF)
_UNICODE_ESCAPE_LEN_SHORT: int = 4

# \UXXXXXX = 6 hex digits (full Unicode range U+0000 to U+10FFFF)
_UNICODE_ESCAPE_LEN_LONG: int = 6

_MAX_UNICODE_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogates are invalid in isolation.
_SURROGATE_RANGE_START: int = 0xD800
_SURROGATE_RANGE_END: int = 0xDFFF

_HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ASCII digits only. str.isdigit() accepts characters like "²" that int() rejects.
ASCII_DIGITS: str = "0123456789"

_error_thread_local = thread_local()


@dataclass(frozen=True, slots=True)
class ParseErrorContext:
    """Context information for parse failures.

    Attributes:
        message: Human-readable error description
        position: Character position in source where error occurred
        code: DiagnosticCode name for the Junk annotation
    """

    message: str
    position: int
    code: str = DiagnosticCode.PARSE_JUNK.name


def set_parse_error(
    message: str, position: int, code: DiagnosticCode = DiagnosticCode.PARSE_JUNK
) -> None:
    """Store parse error context for later retrieval."""
    _error_thread_local.last_error = ParseErrorContext(
        message=message, position=position, code=code.name
    )


def get_last_parse_error() -> ParseErrorContext | None:
    """Get the last parse error context (if any)."""
    return getattr(_error_thread_local, "last_error", None)


def clear_parse_error() -> None:
    """Clear the last parse error context."""
    _error_thread_local.last_error = None


def is_identifier_start(ch: str) -> bool:
    """Identifiers start with an ASCII letter."""
    return ch.isascii() and ch.isalpha()


def is_identifier_char(ch: str) -> bool:
    """Identifiers continue with ASCII letters, digits, '-' or '_'."""
    return (ch.isascii() and ch.isalnum()) or ch in ("-", "_")


def parse_identifier(cursor: Cursor) -> ParseResult[str] | None:
    """Parse identifier: [a-zA-Z][a-zA-Z0-9_-]*

    Examples:
        hello → "hello"
        brand-name → "brand-name"
        file_name → "file_name"
    """
    if cursor.is_eof or not is_identifier_start(cursor.current):
        set_parse_error("Expected identifier (must start with a letter)", cursor.pos)
        return None

    start_pos = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof and is_identifier_char(cursor.current):
        cursor = cursor.advance()

    identifier = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(identifier, cursor)


def parse_number_value(num_str: str) -> int | Decimal:
    """Convert a number string to int, or Decimal when it has a fraction."""
    return int(num_str) if "." not in num_str else Decimal(num_str)


def parse_number(cursor: Cursor) -> ParseResult[str] | None:
    """Parse number literal: -?[0-9]+(.[0-9]+)?

    Returns the raw string representation. Use parse_number_value()
    to convert it for NumberLiteral construction.

    Examples:
        42 → "42"
        -3.14 → "-3.14"
    """
    start_pos = cursor.pos

    if not cursor.is_eof and cursor.current == "-":
        cursor = cursor.advance()

    if cursor.is_eof or cursor.current not in ASCII_DIGITS:
        set_parse_error("Expected number", cursor.pos)
        return None

    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()

    if not cursor.is_eof and cursor.current == ".":
        cursor = cursor.advance()
        if cursor.is_eof or cursor.current not in ASCII_DIGITS:
            set_parse_error("Expected digit after decimal point", cursor.pos)
            return None
        while not cursor.is_eof and cursor.current in ASCII_DIGITS:
            cursor = cursor.advance()

    number_str = Cursor(cursor.source, start_pos).slice_to(cursor.pos)
    return ParseResult(number_str, cursor)


def _parse_unicode_escape(cursor: Cursor, length: int) -> tuple[str, Cursor] | None:
    hex_digits = cursor.source[cursor.pos : cursor.pos + length]
    if len(hex_digits) < length or not all(c in _HEX_DIGITS for c in hex_digits):
        set_parse_error(
            f"Invalid Unicode escape (expected {length} hex digits)", cursor.pos
        )
        return None
    code_point = int(hex_digits, 16)
    if code_point > _MAX_UNICODE_CODE_POINT:
        set_parse_error(f"Invalid Unicode code point: U+{hex_digits}", cursor.pos)
        return None
    if _SURROGATE_RANGE_START <= code_point <= _SURROGATE_RANGE_END:
        set_parse_error(f"Invalid surrogate code point: U+{hex_digits}", cursor.pos)
        return None
    return (chr(code_point), cursor.advance(length))


def parse_escape_sequence(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Parse escape sequence after backslash in string.

    Supported escape sequences:
        \\" → "
        \\\\ → \\
        \\uXXXX → Unicode character (4 hex digits)
        \\UXXXXXX → Unicode character (6 hex digits)

    Args:
        cursor: Position AFTER the backslash
    """
    if cursor.is_eof:
        set_parse_error("Unexpected EOF in escape sequence", cursor.pos)
        return None

    match cursor.current:
        case '"':
            return ('"', cursor.advance())
        case "\\":
            return ("\\", cursor.advance())
        case "u":
            return _parse_unicode_escape(cursor.advance(), _UNICODE_ESCAPE_LEN_SHORT)
        case "U":
            return _parse_unicode_escape(cursor.advance(), _UNICODE_ESCAPE_LEN_LONG)
        case other:
            set_parse_error(f"Invalid escape sequence: \\{other}", cursor.pos)
            return None


def parse_string_literal(cursor: Cursor) -> ParseResult[str] | None:
    """Parse string literal: "text"

    Examples:
        "hello" → "hello"
        "with \\"quotes\\"" → 'with "quotes"'
        "unicode: \\u00E4" → "unicode: ä"
    """
    if cursor.is_eof or cursor.current != '"':
        set_parse_error("Expected opening quote", cursor.pos)
        return None

    cursor = cursor.advance()
    chars: list[str] = []

    while not cursor.is_eof:
        ch = cursor.current

        if ch == '"':
            return ParseResult("".join(chars), cursor.advance())

        if ch == "\n":
            break

        if ch == "\\":
            escape_result = parse_escape_sequence(cursor.advance())
            if escape_result is None:
                return None
            escaped_char, cursor = escape_result
            chars.append(escaped_char)
        else:
            chars.append(ch)
            cursor = cursor.advance()

    set_parse_error("Unterminated string literal", cursor.pos)
    return None
