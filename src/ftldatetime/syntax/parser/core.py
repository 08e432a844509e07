"""Core Fluent FTL parser implementation.

This module provides the FluentParserV1 class that drives the grammar
rules in :mod:`ftldatetime.syntax.parser.rules` over a whole resource.

AST Types:
    The parser produces a :class:`~ftldatetime.syntax.ast.Resource` containing:

    - :class:`~ftldatetime.syntax.ast.Message` - Messages with a value pattern
    - :class:`~ftldatetime.syntax.ast.Junk` - Unparseable content (robustness principle)

    Comment lines are skipped.

Security:
    Includes configurable input size and nesting limits to prevent DoS
    via extremely large or deeply nested FTL sources.
"""

import logging

from ftldatetime.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from ftldatetime.diagnostics import DiagnosticCode
from ftldatetime.syntax.ast import Annotation, Junk, Message, Resource, Span
from ftldatetime.syntax.cursor import Cursor
from ftldatetime.syntax.parser.primitives import (
    clear_parse_error,
    get_last_parse_error,
    is_identifier_start,
    set_parse_error,
)
from ftldatetime.syntax.parser.rules import ParseContext, parse_message

__all__ = ["FluentParserV1"]

logger = logging.getLogger(__name__)


class FluentParserV1:
    """Fluent FTL parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Every rule returns ParseResult[T] | None (None indicates parse failure)
    - Failed entries become Junk and parsing resumes at the next entry

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        max_nesting_depth: Maximum allowed placeable nesting depth (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable the limit.
            max_nesting_depth: Maximum placeable nesting depth (default: 100).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed placeable nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> Resource:
        """Parse FTL source into AST Resource.

        Continues parsing after errors (robustness principle).

        Args:
            source: FTL file content

        Returns:
            Resource whose entries are Message or Junk nodes, in source order

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> resource = FluentParserV1().parse("hello = World")
            >>> resource.entries[0].id.name
            'hello'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size to increase the limit."
            )
            raise ValueError(msg)

        source = source.replace("\r\n", "\n")
        cursor = Cursor(source, 0)
        entries: list[Message | Junk] = []
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)

        while not cursor.is_eof:
            cursor = cursor.skip_whitespace()
            if cursor.is_eof:
                break

            at_line_start = cursor.pos == 0 or source[cursor.pos - 1] == "\n"

            if at_line_start and cursor.current == "#":
                cursor = cursor.skip_to_line_end().skip_line_end()
                continue

            clear_parse_error()
            if not at_line_start:
                set_parse_error("Entries must start at the beginning of a line", cursor.pos)
            elif cursor.current == "-":
                set_parse_error("Terms are not supported", cursor.pos)
            else:
                message_result = parse_message(cursor, context)
                if message_result is not None:
                    entries.append(message_result.value)
                    cursor = message_result.cursor
                    continue

            entries.append(self._make_junk(cursor))
            cursor = self._consume_junk_lines(cursor)

        logger.debug("Parsed %d entries from %d characters", len(entries), len(source))
        return Resource(entries=tuple(entries))

    def _make_junk(self, cursor: Cursor) -> Junk:
        junk_start = cursor.pos
        junk_end = self._consume_junk_lines(cursor).pos
        error = get_last_parse_error()
        if error is not None:
            annotation = Annotation(
                code=error.code,
                message=error.message,
                span=Span(start=error.position, end=error.position),
            )
        else:
            annotation = Annotation(
                code=DiagnosticCode.PARSE_JUNK.name,
                message="Parse error",
                span=Span(start=junk_start, end=junk_start),
            )
        return Junk(
            content=cursor.source[junk_start:junk_end],
            annotations=(annotation,),
            span=Span(start=junk_start, end=junk_end),
        )

    def _consume_junk_lines(self, cursor: Cursor) -> Cursor:
        """Consume junk lines until the next line that can start an entry.

        Junk ::= junk_line (junk_line - "#" - "-" - [a-zA-Z])*

        The first line is always consumed. Subsequent lines are consumed
        until one starts (at column 0) with '#', '-' or an ASCII letter.
        """
        cursor = cursor.skip_to_line_end().skip_line_end()

        while not cursor.is_eof:
            ch = cursor.current
            if ch in ("#", "-") or is_identifier_start(ch):
                break
            cursor = cursor.skip_to_line_end().skip_line_end()

        return cursor
