"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only needed for errors)

Line endings are normalized to LF before a cursor is created.
"""

from dataclasses import dataclass

from ftldatetime.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_spaces(self) -> "Cursor":
        """Skip space characters (U+0020 only, not tabs or newlines)."""
        c = self
        while not c.is_eof and c.current == " ":
            c = c.advance()
        return c

    def skip_whitespace(self) -> "Cursor":
        """Skip spaces and newlines."""
        c = self
        while not c.is_eof and c.current in (" ", "\n"):
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("(x)", 0).expect("(").pos
            1
            >>> Cursor("x", 0).expect("(") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next newline (or EOF) without consuming it."""
        c = self
        while not c.is_eof and c.current != "\n":
            c = c.advance()
        return c

    def skip_line_end(self) -> "Cursor":
        """Consume a newline if the cursor is on one."""
        if not self.is_eof and self.current == "\n":
            return self.advance()
        return self

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-based (line, column) of the current position.

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        line_start = self.source.rfind("\n", 0, self.pos) + 1
        return (line, self.pos - line_start + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every rule has the signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
