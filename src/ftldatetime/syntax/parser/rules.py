"""Grammar rules for the supported FTL subset.

Each rule takes an immutable Cursor and returns ParseResult[T] | None.
A None result means the rule failed; the reason is recorded with
set_parse_error() so the entry parser can annotate the resulting Junk.

Supported:
    message      ::= Identifier blank_inline? "=" blank_inline? Pattern
    Pattern      ::= (text | continuation | Placeable)+
    Placeable    ::= "{" blank? InlineExpression blank? "}"
    InlineExpression ::= StringLiteral | NumberLiteral | VariableReference
                       | MessageReference | FunctionReference | Placeable
    CallArguments ::= "(" blank? (Argument ("," blank? Argument)*)? blank? ")"

Terms, select expressions and attributes are rejected with a reason.
"""

from dataclasses import dataclass

from ftldatetime.constants import MAX_DEPTH
from ftldatetime.diagnostics import DiagnosticCode, ErrorTemplate
from ftldatetime.syntax.ast import (
    CallArguments,
    FunctionReference,
    Identifier,
    InlineExpression,
    Message,
    MessageReference,
    NamedArgument,
    NumberLiteral,
    Pattern,
    PatternElement,
    Placeable,
    Span,
    StringLiteral,
    TextElement,
    VariableReference,
)
from ftldatetime.syntax.cursor import Cursor, ParseResult
from ftldatetime.syntax.parser.primitives import (
    ASCII_DIGITS,
    is_identifier_start,
    parse_identifier,
    parse_number,
    parse_number_value,
    parse_string_literal,
    set_parse_error,
)

__all__ = [
    "ParseContext",
    "is_indented_continuation",
    "parse_call_arguments",
    "parse_function_reference",
    "parse_inline_expression",
    "parse_message",
    "parse_pattern",
    "parse_placeable",
]


@dataclass(slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Attributes:
        max_nesting_depth: Maximum allowed nesting depth for placeables
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_placeable(self) -> "ParseContext":
        """Create new context with incremented depth for entering a placeable."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


# =============================================================================
# Whitespace
# =============================================================================


def is_indented_continuation(cursor: Cursor) -> bool:
    """Check if the line after cursor continues the current pattern.

    Continuation lines start with at least one space. Blank lines in
    between are allowed. Lines whose first non-space character is one of
    '[', '*', '.' or '}' never continue a pattern.

    Args:
        cursor: Position at a newline character
    """
    if cursor.is_eof or cursor.current != "\n":
        return False

    line = cursor.advance()
    while True:
        content = line.skip_spaces()
        if content.is_eof:
            return False
        if content.current != "\n":
            break
        line = content.advance()

    if content.pos == line.pos:
        # No indentation
        return False
    return content.current not in ("[", "*", ".", "}")


# =============================================================================
# Pattern Parsing
# =============================================================================


def _append_text(elements: list[PatternElement], text: str) -> None:
    if not text:
        return
    if elements and isinstance(elements[-1], TextElement):
        elements[-1] = TextElement(value=elements[-1].value + text)
    else:
        elements.append(TextElement(value=text))


def _dedent(elements: list[PatternElement], indents: list[int]) -> list[PatternElement]:
    """Remove the indentation shared by every continuation line."""
    if not indents or min(indents) == 0:
        return elements
    prefix = "\n" + " " * min(indents)
    return [
        TextElement(value=elem.value.replace(prefix, "\n"))
        if isinstance(elem, TextElement)
        else elem
        for elem in elements
    ]


def _trim(elements: list[PatternElement]) -> tuple[PatternElement, ...]:
    """Strip leading blank space and trailing whitespace from a pattern."""
    result = list(elements)

    while result and isinstance(result[0], TextElement):
        stripped = result[0].value.lstrip(" \n")
        if stripped:
            result[0] = TextElement(value=stripped)
            break
        result.pop(0)

    while result and isinstance(result[-1], TextElement):
        stripped = result[-1].value.rstrip(" \n")
        if stripped:
            result[-1] = TextElement(value=stripped)
            break
        result.pop()

    return tuple(result)


def parse_pattern(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[Pattern] | None:
    """Parse a message value with multi-line continuation support.

    Continuation lines are joined with newlines. The smallest indentation
    among them is removed from each one, so relative indentation survives.

    Examples:
        "Hello"  -> Pattern([TextElement("Hello")])
        "Hi { $name }"  -> Pattern([TextElement("Hi "), Placeable(...)])

    Args:
        cursor: Position after '=' and any inline spaces
        context: Parse context for depth tracking

    Returns:
        ParseResult with Pattern on success, None on parse error
    """
    elements: list[PatternElement] = []
    indents: list[int] = []

    while not cursor.is_eof:
        ch = cursor.current

        if ch == "\n":
            if not is_indented_continuation(cursor):
                break
            cursor = cursor.advance()
            newlines = "\n"
            line_start = cursor
            cursor = cursor.skip_spaces()
            while not cursor.is_eof and cursor.current == "\n":
                newlines += "\n"
                line_start = cursor.advance()
                cursor = line_start.skip_spaces()
            indent = cursor.pos - line_start.pos
            indents.append(indent)
            _append_text(elements, newlines + " " * indent)
            continue

        if ch == "{":
            placeable_result = parse_placeable(cursor.advance(), context)
            if placeable_result is None:
                return None
            elements.append(placeable_result.value)
            cursor = placeable_result.cursor
            continue

        text_start = cursor.pos
        while not cursor.is_eof and cursor.current not in ("{", "\n"):
            cursor = cursor.advance()
        _append_text(elements, cursor.source[text_start : cursor.pos])

    pattern = Pattern(elements=_trim(_dedent(elements, indents)))
    return ParseResult(pattern, cursor)


# =============================================================================
# Expression Parsing
# =============================================================================


def parse_variable_reference(cursor: Cursor) -> ParseResult[VariableReference] | None:
    """Parse variable reference: $variable"""
    if cursor.is_eof or cursor.current != "$":
        set_parse_error("Expected '$'", cursor.pos)
        return None

    result = parse_identifier(cursor.advance())
    if result is None:
        return None
    return ParseResult(VariableReference(id=Identifier(result.value)), result.cursor)


def _parse_number_literal(cursor: Cursor) -> ParseResult[InlineExpression] | None:
    num_result = parse_number(cursor)
    if num_result is None:
        return None
    num_str = num_result.value
    literal = NumberLiteral(value=parse_number_value(num_str), raw=num_str)
    return ParseResult(literal, num_result.cursor)


def _parse_identifier_expression(
    cursor: Cursor,
    context: ParseContext,
) -> ParseResult[InlineExpression] | None:
    """Parse function call or message reference."""
    id_result = parse_identifier(cursor)
    if id_result is None:
        return None

    after_id = id_result.cursor
    if not after_id.is_eof and after_id.current == "(":
        return parse_function_reference(cursor, context)

    if not after_id.is_eof and after_id.current == ".":
        set_parse_error("Message attributes are not supported", after_id.pos)
        return None

    return ParseResult(MessageReference(id=Identifier(id_result.value)), after_id)


def parse_inline_expression(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[InlineExpression] | None:
    """Parse an inline expression, dispatching on its first character.

    Handles:
    - Variable references: $var
    - String literals: "text"
    - Number literals: 42 or -1.5
    - Function calls: DATETIME($date)
    - Message references: identifier
    - Nested placeables: { expr }
    """
    if context is None:
        context = ParseContext()

    if cursor.is_eof:
        set_parse_error("Expected an expression", cursor.pos)
        return None

    ch = cursor.current
    match ch:
        case "$":
            var_result = parse_variable_reference(cursor)
            if var_result is None:
                return None
            return ParseResult(var_result.value, var_result.cursor)

        case '"':
            str_result = parse_string_literal(cursor)
            if str_result is None:
                return None
            return ParseResult(StringLiteral(value=str_result.value), str_result.cursor)

        case "-":
            next_ch = cursor.peek(1)
            if next_ch is not None and is_identifier_start(next_ch):
                set_parse_error("Term references are not supported", cursor.pos)
                return None
            return _parse_number_literal(cursor)

        case "{":
            placeable_result = parse_placeable(cursor.advance(), context)
            if placeable_result is None:
                return None
            return ParseResult(placeable_result.value, placeable_result.cursor)

        case _ if ch in ASCII_DIGITS:
            return _parse_number_literal(cursor)

        case _ if is_identifier_start(ch):
            return _parse_identifier_expression(cursor, context)

        case _:
            set_parse_error(f"Expected an expression, found '{ch}'", cursor.pos)
            return None


def parse_call_arguments(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[CallArguments] | None:
    """Parse function call arguments: (pos1, name1: "val1", name2: 2)

    Positional arguments must come before named arguments. Named argument
    values must be literals and their names must be unique.

    Args:
        cursor: Position AFTER the opening '('
        context: Parse context for nested placeable depth tracking

    Returns:
        ParseResult with cursor positioned after the closing ')'
    """
    if context is None:
        context = ParseContext()

    positional: list[InlineExpression] = []
    named: list[NamedArgument] = []
    seen_names: set[str] = set()

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            set_parse_error("Expected ')'", cursor.pos)
            return None
        if cursor.current == ")":
            cursor = cursor.advance()
            break

        arg_result = parse_inline_expression(cursor, context)
        if arg_result is None:
            return None
        arg_expr = arg_result.value
        cursor = arg_result.cursor.skip_whitespace()

        if not cursor.is_eof and cursor.current == ":":
            if not isinstance(arg_expr, MessageReference):
                set_parse_error("Named argument name must be an identifier", cursor.pos)
                return None
            arg_name = arg_expr.id.name
            if arg_name in seen_names:
                set_parse_error(f"Duplicate named argument: '{arg_name}'", cursor.pos)
                return None
            seen_names.add(arg_name)

            cursor = cursor.advance().skip_whitespace()
            value_result = parse_inline_expression(cursor, context)
            if value_result is None:
                return None
            value_expr = value_result.value
            if not isinstance(value_expr, (StringLiteral, NumberLiteral)):
                set_parse_error(
                    f"Named argument '{arg_name}' requires a literal value", cursor.pos
                )
                return None
            named.append(NamedArgument(name=Identifier(arg_name), value=value_expr))
            cursor = value_result.cursor.skip_whitespace()
        else:
            if named:
                set_parse_error(
                    "Positional arguments must come before named arguments", cursor.pos
                )
                return None
            positional.append(arg_expr)

        if cursor.is_eof:
            set_parse_error("Expected ')'", cursor.pos)
            return None
        if cursor.current == ",":
            cursor = cursor.advance()
        elif cursor.current != ")":
            set_parse_error("Expected ',' or ')'", cursor.pos)
            return None

    call_args = CallArguments(positional=tuple(positional), named=tuple(named))
    return ParseResult(call_args, cursor)


def parse_function_reference(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[FunctionReference] | None:
    """Parse function reference: FUNCTION(args)

    Function names must be upper case.

    Examples:
        DATETIME($date)
        DATETIME($date, dateStyle: "full")
    """
    id_result = parse_identifier(cursor)
    if id_result is None:
        return None

    func_name = id_result.value
    if not func_name.isupper():
        set_parse_error(f"Function name must be upper case: '{func_name}'", cursor.pos)
        return None

    paren_cursor = id_result.cursor.expect("(")
    if paren_cursor is None:
        set_parse_error("Expected '(' after function name", id_result.cursor.pos)
        return None

    args_result = parse_call_arguments(paren_cursor, context)
    if args_result is None:
        return None

    func_ref = FunctionReference(id=Identifier(func_name), arguments=args_result.value)
    return ParseResult(func_ref, args_result.cursor)


def parse_placeable(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[Placeable] | None:
    """Parse placeable expression: { $var }, { "text" }, { FUNC(...) }.

    Enforces the maximum nesting depth so { { { ... } } } cannot
    exhaust the stack.

    Args:
        cursor: Position AFTER the opening '{'
        context: Parse context for depth tracking

    Returns:
        ParseResult with cursor after the closing '}', None on parse error
    """
    if context is None:
        context = ParseContext()

    if context.is_depth_exceeded():
        diagnostic = ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
        set_parse_error(
            diagnostic.message, cursor.pos, DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED
        )
        return None

    nested_context = context.enter_placeable()
    cursor = cursor.skip_whitespace()

    expr_result = parse_inline_expression(cursor, nested_context)
    if expr_result is None:
        return None

    cursor = expr_result.cursor.skip_whitespace()

    if cursor.peek() == "-" and cursor.peek(1) == ">":
        set_parse_error("Select expressions are not supported", cursor.pos)
        return None

    close_cursor = cursor.expect("}")
    if close_cursor is None:
        set_parse_error("Expected '}'", cursor.pos)
        return None

    return ParseResult(Placeable(expression=expr_result.value), close_cursor)


# =============================================================================
# Entry Parsing
# =============================================================================


def _starts_attribute_line(cursor: Cursor) -> bool:
    if cursor.is_eof or cursor.current != "\n":
        return False
    content = cursor.advance().skip_whitespace()
    return not content.is_eof and content.current == "."


def parse_message(
    cursor: Cursor,
    context: ParseContext | None = None,
) -> ParseResult[Message] | None:
    """Parse message: Identifier "=" Pattern

    Examples:
        "hello = World"
        "today = { DATETIME($date, dateStyle: \\"full\\") }"

    Returns:
        ParseResult(Message, cursor) with cursor at the line end, None on error
    """
    start_pos = cursor.pos

    id_result = parse_identifier(cursor)
    if id_result is None:
        return None

    cursor = id_result.cursor.skip_spaces()
    equals_cursor = cursor.expect("=")
    if equals_cursor is None:
        set_parse_error("Expected '=' after message ID", cursor.pos)
        return None

    pattern_result = parse_pattern(equals_cursor.skip_spaces(), context)
    if pattern_result is None:
        return None
    cursor = pattern_result.cursor

    if _starts_attribute_line(cursor):
        set_parse_error("Message attributes are not supported", cursor.pos)
        return None

    if not pattern_result.value.elements:
        set_parse_error(
            f"Expected a value for message '{id_result.value}'", equals_cursor.pos
        )
        return None

    message = Message(
        id=Identifier(id_result.value),
        value=pattern_result.value,
        span=Span(start=start_pos, end=cursor.pos),
    )
    return ParseResult(message, cursor)
