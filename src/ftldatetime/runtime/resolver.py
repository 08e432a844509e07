"""Fluent message resolver - converts AST to formatted strings.

Resolves patterns by walking the AST, interpolating variables, calling
functions and formatting date/time values with the bundle locale.
Python 3.13+. Indirect dependency: Babel (via LocaleContext).

Thread Safety:
    Resolution state is passed explicitly via ResolutionContext, making the
    resolver fully reentrant. Each resolution operation creates its own
    isolated context.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime

from ftldatetime.constants import (
    FALLBACK_FUNCTION_CALL,
    FALLBACK_INVALID,
    FALLBACK_MISSING_MESSAGE,
    FALLBACK_MISSING_VARIABLE,
    MAX_DEPTH,
    UNICODE_FSI,
    UNICODE_PDI,
)
from ftldatetime.diagnostics import (
    ErrorTemplate,
    FluentCyclicReferenceError,
    FluentError,
    FluentReferenceError,
    FluentResolutionError,
    FormattingError,
)
from ftldatetime.syntax import (
    FunctionReference,
    InlineExpression,
    Message,
    MessageReference,
    NumberLiteral,
    Pattern,
    Placeable,
    StringLiteral,
    TextElement,
    VariableReference,
)

from .function_bridge import FunctionRegistry
from .locale_context import LocaleContext
from .value_types import FluentDateTime, FluentValue

__all__ = ["FluentResolver", "ResolutionContext"]


@dataclass(slots=True)
class ResolutionContext:
    """Explicit context for message resolution.

    Attributes:
        stack: Resolution stack for cycle detection (message ids being resolved)
        max_depth: Maximum resolution depth (prevents stack overflow)
    """

    stack: list[str] = field(default_factory=list)
    max_depth: int = MAX_DEPTH

    def push(self, key: str) -> None:
        """Push message id onto resolution stack."""
        self.stack.append(key)

    def pop(self) -> str:
        """Pop message id from resolution stack."""
        return self.stack.pop()

    def contains(self, key: str) -> bool:
        """Check if key is in resolution stack (cycle detection)."""
        return key in self.stack

    @property
    def depth(self) -> int:
        """Current resolution depth."""
        return len(self.stack)

    def is_depth_exceeded(self) -> bool:
        """Check if maximum depth has been reached."""
        return self.depth >= self.max_depth

    def get_cycle_path(self, key: str) -> list[str]:
        """Get the cycle path for error reporting."""
        return [*self.stack, key]


class FluentResolver:
    """Resolves Fluent messages to strings.

    Error handling follows Mozilla python-fluent:
    - Collects errors instead of embedding them in output
    - Returns (result, errors) tuples
    - Provides readable fallbacks per Fluent specification

    Formatting errors (FormattingError and its FluentOptionError subclass)
    still carry usable text, which is interpolated like any other value.
    """

    __slots__ = ("function_registry", "locale", "messages", "use_isolating")

    def __init__(
        self,
        locale: str,
        messages: Mapping[str, Message],
        *,
        function_registry: FunctionRegistry,
        use_isolating: bool = True,
    ) -> None:
        """Initialize resolver.

        Args:
            locale: Locale code for date/time formatting and function injection
            messages: Message registry
            function_registry: Function registry with camelCase conversion (keyword-only)
            use_isolating: Wrap interpolated values in Unicode bidi marks (keyword-only)
        """
        self.locale = locale
        self.use_isolating = use_isolating
        self.messages = messages
        self.function_registry = function_registry

    def resolve_message(
        self,
        message: Message,
        args: Mapping[str, FluentValue] | None = None,
        *,
        context: ResolutionContext | None = None,
    ) -> tuple[str, tuple[FluentError, ...]]:
        """Resolve message to final string with error collection.

        Never raises for template problems (graceful degradation).

        Args:
            message: Message AST
            args: Variable arguments
            context: Resolution context for cycle detection and depth tracking.
                    If None, creates a fresh context for this resolution.

        Returns:
            Tuple of (formatted_string, errors)
        """
        errors: list[FluentError] = []
        args = args or {}

        if context is None:
            context = ResolutionContext()

        msg_id = message.id.name
        fallback = FALLBACK_MISSING_MESSAGE.format(id=msg_id)

        if context.contains(msg_id):
            cycle_path = context.get_cycle_path(msg_id)
            errors.append(FluentCyclicReferenceError(ErrorTemplate.cyclic_reference(cycle_path)))
            return (fallback, tuple(errors))

        if context.is_depth_exceeded():
            errors.append(
                FluentReferenceError(ErrorTemplate.max_depth_exceeded(msg_id, context.max_depth))
            )
            return (fallback, tuple(errors))

        try:
            context.push(msg_id)
            result = self._resolve_pattern(message.value, args, errors, context)
            return (result, tuple(errors))
        finally:
            context.pop()

    def _resolve_pattern(
        self,
        pattern: Pattern,
        args: Mapping[str, FluentValue],
        errors: list[FluentError],
        context: ResolutionContext,
    ) -> str:
        """Resolve pattern by walking elements."""
        parts: list[str] = []

        for element in pattern.elements:
            match element:
                case TextElement():
                    parts.append(element.value)
                case Placeable():
                    try:
                        value = self._resolve_expression(element.expression, args, errors, context)
                        parts.append(self._isolate(self._format_value(value)))
                    except FormattingError as e:
                        # Formatter produced usable text despite the error
                        errors.append(e)
                        parts.append(self._isolate(e.fallback_value))
                    except (FluentReferenceError, FluentResolutionError) as e:
                        errors.append(e)
                        parts.append(self._get_fallback_for_placeable(element.expression))

        return "".join(parts)

    def _isolate(self, text: str) -> str:
        # Per Unicode TR9, prevents RTL/LTR text interference
        if self.use_isolating:
            return f"{UNICODE_FSI}{text}{UNICODE_PDI}"
        return text

    def _resolve_expression(
        self,
        expr: InlineExpression,
        args: Mapping[str, FluentValue],
        errors: list[FluentError],
        context: ResolutionContext,
    ) -> FluentValue:
        """Resolve expression to value."""
        match expr:
            case VariableReference():
                return self._resolve_variable_reference(expr, args)
            case MessageReference():
                return self._resolve_message_reference(expr, args, errors, context)
            case FunctionReference():
                return self._resolve_function_call(expr, args, errors, context)
            case StringLiteral():
                return expr.value
            case NumberLiteral():
                return expr.value
            case Placeable():
                return self._resolve_expression(expr.expression, args, errors, context)
            case _:
                raise FluentResolutionError(ErrorTemplate.unknown_expression(type(expr).__name__))

    def _resolve_variable_reference(
        self, expr: VariableReference, args: Mapping[str, FluentValue]
    ) -> FluentValue:
        """Resolve variable reference from args."""
        var_name = expr.id.name
        if var_name not in args:
            raise FluentReferenceError(ErrorTemplate.variable_not_provided(var_name))
        return args[var_name]

    def _resolve_message_reference(
        self,
        expr: MessageReference,
        args: Mapping[str, FluentValue],
        errors: list[FluentError],
        context: ResolutionContext,
    ) -> str:
        """Resolve message reference, sharing the context for cycle detection."""
        msg_id = expr.id.name
        if msg_id not in self.messages:
            raise FluentReferenceError(ErrorTemplate.message_not_found(msg_id))
        result, nested_errors = self.resolve_message(
            self.messages[msg_id], args, context=context
        )
        errors.extend(nested_errors)
        return result

    def _resolve_function_call(
        self,
        func_ref: FunctionReference,
        args: Mapping[str, FluentValue],
        errors: list[FluentError],
        context: ResolutionContext,
    ) -> FluentValue:
        """Resolve function call.

        FunctionRegistry handles camelCase to snake_case parameter conversion.
        Functions marked with @fluent_function(inject_locale=True) receive the
        bundle locale after their positional arguments.
        """
        func_name = func_ref.id.name

        positional_values: list[FluentValue] = [
            self._resolve_expression(arg, args, errors, context)
            for arg in func_ref.arguments.positional
        ]

        named_values: dict[str, FluentValue] = {
            arg.name.name: self._resolve_expression(arg.value, args, errors, context)
            for arg in func_ref.arguments.named
        }

        if self.function_registry.should_inject_locale(func_name):
            # Validate arity before injection so the locale never lands in
            # the wrong positional slot
            expected_args = self.function_registry.get_expected_positional_args(func_name)
            if expected_args is not None and len(positional_values) != expected_args:
                raise FluentResolutionError(
                    ErrorTemplate.function_arity_mismatch(
                        func_name, expected_args, len(positional_values)
                    )
                )
            return self.function_registry.call(
                func_name,
                [*positional_values, self.locale],
                named_values,
            )

        return self.function_registry.call(func_name, positional_values, named_values)

    def _format_value(self, value: FluentValue) -> str:
        """Format FluentValue to string for final output.

        - str: returned as-is
        - bool: "true"/"false" (Fluent convention)
        - FluentDateTime: its stored options, bundle locale
        - datetime/date: short date, bundle locale
        - None: empty string
        - int/float/Decimal: string representation

        Raises:
            FormattingError: If a date/time cannot be formatted
        """
        match value:
            case str():
                return value
            # bool before int (bool is a subclass of int)
            case bool():
                return "true" if value else "false"
            case FluentDateTime():
                return value.format(self.locale)
            case datetime() | date():
                return FluentDateTime(value).format(self.locale)
            case None:
                return ""
            case _:
                return str(value)

    def _get_fallback_for_placeable(self, expr: InlineExpression) -> str:
        """Get readable fallback for failed placeable per Fluent spec.

        Examples:
            VariableReference($date) -> "{$date}"
            MessageReference(welcome) -> "{welcome}"
            FunctionReference(DATETIME) -> "{DATETIME(...)}"
        """
        match expr:
            case VariableReference():
                return FALLBACK_MISSING_VARIABLE.format(name=expr.id.name)
            case MessageReference():
                return FALLBACK_MISSING_MESSAGE.format(id=expr.id.name)
            case FunctionReference():
                return FALLBACK_FUNCTION_CALL.format(name=expr.id.name)
            case Placeable():
                return self._get_fallback_for_placeable(expr.expression)
            case _:
                return FALLBACK_INVALID
