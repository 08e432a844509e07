"""FluentBundle - Main API for Fluent message formatting.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

import logging
import threading
from collections.abc import Callable, Mapping

from ftldatetime.constants import (
    DATETIME_FUNCTION_NAME,
    FALLBACK_INVALID,
    FALLBACK_MISSING_MESSAGE,
    MAX_DEPTH,
    MAX_SOURCE_SIZE,
)
from ftldatetime.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FluentError,
    FluentReferenceError,
    FluentRegistrationError,
    OutputFormat,
)
from ftldatetime.locale_utils import is_valid_locale_format
from ftldatetime.syntax import Cursor, Junk, Message
from ftldatetime.syntax.parser import FluentParserV1

from .function_bridge import FunctionRegistry
from .functions import datetime_format
from .resolver import FluentResolver
from .value_types import FluentValue

__all__ = ["FluentBundle"]

logger = logging.getLogger(__name__)

# Warnings show more context as they're surfaced to users.
_LOG_TRUNCATE_WARNING: int = 100
_LOG_TRUNCATE_DEBUG: int = 50

# One line per error in DEBUG output.
_DEBUG_FORMATTER = DiagnosticFormatter(
    output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=_LOG_TRUNCATE_WARNING
)


class FluentBundle:
    """Fluent message bundle for specific locale.

    Main public API. Aligned with Mozilla python-fluent error handling that
    returns (result, errors) tuples.

    The bundle starts with no functions (unless a registry is passed);
    call add_datetime_support() to enable DATETIME().

    Thread Safety:
        By default, bundles are NOT thread-safe. Complete initialization
        before sharing across threads, or pass thread_safe=True to serialize
        add_resource(), add_function() and format_pattern() with an RLock.

    Parser Security:
        - max_source_size: Maximum FTL source size in characters (default: 10 MB)
        - max_nesting_depth: Maximum placeable nesting depth (default: 100)

    Examples:
        >>> from datetime import datetime
        >>> bundle = FluentBundle("en-US", use_isolating=False)
        >>> bundle.add_datetime_support()
        >>> bundle.add_resource('born = Born { DATETIME($date, dateStyle: "long") }')
        >>> result, errors = bundle.format_pattern("born", {"date": datetime(1989, 11, 9)})
        >>> result
        'Born November 9, 1989'
        >>> errors
        ()
    """

    __slots__ = (
        "_function_registry",
        "_locale",
        "_lock",
        "_max_nesting_depth",
        "_max_source_size",
        "_messages",
        "_parser",
        "_use_isolating",
    )

    @staticmethod
    def _validate_locale_format(locale: str) -> None:
        """Validate locale code format.

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)

        if not is_valid_locale_format(locale):
            msg = f"Invalid locale code format: '{locale}'"
            raise ValueError(msg)

    def __init__(
        self,
        locale: str,
        /,
        *,
        use_isolating: bool = True,
        functions: FunctionRegistry | None = None,
        thread_safe: bool = False,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize bundle for locale.

        Args:
            locale: Locale code (en-US, de_DE, ar) [positional-only]
            use_isolating: Wrap interpolated values in Unicode bidi isolation marks
                          (default: True). See Unicode TR9.
            functions: FunctionRegistry to start from (copied for isolation).
                      Default: an empty registry.
            thread_safe: Serialize all operations with an internal RLock (default: False)
            max_source_size: Maximum FTL source size in characters (default: 10 MB).
                            Set to 0 to disable the limit.
            max_nesting_depth: Maximum placeable nesting depth (default: 100).

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        FluentBundle._validate_locale_format(locale)

        self._locale = locale
        self._use_isolating = use_isolating
        self._messages: dict[str, Message] = {}

        self._max_source_size = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        self._max_nesting_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        self._parser = FluentParserV1(
            max_source_size=self._max_source_size,
            max_nesting_depth=self._max_nesting_depth,
        )

        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

        self._function_registry = functions.copy() if functions is not None else FunctionRegistry()

        logger.info(
            "FluentBundle initialized for locale: %s (use_isolating=%s, thread_safe=%s)",
            locale,
            use_isolating,
            thread_safe,
        )

    @property
    def locale(self) -> str:
        """Get the locale code for this bundle (read-only).

        Example:
            >>> FluentBundle("en-US").locale
            'en-US'
        """
        return self._locale

    @property
    def use_isolating(self) -> bool:
        """Get whether Unicode bidi isolation is enabled (read-only)."""
        return self._use_isolating

    @property
    def is_thread_safe(self) -> bool:
        """Check if bundle uses thread-safe operations (read-only)."""
        return self._lock is not None

    @property
    def max_source_size(self) -> int:
        """Maximum FTL source size in characters (read-only)."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum placeable nesting depth (read-only)."""
        return self._max_nesting_depth

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(FluentBundle("en-US"))
            "FluentBundle(locale='en-US', messages=0, functions=0)"
        """
        return (
            f"FluentBundle(locale={self._locale!r}, "
            f"messages={len(self._messages)}, "
            f"functions={len(self._function_registry)})"
        )

    def add_resource(self, source: str, /, *, source_path: str | None = None) -> None:
        """Add FTL resource to bundle.

        Parses FTL source and adds messages to the registry. A message id
        that already exists is replaced.

        Args:
            source: FTL file content [positional-only]
            source_path: Optional path used as source identifier in log messages
                        (e.g., "locales/en/main.ftl"). Defaults to "<string>".

        Raises:
            ValueError: If source exceeds max_source_size

        Logging:
            Syntax errors (Junk entries) are logged at WARNING level.
        """
        if self._lock is not None:
            with self._lock:
                self._add_resource_impl(source, source_path)
        else:
            self._add_resource_impl(source, source_path)

    def _add_resource_impl(self, source: str, source_path: str | None) -> None:
        resource = self._parser.parse(source)
        normalized = source.replace("\r\n", "\n")
        source_desc = source_path or "<string>"

        message_count = 0
        junk_count = 0
        for entry in resource.entries:
            match entry:
                case Message():
                    self._messages[entry.id.name] = entry
                    message_count += 1
                    logger.debug("Registered message: %s", entry.id.name)
                case Junk():
                    junk_count += 1
                    start = entry.span.start if entry.span else 0
                    line, _ = Cursor(normalized, start).compute_line_col()
                    reason = entry.annotations[0].message if entry.annotations else "Parse error"
                    diagnostic = ErrorTemplate.parse_junk(line, reason)
                    # repr() escapes control characters in the logged content
                    logger.warning(
                        "Syntax error in %s: %s %s",
                        source_desc,
                        diagnostic.message,
                        repr(entry.content[:_LOG_TRUNCATE_WARNING]),
                    )

        logger.info(
            "Added resource %s: %d messages, %d junk entries",
            source_desc,
            message_count,
            junk_count,
        )

    def format_pattern(
        self,
        message_id: str,
        /,
        args: Mapping[str, FluentValue] | None = None,
    ) -> tuple[str, tuple[FluentError, ...]]:
        """Format message to string with error reporting.

        Args:
            message_id: Message identifier [positional-only]
            args: Variable arguments for interpolation

        Returns:
            Tuple of (formatted_string, errors)
            - formatted_string: Best-effort formatted output
            - errors: Tuple of exceptions encountered during resolution

        Note:
            This method does not raise for template problems. Missing
            messages, variables and functions, wrong argument types and
            rejected DATETIME options are collected in errors, and the
            output contains a readable fallback.
        """
        if self._lock is not None:
            with self._lock:
                return self._format_pattern_impl(message_id, args)
        return self._format_pattern_impl(message_id, args)

    def _format_pattern_impl(
        self,
        message_id: str,
        args: Mapping[str, FluentValue] | None,
    ) -> tuple[str, tuple[FluentError, ...]]:
        if not message_id or not isinstance(message_id, str):
            logger.warning("Invalid message ID: empty or non-string")
            diagnostic = Diagnostic(
                code=DiagnosticCode.MESSAGE_NOT_FOUND,
                message="Invalid message ID: empty or non-string",
            )
            return (FALLBACK_INVALID, (FluentReferenceError(diagnostic),))

        if message_id not in self._messages:
            logger.warning("Message '%s' not found", message_id)
            error = FluentReferenceError(ErrorTemplate.message_not_found(message_id))
            return (FALLBACK_MISSING_MESSAGE.format(id=message_id), (error,))

        resolver = FluentResolver(
            self._locale,
            self._messages,
            function_registry=self._function_registry,
            use_isolating=self._use_isolating,
        )

        # Resolver collects all expected errors. Anything escaping it is a bug.
        result, errors = resolver.resolve_message(self._messages[message_id], args)

        if errors:
            logger.debug(
                "Message resolution errors for '%s': %d error(s)", message_id, len(errors)
            )
            for err in errors:
                detail = _DEBUG_FORMATTER.format(err.diagnostic) if err.diagnostic else str(err)
                logger.debug("  - %s: %s", type(err).__name__, detail)
        else:
            logger.debug(
                "Resolved message '%s': %s", message_id, result[:_LOG_TRUNCATE_DEBUG]
            )

        return (result, errors)

    def has_message(self, message_id: str) -> bool:
        """Check if message exists."""
        return message_id in self._messages

    def get_message_ids(self) -> list[str]:
        """Get all message IDs in bundle, in insertion order."""
        return list(self._messages.keys())

    def add_function(self, name: str, func: Callable[..., FluentValue]) -> None:
        """Add custom function to bundle, replacing any function with that name.

        Example:
            >>> def SHOUT(value):
            ...     return str(value).upper()
            >>> bundle = FluentBundle("en")
            >>> bundle.add_function("SHOUT", SHOUT)
        """
        if self._lock is not None:
            with self._lock:
                self._function_registry.register(func, ftl_name=name)
        else:
            self._function_registry.register(func, ftl_name=name)
        logger.debug("Added custom function: %s", name)

    def add_datetime_support(self) -> None:
        """Install DATETIME() into this bundle's function table.

        Calling it again is a no-op.

        Raises:
            FluentRegistrationError: If a different function is already
                registered as DATETIME

        Example:
            >>> bundle = FluentBundle("en-US")
            >>> bundle.add_datetime_support()
            >>> bundle.add_datetime_support()
            >>> bundle.has_function("DATETIME")
            True
        """
        if self._lock is not None:
            with self._lock:
                self._add_datetime_support_impl()
        else:
            self._add_datetime_support_impl()

    def _add_datetime_support_impl(self) -> None:
        existing = self._function_registry.get_callable(DATETIME_FUNCTION_NAME)
        if existing is datetime_format:
            return
        if existing is not None:
            raise FluentRegistrationError(
                ErrorTemplate.function_already_registered(DATETIME_FUNCTION_NAME)
            )
        self.add_function(DATETIME_FUNCTION_NAME, datetime_format)

    def has_function(self, name: str) -> bool:
        """Check if a function is registered under an FTL name."""
        return name in self._function_registry
