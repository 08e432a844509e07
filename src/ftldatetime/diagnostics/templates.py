"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable, consistently formatted, and documented in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://projectfluent.org/fluent/guide"

    # =========================================================================
    # REFERENCE ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def message_not_found(message_id: str) -> Diagnostic:
        """Message reference not found in bundle.

        Args:
            message_id: The message identifier that was not found

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{message_id}' not found"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the message is defined in the loaded resources",
            help_url=f"{ErrorTemplate._DOCS_BASE}/messages.html",
        )

    @staticmethod
    def variable_not_provided(variable_name: str) -> Diagnostic:
        """Variable not provided in arguments.

        Args:
            variable_name: The variable name (without leading $)

        Returns:
            Diagnostic for VARIABLE_NOT_PROVIDED
        """
        msg = f"Variable '${variable_name}' not provided"
        return Diagnostic(
            code=DiagnosticCode.VARIABLE_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{variable_name}' in the arguments dictionary",
            help_url=f"{ErrorTemplate._DOCS_BASE}/variables.html",
        )

    # =========================================================================
    # RESOLUTION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def cyclic_reference(resolution_path: list[str]) -> Diagnostic:
        """Circular reference detected.

        Args:
            resolution_path: The path of message references forming the cycle

        Returns:
            Diagnostic for CYCLIC_REFERENCE
        """
        cycle_chain = " -> ".join(resolution_path)
        msg = f"Circular reference detected: {cycle_chain}"
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_REFERENCE,
            message=msg,
            hint="Break the circular dependency by removing one of the references",
            help_url=f"{ErrorTemplate._DOCS_BASE}/references.html",
        )

    @staticmethod
    def max_depth_exceeded(message_id: str, max_depth: int) -> Diagnostic:
        """Maximum resolution depth exceeded."""
        msg = f"Maximum resolution depth ({max_depth}) exceeded while resolving '{message_id}'"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce message reference chain depth",
            help_url=f"{ErrorTemplate._DOCS_BASE}/references.html",
        )

    @staticmethod
    def function_not_found(function_name: str) -> Diagnostic:
        """Function not found in registry.

        Args:
            function_name: The FTL function name (e.g., "DATETIME")

        Returns:
            Diagnostic for FUNCTION_NOT_FOUND
        """
        msg = f"Function '{function_name}' not found"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_NOT_FOUND,
            message=msg,
            hint="Call add_datetime_support() to install DATETIME. Check spelling.",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
        )

    @staticmethod
    def function_failed(function_name: str, error_msg: str) -> Diagnostic:
        """Function execution failed.

        Args:
            function_name: The function that failed
            error_msg: The error message from the function

        Returns:
            Diagnostic for FUNCTION_FAILED
        """
        msg = f"Function '{function_name}' failed: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_FAILED,
            message=msg,
            hint="Check the function arguments and their types",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
        )

    @staticmethod
    def function_arity_mismatch(
        function_name: str,
        expected: int,
        received: int,
    ) -> Diagnostic:
        """Function called with wrong number of positional arguments.

        Args:
            function_name: The function that was called
            expected: Expected number of positional arguments
            received: Actual number of positional arguments

        Returns:
            Diagnostic for FUNCTION_ARITY_MISMATCH
        """
        msg = (
            f"Function '{function_name}' expects {expected} argument(s), "
            f"got {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_ARITY_MISMATCH,
            message=msg,
            hint=f"Pass exactly {expected} value(s) to {function_name}()",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
        )

    @staticmethod
    def type_mismatch(
        function_name: str,
        argument_name: str,
        expected_type: str,
        received_type: str,
    ) -> Diagnostic:
        """Type mismatch in function argument.

        Args:
            function_name: Function where type mismatch occurred
            argument_name: Argument name that has wrong type
            expected_type: Expected type (e.g., "datetime")
            received_type: Actual type received

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Type mismatch in {function_name}(): expected {expected_type}, got {received_type}"
        hint = f"Convert '{argument_name}' to {expected_type} before passing to {function_name}()"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
            argument_name=argument_name,
            expected_type=expected_type,
            received_type=received_type,
        )

    @staticmethod
    def invalid_options(function_name: str, argument_names: list[str]) -> Diagnostic:
        """Named arguments skipped while formatting.

        Severity is "warning": the value was still formatted with the
        remaining options.

        Args:
            function_name: Function that skipped the arguments
            argument_names: Names of skipped arguments, in call order

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        names = ", ".join(argument_names)
        msg = f"Ignored invalid option(s) in {function_name}(): {names}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            hint="Supported options: dateStyle, timeStyle, hourCycle",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
            argument_name=argument_names[0] if argument_names else None,
            severity="warning",
        )

    @staticmethod
    def formatting_failed(
        function_name: str,
        value: str,
        reason: str,
    ) -> Diagnostic:
        """Locale data could not format a value.

        Args:
            function_name: Function that was formatting
            value: String form of the value
            reason: Error reported by the formatting backend

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{function_name}() could not format '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint="Check that the locale has CLDR data for the requested style",
            function_name=function_name,
        )

    @staticmethod
    def unknown_expression(expr_type: str) -> Diagnostic:
        """Unknown expression type encountered."""
        msg = f"Unknown expression type: {expr_type}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_EXPRESSION,
            message=msg,
            hint="This is likely a bug in the parser or resolver",
        )

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of file.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for unclosed braces or incomplete syntax",
        )

    @staticmethod
    def parse_junk(line: int, reason: str) -> Diagnostic:
        """Unparseable FTL content was skipped.

        Args:
            line: 1-based line where the junk entry starts
            reason: What the parser expected

        Returns:
            Diagnostic for PARSE_JUNK
        """
        msg = f"Skipped invalid entry at line {line}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_JUNK,
            message=msg,
            hint="Only messages with text and { } placeables are supported",
            help_url=f"{ErrorTemplate._DOCS_BASE}/hello.html",
            severity="warning",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Placeables nested deeper than the parser allows."""
        msg = f"Placeable nesting exceeds maximum depth ({max_depth})"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested placeables",
        )

    # =========================================================================
    # REGISTRATION ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def function_already_registered(function_name: str) -> Diagnostic:
        """A different callable already holds the FTL name.

        Args:
            function_name: The FTL function name that is taken

        Returns:
            Diagnostic for FUNCTION_ALREADY_REGISTERED
        """
        msg = f"Function '{function_name}' is already registered with a different callable"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_ALREADY_REGISTERED,
            message=msg,
            hint=f"Use add_function('{function_name}', ...) to replace it explicitly",
            function_name=function_name,
        )
