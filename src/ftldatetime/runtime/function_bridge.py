"""Function call bridge between Python and FTL calling conventions.

Provides a bidirectional mapping layer:
    - Python: snake_case parameters (PEP 8)
    - FTL: camelCase parameters (JavaScript/ICU heritage)

Architecture:
    - FunctionRegistry: Manages function registration and calling
    - Auto-generates parameter mappings from function signatures
    - Converts FTL camelCase args to Python snake_case args at call time
    - fluent_function: Decorator marking functions that need the bundle locale

Example:
    # Python function (snake_case):
    def relative_day(value, *, base_date=None):
        ...

    # FTL file (camelCase):
    when = { RELATIVE_DAY($when, baseDate: "2024-01-01") }

    # Bridge converts: baseDate -> base_date

Python 3.13+.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from inspect import Parameter, signature

from ftldatetime.diagnostics import ErrorTemplate, FluentResolutionError

from .value_types import (
    FTL_POSITIONAL_ARGS_ATTR,
    FTL_REQUIRES_LOCALE_ATTR,
    FluentValue,
    FunctionSignature,
)

__all__ = ["FunctionRegistry", "fluent_function"]

logger = logging.getLogger(__name__)

# Parameters never exposed as FTL named arguments.
_UNMAPPED_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


def fluent_function[F: Callable[..., FluentValue]](
    func: F | None = None,
    *,
    inject_locale: bool = False,
    positional_args: int = 1,
) -> F | Callable[[F], F]:
    """Mark a Python function for use from FTL.

    With inject_locale=True the resolver appends the bundle locale code
    after the FTL positional arguments, and checks that exactly
    positional_args positional arguments were written in the pattern.

    Usable bare (@fluent_function) or with arguments.

    Example:
        >>> @fluent_function(inject_locale=True)
        ... def shout(value, locale_code, /):
        ...     return f"{value}!".upper()
        >>> shout._ftl_requires_locale
        True
    """

    def decorator(fn: F) -> F:
        if inject_locale:
            setattr(fn, FTL_REQUIRES_LOCALE_ATTR, True)
            setattr(fn, FTL_POSITIONAL_ARGS_ATTR, positional_args)
        return fn

    if func is not None:
        return decorator(func)
    return decorator


class FunctionRegistry:
    """Manages Python/FTL function calling convention bridge.

    Provides automatic parameter name conversion:
        - FTL uses camelCase (baseDate)
        - Python uses snake_case (base_date)

    Supports dict-like introspection:
        - list_functions(): List all registered function names
        - get_function_info(name): Get function metadata
        - __iter__: Iterate over function names
        - __len__: Count registered functions
        - __contains__: Check if function exists (supports 'in' operator)

    Example:
        >>> registry = FunctionRegistry()
        >>> registry.register(str.upper, ftl_name="UPPER")
        >>> "UPPER" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_functions",)

    def __init__(self) -> None:
        """Initialize empty function registry."""
        self._functions: dict[str, FunctionSignature] = {}

    def register(
        self,
        func: Callable[..., FluentValue],
        *,
        ftl_name: str | None = None,
        param_map: dict[str, str] | None = None,
    ) -> None:
        """Register Python function for FTL use.

        Overwrites any function already registered under ftl_name.

        Args:
            func: Python function to register
            ftl_name: Function name in FTL (default: func.__name__.upper())
            param_map: Custom parameter mappings (overrides auto-generation)
        """
        python_name = getattr(func, "__name__", "unknown")
        if ftl_name is None:
            ftl_name = python_name.upper()

        auto_map: dict[str, str] = {}
        try:
            parameters = signature(func).parameters.values()
        except (TypeError, ValueError):
            # Some builtins expose no signature
            parameters = ()
        for param in parameters:
            if param.name == "self" or param.kind in _UNMAPPED_KINDS:
                continue
            # Leading underscores are private by convention
            camel_case = self._to_camel_case(param.name.lstrip("_"))
            auto_map[camel_case] = param.name

        final_map = {**auto_map, **(param_map or {})}

        self._functions[ftl_name] = FunctionSignature(
            python_name=python_name,
            ftl_name=ftl_name,
            param_mapping=tuple(sorted(final_map.items())),
            callable=func,
        )
        logger.debug("Registered function %s as %s", python_name, ftl_name)

    def call(
        self,
        ftl_name: str,
        positional: Sequence[FluentValue],
        named: Mapping[str, FluentValue],
    ) -> FluentValue:
        """Call Python function with FTL arguments.

        Converts FTL camelCase parameters to Python snake_case parameters.

        Args:
            ftl_name: Function name from FTL (e.g., "DATETIME")
            positional: Positional arguments (locale already appended if injected)
            named: Named arguments from FTL (camelCase)

        Returns:
            Function result as FluentValue. The resolver formats non-string
            values to strings for final output.

        Raises:
            FluentResolutionError: If function not found or execution fails.
                Fluent errors raised by the function itself propagate as-is.
        """
        func_sig = self._functions.get(ftl_name)
        if func_sig is None:
            raise FluentResolutionError(ErrorTemplate.function_not_found(ftl_name))

        python_kwargs = {
            func_sig.param_dict.get(ftl_param, ftl_param): value
            for ftl_param, value in named.items()
        }

        # TypeError/ValueError indicate argument problems. Anything else is a
        # bug in the custom function and propagates.
        try:
            return func_sig.callable(*positional, **python_kwargs)
        except (TypeError, ValueError) as e:
            raise FluentResolutionError(ErrorTemplate.function_failed(ftl_name, str(e))) from e

    def should_inject_locale(self, ftl_name: str) -> bool:
        """Check whether the resolver must append the locale code when calling."""
        func_sig = self._functions.get(ftl_name)
        if func_sig is None:
            return False
        return getattr(func_sig.callable, FTL_REQUIRES_LOCALE_ATTR, False) is True

    def get_expected_positional_args(self, ftl_name: str) -> int | None:
        """FTL positional arity recorded by @fluent_function(inject_locale=True).

        Returns:
            Expected count, or None when the function is unknown or unmarked
        """
        if not self.should_inject_locale(ftl_name):
            return None
        expected: int = getattr(self._functions[ftl_name].callable, FTL_POSITIONAL_ARGS_ATTR, 1)
        return expected

    def has_function(self, ftl_name: str) -> bool:
        """Check if function is registered."""
        return ftl_name in self._functions

    def list_functions(self) -> list[str]:
        """List all registered function names (FTL names)."""
        return list(self._functions.keys())

    def get_function_info(self, ftl_name: str) -> FunctionSignature | None:
        """Get function metadata by FTL name.

        Example:
            >>> registry = FunctionRegistry()
            >>> def my_func(value, *, min_digits=0): return str(value)
            >>> registry.register(my_func, ftl_name="MYFUNC")
            >>> info = registry.get_function_info("MYFUNC")
            >>> info.python_name
            'my_func'
            >>> dict(info.param_mapping)["minDigits"]
            'min_digits'
        """
        return self._functions.get(ftl_name)

    def get_callable(self, ftl_name: str) -> Callable[..., FluentValue] | None:
        """Get the underlying callable for a registered function, or None."""
        func_sig = self._functions.get(ftl_name)
        return func_sig.callable if func_sig else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, ftl_name: object) -> bool:
        return ftl_name in self._functions

    def __repr__(self) -> str:
        return f"FunctionRegistry(functions={len(self._functions)})"

    def copy(self) -> "FunctionRegistry":
        """Create a shallow copy of this registry.

        FunctionSignature objects are shared; adding functions to the copy
        does not affect the original.
        """
        new_registry = FunctionRegistry()
        new_registry._functions = self._functions.copy()
        return new_registry

    @staticmethod
    def _to_camel_case(snake_case: str) -> str:
        """Convert Python snake_case to FTL camelCase.

        Examples:
            >>> FunctionRegistry._to_camel_case("date_style")
            'dateStyle'
            >>> FunctionRegistry._to_camel_case("value")
            'value'
        """
        components = snake_case.split("_")
        return components[0] + "".join(comp.capitalize() for comp in components[1:])
