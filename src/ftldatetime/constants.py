"""Shared constants for ftldatetime.

Centralized configuration constants used across the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing/resolution
- Cache limits: Memory bounds for the locale context cache
- Input limits: DoS prevention via size constraints
- Output: Bidi isolation characters and fallback strings

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Output
    "UNICODE_FSI",
    "UNICODE_PDI",
    # Function names
    "DATETIME_FUNCTION_NAME",
    # Fallback strings
    "FALLBACK_INVALID",
    "FALLBACK_MISSING_MESSAGE",
    "FALLBACK_MISSING_VARIABLE",
    "FALLBACK_FUNCTION_CALL",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: parser (placeable nesting) and resolver (message reference chains).
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# OUTPUT
# ============================================================================

# Unicode bidirectional isolation characters per Unicode TR9.
UNICODE_FSI: str = "\u2068"  # U+2068 FIRST STRONG ISOLATE
UNICODE_PDI: str = "\u2069"  # U+2069 POP DIRECTIONAL ISOLATE

# FTL name under which add_datetime_support() installs datetime_format().
DATETIME_FUNCTION_NAME: str = "DATETIME"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Truly invalid/unknown expression
FALLBACK_INVALID: str = "{???}"

# Template patterns for contextual fallbacks (preserve what was expected)
FALLBACK_MISSING_MESSAGE: str = "{{{id}}}"  # e.g., {my-message}
FALLBACK_MISSING_VARIABLE: str = "{{${name}}}"  # e.g., {$date}
FALLBACK_FUNCTION_CALL: str = "{{{name}(...)}}"  # e.g., {DATETIME(...)}
