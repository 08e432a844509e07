"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.

Python 3.13+.
"""

__all__ = ["is_valid_locale_format", "normalize_locale"]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the system boundary using this
    function, then uses the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def is_valid_locale_format(locale_code: str) -> bool:
    """Check that a locale code is non-empty alphanumerics joined by '-' or '_'.

    This is a syntactic check only; it does not consult CLDR data.

    Example:
        >>> is_valid_locale_format("en-US")
        True
        >>> is_valid_locale_format("en US")
        False
    """
    if not locale_code:
        return False
    return locale_code.replace("_", "").replace("-", "").isalnum()
