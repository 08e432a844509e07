"""Locale context for thread-safe, bundle-scoped date/time formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant date and time formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from ftldatetime.constants import DATETIME_FUNCTION_NAME, MAX_LOCALE_CACHE_SIZE
from ftldatetime.diagnostics import ErrorTemplate, FormattingError
from ftldatetime.enums import DateStyle, HourCycle, TimeStyle
from ftldatetime.locale_utils import normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# CLDR hour field letter for each hour cycle.
_HOUR_FIELDS: dict[HourCycle, str] = {
    HourCycle.H11: "K",
    HourCycle.H12: "h",
    HourCycle.H23: "H",
    HourCycle.H24: "k",
}

# availableFormats skeletons per time style, 12-hour form. The "v" zone field
# is rewritten to the specific zone name width of the style.
_TIME_SKELETONS: dict[TimeStyle, str] = {
    TimeStyle.SHORT: "hm",
    TimeStyle.MEDIUM: "hms",
    TimeStyle.LONG: "hmsv",
    TimeStyle.FULL: "hmsv",
}
_ZONE_WIDTHS: dict[TimeStyle, int] = {
    TimeStyle.LONG: 1,
    TimeStyle.FULL: 4,
}


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for date/time formatting.

    Use LocaleContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ bypasses validation.

    Cache Management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> from datetime import datetime
        >>> ctx = LocaleContext.create("en-US")
        >>> ctx.format_datetime(datetime(1989, 11, 9, 23, 30))
        '11/9/89'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create("invalid-locale")
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create("en-US")
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds; use create_or_raise() for strict validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US rules
            while preserving the original locale_code for debugging.
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to en_US", locale_code, e)
            babel_locale = Locale.parse("en_US")
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to en_US", locale_code, e
            )
            babel_locale = Locale.parse("en_US")
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def hour_cycle_pattern(self, time_style: TimeStyle, hour_cycle: HourCycle) -> str:
        """CLDR time pattern for time_style using the requested hour cycle.

        The pattern comes from the locale's availableFormats, so the day
        period sits where the locale puts it. The hour field letter is then
        set to K (h11), h (h12), H (h23) or k (h24).

        Raises:
            KeyError: If the locale has no matching skeleton

        Example:
            >>> ctx = LocaleContext.create("en-US")
            >>> ctx.hour_cycle_pattern(TimeStyle.SHORT, HourCycle.H23)
            'HH:mm'
        """
        skeleton = _TIME_SKELETONS[time_style]
        if hour_cycle in (HourCycle.H23, HourCycle.H24):
            skeleton = skeleton.replace("h", "H")

        available = self._babel_locale.datetime_skeletons
        if skeleton not in available:
            skeleton = babel_dates.match_skeleton(skeleton, available)
        pattern = babel_dates.parse_pattern(available[skeleton]).pattern

        letter = _HOUR_FIELDS[hour_cycle]
        zone_width = _ZONE_WIDTHS.get(time_style, 0)
        tokens: list[tuple[str, str | tuple[str, int]]] = []
        for kind, content in babel_dates.tokenize_pattern(pattern):
            if kind == "field":
                field, width = content
                if field in "hHkK":
                    content = (letter, width)
                elif field == "v" and zone_width:
                    content = ("z", zone_width)
            tokens.append((kind, content))
        return babel_dates.untokenize_pattern(tokens)

    def _format_time(
        self,
        value: datetime,
        time_style: TimeStyle,
        hour_cycle: HourCycle | None,
    ) -> str:
        # Naive values have no zone to name
        if value.tzinfo is None and time_style in _ZONE_WIDTHS:
            time_style = TimeStyle.MEDIUM
        if hour_cycle is None:
            return str(
                babel_dates.format_time(value, format=time_style, locale=self._babel_locale)
            )
        pattern = self.hour_cycle_pattern(time_style, hour_cycle)
        return str(babel_dates.format_time(value, format=pattern, locale=self._babel_locale))

    def format_datetime(
        self,
        value: datetime,
        *,
        date_style: DateStyle | None = None,
        time_style: TimeStyle | None = None,
        hour_cycle: HourCycle | None = None,
    ) -> str:
        """Format a datetime with locale-specific CLDR styles.

        Implements Fluent DATETIME semantics using Babel:
            - neither style: short date (Intl.DateTimeFormat default)
            - date_style only: date portion
            - time_style only: time portion
            - both: joined with the locale's dateTime glue pattern for date_style

        Args:
            value: datetime to format
            date_style: Date verbosity (full, long, medium, short)
            time_style: Time verbosity (full, long, medium, short). Naive values
                have no zone, so long and full render as medium.
            hour_cycle: Hour numbering override; ignored when no time is shown

        Returns:
            Formatted text

        Raises:
            FormattingError: If Babel cannot format the value. The error's
                fallback_value is the ISO 8601 text of value.

        Examples:
            >>> from datetime import datetime
            >>> ctx = LocaleContext.create("en-US")
            >>> dt = datetime(1989, 11, 9, 23, 30)
            >>> ctx.format_datetime(dt, date_style=DateStyle.FULL)
            'Thursday, November 9, 1989'
            >>> ctx.format_datetime(dt, time_style=TimeStyle.SHORT, hour_cycle=HourCycle.H23)
            '23:30'
        """
        try:
            if time_style is None:
                return str(
                    babel_dates.format_date(
                        value,
                        format=date_style or DateStyle.SHORT,
                        locale=self._babel_locale,
                    )
                )

            time_str = self._format_time(value, time_style, hour_cycle)
            if date_style is None:
                return time_str

            date_str = str(
                babel_dates.format_date(value, format=date_style, locale=self._babel_locale)
            )
            # Glue pattern uses {0} for time and {1} for date per CLDR
            glue = str(babel_dates.get_datetime_format(date_style, locale=self._babel_locale))
            return glue.replace("'", "").replace("{0}", time_str).replace("{1}", date_str)
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            fallback = value.isoformat()
            diagnostic = ErrorTemplate.formatting_failed(DATETIME_FUNCTION_NAME, fallback, str(e))
            raise FormattingError(diagnostic, fallback_value=fallback) from e
