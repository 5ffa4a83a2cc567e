"""Locale context for Babel-backed value formatting.

Provides CLDR-compliant number, currency, percent and date formatting for
the default message formatter without touching Python's global ``locale``
module state.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (CLDR-based, no global state)
    - Unknown locales fall back to en_US with a logged warning
    - Contexts are cached per locale code, so the warning is logged once

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import contextlib
import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import TYPE_CHECKING, ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from localekit.constants import DEFAULT_FORMAT_LOCALE, MAX_LOCALE_CACHE_SIZE
from localekit.errors import FormattingError
from localekit.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["DateStyle", "LocaleContext"]

logger = logging.getLogger(__name__)

type DateStyle = Literal["short", "medium", "long", "full"]

type Number = int | float | Decimal


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it resolves the Babel
    locale and handles unknown locale codes.

    Examples:
        >>> ctx = LocaleContext.create('en')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5)
        '1.234,5'

        >>> ctx = LocaleContext.create('xx-UNKNOWN')
        >>> ctx.is_fallback
        True

    Attributes:
        locale_code: Locale code as given by the caller
        babel_locale: Resolved Babel Locale
        is_fallback: True when locale_code was unknown and en_US is used
    """

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    _cache: ClassVar[OrderedDict[str, LocaleContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached LocaleContext."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get the number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> LocaleContext:
        """Get the LocaleContext for a locale code, creating it on first use.

        Results are cached by normalized locale code, fallbacks included, in
        an LRU of MAX_LOCALE_CACHE_SIZE entries. An unknown locale therefore
        logs its warning once, not on every formatted message.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext. For unknown/invalid locales, formatting uses en_US
            rules while the original locale_code is preserved.
        """
        cache_key = normalize_locale(locale_code)
        with cls._cache_lock:
            cached = cls._cache.get(cache_key)
            if cached is not None:
                cls._cache.move_to_end(cache_key)
                return cached

        ctx = cls._resolve(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def _resolve(cls, locale_code: str) -> LocaleContext:
        try:
            return cls(locale_code=locale_code, babel_locale=get_babel_locale(locale_code))
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_FORMAT_LOCALE,
            )
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_FORMAT_LOCALE,
            )
        return cls(
            locale_code=locale_code,
            babel_locale=get_babel_locale(DEFAULT_FORMAT_LOCALE),
            is_fallback=True,
        )

    def format_number(self, value: Number, *, pattern: str | None = None) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format
            pattern: Optional Babel number pattern (e.g., "#,##0")

        Returns:
            Formatted number string

        Raises:
            FormattingError: If Babel rejects the value or pattern
        """
        try:
            return str(
                babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Number formatting failed for '{value}': {e}"
            raise FormattingError(msg, template=str(pattern), fallback_value=str(value)) from e

    def format_percent(self, value: Number) -> str:
        """Format a ratio as a percentage (0.25 -> '25%').

        Raises:
            FormattingError: If Babel rejects the value
        """
        try:
            return str(babel_numbers.format_percent(value, locale=self.babel_locale))
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Percent formatting failed for '{value}': {e}"
            raise FormattingError(msg, template="percent", fallback_value=str(value)) from e

    def format_currency(self, value: Number, currency: str) -> str:
        """Format a monetary amount with currency-specific decimal places.

        Examples:
            >>> LocaleContext.create('en').format_currency(100, 'INR')
            '₹100.00'

        Raises:
            FormattingError: If the currency code or value is invalid
        """
        try:
            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    locale=self.babel_locale,
                    currency_digits=True,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Currency formatting failed for '{currency} {value}': {e}"
            raise FormattingError(
                msg, template=f"currency/{currency}", fallback_value=f"{currency} {value}"
            ) from e

    def format_date(self, value: date | datetime | str, style: DateStyle = "medium") -> str:
        """Format the date part of a value.

        Strings are parsed as ISO 8601.

        Raises:
            FormattingError: If the value is not a date or ISO 8601 string
        """
        parsed = self._coerce_datetime(value)
        try:
            return str(babel_dates.format_date(parsed, format=style, locale=self.babel_locale))
        except (ValueError, TypeError, OverflowError, AttributeError, KeyError) as e:
            msg = f"Date formatting failed for '{value}': {e}"
            raise FormattingError(msg, template=style, fallback_value=str(value)) from e

    def format_time(self, value: time | datetime | str, style: DateStyle = "medium") -> str:
        """Format the time part of a value.

        Raises:
            FormattingError: If the value is not a time or ISO 8601 string
        """
        parsed = self._coerce_datetime(value, allow_time=True)
        try:
            return str(babel_dates.format_time(parsed, format=style, locale=self.babel_locale))
        except (ValueError, TypeError, OverflowError, AttributeError, KeyError) as e:
            msg = f"Time formatting failed for '{value}': {e}"
            raise FormattingError(msg, template=style, fallback_value=str(value)) from e

    def format_datetime(self, value: datetime | str, style: DateStyle = "medium") -> str:
        """Format a full datetime value.

        Raises:
            FormattingError: If the value is not a datetime or ISO 8601 string
        """
        parsed = self._coerce_datetime(value)
        try:
            return str(
                babel_dates.format_datetime(parsed, format=style, locale=self.babel_locale)
            )
        except (ValueError, TypeError, OverflowError, AttributeError, KeyError) as e:
            msg = f"DateTime formatting failed for '{value}': {e}"
            raise FormattingError(msg, template=style, fallback_value=str(value)) from e

    @staticmethod
    def _coerce_datetime(value: date | time | str, *, allow_time: bool = False) -> date | time:
        """Parse ISO 8601 strings; time-only strings ("14:30") need ``allow_time``."""
        if not isinstance(value, str):
            return value
        parsers: list[Callable[[str], date | time]] = [datetime.fromisoformat]
        if allow_time:
            parsers.append(time.fromisoformat)
        for parse in parsers:
            with contextlib.suppress(ValueError):
                return parse(value)
        msg = f"Invalid datetime string '{value}': not ISO 8601 format"
        raise FormattingError(msg, template=value, fallback_value=value)
