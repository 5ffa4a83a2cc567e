"""Plural category selection by numeric range.

Maps a count onto one of the seven canonical plural categories using a
fixed range table, then onto a catalog key using the configured suffixes.

This approximates CLDR plural rules: every locale uses
the same table, evaluated in this order:

    count == 0          -> zero
    count == 1          -> one
    count == 2          -> two
    count == 3          -> three
    3 < count < 11      -> few
    11 <= count < 100   -> many
    anything else       -> other

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from localekit.constants import SUFFIX_SEPARATOR
from localekit.enums import PluralCategory
from localekit.errors import InvalidCountError

if TYPE_CHECKING:
    from localekit.config import PluralConfig

__all__ = [
    "Count",
    "PluralCategoryMapper",
    "parse_count",
    "select_plural_category",
]

type Count = int | float | Decimal | str
"""Accepted count values: numbers or numeric strings."""

_EXACT_CATEGORIES: dict[int, PluralCategory] = {
    0: PluralCategory.ZERO,
    1: PluralCategory.ONE,
    2: PluralCategory.TWO,
    3: PluralCategory.THREE,
}


def parse_count(count: Count) -> int | float | Decimal:
    """Convert a count argument into a number.

    Numbers pass through unchanged. Strings are parsed as decimals after
    stripping surrounding whitespace.

    Args:
        count: Number or numeric string

    Returns:
        Numeric value of ``count``

    Raises:
        InvalidCountError: If ``count`` is a bool, a non-numeric string,
            NaN, or any other type

    Examples:
        >>> parse_count(5)
        5
        >>> parse_count(" 20 ")
        Decimal('20')
        >>> parse_count("many")
        Traceback (most recent call last):
            ...
        localekit.errors.InvalidCountError: "count" is not a number
    """
    match count:
        case bool():
            raise InvalidCountError(count)
        case int():
            return count
        case float() | Decimal():
            value = count
        case str():
            try:
                value = Decimal(count.strip())
            except InvalidOperation:
                raise InvalidCountError(count) from None
        case _:
            raise InvalidCountError(count)

    if isinstance(value, Decimal) and value.is_nan():
        raise InvalidCountError(count)
    if isinstance(value, float) and math.isnan(value):
        raise InvalidCountError(count)
    return value


def select_plural_category(count: int | float | Decimal) -> PluralCategory:
    """Select the plural category for a numeric count.

    Args:
        count: Numeric count (already parsed)

    Returns:
        PluralCategory from the range table in the module docstring

    Examples:
        >>> select_plural_category(0)
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category(10)
        <PluralCategory.FEW: 'few'>
        >>> select_plural_category(100)
        <PluralCategory.OTHER: 'other'>
    """
    for exact, category in _EXACT_CATEGORIES.items():
        if count == exact:
            return category
    if 3 < count < 11:
        return PluralCategory.FEW
    if 11 <= count < 100:
        return PluralCategory.MANY
    return PluralCategory.OTHER


class PluralCategoryMapper:
    """Derives plural-specific catalog keys from an identifier and a count.

    Wraps a PluralConfig so that callers deal in categories while the
    catalog deals in suffixed keys (``"inbox"`` + ONE -> ``"inbox_one"``).

    Example:
        >>> mapper = PluralCategoryMapper(PluralConfig(one="un", other="autre"))
        >>> mapper.map("inbox", 1)
        (<PluralCategory.ONE: 'one'>, 'inbox_un')
        >>> mapper.fallback_key("inbox")
        'inbox_autre'
    """

    __slots__ = ("_config",)

    def __init__(self, config: PluralConfig) -> None:
        self._config = config

    @property
    def config(self) -> PluralConfig:
        """Get the plural configuration (read-only)."""
        return self._config

    def key_for(self, identifier: str, category: PluralCategory) -> str:
        """Build the catalog key for ``identifier`` in ``category``."""
        return f"{identifier}{SUFFIX_SEPARATOR}{self._config.suffix_for(category)}"

    def fallback_key(self, identifier: str) -> str:
        """Build the ``other`` key, the universal fallback for non-zero counts."""
        return self.key_for(identifier, PluralCategory.OTHER)

    def variant_keys(self, identifier: str) -> dict[PluralCategory, str]:
        """Build the candidate key of every category for ``identifier``."""
        return {category: self.key_for(identifier, category) for category in PluralCategory}

    def map(self, identifier: str, count: Count) -> tuple[PluralCategory, str]:
        """Select the category for ``count`` and its catalog key.

        Raises:
            InvalidCountError: If ``count`` is not a number
        """
        category = select_plural_category(parse_count(count))
        return category, self.key_for(identifier, category)
