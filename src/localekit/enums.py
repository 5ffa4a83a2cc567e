"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be used directly as
plural-config keys and catalog suffixes.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """Canonical plural category labels.

    The seven labels follow CLDR naming, but selection is done with the
    numeric ranges in ``localekit.runtime.plural_rules`` rather than CLDR
    locale data.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    THREE = "three"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Universal fallback category for every non-zero count."""


__all__ = [
    "PluralCategory",
]
