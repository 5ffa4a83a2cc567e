"""Resolution runtime: plural rules, key resolution, lookup and formatting.

Python 3.13+.
"""

from .fallback import FallbackCoordinator, MessageLookup
from .formatter import BabelMessageFormatter, MessageFormatter
from .locale_context import LocaleContext
from .plural_rules import PluralCategoryMapper, parse_count, select_plural_category
from .resolver import IdentifierResolver, MissingKey, ResolvedKey

__all__ = [
    "BabelMessageFormatter",
    "FallbackCoordinator",
    "IdentifierResolver",
    "LocaleContext",
    "MessageFormatter",
    "MessageLookup",
    "MissingKey",
    "PluralCategoryMapper",
    "ResolvedKey",
    "parse_count",
    "select_plural_category",
]
