"""Identifier resolution: context and plural key derivation.

Turns an identifier plus optional context and count into the catalog key
that should be looked up. Context suffixing is unconditional string
concatenation; plural suffixing consults the active-locale catalog to
decide between the category key, the ``other`` key and a reported miss.

Resolution order:
    1. Context: ``identifier_<context lower-cased>``
    2. Count: ``identifier_<category suffix>``
       - zero miss: reported with no expected fallback
       - other miss: silent fallback to ``identifier_<other suffix>`` when
         that key exists, otherwise reported with it as the expected fallback

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localekit.constants import SUFFIX_SEPARATOR
from localekit.enums import PluralCategory

from .plural_rules import PluralCategoryMapper

if TYPE_CHECKING:
    from localekit.catalog.types import MessageId, TranslationCatalog
    from localekit.config import PluralConfig

    from .plural_rules import Count

__all__ = [
    "IdentifierResolver",
    "MissingKey",
    "ResolvedKey",
]


@dataclass(frozen=True, slots=True)
class ResolvedKey:
    """Catalog key that the active locale is expected to contain.

    Attributes:
        key: Final lookup key
    """

    key: MessageId


@dataclass(frozen=True, slots=True)
class MissingKey:
    """Plural resolution found neither the category key nor a fallback.

    Attributes:
        attempted_key: The category key that was looked for
        expected_fallback_key: The ``other`` key that would have been used,
            or None for ``zero`` misses (zero has no universal fallback)
    """

    attempted_key: MessageId
    expected_fallback_key: MessageId | None = None


class IdentifierResolver:
    """Derives the final catalog key for an identifier, context and count.

    The resolver reads the active-locale catalog only; existence in the
    fallback locale never influences which plural key is chosen.

    Example:
        >>> catalog = {"inbox_zero": "Empty", "inbox_other": "{count} messages"}
        >>> resolver = IdentifierResolver(PluralConfig())
        >>> resolver.resolve("inbox", catalog, count=0)
        ResolvedKey(key='inbox_zero')
        >>> resolver.resolve("inbox", catalog, count=1)
        ResolvedKey(key='inbox_other')
        >>> resolver.resolve("inbox", {}, count=1)
        MissingKey(attempted_key='inbox_one', expected_fallback_key='inbox_other')
    """

    __slots__ = ("_mapper",)

    def __init__(self, plurals: PluralConfig) -> None:
        self._mapper = PluralCategoryMapper(plurals)

    @property
    def mapper(self) -> PluralCategoryMapper:
        """Get the plural category mapper (read-only)."""
        return self._mapper

    @staticmethod
    def resolve_context(identifier: MessageId, context: str | None) -> MessageId:
        """Append a lower-cased context suffix.

        An empty or None context leaves the identifier unchanged.
        """
        if not context:
            return identifier
        return f"{identifier}{SUFFIX_SEPARATOR}{context.lower()}"

    def resolve_plural(
        self,
        identifier: MessageId,
        count: Count,
        catalog: TranslationCatalog,
    ) -> ResolvedKey | MissingKey:
        """Resolve the plural-specific key for ``count``.

        Args:
            identifier: Identifier (already context-adjusted)
            count: Number or numeric string
            catalog: Active-locale catalog used to detect existing variants

        Returns:
            ResolvedKey for a direct or silent-fallback hit, MissingKey otherwise

        Raises:
            InvalidCountError: If ``count`` is not a number
        """
        category, key = self._mapper.map(identifier, count)
        existing = {
            variant: variant_key
            for variant, variant_key in self._mapper.variant_keys(identifier).items()
            if variant_key in catalog
        }

        if category in existing:
            return ResolvedKey(key)

        if category is PluralCategory.ZERO:
            return MissingKey(attempted_key=key)

        fallback_key = self._mapper.fallback_key(identifier)
        if PluralCategory.OTHER in existing:
            return ResolvedKey(fallback_key)
        return MissingKey(attempted_key=key, expected_fallback_key=fallback_key)

    def resolve(
        self,
        identifier: MessageId,
        catalog: TranslationCatalog,
        *,
        context: str | None = None,
        count: Count | None = None,
    ) -> ResolvedKey | MissingKey:
        """Apply context then plural resolution.

        Args:
            identifier: Message identifier
            catalog: Active-locale catalog
            context: Optional context suffix
            count: Optional count selecting a plural variant

        Returns:
            ResolvedKey, or MissingKey when plural resolution misses

        Raises:
            InvalidCountError: If ``count`` is not a number
        """
        resolved = self.resolve_context(identifier, context)
        if count is None:
            return ResolvedKey(resolved)
        return self.resolve_plural(resolved, count, catalog)
