"""Two-tier catalog lookup: active locale, then fallback locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localekit.catalog.types import MessageId, Template, TranslationCatalog

__all__ = ["FallbackCoordinator", "MessageLookup"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageLookup:
    """Template found for a key.

    Attributes:
        template: Raw template string
        is_fallback_locale: True when the template came from the fallback
            locale catalog (a "soft miss" for the active locale)
    """

    template: Template
    is_fallback_locale: bool = False


class FallbackCoordinator:
    """Looks keys up in the active catalog first, then in the fallback catalog.

    Holds references to two immutable catalog snapshots. A locale switch
    builds a new coordinator rather than mutating this one.
    """

    __slots__ = ("_active", "_fallback")

    def __init__(self, active: TranslationCatalog, fallback: TranslationCatalog) -> None:
        self._active = active
        self._fallback = fallback

    @property
    def active(self) -> TranslationCatalog:
        """Get the active-locale catalog snapshot."""
        return self._active

    @property
    def fallback(self) -> TranslationCatalog:
        """Get the fallback-locale catalog snapshot."""
        return self._fallback

    def get_message(self, key: MessageId) -> MessageLookup | None:
        """Look a key up in the active catalog, then in the fallback catalog.

        Args:
            key: Exact catalog key

        Returns:
            MessageLookup, or None when neither catalog has the key
        """
        template = self._active.get(key)
        if template is not None:
            return MessageLookup(template)

        template = self._fallback.get(key)
        if template is not None:
            logger.debug("Key '%s' resolved from fallback catalog", key)
            return MessageLookup(template, is_fallback_locale=True)

        return None

    def has_message(self, key: MessageId) -> bool:
        """Check if the active catalog has the key."""
        return key in self._active

    def has_fallback_message(self, key: MessageId) -> bool:
        """Check if the fallback catalog has the key."""
        return key in self._fallback
