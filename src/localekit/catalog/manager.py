"""In-memory catalog registry and session factory.

I18nManager implements the CatalogProvider protocol on top of per-locale
catalog snapshots held in memory. Catalog loading from disk or network is
left to the application; the manager receives already-parsed mappings.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from localekit.config import I18nConfig
from localekit.runtime.formatter import BabelMessageFormatter

from .store import EMPTY_CATALOG, flatten_messages, freeze_catalog, merge_catalogs

if TYPE_CHECKING:
    from localekit.localization.events import MissingTranslationHandler
    from localekit.localization.session import LocaleSession
    from localekit.runtime.formatter import MessageFormatter

    from .types import LocaleCode, TranslationCatalog

__all__ = ["I18nManager"]

logger = logging.getLogger(__name__)


class I18nManager:
    """Holds catalogs for every locale and creates LocaleSession instances.

    Fallback locale derivation:
        1. ``config.fallback_locales[locale]`` when configured
        2. ``default_locale`` when one was given
        3. the locale itself (no cross-locale fallback)

    Example:
        >>> manager = I18nManager(
        ...     config=I18nConfig(fallback_locales={"ca": "es"}),
        ...     on_missing_translation=print,
        ... )
        >>> manager.add_translations("es", {"greeting": "Hola"}, namespace="messages")
        >>> manager.locale("ca").t("messages.greeting")
        MissingTranslation(locale='ca', identifier='messages.greeting', has_fallback=True)
        'Hola'

    Attributes:
        config: Resolution configuration shared by all sessions
        default_locale: Optional locale every unmapped locale falls back to
    """

    __slots__ = (
        "_catalogs",
        "_config",
        "_default_locale",
        "_formatter",
        "_on_missing_translation",
    )

    def __init__(
        self,
        translations: Mapping[LocaleCode, Mapping[str, object]] | None = None,
        *,
        config: I18nConfig | None = None,
        default_locale: LocaleCode | None = None,
        formatter: MessageFormatter | None = None,
        on_missing_translation: MissingTranslationHandler | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            translations: Optional locale → (nested) messages mapping to load
            config: Resolution configuration (defaults to I18nConfig())
            default_locale: Locale unmapped locales fall back to
            formatter: Message formatter (defaults to BabelMessageFormatter)
            on_missing_translation: Callback passed to every created session
        """
        self._config = config if config is not None else I18nConfig()
        self._default_locale = default_locale
        self._formatter: MessageFormatter = (
            formatter if formatter is not None else BabelMessageFormatter()
        )
        self._on_missing_translation = on_missing_translation
        self._catalogs: dict[LocaleCode, TranslationCatalog] = {}
        if translations:
            self.reload_translations(translations)

    @property
    def config(self) -> I18nConfig:
        """Get the resolution configuration (read-only)."""
        return self._config

    @property
    def default_locale(self) -> LocaleCode | None:
        """Get the locale unmapped locales fall back to, if any."""
        return self._default_locale

    @property
    def supported_locales(self) -> tuple[LocaleCode, ...]:
        """Get locales that have a catalog, in registration order."""
        return tuple(self._catalogs)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"I18nManager(locales={self.supported_locales!r}, "
            f"default_locale={self._default_locale!r})"
        )

    def add_translations(
        self,
        locale: LocaleCode,
        messages: Mapping[str, object],
        namespace: str | None = None,
    ) -> None:
        """Merge messages into the catalog of ``locale``.

        Nested mappings are flattened into dotted identifiers. The locale's
        catalog snapshot is replaced; sessions pick it up on their next
        (re)load.

        Args:
            locale: Locale code
            messages: Flat or nested identifier → template mapping
            namespace: Optional prefix for every identifier (e.g., 'messages')

        Raises:
            TypeError: If a leaf value is not a string
        """
        flat = flatten_messages(messages, namespace)
        self._catalogs[locale] = merge_catalogs(self.get_translations_for(locale), flat)
        logger.info("Registered %d messages for locale '%s'", len(flat), locale)

    def reload_translations(
        self, translations: Mapping[LocaleCode, Mapping[str, object]]
    ) -> None:
        """Replace every catalog with ``translations``.

        Args:
            translations: Locale → (nested) messages mapping

        Raises:
            TypeError: If a leaf value is not a string
        """
        self._catalogs = {
            locale: freeze_catalog(flatten_messages(messages))
            for locale, messages in translations.items()
        }
        logger.info("Loaded catalogs for %d locales", len(self._catalogs))

    def get_translations_for(self, locale: LocaleCode) -> TranslationCatalog:
        """Get the catalog snapshot for ``locale`` (empty when unknown)."""
        return self._catalogs.get(locale, EMPTY_CATALOG)

    def get_fallback_locale(self, locale: LocaleCode) -> LocaleCode:
        """Get the locale consulted when ``locale`` lacks a key."""
        fallback = self._config.fallback_locales.get(locale)
        if fallback is not None:
            return fallback
        if self._default_locale is not None:
            return self._default_locale
        return locale

    def get_formatter(self) -> MessageFormatter:
        """Get the message formatter shared by all sessions."""
        return self._formatter

    def locale(self, locale: LocaleCode) -> LocaleSession:
        """Create a LocaleSession for ``locale``."""
        # Lazy import: avoids a catalog <-> localization import cycle
        from localekit.localization.session import LocaleSession  # noqa: PLC0415

        return LocaleSession(
            locale, self, on_missing_translation=self._on_missing_translation
        )
