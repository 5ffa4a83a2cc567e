"""Locale-bound message resolution.

LocaleSession is the façade that callers use to turn identifiers into
display strings. It owns the active locale and the derived fallback locale,
consumes catalogs from a CatalogProvider, and delegates text substitution
to the provider's MessageFormatter.

Key architectural decisions:
- Composition over inheritance: the session holds a formatter, it is not one
- Lazy catalog loading: catalogs are fetched on first use, because sessions
  are often created and immediately switched to a request locale
- Immutable snapshots: switching locale swaps catalog references, so other
  sessions holding the old snapshots are unaffected

Resolution algorithm (format_message):
    1. Context suffix  (data["context"])
    2. Plural suffix   (data["count"]), possibly a reported miss
    3. Lookup: active catalog, then fallback catalog
    4. Notify on miss or fallback-locale hit
    5. Output: formatted template | dynamic fallback | fallback_message |
       "translation missing: {locale}, {key}[. expected fallback identifier: {key}]"

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from localekit.constants import (
    DEFAULT_VALIDATOR_PREFIX,
    FALLBACK_EXPECTED_IDENTIFIER,
    FALLBACK_MISSING_TRANSLATION,
    VALIDATOR_WILDCARD,
)
from localekit.localization.events import MissingTranslation
from localekit.runtime.fallback import FallbackCoordinator
from localekit.runtime.resolver import IdentifierResolver, MissingKey
from localekit.validation.messages import ValidatorMessages, ValidatorWildcardCallback

if TYPE_CHECKING:
    from localekit.catalog.store import CatalogProvider
    from localekit.catalog.types import LocaleCode, MessageId, Template
    from localekit.localization.events import MissingTranslationHandler
    from localekit.runtime.fallback import MessageLookup

__all__ = ["LocaleSession"]

logger = logging.getLogger(__name__)


class LocaleSession:
    """Message formatting for one active locale with a fallback locale.

    Example:
        >>> manager = I18nManager(config=I18nConfig(fallback_locales={"ca": "es"}))
        >>> manager.add_translations("en", {"greeting": "Hello {name}"}, namespace="messages")
        >>> manager.add_translations("es", {"greeting": "Hola {name}"}, namespace="messages")
        >>> i18n = manager.locale("en")
        >>> i18n.t("messages.greeting", {"name": "Anna"})
        'Hello Anna'
        >>> i18n.switch_locale("ca")
        >>> i18n.fallback_locale
        'es'
        >>> i18n.t("messages.greeting", {"name": "Anna"})
        'Hola Anna'

    Attributes:
        locale: Active locale
        fallback_locale: Locale consulted when the active catalog lacks a key
    """

    __slots__ = (
        "_coordinator",
        "_locale",
        "_on_missing_translation",
        "_provider",
        "_resolver",
    )

    def __init__(
        self,
        locale: LocaleCode,
        provider: CatalogProvider,
        *,
        on_missing_translation: MissingTranslationHandler | None = None,
    ) -> None:
        """Initialize a session for ``locale``.

        Catalogs are not fetched until the first lookup.

        Args:
            locale: Active locale code
            provider: Collaborator owning catalogs, fallbacks, config and formatter
            on_missing_translation: Optional callback receiving a
                MissingTranslation for every miss and fallback-locale hit
        """
        self._locale = locale
        self._provider = provider
        self._resolver = IdentifierResolver(provider.config.plurals)
        self._on_missing_translation = on_missing_translation
        self._coordinator: FallbackCoordinator | None = None

    @property
    def locale(self) -> LocaleCode:
        """Get the active locale."""
        return self._locale

    @property
    def fallback_locale(self) -> LocaleCode:
        """Get the fallback locale derived from the active locale."""
        return self._provider.get_fallback_locale(self._locale)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        loaded = self._coordinator is not None
        return (
            f"LocaleSession(locale={self._locale!r}, "
            f"fallback_locale={self.fallback_locale!r}, loaded={loaded})"
        )

    def _load_translations(self) -> FallbackCoordinator:
        """Fetch both catalog snapshots from the provider.

        The provider returns already-loaded catalogs; nothing is read from
        disk or network here.
        """
        fallback_locale = self.fallback_locale
        self._coordinator = FallbackCoordinator(
            self._provider.get_translations_for(self._locale),
            self._provider.get_translations_for(fallback_locale),
        )
        logger.debug(
            "Loaded catalogs for locale '%s' (fallback '%s')", self._locale, fallback_locale
        )
        return self._coordinator

    def _lazy_load_translations(self) -> FallbackCoordinator:
        if self._coordinator is None:
            return self._load_translations()
        return self._coordinator

    def report_missing_translation(self, identifier: MessageId, *, has_fallback: bool) -> None:
        """Emit a MissingTranslation notification for ``identifier``.

        Args:
            identifier: Final catalog key that was looked up
            has_fallback: True when the fallback locale supplied the template
        """
        logger.debug(
            "Missing translation for '%s' in locale '%s' (has_fallback=%s)",
            identifier,
            self._locale,
            has_fallback,
        )
        if self._on_missing_translation is not None:
            self._on_missing_translation(
                MissingTranslation(
                    locale=self._locale,
                    identifier=identifier,
                    has_fallback=has_fallback,
                )
            )

    def lookup(self, identifier: MessageId) -> MessageLookup | None:
        """Look up an exact key in the active, then the fallback catalog.

        No context or plural resolution and no notification.

        Returns:
            MessageLookup, or None when neither catalog has the key
        """
        return self._lazy_load_translations().get_message(identifier)

    def has_message(self, identifier: MessageId) -> bool:
        """Check if the active-locale catalog has ``identifier``."""
        return self._lazy_load_translations().has_message(identifier)

    def has_fallback_message(self, identifier: MessageId) -> bool:
        """Check if the fallback-locale catalog has ``identifier``."""
        return self._lazy_load_translations().has_fallback_message(identifier)

    def switch_locale(self, locale: LocaleCode) -> None:
        """Switch the active locale and reload both catalogs.

        The fallback locale is recomputed from the provider. Catalog
        references are replaced, not mutated.

        Args:
            locale: New active locale
        """
        self._locale = locale
        logger.debug('switching locale to "%s"', locale)
        self._load_translations()

    def format_message(
        self,
        identifier: MessageId,
        data: Mapping[str, object] | None = None,
        fallback_message: str | None = None,
    ) -> str:
        """Resolve ``identifier`` and format it with ``data``.

        Args:
            identifier: Message identifier (e.g., 'messages.greeting')
            data: Template arguments. ``context`` selects a context variant
                and ``count`` selects a plural variant.
            fallback_message: Returned verbatim when the translation is
                missing and no dynamic fallback is configured

        Returns:
            Formatted message, or a fallback string when it is missing

        Raises:
            InvalidCountError: If ``data["count"]`` is not a number
            FormattingError: If the template cannot be rendered with ``data``

        Example:
            >>> i18n.format_message("messages.inbox", {"count": 0})
            'You have no messages'
            >>> i18n.format_message("messages.unknown")
            'translation missing: en, messages.unknown'
        """
        coordinator = self._lazy_load_translations()
        key = identifier
        expected_fallback_key: MessageId | None = None

        if data:
            context = data.get("context")
            count = data.get("count")
            resolved = self._resolver.resolve(
                identifier,
                coordinator.active,
                context=None if context is None else str(context),
                count=count,  # type: ignore[arg-type]
            )
            match resolved:
                case MissingKey(attempted_key=attempted, expected_fallback_key=expected):
                    key = attempted
                    expected_fallback_key = expected
                case _:
                    key = resolved.key

        message = coordinator.get_message(key)

        if message is None or message.is_fallback_locale:
            self.report_missing_translation(
                key, has_fallback=message is not None and message.is_fallback_locale
            )

        if message is not None:
            return self.format_raw_message(message.template, data)

        dynamic_fallback = self._provider.config.fallback
        if dynamic_fallback is not None:
            return dynamic_fallback(key, self._locale)

        if fallback_message is not None:
            return fallback_message

        missing = FALLBACK_MISSING_TRANSLATION.format(locale=self._locale, identifier=key)
        if expected_fallback_key:
            missing += FALLBACK_EXPECTED_IDENTIFIER.format(identifier=expected_fallback_key)
        return missing

    def t(
        self,
        identifier: MessageId,
        data: Mapping[str, object] | None = None,
        fallback_message: str | None = None,
    ) -> str:
        """Shorthand for format_message()."""
        return self.format_message(identifier, data, fallback_message)

    def format_raw_message(
        self, template: Template, data: Mapping[str, object] | None = None
    ) -> str:
        """Format a template directly, bypassing identifier resolution.

        Raises:
            FormattingError: If the template cannot be rendered with ``data``
        """
        return self._provider.get_formatter().format(template, self._locale, data)

    def validator_messages(
        self, prefix: str = DEFAULT_VALIDATOR_PREFIX
    ) -> dict[str, ValidatorWildcardCallback]:
        """Build the wildcard rule-message resolver for a validation library.

        Args:
            prefix: Namespace holding validator messages

        Returns:
            ``{"*": resolver}`` where ``resolver(field, rule, array_path, options)``
            returns the message for a failed rule
        """
        return {VALIDATOR_WILDCARD: ValidatorMessages(self, prefix)}
