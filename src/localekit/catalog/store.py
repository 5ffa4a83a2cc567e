"""Immutable per-locale catalog snapshots.

A catalog is a flat mapping from dot-namespaced identifier to template.
Snapshots are wrapped in MappingProxyType so that code holding a reference
can never mutate the catalog in place; new translations replace the whole
snapshot instead.

Components:
    CatalogProvider - Protocol consumed by LocaleSession (structural typing)
    freeze_catalog - Build a read-only snapshot from any mapping
    merge_catalogs - Build a new snapshot from an existing one plus updates
    flatten_messages - Flatten nested mappings into dotted identifiers

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from localekit.constants import KEY_SEPARATOR

if TYPE_CHECKING:
    from localekit.config import I18nConfig
    from localekit.runtime.formatter import MessageFormatter

    from .types import LocaleCode, MessageId, Template, TranslationCatalog

__all__ = [
    "EMPTY_CATALOG",
    "CatalogProvider",
    "flatten_messages",
    "freeze_catalog",
    "merge_catalogs",
]

EMPTY_CATALOG: TranslationCatalog = MappingProxyType({})


class CatalogProvider(Protocol):
    """Protocol for the collaborator that owns loaded catalogs.

    LocaleSession never loads catalogs itself. It asks the provider for the
    already-loaded snapshot of a locale, for the locale to fall back to, and
    for the formatter used to render templates.

    I18nManager is the in-memory implementation shipped with localekit;
    applications that cache catalogs elsewhere implement this protocol.
    """

    @property
    def config(self) -> I18nConfig:
        """Resolution configuration (plural suffixes, fallbacks)."""
        ...

    def get_translations_for(self, locale: LocaleCode) -> TranslationCatalog:
        """Return the catalog snapshot for a locale (empty when unknown)."""
        ...

    def get_fallback_locale(self, locale: LocaleCode) -> LocaleCode:
        """Return the locale consulted when ``locale`` lacks a key."""
        ...

    def get_formatter(self) -> MessageFormatter:
        """Return the formatter used to interpolate data into templates."""
        ...


def freeze_catalog(messages: Mapping[MessageId, Template]) -> TranslationCatalog:
    """Create a read-only snapshot of a flat identifier → template mapping.

    Args:
        messages: Flat mapping of identifiers to templates

    Returns:
        MappingProxyType over a private copy of ``messages``

    Raises:
        TypeError: If any identifier or template is not a string
    """
    snapshot: dict[MessageId, Template] = {}
    for identifier, template in messages.items():
        if not isinstance(identifier, str) or not isinstance(template, str):
            msg = (
                f"Catalog entries must map str to str, got "
                f"{type(identifier).__name__} -> {type(template).__name__}"
            )
            raise TypeError(msg)
        snapshot[identifier] = template
    return MappingProxyType(snapshot)


def merge_catalogs(
    base: TranslationCatalog, updates: Mapping[MessageId, Template]
) -> TranslationCatalog:
    """Return a new snapshot holding ``base`` overlaid with ``updates``.

    Neither argument is modified. Sessions holding ``base`` keep seeing the
    old snapshot until they reload.
    """
    return freeze_catalog({**base, **updates})


def _walk(
    node: Mapping[str, object], prefix: str | None
) -> Iterator[tuple[MessageId, Template]]:
    for key, value in node.items():
        identifier = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key
        match value:
            case str():
                yield identifier, value
            case Mapping():
                yield from _walk(value, identifier)
            case _:
                msg = (
                    f"Unsupported catalog value for '{identifier}': "
                    f"expected str or mapping, got {type(value).__name__}"
                )
                raise TypeError(msg)


def flatten_messages(
    messages: Mapping[str, object], namespace: str | None = None
) -> dict[MessageId, Template]:
    """Flatten nested mappings into dot-namespaced identifiers.

    Keys that already contain dots are kept as-is, so
    ``{"shared": {"username.required": ...}}`` yields
    ``"shared.username.required"``.

    Args:
        messages: Nested mapping whose leaves are templates
        namespace: Optional prefix for every identifier (e.g., 'validator')

    Returns:
        Flat dict of identifier → template

    Raises:
        TypeError: If a leaf is neither a string nor a mapping

    Example:
        >>> flatten_messages({"shared": {"required": "{field} is required"}}, "validator")
        {'validator.shared.required': '{field} is required'}
    """
    return dict(_walk(messages, namespace))
