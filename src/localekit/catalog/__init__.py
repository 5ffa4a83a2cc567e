"""Catalog package: type aliases, immutable snapshots and the in-memory manager.

Submodules:
    types   - PEP 695 type aliases (MessageId, LocaleCode, Template, TranslationCatalog)
    store   - CatalogProvider protocol and snapshot helpers
    manager - I18nManager (in-memory CatalogProvider and session factory)

Python 3.13+.
"""

from localekit.catalog.manager import I18nManager
from localekit.catalog.store import (
    EMPTY_CATALOG,
    CatalogProvider,
    flatten_messages,
    freeze_catalog,
    merge_catalogs,
)
from localekit.catalog.types import LocaleCode, MessageId, Template, TranslationCatalog

__all__ = [
    "EMPTY_CATALOG",
    "CatalogProvider",
    "I18nManager",
    "LocaleCode",
    "MessageId",
    "Template",
    "TranslationCatalog",
    "flatten_messages",
    "freeze_catalog",
    "merge_catalogs",
]
