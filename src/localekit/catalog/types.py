"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout localekit and by user code
when annotating LocaleSession call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleCode",
    "MessageId",
    "Template",
    "TranslationCatalog",
]

type MessageId = str
"""Dot-namespaced message identifier (e.g., 'messages.greeting')."""

type LocaleCode = str
"""Opaque locale code used as a map key (e.g., 'en', 'fr', 'pt-BR')."""

type Template = str
"""Raw ICU-style message template (e.g., 'Hello {name}')."""

type TranslationCatalog = Mapping[MessageId, Template]
"""Read-only mapping from identifier to template for one locale."""
