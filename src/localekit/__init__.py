"""localekit - message identifier resolution with plural, context and locale fallback.

Resolves a message identifier plus optional context and count into a
locale-appropriate display string. Catalogs are supplied already loaded;
localekit derives the catalog key, walks the active then fallback locale,
reports missing translations and formats the result with Babel.

Public API:
    I18nManager - In-memory catalogs, fallback-locale derivation, session factory
    LocaleSession - format_message / t / has_message / switch_locale / validator_messages
    I18nConfig - Plural suffixes, cross-locale fallbacks, dynamic fallback
    PluralConfig - Plural category -> catalog key suffix mapping
    MissingTranslation - Payload of missing-translation notifications
    BabelMessageFormatter - Default MessageFormatter implementation

Exceptions:
    LocaleKitError - Base exception class
    InvalidCountError - Non-numeric count passed for plural resolution
    ConfigurationError - Invalid configuration
    FormattingError - Template could not be rendered

Submodules:
    localekit.catalog - Catalog snapshots, CatalogProvider protocol, I18nManager
    localekit.runtime - Plural rules, identifier resolver, fallback lookup, formatter
    localekit.localization - LocaleSession and notification types
    localekit.validation - Rule-message resolver for validation libraries
"""

from .catalog import CatalogProvider, I18nManager
from .config import I18nConfig, PluralConfig
from .enums import PluralCategory
from .errors import ConfigurationError, FormattingError, InvalidCountError, LocaleKitError
from .localization import LocaleSession, MissingTranslation
from .runtime import BabelMessageFormatter, MessageFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelMessageFormatter",
    "CatalogProvider",
    "ConfigurationError",
    "FormattingError",
    "I18nConfig",
    "I18nManager",
    "InvalidCountError",
    "LocaleKitError",
    "LocaleSession",
    "MessageFormatter",
    "MissingTranslation",
    "PluralCategory",
    "PluralConfig",
    "__version__",
]
