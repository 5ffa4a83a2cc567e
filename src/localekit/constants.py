"""Shared constants for localekit.

Centralizes the string literals that appear in user-visible output and in
catalog keys so that the resolver, the session and the validator adapter
agree on a single spelling.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog key construction
    "KEY_SEPARATOR",
    "SUFFIX_SEPARATOR",
    # Validator messages
    "DEFAULT_VALIDATOR_PREFIX",
    "VALIDATOR_WILDCARD",
    "FALLBACK_VALIDATION_FAILED",
    # Missing translation output
    "FALLBACK_MISSING_TRANSLATION",
    "FALLBACK_EXPECTED_IDENTIFIER",
    # Formatting
    "DEFAULT_FORMAT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CATALOG KEYS
# ============================================================================

# Namespaces are joined with a dot: "validator.shared.required"
KEY_SEPARATOR = "."

# Context and plural suffixes are joined with an underscore: "inbox_other"
SUFFIX_SEPARATOR = "_"

# ============================================================================
# VALIDATOR MESSAGES
# ============================================================================

DEFAULT_VALIDATOR_PREFIX = "validator.shared"

# Key under which the rule-message resolver is published
VALIDATOR_WILDCARD = "*"

# Last resort when no catalog has a message for the rule. Not configurable.
FALLBACK_VALIDATION_FAILED = "{rule} validation failed on {field}"

# ============================================================================
# MISSING TRANSLATION OUTPUT
# ============================================================================

FALLBACK_MISSING_TRANSLATION = "translation missing: {locale}, {identifier}"
FALLBACK_EXPECTED_IDENTIFIER = ". expected fallback identifier: {identifier}"

# ============================================================================
# FORMATTING
# ============================================================================

# Babel locale used when a session locale is unknown to CLDR
DEFAULT_FORMAT_LOCALE = "en_US"

# Upper bound on cached LocaleContext and Babel Locale instances
MAX_LOCALE_CACHE_SIZE = 128
