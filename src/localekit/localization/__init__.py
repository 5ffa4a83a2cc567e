"""Locale session package.

Submodules:
    session - LocaleSession (identifier resolution façade)
    events  - MissingTranslation notification payload

Python 3.13+.
"""

from localekit.localization.events import MissingTranslation, MissingTranslationHandler
from localekit.localization.session import LocaleSession

__all__ = [
    "LocaleSession",
    "MissingTranslation",
    "MissingTranslationHandler",
]
