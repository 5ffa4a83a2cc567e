"""Missing-translation notifications.

LocaleSession reports every lookup that the active locale could not satisfy,
including "soft misses" served from the fallback locale. Notifications go
to an optional callback; they are telemetry, never errors.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localekit.catalog.types import LocaleCode, MessageId

__all__ = ["MissingTranslation", "MissingTranslationHandler"]


@dataclass(frozen=True, slots=True)
class MissingTranslation:
    """Information about a translation the active locale lacks.

    Attributes:
        locale: Active locale of the session that performed the lookup
        identifier: Final catalog key that was looked up
        has_fallback: True when the fallback locale supplied the template

    Example:
        >>> def log_missing(event: MissingTranslation) -> None:
        ...     print(f"{event.locale}: {event.identifier} (fallback={event.has_fallback})")
        >>> manager = I18nManager(on_missing_translation=log_missing)
    """

    locale: LocaleCode
    identifier: MessageId
    has_fallback: bool


type MissingTranslationHandler = Callable[[MissingTranslation], None]
