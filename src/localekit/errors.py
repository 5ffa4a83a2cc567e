"""localekit exception hierarchy.

Missing translations are never exceptions: they produce a deterministic
fallback string plus a MissingTranslation notification. Exceptions are
reserved for malformed input (a non-numeric count), invalid configuration
and templates the formatter cannot render.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "FormattingError",
    "InvalidCountError",
    "LocaleKitError",
]


class LocaleKitError(Exception):
    """Base exception for all localekit errors."""


class InvalidCountError(LocaleKitError, ValueError):
    """The ``count`` value passed for plural resolution is not a number.

    Raised synchronously to the caller. No missing-translation notification
    is emitted because the caller passed malformed data.

    Attributes:
        value: The offending count value
    """

    def __init__(self, value: object) -> None:
        """Initialize InvalidCountError.

        Args:
            value: The count value that failed numeric parsing
        """
        super().__init__('"count" is not a number')
        self.value = value


class ConfigurationError(LocaleKitError, ValueError):
    """Invalid I18nConfig or PluralConfig detected at construction time."""


class FormattingError(LocaleKitError):
    """Raised when a template cannot be rendered by the message formatter.

    Carries a fallback_value so callers that prefer degraded output over
    an exception can still show something meaningful.

    Attributes:
        template: The template that failed to render
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, *, template: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error description
            template: The template that failed to render
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.template = template
        self.fallback_value = fallback_value
