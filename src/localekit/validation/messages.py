"""Rule-message resolution for validation libraries.

A validation library asks for one message per failed rule. Messages are
searched from most to least specific:

    1. <prefix>.<field>.<rule>         e.g. validator.shared.username.required
    2. <prefix>.<array_path>.<rule>    e.g. validator.shared.users.*.email.email
    3. <prefix>.<rule>                 e.g. validator.shared.required
    4. "<rule> validation failed on <field>"

Only the third tier reports a missing translation when absent, because it is
the shared message every rule is expected to have. A fallback-locale hit on
any tier is reported as well.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from localekit.constants import (
    DEFAULT_VALIDATOR_PREFIX,
    FALLBACK_VALIDATION_FAILED,
    KEY_SEPARATOR,
)

if TYPE_CHECKING:
    from localekit.catalog.types import MessageId
    from localekit.localization.session import LocaleSession

__all__ = ["ValidatorMessages", "ValidatorWildcardCallback"]

type ValidatorWildcardCallback = Callable[
    [str, str, str | None, Mapping[str, object] | None], str
]
"""Signature expected by validation libraries: (field, rule, array_path, options)."""


class ValidatorMessages:
    """Callable resolving the message for a failed validation rule.

    Never raises for missing translations; the last tier is a fixed English
    sentence.

    Example:
        >>> manager.add_translations(
        ...     "en", {"shared": {"required": "{field} is required"}}, namespace="validator"
        ... )
        >>> messages = manager.locale("en").validator_messages()["*"]
        >>> messages("username", "required")
        'username is required'
        >>> messages("age", "min", options={"min": 18})
        'min validation failed on age'
    """

    __slots__ = ("_prefix", "_session")

    def __init__(self, session: LocaleSession, prefix: str = DEFAULT_VALIDATOR_PREFIX) -> None:
        self._session = session
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Get the namespace holding validator messages."""
        return self._prefix

    def _key(self, *parts: str) -> MessageId:
        return KEY_SEPARATOR.join((self._prefix, *parts))

    def _format(
        self,
        identifier: MessageId,
        data: Mapping[str, object],
        *,
        force_notify: bool = False,
    ) -> str | None:
        """Format the message for ``identifier`` or return None when absent."""
        message = self._session.lookup(identifier)

        if message is None:
            if force_notify:
                self._session.report_missing_translation(identifier, has_fallback=False)
            return None

        if message.is_fallback_locale:
            self._session.report_missing_translation(identifier, has_fallback=True)

        return self._session.format_raw_message(message.template, data)

    def __call__(
        self,
        field: str,
        rule: str,
        array_path: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> str:
        """Resolve the message for ``rule`` failing on ``field``.

        Args:
            field: Field name (e.g., 'username')
            rule: Rule name (e.g., 'required')
            array_path: Wildcard path for array members (e.g., 'users.*.email')
            options: Rule options made available to the template

        Returns:
            Formatted message
        """
        data: dict[str, object] = {"field": field, "rule": rule, **(options or {})}

        message = self._format(self._key(field, rule), data)
        if message is not None:
            return message

        if array_path:
            message = self._format(self._key(array_path, rule), data)
            if message is not None:
                return message

        message = self._format(self._key(rule), data, force_notify=True)
        if message is not None:
            return message

        return FALLBACK_VALIDATION_FAILED.format(rule=rule, field=field)
