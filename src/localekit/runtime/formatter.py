"""Message formatting: interpolating data into templates.

LocaleSession delegates all text substitution to a MessageFormatter. The
protocol is the only contract the session relies on; BabelMessageFormatter
is the default implementation.

BabelMessageFormatter understands simple ICU arguments:

    {name}                          value as-is (numbers and dates localized)
    {name, number}                  locale decimal format
    {name, number, integer}         grouped integer
    {name, number, percent}         percentage (also ::percent)
    {name, number, ::currency/EUR}  currency with CLDR decimal places
    {name, number, #,##0.00}        Babel number pattern
    {name, date[, style]}           short | medium | long | full | pattern
    {name, time[, style]}           short | medium | long | full | pattern

Complex arguments (plural, select, selectordinal) and apostrophe quoting are
not interpreted; plural selection happens on catalog keys instead.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Protocol

from localekit.errors import FormattingError

from .locale_context import LocaleContext

if TYPE_CHECKING:
    from localekit.catalog.types import LocaleCode, Template

__all__ = ["BabelMessageFormatter", "MessageFormatter"]

_CURRENCY_SKELETON = "::currency/"
_COMPLEX_ARGUMENT_TYPES = frozenset({"plural", "select", "selectordinal"})


class MessageFormatter(Protocol):
    """Protocol for rendering a template with data in a locale.

    Implementations must return ``template`` unchanged when it contains no
    placeholders and ``data`` is empty.
    """

    def format(
        self,
        template: Template,
        locale: LocaleCode,
        data: Mapping[str, object] | None = None,
    ) -> str:
        """Render ``template`` for ``locale`` with ``data``.

        Raises:
            FormattingError: If the template cannot be rendered
        """
        ...


@dataclass(frozen=True, slots=True)
class _Argument:
    name: str
    kind: str | None = None
    style: str | None = None


def _parse_argument(body: str, template: str) -> _Argument:
    parts = [part.strip() for part in body.split(",", 2)]
    name = parts[0]
    if not name:
        msg = f"Empty argument name in template '{template}'"
        raise FormattingError(msg, template=template, fallback_value=template)
    kind = parts[1].lower() if len(parts) > 1 and parts[1] else None
    style = parts[2] if len(parts) > 2 and parts[2] else None
    return _Argument(name, kind, style)


@functools.lru_cache(maxsize=512)
def _tokenize(template: str) -> tuple[str | _Argument, ...]:
    """Split a template into literal text and arguments.

    A '}' outside an argument is literal text, as in ICU MessageFormat.

    Raises:
        FormattingError: On unclosed or nested braces
    """
    tokens: list[str | _Argument] = []
    pos = 0
    while pos < len(template):
        start = template.find("{", pos)
        if start == -1:
            tokens.append(template[pos:])
            break

        end = template.find("}", start + 1)
        if end == -1:
            msg = f"Unclosed '{{' at offset {start} in template '{template}'"
            raise FormattingError(msg, template=template, fallback_value=template)
        nested = template.find("{", start + 1, end)
        if nested != -1:
            msg = f"Nested arguments are not supported in template '{template}'"
            raise FormattingError(msg, template=template, fallback_value=template)

        if start > pos:
            tokens.append(template[pos:start])
        tokens.append(_parse_argument(template[start + 1 : end], template))
        pos = end + 1
    return tuple(tokens)


def _as_number(value: object, template: str) -> int | float | Decimal:
    match value:
        case bool():
            pass
        case int() | float() | Decimal():
            return value
        case str():
            try:
                return Decimal(value.strip())
            except InvalidOperation:
                pass
    msg = f"Expected a number, got {value!r} in template '{template}'"
    raise FormattingError(msg, template=template, fallback_value=str(value))


class BabelMessageFormatter:
    """Default MessageFormatter using Babel for locale-aware values.

    Stateless; one instance can serve every session.

    Example:
        >>> formatter = BabelMessageFormatter()
        >>> formatter.format("The price is {price, number, ::currency/INR}", "en", {"price": 100})
        'The price is ₹100.00'
        >>> formatter.format("{count} requests", "en", {"count": 1200})
        '1,200 requests'
    """

    __slots__ = ()

    def format(
        self,
        template: Template,
        locale: LocaleCode,
        data: Mapping[str, object] | None = None,
    ) -> str:
        """Render ``template`` for ``locale`` with ``data``.

        Raises:
            FormattingError: On malformed templates, missing arguments,
                unsupported argument types or values Babel cannot format
        """
        tokens = _tokenize(template)
        if all(isinstance(token, str) for token in tokens):
            return template

        args = data or {}
        ctx = LocaleContext.create(locale)
        parts: list[str] = []
        for token in tokens:
            if isinstance(token, str):
                parts.append(token)
                continue
            if token.name not in args:
                msg = f"Missing argument '{token.name}' for template '{template}'"
                raise FormattingError(msg, template=template, fallback_value=template)
            parts.append(self._format_argument(ctx, token, args[token.name], template))
        return "".join(parts)

    def _format_argument(
        self, ctx: LocaleContext, argument: _Argument, value: object, template: str
    ) -> str:
        match argument.kind:
            case None:
                return self._format_simple(ctx, value)
            case "number":
                return self._format_number(ctx, argument.style, value, template)
            case "date":
                temporal = self._as_temporal(value, template)
                return ctx.format_date(temporal, argument.style or "medium")
            case "time":
                temporal = self._as_temporal(value, template)
                return ctx.format_time(temporal, argument.style or "medium")
            case kind if kind in _COMPLEX_ARGUMENT_TYPES:
                msg = f"'{kind}' arguments are not supported in template '{template}'"
                raise FormattingError(msg, template=template, fallback_value=template)
            case kind:
                msg = f"Unknown argument type '{kind}' in template '{template}'"
                raise FormattingError(msg, template=template, fallback_value=template)

    @staticmethod
    def _format_simple(ctx: LocaleContext, value: object) -> str:
        match value:
            case bool():
                return str(value).lower()
            case int() | float() | Decimal():
                return ctx.format_number(value)
            case datetime():
                return ctx.format_datetime(value)
            case date():
                return ctx.format_date(value)
            case time():
                return ctx.format_time(value)
            case _:
                return str(value)

    @staticmethod
    def _format_number(
        ctx: LocaleContext, style: str | None, value: object, template: str
    ) -> str:
        number = _as_number(value, template)
        match style:
            case None:
                return ctx.format_number(number)
            case "integer" | "::integer":
                return ctx.format_number(number, pattern="#,##0")
            case "percent" | "::percent":
                return ctx.format_percent(number)
            case str() if style.startswith(_CURRENCY_SKELETON):
                currency = style.removeprefix(_CURRENCY_SKELETON).strip().upper()
                return ctx.format_currency(number, currency)
            case str() if style.startswith("::"):
                msg = f"Unsupported number skeleton '{style}' in template '{template}'"
                raise FormattingError(msg, template=template, fallback_value=str(value))
            case _:
                return ctx.format_number(number, pattern=style)

    @staticmethod
    def _as_temporal(value: object, template: str) -> date | time | str:
        if isinstance(value, (date, time, str)):
            return value
        msg = f"Expected a date, time or ISO 8601 string, got {value!r} in template '{template}'"
        raise FormattingError(msg, template=template, fallback_value=str(value))
