"""Resolution configuration for LocaleSession.

Provides frozen dataclasses that encapsulate every configurable aspect of
identifier resolution: plural suffixes, cross-locale fallbacks and the
dynamic fallback for missing translations. All values are validated at
construction so that a session never discovers a broken configuration
halfway through a lookup.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from localekit.enums import PluralCategory
from localekit.errors import ConfigurationError

__all__ = ["DynamicFallback", "I18nConfig", "PluralConfig"]

type DynamicFallback = Callable[[str, str], str]
"""Callable receiving (identifier, locale) and returning replacement text."""


@dataclass(frozen=True, slots=True)
class PluralConfig:
    """Immutable mapping of the seven plural categories to key suffixes.

    Every category maps to exactly one suffix. Suffixes default to the
    category name and are lower-cased at construction, so
    ``PluralConfig(other="AUTRE").other == "autre"``.

    Attributes:
        zero: Suffix for count == 0
        one: Suffix for count == 1
        two: Suffix for count == 2
        three: Suffix for count == 3
        few: Suffix for 3 < count < 11
        many: Suffix for 11 <= count < 100
        other: Suffix for everything else; universal fallback target

    Example:
        >>> config = PluralConfig.from_mapping({"one": "un", "other": "autre"})
        >>> config.suffix_for(PluralCategory.ONE)
        'un'
        >>> config.suffix_for(PluralCategory.ZERO)
        'zero'
    """

    zero: str = PluralCategory.ZERO.value
    one: str = PluralCategory.ONE.value
    two: str = PluralCategory.TWO.value
    three: str = PluralCategory.THREE.value
    few: str = PluralCategory.FEW.value
    many: str = PluralCategory.MANY.value
    other: str = PluralCategory.OTHER.value

    def __post_init__(self) -> None:
        """Normalize suffixes to lower case and validate them.

        Raises:
            ConfigurationError: If a suffix is not a non-empty string
        """
        for config_field in fields(self):
            suffix = getattr(self, config_field.name)
            if not isinstance(suffix, str) or not suffix:
                msg = (
                    f"Plural suffix for '{config_field.name}' must be a non-empty string, "
                    f"got {suffix!r}"
                )
                raise ConfigurationError(msg)
            object.__setattr__(self, config_field.name, suffix.lower())

    @classmethod
    def from_mapping(cls, plurals: Mapping[str, str]) -> PluralConfig:
        """Build a PluralConfig from a category → suffix mapping.

        Category labels are matched case-insensitively. Categories absent
        from ``plurals`` keep their default suffix, except ``other`` which
        must be listed whenever a non-empty mapping is given.

        Args:
            plurals: Mapping of category label to custom suffix

        Returns:
            Validated PluralConfig

        Raises:
            ConfigurationError: If a label is unknown or ``other`` is missing
        """
        overrides: dict[str, str] = {}
        for label, suffix in plurals.items():
            category = label.lower()
            if category not in PluralCategory:
                valid = ", ".join(PluralCategory)
                msg = f"Unknown plural category '{label}'. Expected one of: {valid}"
                raise ConfigurationError(msg)
            overrides[category] = suffix

        if overrides and PluralCategory.OTHER not in overrides:
            msg = "Plural configuration must define a suffix for 'other'"
            raise ConfigurationError(msg)

        return cls(**overrides)

    def suffix_for(self, category: PluralCategory) -> str:
        """Get the catalog key suffix for a plural category."""
        suffix: str = getattr(self, category.value)
        return suffix

    def as_dict(self) -> dict[PluralCategory, str]:
        """Get the full category → suffix mapping."""
        return {category: self.suffix_for(category) for category in PluralCategory}


def _default_fallback_locales() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable configuration consumed by LocaleSession.

    Attributes:
        plurals: Plural category → key suffix mapping
        fallback_locales: Locale → fallback locale mapping
            (e.g., ``{"ca": "es"}``). Stored as a read-only copy.
        fallback: Optional callable returning replacement text for a missing
            translation. Receives (identifier, locale). Takes precedence over
            the per-call fallback message.

    Example:
        >>> config = I18nConfig(
        ...     plurals=PluralConfig(other="autre"),
        ...     fallback_locales={"ca": "es"},
        ...     fallback=lambda identifier, locale: identifier,
        ... )
        >>> config.fallback_locales["ca"]
        'es'
    """

    plurals: PluralConfig = field(default_factory=PluralConfig)
    fallback_locales: Mapping[str, str] = field(default_factory=_default_fallback_locales)
    fallback: DynamicFallback | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If plurals is not a PluralConfig or mapping,
                fallback_locales is not a str → str mapping, or fallback is
                not callable.
        """
        if isinstance(self.plurals, Mapping):
            object.__setattr__(self, "plurals", PluralConfig.from_mapping(self.plurals))
        elif not isinstance(self.plurals, PluralConfig):
            msg = f"plurals must be a PluralConfig or mapping, got {type(self.plurals).__name__}"
            raise ConfigurationError(msg)

        if not isinstance(self.fallback_locales, Mapping):
            msg = (
                "fallback_locales must be a mapping, "
                f"got {type(self.fallback_locales).__name__}"
            )
            raise ConfigurationError(msg)
        for locale, fallback_locale in self.fallback_locales.items():
            if not isinstance(locale, str) or not isinstance(fallback_locale, str):
                msg = (
                    f"fallback_locales must map str to str, got "
                    f"{locale!r} -> {fallback_locale!r}"
                )
                raise ConfigurationError(msg)
        object.__setattr__(
            self, "fallback_locales", MappingProxyType(dict(self.fallback_locales))
        )

        if self.fallback is not None and not callable(self.fallback):
            msg = f"fallback must be callable, got {type(self.fallback).__name__}"
            raise ConfigurationError(msg)
