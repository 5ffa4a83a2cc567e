"""Tests for catalog snapshots and the in-memory I18nManager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from localekit import CatalogProvider, I18nConfig, I18nManager, LocaleSession
from localekit.catalog import EMPTY_CATALOG, flatten_messages, freeze_catalog, merge_catalogs
from localekit.runtime import BabelMessageFormatter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tests.conftest import ManagerFactory


class TestCatalogHelpers:
    """Snapshot construction and flattening."""

    def test_flatten_nested(self) -> None:
        """Nested mappings become dotted identifiers."""
        assert flatten_messages({"shared": {"required": "r", "min": "m"}}, "validator") == {
            "validator.shared.required": "r",
            "validator.shared.min": "m",
        }

    def test_flatten_keeps_dotted_keys(self) -> None:
        """Keys that contain dots are kept whole."""
        assert flatten_messages({"users.*.email": {"email": "e"}}) == {"users.*.email.email": "e"}

    def test_flatten_rejects_bad_leaf(self) -> None:
        """Leaves must be strings or mappings."""
        with pytest.raises(TypeError, match="'messages.count'"):
            flatten_messages({"count": 3}, "messages")

    def test_freeze_is_read_only(self) -> None:
        """Snapshots cannot be mutated."""
        catalog = freeze_catalog({"a": "b"})
        with pytest.raises(TypeError):
            catalog["a"] = "c"  # type: ignore[index]

    def test_freeze_rejects_non_strings(self) -> None:
        """Templates must be strings."""
        with pytest.raises(TypeError, match="must map str to str"):
            freeze_catalog({"a": 1})  # type: ignore[dict-item]

    def test_merge_leaves_base_untouched(self) -> None:
        """Merging builds a new snapshot."""
        base = freeze_catalog({"a": "1", "b": "2"})
        merged = merge_catalogs(base, {"b": "3", "c": "4"})
        assert dict(base) == {"a": "1", "b": "2"}
        assert dict(merged) == {"a": "1", "b": "3", "c": "4"}


class TestI18nManager:
    """Catalog registry and session factory."""

    def test_is_catalog_provider(self) -> None:
        """I18nManager satisfies the CatalogProvider protocol structurally."""
        provider: CatalogProvider = I18nManager()
        assert provider.get_translations_for("en") is EMPTY_CATALOG
        assert isinstance(provider.get_formatter(), BabelMessageFormatter)

    def test_initial_translations_are_flattened(self) -> None:
        """Constructor catalogs are flattened per locale."""
        manager = I18nManager({"en": {"messages": {"greeting": "Hello"}}, "es": {}})
        assert manager.supported_locales == ("en", "es")
        assert dict(manager.get_translations_for("en")) == {"messages.greeting": "Hello"}

    def test_add_translations_merges(self, make_manager: ManagerFactory) -> None:
        """add_translations overlays new messages on the existing catalog."""
        manager = make_manager({"en": {"a": "1"}})
        manager.add_translations("en", {"b": "2"})
        manager.add_translations("en", {"a": "updated"})
        assert dict(manager.get_translations_for("en")) == {"a": "updated", "b": "2"}

    def test_add_translations_with_namespace(self, make_manager: ManagerFactory) -> None:
        """The namespace prefixes every identifier."""
        manager = make_manager()
        manager.add_translations("en", {"shared": {"required": "r"}}, namespace="validator")
        assert "validator.shared.required" in manager.get_translations_for("en")

    def test_add_translations_logs(
        self, make_manager: ManagerFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Registration is logged at info level."""
        manager = make_manager()
        with caplog.at_level(logging.INFO, logger="localekit.catalog.manager"):
            manager.add_translations("fr", {"a": "b", "c": "d"})
        assert "Registered 2 messages for locale 'fr'" in caplog.text

    def test_reload_replaces_everything(self, make_manager: ManagerFactory) -> None:
        """reload_translations drops locales that are not in the new mapping."""
        manager = make_manager({"en": {"a": "1"}, "fr": {"a": "un"}})
        manager.reload_translations({"de": {"a": "eins"}})
        assert manager.supported_locales == ("de",)
        assert manager.get_translations_for("en") is EMPTY_CATALOG

    def test_snapshot_identity_changes_on_update(self, make_manager: ManagerFactory) -> None:
        """Updates replace the snapshot object instead of mutating it."""
        manager = make_manager({"en": {"a": "1"}})
        before = manager.get_translations_for("en")
        manager.add_translations("en", {"b": "2"})
        assert manager.get_translations_for("en") is not before
        assert "b" not in before

    @pytest.mark.parametrize(
        ("fallback_locales", "default_locale", "locale", "expected"),
        [
            ({"ca": "es"}, None, "ca", "es"),
            ({"ca": "es"}, "en", "ca", "es"),
            ({}, "en", "de", "en"),
            ({}, None, "de", "de"),
        ],
    )
    def test_fallback_locale_derivation(
        self,
        make_manager: ManagerFactory,
        fallback_locales: Mapping[str, str],
        default_locale: str | None,
        locale: str,
        expected: str,
    ) -> None:
        """Mapping wins, then the default locale, then the locale itself."""
        manager = make_manager(
            config=I18nConfig(fallback_locales=fallback_locales),
            default_locale=default_locale,
        )
        assert manager.get_fallback_locale(locale) == expected

    def test_locale_creates_session(self, make_manager: ManagerFactory) -> None:
        """locale() returns a session bound to the manager."""
        session = make_manager().locale("en")
        assert isinstance(session, LocaleSession)
        assert session.locale == "en"

    def test_custom_formatter(self) -> None:
        """A custom MessageFormatter is used by every session."""

        class UpperFormatter:
            def format(
                self,
                template: str,
                locale: str,
                data: Mapping[str, object] | None = None,
            ) -> str:
                return template.upper()

        manager = I18nManager({"en": {"title": "dashboard"}}, formatter=UpperFormatter())
        assert manager.locale("en").t("title") == "DASHBOARD"

    def test_repr(self) -> None:
        """repr lists locales and the default locale."""
        manager = I18nManager({"en": {}}, default_locale="en")
        assert repr(manager) == "I18nManager(locales=('en',), default_locale='en')"
