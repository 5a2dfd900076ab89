#!/usr/bin/env python3
"""End-to-end tests for LocalizationContext."""

import logging

import pytest

from modlocale.core.localization import (
    InMemoryHost,
    Locale,
    LocalizationContext,
    NotifierState,
    TranslationCatalog,
    load_catalog,
)
from modlocale.ui import TextLabel


class TestWorkedExample:
    """Primary 'Hi {0}', fr 'Salut {0}', host switches to unsupported 'de'."""

    def test_example(self):
        catalog = TranslationCatalog(
            {"en": {"Greeting": "Hi {0}"}, "fr": {"Greeting": "Salut {0}"}},
            primary="en",
        )
        host = InMemoryHost(current_locale="fr")
        localization = LocalizationContext(host, catalog=catalog)
        events = []

        assert localization.initialize()
        localization.on_locale_changed.subscribe(events.append)

        assert localization.get("Greeting") == "Salut {0}"
        assert localization.get_formatted("Greeting", "Amy") == "Salut Amy"

        host.set_language("de")
        assert localization.get("Greeting") == "Hi {0}"
        assert events == ["de"]

        localization.cleanup()


class TestInitialize:
    """Test initialize()."""

    def test_initialize_returns_ok_result(self, context):
        result = context.initialize()
        assert result.ok
        assert result.operation == "initialize"
        assert context.state is NotifierState.ACTIVE
        assert context.active_locale == "en"

    def test_initialize_twice_is_noop(self, context, host):
        context.initialize()
        writes = host.override_writes
        assert context.initialize().ok
        assert host.override_writes == writes
        assert len(host.on_locale_changed) == 1

    def test_nothing_written_before_initialize(self, context, host):
        assert host.overrides == {}
        assert context.get("Title") == "HOST DEFAULT"
        assert context.active_locale is None

    def test_unsupported_host_locale_uses_primary(self, sample_catalog):
        host = InMemoryHost(current_locale="de")
        localization = LocalizationContext(host, catalog=sample_catalog)
        result = localization.initialize()
        assert result.ok
        assert localization.get("Greeting") == "Hi {0}"
        assert [d.operation for d in result.diagnostics] == ["catalog", "apply"]
        localization.cleanup()

    def test_initialize_failure_is_contained(self, tmp_path, host):
        localization = LocalizationContext(host, extra_catalogs=[tmp_path / "missing.yaml"])
        result = localization.initialize()

        assert not result
        assert result.error is not None
        assert localization.state is NotifierState.UNINITIALIZED
        # Host keeps its own text; nothing subscribed or written
        assert host.overrides == {}
        assert len(host.on_locale_changed) == 0
        assert localization.get("Title") == "HOST DEFAULT"
        assert localization.diagnostics.records(operation="initialize", min_severity=logging.ERROR)

    def test_apply_failure_during_initialize_is_contained(self, context, host, monkeypatch):
        def broken_set_override(full_key, text):
            raise RuntimeError("host store locked")

        monkeypatch.setattr(host, "set_override", broken_set_override)
        result = context.initialize()
        assert not result.ok
        assert isinstance(result.error, RuntimeError)
        assert len(host.on_locale_changed) == 0

    def test_initialize_with_builtin_catalog(self):
        host = InMemoryHost(current_locale=Locale.KOREAN.value)
        localization = LocalizationContext(host)
        assert localization.initialize()
        assert localization.get("Settings_Title") == "원형 메뉴 설정"
        assert localization.get_formatted("UI_ItemCount", 4) == "남은 수량: 4"
        localization.cleanup()


class TestCleanup:
    """Test cleanup()."""

    def test_cleanup_retracts_every_locale_ever_applied(self, context, host):
        context.initialize()
        host.set_language("fr")
        host.set_language("de")
        result = context.cleanup()

        assert result.ok
        assert host.overrides == {}
        assert context.get("Title") == "HOST DEFAULT"
        assert context.get("Greeting") == "RadialMenu_Greeting"

    def test_cleanup_drops_subscribers(self, context, host):
        context.initialize()
        seen = []
        context.on_locale_changed.subscribe(seen.append)
        context.bind(TextLabel(), "Title")
        context.cleanup()

        host.set_language("fr")
        assert seen == []
        assert len(context.on_locale_changed) == 0
        assert context.binder.active_bindings() == []
        assert len(host.on_locale_changed) == 0

    def test_cleanup_when_inactive_is_noop(self, context):
        assert context.cleanup().ok

    def test_cleanup_failure_is_contained(self, context, host, monkeypatch):
        context.initialize()
        context.on_locale_changed.subscribe(lambda locale: None)

        def broken_remove(full_key):
            raise RuntimeError("host store locked")

        monkeypatch.setattr(host, "remove_override", broken_remove)
        result = context.cleanup()

        assert not result.ok
        assert isinstance(result.error, RuntimeError)
        assert context.state is NotifierState.UNINITIALIZED
        assert len(context.on_locale_changed) == 0
        assert len(host.on_locale_changed) == 0

    def test_cleanup_retracts_when_host_unsubscribe_fails(self, context, host, monkeypatch):
        context.initialize()
        host.set_language("fr")

        def broken_unsubscribe(token):
            raise RuntimeError("signal gone")

        monkeypatch.setattr(host.on_locale_changed, "unsubscribe", broken_unsubscribe)
        result = context.cleanup()

        assert not result.ok
        assert str(result.error) == "signal gone"
        assert host.overrides == {}
        assert context.get("Title") == "HOST DEFAULT"
        assert context.state is NotifierState.UNINITIALIZED


class TestLifecycleCycle:
    """Re-initialize after cleanup reproduces a fresh start."""

    def test_reinitialize_reproduces_override_set(self, context, host):
        host.set_language("fr")
        context.initialize()
        first = host.overrides
        host.set_language("en")
        context.cleanup()

        host.set_language("fr")
        assert context.initialize().ok
        assert host.overrides == first

    def test_events_flow_after_reinitialize(self, context, host):
        context.initialize()
        context.cleanup()
        context.initialize()

        seen = []
        context.on_locale_changed.subscribe(seen.append)
        host.set_language("fr")
        assert seen == ["fr"]
        assert context.get("Title") == "Menu radial"

    def test_builtin_locales_full_cycle(self):
        catalog = load_catalog()
        host = InMemoryHost()
        localization = LocalizationContext(host, catalog=catalog)
        localization.initialize()
        for locale in Locale:
            host.set_language(locale.value)
            for key, template in catalog[locale].items():
                assert localization.get(key) == template
        localization.cleanup()
        assert host.overrides == {}


class TestSubscribers:
    """Test the public change event."""

    def test_exactly_one_emission_per_host_change(self, context, host):
        context.initialize()
        seen = []
        context.on_locale_changed.subscribe(seen.append)
        host.set_language("fr")
        host.set_language("fr")  # no change, host does not fire
        host.set_language("en")
        assert seen == ["fr", "en"]

    def test_failing_subscriber_does_not_block_others(self, context, host):
        context.initialize()
        seen = []

        def broken(locale):
            raise ValueError("bad subscriber")

        context.on_locale_changed.subscribe(broken)
        context.on_locale_changed.subscribe(seen.append)
        host.set_language("fr")

        assert seen == ["fr"]
        errors = context.diagnostics.records(operation="subscriber")
        assert len(errors) == 1
        assert isinstance(errors[0].exception, ValueError)

    def test_bound_label_follows_host(self, context, host):
        context.initialize()
        label = TextLabel()
        binding = context.bind(label, "Title")
        assert label.text == "Radial Menu"
        host.set_language("fr")
        assert label.text == "Menu radial"
        binding.cancel()
        host.set_language("en")
        assert label.text == "Menu radial"

    def test_bind_unsupported_sink_returns_none(self, context):
        context.initialize()
        assert context.bind(object(), "Title") is None
        assert context.binder.active_bindings() == []
        assert context.diagnostics.records(operation="bind")


class TestFromConfig:
    """Test building a context from config."""

    def test_from_config(self, tmp_path):
        extra = tmp_path / "extra.yaml"
        extra.write_text("en:\n  Settings_Title: Configured\n", encoding="utf-8")
        config = {
            "localization": {
                "primary_locale": "en",
                "extra_catalogs": [str(extra)],
                "diagnostics_capacity": 5,
            }
        }
        host = InMemoryHost()
        localization = LocalizationContext.from_config(host, config)
        assert localization.initialize()
        assert localization.get("Settings_Title") == "Configured"
        assert localization.get_all_translations("Settings_Title")["ja"] == "ラジアルメニュー設定"
        localization.cleanup()

    @pytest.mark.parametrize("primary", ["ja", "zh-Hans"])
    def test_configured_primary_is_fallback(self, primary):
        host = InMemoryHost(current_locale="de")
        localization = LocalizationContext.from_config(host, {"localization": {"primary_locale": primary}})
        localization.initialize()
        assert localization.active_locale == primary
        localization.cleanup()
