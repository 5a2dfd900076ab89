#!/usr/bin/env python3
"""Tests for the language-change notifier state machine."""

import logging

import pytest

from modlocale.core.localization import ChangeNotifier, NotifierState, OverrideApplier


@pytest.fixture
def notifier(sample_catalog, host, diagnostics):
    applier = OverrideApplier(sample_catalog, host, diagnostics)
    return ChangeNotifier(applier, host, diagnostics=diagnostics)


class TestLifecycle:
    """Test start()/stop() transitions."""

    def test_starts_uninitialized(self, notifier):
        assert notifier.state is NotifierState.UNINITIALIZED

    def test_start_applies_current_locale_and_subscribes(self, notifier, host):
        host.set_language("fr")
        assert notifier.start() == "fr"
        assert notifier.state is NotifierState.ACTIVE
        assert len(host.on_locale_changed) == 1
        assert host.get_plain_text("RadialMenu_Greeting") == "Salut {0}"

    def test_start_twice_is_noop(self, notifier, host):
        notifier.start()
        assert notifier.start() is None
        assert len(host.on_locale_changed) == 1

    def test_stop_unsubscribes_retracts_and_drops_local_subscribers(self, notifier, host):
        notifier.start()
        notifier.on_locale_changed.subscribe(lambda locale: None)

        assert notifier.stop() == 1
        assert notifier.state is NotifierState.UNINITIALIZED
        assert len(host.on_locale_changed) == 0
        assert len(notifier.on_locale_changed) == 0
        assert host.overrides == {}

    def test_stop_when_uninitialized_is_noop(self, notifier):
        assert notifier.stop() == 0

    def test_failed_start_rolls_back(self, notifier, host, monkeypatch):
        def boom(locale):
            host.set_override("RadialMenu_Greeting", "partial")
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(notifier.applier, "apply", boom)
        with pytest.raises(RuntimeError):
            notifier.start()
        assert notifier.state is NotifierState.UNINITIALIZED
        assert len(host.on_locale_changed) == 0
        assert host.overrides == {}

    def test_stop_retracts_even_if_unsubscribe_fails(self, notifier, host, diagnostics, monkeypatch):
        notifier.start()
        notifier.on_locale_changed.subscribe(lambda locale: None)

        def broken_unsubscribe(token):
            raise RuntimeError("signal gone")

        monkeypatch.setattr(host.on_locale_changed, "unsubscribe", broken_unsubscribe)
        with pytest.raises(RuntimeError, match="signal gone"):
            notifier.stop()

        assert notifier.state is NotifierState.UNINITIALIZED
        assert host.overrides == {}
        assert len(notifier.on_locale_changed) == 0
        records = diagnostics.records(operation="stop")
        assert [r.details["step"] for r in records] == ["unsubscribe"]


class TestLocaleChange:
    """Test handling of host language changes."""

    def test_change_reapplies_then_emits(self, notifier, host):
        seen = []
        notifier.on_locale_changed.subscribe(
            lambda locale: seen.append((locale, host.get_plain_text("RadialMenu_Greeting")))
        )
        notifier.start()
        host.set_language("fr")
        # The store is already updated when subscribers run
        assert seen == [("fr", "Salut {0}")]

    def test_one_emission_per_host_firing(self, notifier, host):
        seen = []
        notifier.on_locale_changed.subscribe(seen.append)
        notifier.start()
        for locale in ["fr", "en", "de", "fr"]:
            host.set_language(locale)
        assert seen == ["fr", "en", "de", "fr"]

    def test_emits_reported_locale_even_on_fallback(self, notifier, host):
        seen = []
        notifier.on_locale_changed.subscribe(seen.append)
        notifier.start()
        host.set_language("de")
        assert seen == ["de"]
        assert notifier.applier.applied_locale == "en"

    def test_no_emission_after_stop(self, notifier, host):
        seen = []
        notifier.start()
        notifier.on_locale_changed.subscribe(seen.append)
        notifier.stop()
        host.set_language("fr")
        assert seen == []
        assert host.overrides == {}

    def test_apply_failure_suppresses_emission(self, notifier, host, diagnostics, monkeypatch):
        seen = []
        notifier.on_locale_changed.subscribe(seen.append)
        notifier.start()

        def boom(locale):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(notifier.applier, "apply", boom)
        host.set_language("fr")

        assert seen == []
        errors = diagnostics.records(operation="locale_change", min_severity=logging.ERROR)
        assert len(errors) == 1
        assert isinstance(errors[0].exception, RuntimeError)

    def test_restart_after_stop(self, notifier, host):
        seen = []
        notifier.start()
        notifier.stop()
        notifier.start()
        notifier.on_locale_changed.subscribe(seen.append)
        host.set_language("fr")
        assert seen == ["fr"]
        assert len(host.on_locale_changed) == 1
