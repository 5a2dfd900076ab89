#!/usr/bin/env python3
"""Tests for pushing/retracting overrides in the host store."""

import logging
import threading

import pytest

from modlocale.core.localization import InMemoryHost, OverrideApplier, TranslationCatalog, load_catalog


@pytest.fixture
def applier(sample_catalog, host, diagnostics):
    return OverrideApplier(sample_catalog, host, diagnostics)


class TestApply:
    """Test apply()."""

    def test_apply_writes_namespaced_overrides(self, applier, host):
        assert applier.apply("fr") == "fr"
        assert host.get_plain_text("RadialMenu_Greeting") == "Salut {0}"
        assert host.get_plain_text("RadialMenu_Title") == "Menu radial"

    def test_no_unprefixed_keys_written(self, applier, host):
        applier.apply("en")
        assert all(key.startswith("RadialMenu_") for key in host.overrides)

    def test_unknown_locale_falls_back_to_primary(self, applier, host, diagnostics):
        assert applier.apply("de") == "en"
        assert host.get_plain_text("RadialMenu_Greeting") == "Hi {0}"

        warnings = diagnostics.records(operation="apply", min_severity=logging.WARNING)
        assert len(warnings) == 1
        assert warnings[0].details == {"requested": "de", "fallback": "en"}

    def test_unknown_locale_matches_primary_override_set(self, sample_catalog):
        primary_host = InMemoryHost()
        fallback_host = InMemoryHost()
        OverrideApplier(sample_catalog, primary_host).apply("en")
        OverrideApplier(sample_catalog, fallback_host).apply("xx-unknown")
        assert primary_host.overrides == fallback_host.overrides

    def test_missing_key_shows_primary_text(self, applier, host):
        """fr lacks 'Pair'; it still resolves to the primary template."""
        applier.apply("fr")
        assert host.get_plain_text("RadialMenu_Pair") == "{0} and {1}"

    def test_supported_locale_records_no_diagnostic(self, applier, diagnostics):
        applier.apply("fr")
        assert diagnostics.records(operation="apply") == []

    def test_applied_locale_tracks_last_apply(self, applier):
        assert applier.applied_locale is None
        applier.apply("fr")
        assert applier.applied_locale == "fr"
        applier.apply("de")
        assert applier.applied_locale == "en"

    @pytest.mark.parametrize("locale", ["zh-Hans", "zh-Hant", "en", "ja", "ko"])
    def test_every_builtin_locale_round_trips_through_host(self, locale):
        catalog = load_catalog()
        host = InMemoryHost()
        OverrideApplier(catalog, host).apply(locale)
        for key, template in catalog[locale].items():
            assert host.get_plain_text("RadialMenu_" + key) == template


class TestRetractAll:
    """Test retract_all()."""

    def test_retract_restores_host_defaults(self, applier, host):
        applier.apply("fr")
        applier.retract_all()
        assert host.overrides == {}
        assert host.get_plain_text("RadialMenu_Title") == "HOST DEFAULT"

    def test_retract_covers_every_locale(self, host):
        catalog = TranslationCatalog({"en": {"A": "a"}, "ja": {"B": "b"}}, primary="en")
        applier = OverrideApplier(catalog, host)
        # Simulate keys left by some earlier locale
        host.set_override("RadialMenu_B", "stale")
        applier.apply("en")
        assert applier.retract_all() == 2
        assert host.overrides == {}

    def test_retract_is_idempotent(self, applier, host):
        applier.apply("en")
        applier.retract_all()
        applier.retract_all()
        assert host.overrides == {}
        assert applier.applied_locale is None

    def test_retract_leaves_foreign_keys(self, applier, host):
        host.set_override("OtherMod_Title", "theirs")
        applier.apply("en")
        applier.retract_all()
        assert host.overrides == {"OtherMod_Title": "theirs"}


class TestSerialization:
    """Concurrent applies never leave a mixed-locale store."""

    def test_concurrent_applies_leave_single_locale(self):
        keys = {f"K{i}": f"en{i}" for i in range(200)}
        catalog = TranslationCatalog(
            {"en": keys, "fr": {k: v.replace("en", "fr") for k, v in keys.items()}},
            primary="en",
        )
        host = InMemoryHost()
        applier = OverrideApplier(catalog, host)

        threads = [threading.Thread(target=applier.apply, args=(loc,)) for loc in ["en", "fr"] * 10]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        prefixes = {value[:2] for value in host.overrides.values()}
        assert len(prefixes) == 1

    def test_failed_remove_does_not_stop_the_rest(self, host, monkeypatch):
        catalog = TranslationCatalog({"en": {"A": "a", "B": "b", "C": "c"}}, primary="en")
        applier = OverrideApplier(catalog, host)
        applier.apply("en")
        remove = host.remove_override

        def flaky_remove(full_key):
            if full_key == "RadialMenu_B":
                raise RuntimeError("locked")
            remove(full_key)

        monkeypatch.setattr(host, "remove_override", flaky_remove)
        with pytest.raises(RuntimeError, match="locked"):
            applier.retract_all()
        assert host.overrides == {"RadialMenu_B": "b"}
        assert applier.applied_locale is None
