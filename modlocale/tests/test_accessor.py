#!/usr/bin/env python3
"""Tests for get()/get_formatted()."""

import logging

import pytest

from modlocale.core.localization import Accessor, InMemoryHost, OverrideApplier


@pytest.fixture
def accessor(sample_catalog, host, diagnostics):
    OverrideApplier(sample_catalog, host, diagnostics).apply("en")
    return Accessor(host, diagnostics)


class TestGet:
    """Test plain lookups."""

    def test_get_returns_override(self, accessor):
        assert accessor.get("Greeting") == "Hi {0}"

    def test_missing_key_is_host_defined(self, sample_catalog):
        raw_host = InMemoryHost(missing_key_policy="key")
        empty_host = InMemoryHost(missing_key_policy="empty")
        assert Accessor(raw_host).get("Nope") == "RadialMenu_Nope"
        assert Accessor(empty_host).get("Nope") == ""

    def test_unknown_missing_key_policy_rejected(self):
        with pytest.raises(ValueError):
            InMemoryHost(missing_key_policy="explode")


class TestGetFormatted:
    """Test positional formatting and its failure containment."""

    def test_formats_positional_args(self, accessor):
        assert accessor.get_formatted("Greeting", "Amy") == "Hi Amy"
        assert accessor.get_formatted("Pair", "salt", "pepper") == "salt and pepper"

    def test_non_string_args(self, accessor):
        assert accessor.get_formatted("Pair", 1, 2.5) == "1 and 2.5"

    def test_extra_args_are_ignored(self, accessor):
        assert accessor.get_formatted("Greeting", "Amy", "unused") == "Hi Amy"

    def test_too_few_args_returns_unformatted(self, accessor, diagnostics):
        assert accessor.get_formatted("Pair", "salt") == "{0} and {1}"
        records = diagnostics.records(operation="format")
        assert len(records) == 1
        assert records[0].severity == logging.DEBUG
        assert records[0].details == {"key": "Pair", "arg_count": 1}

    def test_no_args_for_placeholder_returns_unformatted(self, accessor):
        assert accessor.get_formatted("Greeting") == "Hi {0}"

    @pytest.mark.parametrize(
        "template",
        ["Broken {0", "Named {name}", "Attr {0.missing}", "Spec {0:d}"],
    )
    def test_malformed_templates_return_unformatted(self, host, template):
        host.set_override("RadialMenu_Odd", template)
        assert Accessor(host).get_formatted("Odd", "text") == template

    def test_never_partially_substituted(self, host):
        host.set_override("RadialMenu_Odd", "{0} then {5}")
        result = Accessor(host).get_formatted("Odd", "first")
        assert result == "{0} then {5}"
