"""Pytest configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path (now we're one level deeper)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from modlocale.core.localization import (  # noqa: E402
    DiagnosticLog,
    InMemoryHost,
    LocalizationContext,
    TranslationCatalog,
)

SAMPLE_DATA = {
    "en": {"Greeting": "Hi {0}", "Title": "Radial Menu", "Pair": "{0} and {1}"},
    "fr": {"Greeting": "Salut {0}", "Title": "Menu radial"},
}


@pytest.fixture
def sample_catalog():
    """Small two-locale catalog with English as primary."""
    return TranslationCatalog(SAMPLE_DATA, primary="en")


@pytest.fixture
def host():
    """In-memory host starting in English with one host-owned text."""
    return InMemoryHost(current_locale="en", base_texts={"RadialMenu_Title": "HOST DEFAULT"})


@pytest.fixture
def diagnostics():
    return DiagnosticLog()


@pytest.fixture
def context(host, sample_catalog, diagnostics):
    """Uninitialized context over the sample catalog."""
    ctx = LocalizationContext(host, catalog=sample_catalog, diagnostics=diagnostics)
    yield ctx
    ctx.cleanup()
