"""Localization override package.

This package overrides the host application's text with the mod's own
translations and keeps them in sync with the host language.

Structure:
    - locales.py: Supported locales and the primary (fallback) locale
    - catalog.py: Immutable translation catalog and consistency checks
    - host.py: Host collaborator protocol and the in-memory host
    - applier.py: Writes/retracts overrides in the host store
    - notifier.py: Host language signal -> re-apply -> local event
    - accessor.py: get() / get_formatted()
    - binder.py: Keeps display sinks in sync with keys
    - context.py: LocalizationContext, the public surface
    - translations_*.py: Per-language translation data
"""

from .accessor import Accessor
from .applier import OverrideApplier
from .binder import Binding, SinkBinder, is_sink_valid
from .catalog import (
    KEY_PREFIX,
    CatalogError,
    CatalogReport,
    TranslationCatalog,
    check_catalog,
    full_key,
    load_catalog,
)
from .context import LocalizationContext
from .diagnostics import Diagnostic, DiagnosticLog, LifecycleResult
from .host import HostLocalization, InMemoryHost
from .locales import PRIMARY_LOCALE, Locale, available_locales, language_name
from .notifier import ChangeNotifier, NotifierState

__all__ = [
    "KEY_PREFIX",
    "PRIMARY_LOCALE",
    "Accessor",
    "Binding",
    "CatalogError",
    "CatalogReport",
    "ChangeNotifier",
    "Diagnostic",
    "DiagnosticLog",
    "HostLocalization",
    "InMemoryHost",
    "LifecycleResult",
    "Locale",
    "LocalizationContext",
    "NotifierState",
    "OverrideApplier",
    "SinkBinder",
    "TranslationCatalog",
    "available_locales",
    "check_catalog",
    "full_key",
    "is_sink_valid",
    "language_name",
    "load_catalog",
]
