"""LocalizationContext - the engine's public surface.

One context is constructed at startup and handed to whatever needs text:

    host = InMemoryHost(current_locale="ja")
    localization = LocalizationContext(host)
    result = localization.initialize()
    title = localization.get("Settings_Title")
    localization.bind(label, "Settings_Title")
    ...
    localization.cleanup()

initialize() and cleanup() never raise; they return a LifecycleResult and
record what went wrong in ``diagnostics``.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from modlocale.core.config_loader import get_nested
from modlocale.core.logging_utils import setup_logger
from modlocale.core.signals import Signal

from .accessor import Accessor
from .applier import OverrideApplier
from .binder import Binding, SinkBinder
from .catalog import TranslationCatalog, check_catalog, load_catalog
from .diagnostics import DiagnosticLog, LifecycleResult
from .host import HostLocalization
from .locales import PRIMARY_LOCALE
from .notifier import ChangeNotifier, NotifierState

logger = setup_logger("modlocale.context")


class LocalizationContext:
    """Owns the catalog, the override lifecycle, and change notification."""

    def __init__(
        self,
        host: HostLocalization,
        primary_locale: str = PRIMARY_LOCALE,
        extra_catalogs: Iterable[str | Path] = (),
        catalog: TranslationCatalog | None = None,
        diagnostics: DiagnosticLog | None = None,
    ):
        """Initialize context (nothing is written to the host until initialize()).

        Args:
            host: Host localization collaborator
            primary_locale: Fallback locale for unsupported host languages
            extra_catalogs: YAML catalog files merged over the built-in translations
            catalog: Prebuilt catalog (skips loading; used by tests and embedders)
            diagnostics: Diagnostic sink (a new one is created if omitted)
        """
        self.host = host
        self.primary_locale = primary_locale
        self.extra_catalogs = list(extra_catalogs)
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

        self._catalog_source = catalog
        self._catalog: TranslationCatalog | None = None
        self._applier: OverrideApplier | None = None
        self._notifier: ChangeNotifier | None = None

        self.on_locale_changed = Signal("localization.on_locale_changed", error_handler=self._on_subscriber_error)
        self.accessor = Accessor(host, self.diagnostics)
        self.binder = SinkBinder(self.accessor, self.on_locale_changed, self.diagnostics)

    @classmethod
    def from_config(cls, host: HostLocalization, config: dict[str, Any]) -> "LocalizationContext":
        """Build a context from a loaded config dict.

        Args:
            host: Host localization collaborator
            config: Config dict (as returned by load_config)

        Returns:
            LocalizationContext
        """
        return cls(
            host,
            primary_locale=get_nested(config, "localization.primary_locale", PRIMARY_LOCALE.value),
            extra_catalogs=get_nested(config, "localization.extra_catalogs") or [],
            diagnostics=DiagnosticLog(capacity=int(get_nested(config, "localization.diagnostics_capacity", 100))),
        )

    # Lifecycle

    @property
    def state(self) -> NotifierState:
        if self._notifier is None:
            return NotifierState.UNINITIALIZED
        return self._notifier.state

    @property
    def active(self) -> bool:
        return self.state is NotifierState.ACTIVE

    @property
    def catalog(self) -> TranslationCatalog | None:
        """Catalog loaded by initialize() (None before and after the lifecycle)."""
        return self._catalog

    @property
    def active_locale(self) -> str | None:
        """Catalog locale currently written to the host (None when inactive)."""
        if self._applier is None:
            return None
        return self._applier.applied_locale

    def initialize(self) -> LifecycleResult:
        """Load the catalog, subscribe to the host, apply its current locale.

        Calling this while already active is a no-op that succeeds.

        Returns:
            LifecycleResult (ok=False if anything failed; host text is left untouched)
        """
        marker = self.diagnostics.mark()
        if self.active:
            return LifecycleResult(ok=True, operation="initialize")

        try:
            logger.info("Initializing localization system...")
            catalog = self._catalog_source
            if catalog is None:
                catalog = load_catalog(self.extra_catalogs, primary=self.primary_locale)

            report = check_catalog(catalog)
            if not report.clean:
                self.diagnostics.record(
                    logging.WARNING,
                    "catalog",
                    f"Catalog check: {report.summary()}",
                    report=report,
                )

            applier = OverrideApplier(catalog, self.host, self.diagnostics)
            notifier = ChangeNotifier(applier, self.host, self.on_locale_changed, self.diagnostics)
            applied = notifier.start()
        except Exception as e:
            self.diagnostics.record(
                logging.ERROR,
                "initialize",
                f"Failed to initialize localization: {e}",
                exception=e,
            )
            return LifecycleResult(ok=False, operation="initialize", diagnostics=self.diagnostics.since(marker))

        self._catalog = catalog
        self._applier = applier
        self._notifier = notifier
        logger.info(f"Localization initialized for language: {self.host.current_locale} (applied {applied})")
        return LifecycleResult(ok=True, operation="initialize", diagnostics=self.diagnostics.since(marker))

    def cleanup(self) -> LifecycleResult:
        """Unsubscribe from the host, retract every override, drop subscribers.

        Best effort: a failure part way through is recorded, and local
        subscriptions are dropped regardless. Calling this while inactive is a
        no-op that succeeds.

        Returns:
            LifecycleResult
        """
        marker = self.diagnostics.mark()
        if not self.active:
            return LifecycleResult(ok=True, operation="cleanup")

        ok = True
        try:
            self._notifier.stop()
            logger.info("Localization system cleaned up")
        except Exception as e:
            ok = False
            self.diagnostics.record(
                logging.ERROR,
                "cleanup",
                f"Failed to cleanup localization: {e}",
                exception=e,
            )
        finally:
            self.on_locale_changed.clear()
            self.binder.cancel_all()
            self._catalog = None
            self._applier = None
            self._notifier = None

        return LifecycleResult(ok=ok, operation="cleanup", diagnostics=self.diagnostics.since(marker))

    # Text access

    def get(self, key: str) -> str:
        """Current text for a short key (see Accessor.get)."""
        return self.accessor.get(key)

    def get_formatted(self, key: str, *args) -> str:
        """Current text with positional substitution (see Accessor.get_formatted)."""
        return self.accessor.get_formatted(key, *args)

    def bind(self, sink: Any, key: str) -> Binding | None:
        """Keep a sink's text in sync with a key (see SinkBinder.bind)."""
        return self.binder.bind(sink, key)

    def get_all_translations(self, key: str) -> dict[str, str]:
        """Every locale's template for a key (empty while inactive)."""
        if self._catalog is None:
            return {}
        return self._catalog.get_all_translations(key)

    def _on_subscriber_error(self, error: Exception):
        self.diagnostics.record(
            logging.ERROR,
            "subscriber",
            f"Error in language change subscriber: {error}",
            exception=error,
        )
