"""Push and retract catalog entries in the host's override store."""

import logging
import threading

from modlocale.core.logging_utils import setup_logger

from .catalog import TranslationCatalog, full_key, locale_code
from .diagnostics import DiagnosticLog
from .host import HostLocalization

logger = setup_logger("modlocale.applier")


class OverrideApplier:
    """Writes one locale's entries into the host store under KEY_PREFIX.

    apply() and retract_all() share one lock, so two applies for different
    locales can never interleave their writes.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        host: HostLocalization,
        diagnostics: DiagnosticLog | None = None,
    ):
        self.catalog = catalog
        self.host = host
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._lock = threading.RLock()
        self._applied_locale: str | None = None

    @property
    def applied_locale(self) -> str | None:
        """Catalog locale whose entries were written last (None after retract_all)."""
        return self._applied_locale

    def resolve(self, locale) -> str:
        """Map a requested locale onto a catalog locale.

        Args:
            locale: Locale code reported by the host

        Returns:
            The locale itself if present in the catalog, else the primary locale
        """
        if locale in self.catalog:
            return locale_code(locale)
        self.diagnostics.record(
            logging.WARNING,
            "apply",
            f"No translations found for {locale}, falling back to {self.catalog.primary}",
            requested=str(locale),
            fallback=self.catalog.primary,
        )
        return self.catalog.primary

    def apply(self, locale) -> str:
        """Write every entry of a locale into the host override store.

        Args:
            locale: Locale code to apply

        Returns:
            Catalog locale that was actually applied
        """
        with self._lock:
            resolved = self.resolve(locale)
            translations = self.catalog[resolved]
            for key, template in translations.items():
                self.host.set_override(full_key(key), template)

            # Keys this locale lacks show the primary text, whatever was active before
            fallbacks = 0
            if resolved != self.catalog.primary:
                for key, template in self.catalog[self.catalog.primary].items():
                    if key not in translations:
                        self.host.set_override(full_key(key), template)
                        fallbacks += 1
            self._applied_locale = resolved

        if fallbacks:
            logger.info(
                f"Applied {len(translations)} translations for {resolved} "
                f"({fallbacks} from {self.catalog.primary})"
            )
        else:
            logger.info(f"Applied {len(translations)} translations for {resolved}")
        return resolved

    def retract_all(self) -> int:
        """Remove every namespaced key of every catalog locale.

        A failed remove does not stop the remaining ones; the first failure is
        re-raised once every key has been tried.

        Returns:
            Number of remove calls issued
        """
        first_error = None
        failed = 0
        with self._lock:
            keys = self.catalog.all_keys()
            for key in keys:
                try:
                    self.host.remove_override(full_key(key))
                except Exception as e:
                    failed += 1
                    if first_error is None:
                        first_error = e
            self._applied_locale = None

        if first_error is not None:
            logger.error(f"Failed to retract {failed} of {len(keys)} overrides: {first_error}")
            raise first_error

        logger.info(f"Retracted {len(keys)} overrides")
        return len(keys)
