"""Host localization collaborator.

The host owns the authoritative text store and the current-language signal.
HostLocalization describes what the engine needs from it; InMemoryHost is a
complete in-process implementation used by tests, the CLI preview, and
embedders without a host of their own.
"""

from collections.abc import Mapping
from typing import Any, Literal, Protocol, runtime_checkable

from modlocale.core.logging_utils import setup_logger
from modlocale.core.signals import Signal

from .locales import PRIMARY_LOCALE

logger = setup_logger("modlocale.host")


@runtime_checkable
class LocaleSignal(Protocol):
    """Anything with token-based subscribe/unsubscribe."""

    def subscribe(self, handler) -> Any: ...

    def unsubscribe(self, token) -> Any: ...


@runtime_checkable
class HostLocalization(Protocol):
    """Interface the engine consumes from the host application."""

    @property
    def current_locale(self) -> str: ...

    @property
    def on_locale_changed(self) -> LocaleSignal: ...

    def set_override(self, full_key: str, text: str) -> None: ...

    def remove_override(self, full_key: str) -> None: ...

    def get_plain_text(self, full_key: str) -> str: ...


class InMemoryHost:
    """Host text store with an override layer over base texts."""

    def __init__(
        self,
        current_locale: str = PRIMARY_LOCALE.value,
        base_texts: Mapping[str, str] | None = None,
        missing_key_policy: Literal["key", "empty"] = "key",
    ):
        """Initialize host.

        Args:
            current_locale: Initial language code
            base_texts: Host's own texts (shown when no override exists)
            missing_key_policy: 'key' returns the raw key for unknown keys, 'empty' returns ''
        """
        if missing_key_policy not in ("key", "empty"):
            raise ValueError(f"Unknown missing_key_policy: {missing_key_policy}")
        self._current_locale = str(current_locale)
        self._base_texts: dict[str, str] = dict(base_texts or {})
        self._overrides: dict[str, str] = {}
        self._missing_key_policy = missing_key_policy
        self._on_locale_changed = Signal("host.on_locale_changed")

        # Metrics
        self.override_writes = 0
        self.override_removals = 0

    @property
    def current_locale(self) -> str:
        return self._current_locale

    @property
    def on_locale_changed(self) -> Signal:
        return self._on_locale_changed

    @property
    def overrides(self) -> dict[str, str]:
        """Copy of the current override layer."""
        return dict(self._overrides)

    def set_language(self, locale: str) -> bool:
        """Switch language and notify subscribers.

        Args:
            locale: New language code

        Returns:
            True if the language changed (and subscribers were notified)
        """
        locale = str(locale)
        if locale == self._current_locale:
            return False
        old = self._current_locale
        self._current_locale = locale
        logger.info(f"Host language changed: {old} -> {locale}")
        self._on_locale_changed.emit(locale)
        return True

    def set_override(self, full_key: str, text: str) -> None:
        self._overrides[full_key] = text
        self.override_writes += 1

    def remove_override(self, full_key: str) -> None:
        if self._overrides.pop(full_key, None) is not None:
            self.override_removals += 1

    def get_plain_text(self, full_key: str) -> str:
        if full_key in self._overrides:
            return self._overrides[full_key]
        if full_key in self._base_texts:
            return self._base_texts[full_key]
        return full_key if self._missing_key_policy == "key" else ""

    def set_base_text(self, full_key: str, text: str) -> None:
        self._base_texts[full_key] = text
