"""Language-change pipeline: host signal -> re-apply -> local event."""

import logging
from enum import Enum, auto

from modlocale.core.logging_utils import log_event, setup_logger
from modlocale.core.signals import Signal

from .applier import OverrideApplier
from .diagnostics import DiagnosticLog
from .host import HostLocalization

logger = setup_logger("modlocale.notifier")


class NotifierState(Enum):
    """Notifier lifecycle states."""

    UNINITIALIZED = auto()
    ACTIVE = auto()


class ChangeNotifier:
    """Keeps overrides in sync with the host language and re-emits changes.

    While ACTIVE, each host firing runs apply(new_locale) and then emits
    on_locale_changed(new_locale) exactly once. The emitted value is the
    locale the host reported, even when the applier fell back to the primary.
    """

    def __init__(
        self,
        applier: OverrideApplier,
        host: HostLocalization,
        on_locale_changed: Signal | None = None,
        diagnostics: DiagnosticLog | None = None,
    ):
        self.applier = applier
        self.host = host
        if on_locale_changed is None:
            on_locale_changed = Signal("localization.on_locale_changed")
        self.on_locale_changed = on_locale_changed
        self.diagnostics = diagnostics if diagnostics is not None else applier.diagnostics
        self._state = NotifierState.UNINITIALIZED
        self._host_token = None

    @property
    def state(self) -> NotifierState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is NotifierState.ACTIVE

    def start(self) -> str | None:
        """UNINITIALIZED -> ACTIVE: subscribe to the host and apply its locale.

        Returns:
            The applied catalog locale, or None if already active

        Raises:
            Exception: Whatever apply raised; the subscription and any partial
                writes are rolled back first
        """
        if self.active:
            return None

        self._host_token = self.host.on_locale_changed.subscribe(self._on_host_locale_changed)
        try:
            applied = self.applier.apply(self.host.current_locale)
        except Exception:
            self._unsubscribe_host()
            try:
                self.applier.retract_all()
            except Exception as e:
                logger.error(f"Failed to roll back partial overrides: {e}")
            raise

        self._state = NotifierState.ACTIVE
        return applied

    def stop(self) -> int:
        """ACTIVE -> UNINITIALIZED: unsubscribe, retract, drop local subscribers.

        Each step runs even if an earlier one fails, and local subscribers are
        always dropped. Step failures are recorded; the first is re-raised.

        Returns:
            Number of local subscriptions dropped
        """
        if not self.active:
            return 0

        self._state = NotifierState.UNINITIALIZED
        errors = []
        try:
            for step, action in (
                ("unsubscribe", self._unsubscribe_host),
                ("retract", self.applier.retract_all),
            ):
                try:
                    action()
                except Exception as e:
                    errors.append(e)
                    self.diagnostics.record(
                        logging.ERROR,
                        "stop",
                        f"Failed to {step} during stop: {e}",
                        exception=e,
                        step=step,
                    )
        finally:
            dropped = self.on_locale_changed.clear()

        if errors:
            raise errors[0]
        return dropped

    def _unsubscribe_host(self):
        token, self._host_token = self._host_token, None
        if token is not None:
            self.host.on_locale_changed.unsubscribe(token)

    def _on_host_locale_changed(self, new_locale):
        if not self.active:
            return

        log_event(logger, "locale_changed", {"locale": new_locale})
        try:
            self.applier.apply(new_locale)
        except Exception as e:
            self.diagnostics.record(
                logging.ERROR,
                "locale_change",
                f"Failed to handle language change to {new_locale}: {e}",
                exception=e,
                locale=str(new_locale),
            )
            return

        self.on_locale_changed.emit(new_locale)
