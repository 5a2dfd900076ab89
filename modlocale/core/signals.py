#!/usr/bin/env python3
"""
Signal - synchronous observer list with subscription tokens.

Handlers run on the emitting thread, in subscription order. The subscriber
list is guarded so handlers may subscribe or unsubscribe while an emit is
in progress; each emit dispatches over a snapshot.
"""

import threading
from collections.abc import Callable
from typing import Any

from modlocale.core.logging_utils import setup_logger

__all__ = ["Signal", "Subscription"]

logger = setup_logger("modlocale.signals")


class Subscription:
    """Token binding one handler to one signal until cancelled."""

    __slots__ = ("_signal", "handler", "_active")

    def __init__(self, signal: "Signal", handler: Callable[[Any], None]):
        self._signal = signal
        self.handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self):
        """Unsubscribe. Safe to call more than once."""
        if self._active:
            self._signal.unsubscribe(self)

    def _deactivate(self):
        self._active = False

    def __repr__(self):
        state = "active" if self._active else "cancelled"
        return f"<Subscription {self._signal.name}:{getattr(self.handler, '__name__', self.handler)} {state}>"


class Signal:
    """Synchronous signal carrying a single value to every live subscription.

    Features:
    - Subscription tokens for precise unsubscription
    - Snapshot dispatch (handlers may mutate the subscriber list)
    - Handler errors are logged and do not stop other handlers
    """

    def __init__(self, name: str = "signal", error_handler: Callable[[Exception], None] | None = None):
        """Initialize signal.

        Args:
            name: Name used in log messages
            error_handler: Optional callback receiving handler exceptions
        """
        self.name = name
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()
        self._error_handler = error_handler

        # Metrics
        self._emits = 0
        self._handler_errors = 0

    def subscribe(self, handler: Callable[[Any], None]) -> Subscription:
        """Subscribe a handler.

        Args:
            handler: Callback function(value)

        Returns:
            Subscription token for unsubscription
        """
        subscription = Subscription(self, handler)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, token: Subscription | Callable[[Any], None]) -> bool:
        """Unsubscribe using a token or the handler itself.

        Removing a subscription that is already gone is a no-op.

        Args:
            token: Subscription returned from subscribe(), or a subscribed handler

        Returns:
            True if a subscription was removed
        """
        with self._lock:
            for index, subscription in enumerate(self._subscriptions):
                if subscription is token or (
                    not isinstance(token, Subscription) and subscription.handler == token
                ):
                    del self._subscriptions[index]
                    subscription._deactivate()
                    return True
        return False

    def emit(self, value: Any = None) -> int:
        """Dispatch value to every live subscription.

        Args:
            value: Value passed to each handler

        Returns:
            Number of handlers invoked
        """
        with self._lock:
            snapshot = list(self._subscriptions)
        self._emits += 1

        dispatched = 0
        for subscription in snapshot:
            # Skip subscriptions cancelled by an earlier handler in this emit
            if not subscription.active:
                continue
            dispatched += 1
            try:
                subscription.handler(value)
            except Exception as e:
                self._handler_errors += 1
                if self._error_handler is not None:
                    self._error_handler(e)
                else:
                    logger.error(f"Error in handler for {self.name}: {e}", exc_info=True)
        return dispatched

    def clear(self) -> int:
        """Drop every subscription.

        Returns:
            Number of subscriptions dropped
        """
        with self._lock:
            dropped = self._subscriptions
            self._subscriptions = []
        for subscription in dropped:
            subscription._deactivate()
        return len(dropped)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def get_metrics(self) -> dict[str, int]:
        """Get signal metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            "subscribers": len(self),
            "emits": self._emits,
            "handler_errors": self._handler_errors,
        }
