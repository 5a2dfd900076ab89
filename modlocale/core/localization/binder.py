"""Bind display sinks to localization keys."""

import logging
import weakref
from collections.abc import Callable
from typing import Any

from modlocale.core.signals import Signal, Subscription

from .accessor import Accessor
from .diagnostics import DiagnosticLog


def is_sink_valid(sink: Any) -> bool:
    """A sink is valid unless it is None or reports itself destroyed."""
    return sink is not None and not getattr(sink, "destroyed", False)


def _text_setter(sink: Any) -> Callable[[Any, str], None]:
    """Pick how to push text into a sink.

    Supported sink types:
    - objects with a settable ``text`` attribute
    - objects with a ``set_text(str)`` method

    Raises:
        TypeError: If the sink supports neither
    """
    if hasattr(sink, "text"):
        return lambda target, value: setattr(target, "text", value)
    if callable(getattr(sink, "set_text", None)):
        return lambda target, value: target.set_text(value)
    raise TypeError(f"{type(sink).__name__} has no 'text' attribute or set_text() method")


def _reference(sink: Any) -> Callable[[], Any]:
    """Weak reference where the type allows it, strong otherwise."""
    try:
        return weakref.ref(sink)
    except TypeError:
        return lambda: sink


class Binding:
    """Handle for one sink/key binding. cancel() stops future refreshes."""

    def __init__(self, binder: "SinkBinder", key: str, sink_ref: Callable[[], Any]):
        self.key = key
        self._binder = binder
        self._sink_ref = sink_ref
        self._subscription: Subscription | None = None

    @property
    def sink(self) -> Any:
        """The bound sink, or None if it has been garbage collected."""
        return self._sink_ref()

    @property
    def active(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def refresh(self) -> bool:
        """Push the current text into the sink.

        Returns:
            False if the sink is gone or destroyed (nothing was set)
        """
        sink = self._sink_ref()
        if not is_sink_valid(sink):
            return False
        self._binder._set_text(sink, self.key)
        return True

    def cancel(self):
        """Stop refreshing this sink. Safe to call more than once."""
        if self._subscription is not None:
            self._subscription.cancel()
        self._binder._forget(self)

    def _on_locale_changed(self, _locale):
        if not self.refresh():
            # Dead sink: prune instead of keeping the subscription forever
            self.cancel()

    def __repr__(self):
        state = "active" if self.active else "cancelled"
        return f"<Binding {self.key!r} {state}>"


class SinkBinder:
    """Sets a sink's text now and again on every locale change."""

    def __init__(self, accessor: Accessor, on_locale_changed: Signal, diagnostics: DiagnosticLog | None = None):
        self.accessor = accessor
        self.on_locale_changed = on_locale_changed
        self.diagnostics = diagnostics if diagnostics is not None else accessor.diagnostics
        self._bindings: set[Binding] = set()

    def bind(self, sink: Any, key: str) -> Binding | None:
        """Bind a sink to a key.

        Args:
            sink: Object with a settable ``text`` or a ``set_text()`` method
            key: Short (unprefixed) key

        Returns:
            Binding handle, or None if the sink is not valid or cannot
            receive text (the latter is recorded as an ERROR diagnostic)
        """
        if not is_sink_valid(sink):
            return None

        try:
            setter = _text_setter(sink)
        except TypeError as e:
            self.diagnostics.record(
                logging.ERROR,
                "bind",
                f"Cannot bind {key}: {e}",
                exception=e,
                key=key,
                sink_type=type(sink).__name__,
            )
            return None

        setter(sink, self.accessor.get(key))

        binding = Binding(self, key, _reference(sink))
        binding._subscription = self.on_locale_changed.subscribe(binding._on_locale_changed)
        self._bindings.add(binding)
        return binding

    def active_bindings(self) -> list[Binding]:
        """Bindings whose subscription is still live."""
        return [b for b in self._bindings if b.active]

    def cancel_all(self) -> int:
        """Cancel every binding.

        Returns:
            Number of bindings cancelled
        """
        bindings = list(self._bindings)
        for binding in bindings:
            binding.cancel()
        return len(bindings)

    def _set_text(self, sink: Any, key: str):
        _text_setter(sink)(sink, self.accessor.get(key))

    def _forget(self, binding: Binding):
        self._bindings.discard(binding)
