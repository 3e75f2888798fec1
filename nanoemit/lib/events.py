"""Minimal typed event emitter.

Listeners are registered per event name and called synchronously, in
registration order, each time that event is emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

EventName = TypeVar("EventName", bound=Hashable)

Unsubscribe = Callable[[], None]


def _identity_key(handler: Callable[..., Any]) -> Hashable:
    """Key a callback by identity; bound methods by instance and function."""
    if hasattr(handler, "__self__") and hasattr(handler, "__func__"):
        return (id(handler.__self__), id(handler.__func__))
    return id(handler)


class _Listener:
    """One registration of a callback. A new one is created each time it is added."""

    __slots__ = ("handler",)

    def __init__(self, handler: Callable[..., Any]):
        self.handler = handler


class ListenerError(Exception):
    """Raised by an isolated emitter after a dispatch pass in which listeners failed."""

    def __init__(self, event: Hashable, errors: list[tuple[Callable[..., Any], Exception]]):
        self.event = event
        self.errors = errors
        super().__init__(f"{len(errors)} listener(s) failed for event '{event}'")


class Emitter(Generic[EventName]):
    """Synchronous event dispatcher.

    Each event keeps an insertion-ordered set of callbacks keyed by identity,
    so registering the same callback twice for one event has no effect.
    Listener exceptions propagate out of emit() and stop the pass, unless the
    emitter was created with ``isolate=True``: then every listener runs,
    failures are logged, and a single ListenerError is raised at the end.
    """

    def __init__(self, isolate: bool = False):
        self.isolate = isolate
        self._handlers: dict[EventName, dict[Hashable, _Listener]] = {}

    def on(self, event_name: EventName, handler: Callable[..., Any]) -> Unsubscribe:
        """Register a handler for an event and return a function that removes it."""
        logging.debug(f"Registering listener for '{event_name}': {handler}")
        key = _identity_key(handler)
        handlers = self._handlers.setdefault(event_name, {})
        listener = handlers.get(key)
        if listener is None:
            listener = handlers[key] = _Listener(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_name)
            if handlers is None or handlers.get(key) is not listener:
                return
            del handlers[key]
            if not handlers:
                del self._handlers[event_name]
            logging.debug(f"Removed listener for '{event_name}': {handler}")

        return unsubscribe

    def _is_registered(self, event_name: EventName, key: Hashable, listener: _Listener) -> bool:
        return self._handlers.get(event_name, {}).get(key) is listener

    def emit(self, event_name: EventName, *args: Any, **kwargs: Any) -> None:
        """Call all handlers registered for this event."""
        handlers = self._handlers.get(event_name)
        if not handlers:
            return

        errors: list[tuple[Callable[..., Any], Exception]] = []
        # Listeners added or re-added during the pass wait for the next one
        for key, listener in list(handlers.items()):
            if not self._is_registered(event_name, key, listener):
                continue
            handler = listener.handler
            if not self.isolate:
                handler(*args, **kwargs)
                continue
            try:
                handler(*args, **kwargs)
            except Exception as e:
                logging.exception(f"Listener {handler} failed for event '{event_name}'")
                errors.append((handler, e))

        if errors:
            raise ListenerError(event_name, errors)

    def listener_count(self, event_name: EventName) -> int:
        """Number of handlers currently registered for an event."""
        return len(self._handlers.get(event_name, ()))


def create_events(isolate: bool = False) -> Emitter[Any]:
    """Create a new, empty emitter."""
    return Emitter(isolate=isolate)
