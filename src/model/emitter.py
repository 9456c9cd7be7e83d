"""Per-instance event emitter and the subscription handles it returns.

Every model and control owns its own EventEmitter; there is no global bus.
Handlers for one event type run in the order they were registered and
receive a single Event argument. A handler that raises stops the dispatch
and the exception reaches whoever fired the event.

Usage:
    emitter = EventEmitter()
    sub = emitter.on("change", lambda event: print(event.change))
    emitter.emit("change", Event("change", target=None, change=42))
    sub.dispose()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable

Handler = Callable[["Event"], None]


@dataclass
class Event:
    """An event as seen by handlers."""

    type: Hashable
    target: Any = None  # entity the event is attributed to
    change: Any = None  # payload (ChangeRecord, ViewChange, widget message...)


class Subscription:
    """Handle for one registered handler.

    Call dispose() to remove the handler. Disposing twice is harmless.
    """

    def __init__(self, emitter: EventEmitter, event_type: Hashable, handler: Handler) -> None:
        self.emitter = emitter
        self.event_type = event_type
        self.handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def dispose(self) -> None:
        if not self._active:
            return
        self._active = False
        self.emitter.off(self)

    def __repr__(self) -> str:
        state = "active" if self._active else "disposed"
        return f"<Subscription {self.event_type!r} {state}>"


class EventEmitter:
    """Registry of handlers keyed by event type."""

    def __init__(self) -> None:
        self._listeners: dict[Hashable, list[Subscription]] = {}

    def on(self, event_type: Hashable, handler: Handler) -> Subscription:
        """Register a handler and return its subscription handle."""
        subscription = Subscription(self, event_type, handler)
        self._listeners.setdefault(event_type, []).append(subscription)
        return subscription

    def off(self, subscription: Subscription) -> None:
        """Remove a subscription (no-op if it is not registered)."""
        listeners = self._listeners.get(subscription.event_type)
        if listeners and subscription in listeners:
            listeners.remove(subscription)
            if not listeners:
                del self._listeners[subscription.event_type]

    def emit(self, event_type: Hashable, event: Event) -> None:
        """Call every handler registered for event_type.

        Iterates over a snapshot: handlers added during dispatch wait for the
        next event, handlers disposed during dispatch are skipped.
        """
        for subscription in list(self._listeners.get(event_type, ())):
            if subscription.active:
                subscription.handler(event)

    def listener_count(self, event_type: Hashable | None = None) -> int:
        if event_type is None:
            return sum(len(subs) for subs in self._listeners.values())
        return len(self._listeners.get(event_type, ()))


class EventSource:
    """Mixin giving an object on/off/fire/delegate over a private emitter.

    The emitter is created on first use so the mixin can sit in front of
    classes with their own __init__ (Textual apps, user view-models).
    """

    @property
    def events(self) -> EventEmitter:
        emitter = self.__dict__.get("_event_emitter")
        if emitter is None:
            emitter = self.__dict__["_event_emitter"] = EventEmitter()
        return emitter

    def on(self, event_type: Hashable, handler: Handler) -> Subscription:
        return self.events.on(event_type, handler)

    def off(self, subscription: Subscription) -> None:
        subscription.dispose()

    def fire(self, event_type: Hashable, change: Any = None, *, target: Any = None) -> None:
        """Emit event_type on this object, attributed to target (default self)."""
        event = Event(event_type, target if target is not None else self, change)
        self.events.emit(event_type, event)

    def delegate(self, source: Any, target: EventSource, event_type: Hashable, change: Any) -> None:
        """Re-emit change as event_type on target, attributed to source."""
        target.fire(event_type, change, target=source)
