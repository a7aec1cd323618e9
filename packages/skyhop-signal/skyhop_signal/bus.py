"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Callable, TypeVar

from skyhop_signal.events import Event

E = TypeVar("E", bound=Event)

_Handler = Callable[[Event], None]


class SignalBus:
    """Queues events during a tick and dispatches them on ``flush()``.

    Handlers are keyed by event class. A handler registered for a base
    class also receives its subclasses, so subscribing to ``Event`` sees
    everything.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[Event], list[_Handler]] = {}
        self._queue: list[Event] = []

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        handlers = self._subscribers.get(event_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)  # type: ignore[arg-type]
        except ValueError:
            pass

    def publish(self, event: Event) -> None:
        self._queue.append(event)

    def flush(self) -> list[Event]:
        """Dispatch queued events in publish order and return them.

        Events published by handlers during the flush are queued for the
        next flush.
        """
        batch = self._queue
        self._queue = []
        for event in batch:
            for etype in type(event).__mro__:
                for handler in list(self._subscribers.get(etype, ())):
                    handler(event)
                if etype is Event:
                    break
        return batch

    def clear(self) -> None:
        self._queue.clear()
