"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from skyhop_signal.bus import SignalBus
from skyhop_signal.events import Event

if TYPE_CHECKING:
    from skyhop import TickContext


def make_signal_system(
    bus: SignalBus,
    on_flushed: Callable[[list[Event]], None] | None = None,
) -> Callable[[Any, TickContext], None]:
    """Return a system that flushes ``bus`` once per tick.

    ``on_flushed`` receives the batch that was dispatched, which lets a
    caller hand the tick's events to a renderer.
    """

    def signal_system(state: Any, ctx: TickContext) -> None:
        flushed = bus.flush()
        if on_flushed is not None:
            on_flushed(flushed)

    return signal_system
