"""skyhop - A small frame-driven simulation engine for arcade games."""

from skyhop.clock import FrameClock
from skyhop.engine import Engine
from skyhop.types import SnapshotError, System, TickContext

__all__ = [
    "Engine",
    "FrameClock",
    "TickContext",
    "System",
    "SnapshotError",
]
