"""skyhop-fsm - Lifecycle state machine primitives for the skyhop engine."""
from __future__ import annotations

from skyhop_fsm.components import Lifecycle
from skyhop_fsm.guards import LifecycleGuards
from skyhop_fsm.systems import fire, make_gated_system, make_lifecycle_system

__all__ = [
    "Lifecycle",
    "LifecycleGuards",
    "fire",
    "make_gated_system",
    "make_lifecycle_system",
]
