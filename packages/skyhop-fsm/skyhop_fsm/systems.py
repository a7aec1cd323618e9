"""Transition helpers and system factories for lifecycle evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from skyhop_fsm.components import Lifecycle
from skyhop_fsm.guards import LifecycleGuards

if TYPE_CHECKING:
    from skyhop import TickContext

_FsmGetter = Callable[[Any], Lifecycle]


def _default_getter(state: Any) -> Lifecycle:
    return state.lifecycle


def fire(fsm: Lifecycle, trigger: str) -> tuple[str, str] | None:
    """Apply a command trigger. Returns ``(old, new)`` or None if ignored."""
    target = fsm.target(trigger)
    if target is None:
        return None
    old = fsm.state
    fsm.state = target
    return old, target


def make_lifecycle_system(
    guards: LifecycleGuards,
    on_transition: Callable[[Any, TickContext, str, str], None] | None = None,
    get_fsm: _FsmGetter = _default_getter,
) -> Callable[[Any, TickContext], None]:
    """Return a system that evaluates guard triggers each tick.

    Only triggers with a registered guard are evaluated; command triggers
    are left to ``fire``. At most one transition happens per tick.
    """

    def lifecycle_system(state: Any, ctx: TickContext) -> None:
        fsm = get_fsm(state)
        for trigger in fsm.triggers():
            if not guards.has(trigger):
                continue
            if guards.check(trigger, state):
                old, new = fire(fsm, trigger)  # type: ignore[misc]
                if on_transition is not None:
                    on_transition(state, ctx, old, new)
                return

    return lifecycle_system


def make_gated_system(
    states: Iterable[str],
    system: Callable[[Any, TickContext], None],
    get_fsm: _FsmGetter = _default_getter,
) -> Callable[[Any, TickContext], None]:
    """Wrap ``system`` so it only runs while the lifecycle is in ``states``."""
    allowed = frozenset(states)

    def gated_system(state: Any, ctx: TickContext) -> None:
        if get_fsm(state).state in allowed:
            system(state, ctx)

    gated_system.__name__ = getattr(system, "__name__", "gated_system")
    return gated_system
