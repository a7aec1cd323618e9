"""Game lifecycle states, transition table and guards."""
from __future__ import annotations

from skyhop_fsm import Lifecycle, LifecycleGuards

READY = "ready"
PLAYING = "playing"
PAUSED = "paused"
GAMEOVER = "gameover"

STATES = (READY, PLAYING, PAUSED, GAMEOVER)

ACTIVATE = "activate"
PAUSE = "pause"
DIED = "died"

# ready -> playing (activate)
# playing -> gameover (died guard) | paused (pause)
# paused -> playing (pause)
# gameover -> ready (activate, full reset)
TRANSITIONS: dict[str, list[list[str]]] = {
    READY: [[ACTIVATE, PLAYING]],
    PLAYING: [[DIED, GAMEOVER], [PAUSE, PAUSED]],
    PAUSED: [[PAUSE, PLAYING]],
    GAMEOVER: [[ACTIVATE, READY]],
}


def new_lifecycle(state: str = READY) -> Lifecycle:
    return Lifecycle(state=state, transitions={k: [list(e) for e in v] for k, v in TRANSITIONS.items()})


guards = LifecycleGuards()
guards.register(DIED, lambda session: session.dead)
