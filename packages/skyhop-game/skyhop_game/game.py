"""Game - the host-facing facade over the engine and its systems."""
from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from skyhop import Engine, SnapshotError, TickContext
from skyhop_fsm import fire, make_gated_system, make_lifecycle_system
from skyhop_physics import jump, make_fall_system, make_flight_system
from skyhop_signal import (
    BestScoreReset,
    Died,
    Event,
    Flapped,
    GameReset,
    SignalBus,
    StateChanged,
    make_signal_system,
)

from skyhop_game.config import GameConfig
from skyhop_game.effects import make_effects_system, sim_clock_system
from skyhop_game.environment import make_environment_system
from skyhop_game.lifecycle import (
    ACTIVATE,
    GAMEOVER,
    PAUSE,
    PAUSED,
    PLAYING,
    READY,
    guards,
)
from skyhop_game.parallax import make_parallax_system
from skyhop_game.render import RenderableState, build_render_state
from skyhop_game.scoring import make_bounds_system, make_obstacle_system
from skyhop_game.session import (
    GameSession,
    new_session,
    session_from_dict,
    session_to_dict,
)
from skyhop_game.spawner import ObstacleSpawner, make_spawn_system
from skyhop_game.storage import BestScoreRecorder, BestScoreStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Event)


class Game:
    """One obstacle-dodging game driven by host frame timestamps.

    Call ``tick(now_ms)`` once per rendered frame and feed input through
    ``activate()`` and ``toggle_pause()``. Nothing here raises for bad
    input: backwards timestamps become zero deltas and commands that make
    no sense in the current state are ignored.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        store: BestScoreStore | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._bus = SignalBus()
        self._outbox: list[Event] = []

        best = store.load() if store is not None else 0
        self._engine: Engine[GameSession] = Engine.from_factory(
            lambda rng: new_session(self._config, rng, best_score=best),
            seed=seed,
            max_delta_ms=self._config.max_delta_ms,
        )

        if store is not None:
            BestScoreRecorder(store).attach(self._bus)

        self._wire_systems()
        logger.info(f"Game created (seed={self._engine.seed}, best={best})")

    # -- Wiring --

    def _wire_systems(self) -> None:
        config = self._config
        running = [PLAYING]
        add = self._engine.add_system

        add(make_gated_system(running, sim_clock_system))
        add(make_gated_system(running, make_environment_system(
            self._bus, config.phase_interval_ms, config.blend_duration_ms,
        )))
        add(make_gated_system([READY, PLAYING], make_parallax_system(config)))
        add(make_gated_system(running, make_flight_system(config.flight)))
        add(make_gated_system(running, make_bounds_system(config.floor)))
        add(make_gated_system(running, make_spawn_system(ObstacleSpawner.from_config(config))))
        add(make_gated_system(running, make_obstacle_system(self._bus, config.obstacle_speed)))
        add(make_gated_system([GAMEOVER], make_fall_system(config.fall_speed, config.floor)))
        add(make_gated_system([READY, PLAYING, GAMEOVER], make_effects_system(
            config.shake_magnitude, config.death_fade_ms,
        )))
        add(make_lifecycle_system(guards, on_transition=self._on_guard_transition))
        add(make_signal_system(self._bus, on_flushed=self._outbox.extend))

    def _on_guard_transition(
        self, session: GameSession, ctx: TickContext, old: str, new: str,
    ) -> None:
        logger.debug(f"Lifecycle {old} -> {new} at tick {ctx.tick_number}")
        self._bus.publish(StateChanged(tick=ctx.tick_number, old=old, new=new))
        if new == GAMEOVER:
            session.shake_ms = self._config.shake_duration_ms
            session.death_fade = 0.0
            self._bus.publish(Died(
                tick=ctx.tick_number,
                score=session.score,
                cause=session.death_cause or "unknown",
            ))

    # -- Properties --

    @property
    def session(self) -> GameSession:
        return self._engine.state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._engine.seed

    @property
    def state(self) -> str:
        return self.session.state

    @property
    def bus(self) -> SignalBus:
        return self._bus

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        self._bus.subscribe(event_type, handler)

    # -- Host entry points --

    def tick(self, now_ms: float) -> RenderableState:
        self._engine.step(now_ms)
        events = tuple(self._outbox)
        self._outbox.clear()
        return build_render_state(self.session, self._config, events)

    def render_state(self) -> RenderableState:
        """Current snapshot without advancing or draining events."""
        return build_render_state(self.session, self._config)

    def activate(self) -> None:
        """Jump, start or restart depending on the current state."""
        session = self.session
        tick = self._engine.clock.tick_number
        state = session.state

        if state == READY:
            self._fire(ACTIVATE)
            self._flap(session, tick)
        elif state == PLAYING:
            self._flap(session, tick)
        elif state == GAMEOVER:
            self._fire(ACTIVATE)
            self.reset()
        self._dispatch()

    def toggle_pause(self) -> None:
        if self.session.state in (PLAYING, PAUSED):
            self._fire(PAUSE)
        self._dispatch()

    def reset_best_score(self) -> None:
        session = self.session
        previous = session.best_score
        session.best_score = 0
        self._bus.publish(BestScoreReset(tick=self._engine.clock.tick_number, previous=previous))
        self._dispatch()

    def cycle_skin(self) -> int:
        session = self.session
        session.skin = (session.skin + 1) % len(self._config.skins)
        return session.skin

    def reset(self) -> None:
        """Start a fresh ``ready`` session, keeping best score and skin."""
        old = self.session
        self._engine.state = new_session(
            self._config, self._engine.random, best_score=old.best_score, skin=old.skin,
        )
        self._bus.publish(GameReset(tick=self._engine.clock.tick_number))
        logger.info(f"Game reset (last score={old.score}, best={old.best_score})")

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "engine": self._engine.snapshot(),
            "session": session_to_dict(self.session),
        }

    def restore(self, data: dict[str, Any]) -> None:
        try:
            engine_data = data["engine"]
            session_data = data["session"]
        except (KeyError, TypeError) as exc:
            raise SnapshotError(f"Malformed game snapshot: {exc}") from exc
        session = session_from_dict(session_data)
        self._engine.restore(engine_data)
        self._engine.state = session
        self._bus.clear()
        self._outbox.clear()

    # -- Internals --

    def _fire(self, trigger: str) -> None:
        result = fire(self.session.lifecycle, trigger)
        if result is None:
            return
        old, new = result
        logger.debug(f"Lifecycle {old} -> {new} ({trigger})")
        self._bus.publish(StateChanged(tick=self._engine.clock.tick_number, old=old, new=new))

    def _flap(self, session: GameSession, tick: int) -> None:
        jump(session.actor, self._config.flight)
        self._bus.publish(Flapped(tick=tick, velocity=session.actor.velocity))

    def _dispatch(self) -> None:
        self._outbox.extend(self._bus.flush())
