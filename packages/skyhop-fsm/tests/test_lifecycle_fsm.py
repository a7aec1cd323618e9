"""Tests for the lifecycle FSM, guards and gated systems."""
from dataclasses import dataclass, field

import pytest

from skyhop import Engine
from skyhop_fsm import (
    Lifecycle,
    LifecycleGuards,
    fire,
    make_gated_system,
    make_lifecycle_system,
)

TABLE = {
    "ready": [["activate", "playing"]],
    "playing": [["died", "gameover"], ["pause", "paused"]],
    "paused": [["pause", "playing"]],
    "gameover": [["activate", "ready"]],
}


@dataclass
class Box:
    """Minimal session stand-in."""
    lifecycle: Lifecycle
    dead: bool = False
    ticks: list[int] = field(default_factory=list)


def _box(state: str = "ready") -> Box:
    return Box(lifecycle=Lifecycle(state=state, transitions=TABLE))


class TestLifecycleComponent:

    def test_target_lookup(self):
        fsm = Lifecycle(state="playing", transitions=TABLE)
        assert fsm.target("pause") == "paused"
        assert fsm.target("died") == "gameover"
        assert fsm.target("activate") is None

    def test_triggers_for_current_state(self):
        fsm = Lifecycle(state="playing", transitions=TABLE)
        assert fsm.triggers() == ["died", "pause"]

    def test_unknown_state_has_no_triggers(self):
        fsm = Lifecycle(state="limbo", transitions=TABLE)
        assert fsm.triggers() == []
        assert fsm.target("activate") is None


class TestFire:

    def test_valid_trigger_transitions(self):
        fsm = Lifecycle(state="ready", transitions=TABLE)
        assert fire(fsm, "activate") == ("ready", "playing")
        assert fsm.state == "playing"

    def test_invalid_trigger_is_noop(self):
        """Pausing while not playing is silently ignored."""
        fsm = Lifecycle(state="ready", transitions=TABLE)
        assert fire(fsm, "pause") is None
        assert fsm.state == "ready"

    def test_pause_toggles(self):
        fsm = Lifecycle(state="playing", transitions=TABLE)
        fire(fsm, "pause")
        assert fsm.state == "paused"
        fire(fsm, "pause")
        assert fsm.state == "playing"


class TestLifecycleGuards:

    def test_register_and_check(self):
        guards = LifecycleGuards()
        guards.register("always", lambda s: True)
        guards.register("never", lambda s: False)
        assert guards.check("always", None) is True
        assert guards.check("never", None) is False

    def test_unregistered_guard_raises_keyerror(self):
        guards = LifecycleGuards()
        with pytest.raises(KeyError):
            guards.check("nonexistent", None)

    def test_has(self):
        guards = LifecycleGuards()
        guards.register("died", lambda s: s.dead)
        assert guards.has("died") is True
        assert guards.has("activate") is False

    def test_register_overwrites(self):
        guards = LifecycleGuards()
        guards.register("g", lambda s: False)
        guards.register("g", lambda s: True)
        assert guards.check("g", None) is True


class TestLifecycleSystem:

    def test_guard_fires_transition(self):
        guards = LifecycleGuards()
        guards.register("died", lambda s: s.dead)
        log = []

        engine = Engine(_box("playing"), seed=1)
        engine.add_system(make_lifecycle_system(
            guards, on_transition=lambda s, c, old, new: log.append((c.tick_number, old, new)),
        ))

        engine.step(0.0)
        assert engine.state.lifecycle.state == "playing"

        engine.state.dead = True
        engine.step(16.0)
        assert engine.state.lifecycle.state == "gameover"
        assert log == [(2, "playing", "gameover")]

    def test_command_triggers_are_not_evaluated(self):
        guards = LifecycleGuards()
        engine = Engine(_box("ready"), seed=1)
        engine.add_system(make_lifecycle_system(guards))
        engine.run([0.0, 16.0, 32.0])
        assert engine.state.lifecycle.state == "ready"

    def test_single_transition_per_tick(self):
        guards = LifecycleGuards()
        guards.register("activate", lambda s: True)
        engine = Engine(_box("ready"), seed=1)
        engine.add_system(make_lifecycle_system(guards))

        engine.step(0.0)
        assert engine.state.lifecycle.state == "playing"

    def test_custom_getter(self):
        guards = LifecycleGuards()
        guards.register("died", lambda s: True)
        holder = {"fsm": Lifecycle(state="playing", transitions=TABLE)}
        engine = Engine(holder, seed=1)
        engine.add_system(make_lifecycle_system(guards, get_fsm=lambda s: s["fsm"]))
        engine.step(0.0)
        assert holder["fsm"].state == "gameover"


class TestGatedSystem:

    def test_runs_only_in_allowed_states(self):
        def record(state, ctx):
            state.ticks.append(ctx.tick_number)

        engine = Engine(_box("ready"), seed=1)
        engine.add_system(make_gated_system(["playing"], record))

        engine.step(0.0)
        fire(engine.state.lifecycle, "activate")
        engine.step(16.0)
        fire(engine.state.lifecycle, "pause")
        engine.step(32.0)
        fire(engine.state.lifecycle, "pause")
        engine.step(48.0)

        assert engine.state.ticks == [2, 4]

    def test_keeps_wrapped_name(self):
        def scroll_system(state, ctx):
            pass

        assert make_gated_system(["ready"], scroll_system).__name__ == "scroll_system"
