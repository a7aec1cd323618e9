"""Tests for timed obstacle spawning."""
import random

from skyhop_game.config import GameConfig
from skyhop_game.spawner import ObstacleSpawner, make_spawn_system

SPAWNER = ObstacleSpawner.from_config(GameConfig())


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def test_from_config():
    assert SPAWNER.playfield_width == 400
    assert SPAWNER.playfield_height == 600
    assert SPAWNER.obstacle_width == 60.0
    assert SPAWNER.gap_height == 140.0
    assert SPAWNER.interval_ms == 1500.0


def test_first_spawn_is_immediate():
    obstacles = []
    last = SPAWNER.maybe_spawn(obstacles, 0.0, None, random.Random(1))
    assert last == 0.0
    assert len(obstacles) == 1
    column = obstacles[0]
    assert column.x == 400.0
    assert column.width == 60.0
    assert column.gap_height == 140.0
    assert column.passed is False


def test_interval_is_strict():
    obstacles = []
    rng = random.Random(1)
    last = SPAWNER.maybe_spawn(obstacles, 0.0, None, rng)
    assert SPAWNER.maybe_spawn(obstacles, 1500.0, last, rng) == 0.0
    assert len(obstacles) == 1
    assert SPAWNER.maybe_spawn(obstacles, 1501.0, last, rng) == 1501.0
    assert len(obstacles) == 2


def test_appends_at_tail():
    obstacles = []
    rng = random.Random(1)
    last = None
    for now in (0.0, 2000.0, 4000.0):
        last = SPAWNER.maybe_spawn(obstacles, now, last, rng)
        obstacles[-1].x -= now  # tag by position
    assert [o.x for o in obstacles] == [400.0, -1600.0, -3600.0]


def test_gap_center_within_margins():
    rng = random.Random(5)
    for _ in range(500):
        center = SPAWNER.gap_center(rng)
        assert 100.0 <= center <= 500.0


def test_gap_center_endpoints():
    assert SPAWNER.gap_center(_FixedRandom(0.0)) == 100.0
    assert SPAWNER.gap_center(_FixedRandom(0.5)) == 300.0


def test_out_of_range_draw_is_clamped():
    assert SPAWNER.gap_center(_FixedRandom(1.7)) == 500.0
    assert SPAWNER.gap_center(_FixedRandom(-0.2)) == 100.0


def test_same_seed_same_gaps():
    a = [SPAWNER.gap_center(r) for r in [random.Random(11)] for _ in range(20)]
    b = [SPAWNER.gap_center(r) for r in [random.Random(11)] for _ in range(20)]
    assert a == b


def test_spawn_system_uses_simulated_time():
    class _Session:
        obstacles = []
        sim_ms = 0.0
        last_spawn_ms = None

    class _Ctx:
        random = random.Random(1)

    session = _Session()
    system = make_spawn_system(SPAWNER)
    system(session, _Ctx())
    assert len(session.obstacles) == 1
    assert session.last_spawn_ms == 0.0

    session.sim_ms = 1000.0
    system(session, _Ctx())
    assert len(session.obstacles) == 1

    session.sim_ms = 1600.0
    system(session, _Ctx())
    assert len(session.obstacles) == 2
    assert session.last_spawn_ms == 1600.0
