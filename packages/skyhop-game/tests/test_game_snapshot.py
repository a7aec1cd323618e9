"""Tests for Game snapshot/restore."""
import json

import pytest

from skyhop import SnapshotError
from skyhop_game import PAUSED, Game


def _drive(game: Game, start: int, count: int) -> list:
    out = []
    for i in range(start, start + count):
        if i % 20 == 0:
            game.activate()
        out.append(game.tick(16.0 * i))
    return out


def test_restore_resumes_identically():
    game = Game(seed=5)
    game.tick(0.0)
    game.activate()
    _drive(game, 1, 40)

    data = json.loads(json.dumps(game.snapshot()))
    expected = _drive(game, 41, 60)

    other = Game(seed=999)
    other.restore(data)
    assert other.seed == 5
    assert _drive(other, 41, 60) == expected


def test_restore_keeps_lifecycle_state():
    game = Game(seed=5)
    game.tick(0.0)
    game.activate()
    game.tick(16.0)
    game.toggle_pause()
    data = game.snapshot()

    other = Game(seed=1)
    other.restore(data)
    assert other.state == PAUSED
    other.toggle_pause()
    assert other.state == "playing"


def test_restore_rejects_unknown_state():
    game = Game(seed=5)
    data = game.snapshot()
    data["session"]["lifecycle"]["state"] = "sleeping"
    with pytest.raises(SnapshotError, match="Unknown lifecycle state"):
        Game(seed=1).restore(data)


def test_restore_rejects_malformed():
    with pytest.raises(SnapshotError):
        Game(seed=1).restore({"engine": {}})
    data = Game(seed=5).snapshot()
    del data["session"]["actor"]
    with pytest.raises(SnapshotError, match="Malformed session"):
        Game(seed=1).restore(data)


def test_failed_restore_leaves_game_untouched():
    game = Game(seed=5)
    before = game.render_state()
    data = game.snapshot()
    data["engine"]["version"] = 42
    with pytest.raises(SnapshotError):
        game.restore(data)
    assert game.render_state() == before
