"""Tests for best-score stores and their wiring into Game."""
import json
import logging

import pytest

from skyhop_signal import BestScoreAchieved, BestScoreReset, SignalBus
from skyhop_game import Game, GameConfig, JsonFileStore, MemoryStore
from skyhop_game.storage import BestScoreRecorder

HOVER = GameConfig(gravity=0.0, jump_impulse=0.0, gap_margin_top=300.0, gap_margin_bottom=300.0)


def _play(game: Game, ticks: int) -> list:
    game.tick(0.0)
    game.activate()
    return [game.tick(10.0 * i) for i in range(1, ticks + 1)]


class TestMemoryStore:

    def test_round_trip(self):
        store = MemoryStore()
        assert store.load() == 0
        store.save(12)
        assert store.load() == 12
        store.clear()
        assert store.load() == 0
        assert store.writes == 2


class TestJsonFileStore:

    def test_missing_file_loads_zero(self, tmp_path):
        assert JsonFileStore(tmp_path / "best.json").load() == 0

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "best.json"
        store = JsonFileStore(path)
        store.save(7)
        assert json.loads(path.read_text()) == {"bestScore": 7}
        assert JsonFileStore(path).load() == 7

    def test_preserves_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"volume": 3}))
        store = JsonFileStore(path)
        store.save(4)
        store.clear()
        assert json.loads(path.read_text()) == {"volume": 3}

    def test_custom_key(self, tmp_path):
        path = tmp_path / "best.json"
        JsonFileStore(path, key="hop").save(2)
        assert json.loads(path.read_text()) == {"hop": 2}

    def test_malformed_file_degrades(self, tmp_path, caplog):
        path = tmp_path / "best.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="skyhop_game.storage"):
            assert JsonFileStore(path).load() == 0
        assert "malformed" in caplog.text

    def test_invalid_utf8_degrades(self, tmp_path, caplog):
        path = tmp_path / "best.json"
        path.write_bytes(b'{"bestScore": "\xff\xfe"}')
        with caplog.at_level(logging.WARNING, logger="skyhop_game.storage"):
            assert JsonFileStore(path).load() == 0
            game = Game(seed=1, store=JsonFileStore(path))
        assert game.session.best_score == 0
        assert "malformed" in caplog.text

    @pytest.mark.parametrize("raw", ['{"bestScore": 1e400}', '{"bestScore": Infinity}'])
    def test_infinite_score_degrades(self, tmp_path, caplog, raw):
        path = tmp_path / "best.json"
        path.write_text(raw)
        with caplog.at_level(logging.WARNING, logger="skyhop_game.storage"):
            game = Game(seed=1, store=JsonFileStore(path))
        assert game.session.best_score == 0
        assert "non-integer" in caplog.text

    def test_non_object_and_non_integer(self, tmp_path, caplog):
        path = tmp_path / "best.json"
        path.write_text("[1, 2]")
        with caplog.at_level(logging.WARNING):
            assert JsonFileStore(path).load() == 0
        path.write_text(json.dumps({"bestScore": "lots"}))
        with caplog.at_level(logging.WARNING):
            assert JsonFileStore(path).load() == 0

    def test_unwritable_path_degrades(self, tmp_path, caplog):
        store = JsonFileStore(tmp_path)  # a directory, not a file
        with caplog.at_level(logging.WARNING, logger="skyhop_game.storage"):
            assert store.load() == 0
            store.save(3)
        assert "Could not write" in caplog.text


class TestRecorder:

    def test_forwards_events(self):
        bus = SignalBus()
        store = MemoryStore()
        recorder = BestScoreRecorder(store)
        recorder.attach(bus)

        bus.publish(BestScoreAchieved(tick=1, best_score=5))
        bus.flush()
        assert store.value == 5

        bus.publish(BestScoreReset(tick=2, previous=5))
        bus.flush()
        assert store.value == 0

        recorder.detach(bus)
        bus.publish(BestScoreAchieved(tick=3, best_score=9))
        bus.flush()
        assert store.value == 0


class TestGamePersistence:

    def test_best_loaded_at_startup(self):
        game = Game(seed=1, store=MemoryStore(5))
        assert game.session.best_score == 5
        assert game.render_state().best_score == 5

    def test_new_best_is_persisted(self):
        store = MemoryStore()
        game = Game(HOVER, seed=1, store=store)
        _play(game, 400)
        assert game.session.best_score >= 2
        assert store.value == game.session.best_score

    def test_no_write_below_stored_best(self):
        store = MemoryStore(50)
        game = Game(HOVER, seed=1, store=store)
        renders = _play(game, 400)
        assert game.session.score >= 2
        assert store.writes == 0
        assert not any(isinstance(e, BestScoreAchieved) for r in renders for e in r.events)

    def test_reset_best_score(self):
        store = MemoryStore(9)
        game = Game(seed=1, store=store)
        game.reset_best_score()
        assert game.session.best_score == 0
        assert store.value == 0

        view = game.tick(0.0)
        resets = [e for e in view.events if isinstance(e, BestScoreReset)]
        assert [e.previous for e in resets] == [9]
        assert view.best_score == 0

    def test_broken_file_store_does_not_crash(self, tmp_path, caplog):
        game = Game(HOVER, seed=1, store=JsonFileStore(tmp_path))
        with caplog.at_level(logging.WARNING, logger="skyhop_game.storage"):
            _play(game, 400)
        assert game.session.best_score >= 2
        assert "Could not write" in caplog.text
