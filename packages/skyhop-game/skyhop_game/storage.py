"""Best-score persistence adapters.

The simulation never touches storage. A ``BestScoreRecorder`` subscribes
to the bus and forwards best-score events to a store. File I/O failures are logged and
the best score stays session-local.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from skyhop_signal import BestScoreAchieved, BestScoreReset, SignalBus

logger = logging.getLogger(__name__)

DEFAULT_KEY = "bestScore"


class BestScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...

    def clear(self) -> None: ...


class MemoryStore:
    """Keeps the value in process memory. Useful for tests and kiosks."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.writes = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.writes += 1

    def clear(self) -> None:
        self.value = 0
        self.writes += 1


class JsonFileStore:
    """Stores the best score under ``key`` in a small JSON object on disk.

    Other keys in the file are preserved. Last write wins.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            logger.warning(f"Ignoring malformed best score file {self.path}: {exc}")
            return {}
        except OSError as exc:
            logger.warning(f"Could not read best score from {self.path}: {exc}")
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning(f"Ignoring malformed best score file {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring best score file {self.path}: not a JSON object")
            return {}
        return data

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            logger.warning(f"Could not write best score to {self.path}: {exc}")

    def load(self) -> int:
        value = self._read().get(self.key, 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring non-integer best score {value!r} in {self.path}")
            return 0

    def save(self, value: int) -> None:
        data = self._read()
        data[self.key] = int(value)
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)


class BestScoreRecorder:
    """Bus subscriber that persists best-score changes."""

    def __init__(self, store: BestScoreStore) -> None:
        self.store = store

    def attach(self, bus: SignalBus) -> None:
        bus.subscribe(BestScoreAchieved, self.on_best)
        bus.subscribe(BestScoreReset, self.on_reset)

    def detach(self, bus: SignalBus) -> None:
        bus.unsubscribe(BestScoreAchieved, self.on_best)
        bus.unsubscribe(BestScoreReset, self.on_reset)

    def on_best(self, event: BestScoreAchieved) -> None:
        logger.debug(f"Persisting best score {event.best_score}")
        self.store.save(event.best_score)

    def on_reset(self, event: BestScoreReset) -> None:
        logger.debug("Clearing persisted best score")
        self.store.clear()
