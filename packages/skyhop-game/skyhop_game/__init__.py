"""skyhop-game - Side-scrolling obstacle-dodging game built on the skyhop engine."""
from __future__ import annotations

from skyhop_game.config import ConfigError, GameConfig, load_config
from skyhop_game.environment import EnvironmentCycle
from skyhop_game.game import Game
from skyhop_game.lifecycle import GAMEOVER, PAUSED, PLAYING, READY
from skyhop_game.parallax import ParallaxLayer
from skyhop_game.render import RenderableState
from skyhop_game.session import GameSession
from skyhop_game.spawner import ObstacleSpawner
from skyhop_game.storage import BestScoreRecorder, JsonFileStore, MemoryStore

__all__ = [
    "Game",
    "GameConfig",
    "ConfigError",
    "load_config",
    "GameSession",
    "EnvironmentCycle",
    "ParallaxLayer",
    "ObstacleSpawner",
    "RenderableState",
    "BestScoreRecorder",
    "JsonFileStore",
    "MemoryStore",
    "READY",
    "PLAYING",
    "PAUSED",
    "GAMEOVER",
]
