"""
conftest.py

Shared pytest fixtures for dungeon_mini tests.
"""

from pathlib import Path

import pytest

from dungeon_mini.config import Settings
from dungeon_mini.content import create_player, create_sample_world
from dungeon_mini.engine.commands import build_registry
from dungeon_mini.engine.engine import GameEngine, create_engine
from dungeon_mini.models.state import GameState
from dungeon_mini.models.world import Player, World
from dungeon_mini.storage import SaveStore, Scoreboard


@pytest.fixture
def sample_world() -> World:
    """The built-in three-room world."""
    return create_sample_world()


@pytest.fixture
def hero() -> Player:
    """A fresh player: HP 20, attack 5."""
    return create_player()


@pytest.fixture
def game_state(sample_world: World, hero: Player) -> GameState:
    """New-game state in the square."""
    return GameState.new(sample_world, hero)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose data directory is a temporary path."""
    return Settings(data_dir=tmp_path)


@pytest.fixture
def save_store(settings: Settings) -> SaveStore:
    return SaveStore(settings.save_path())


@pytest.fixture
def scoreboard(settings: Settings) -> Scoreboard:
    return Scoreboard(settings.scores_path())


@pytest.fixture
def engine(settings: Settings) -> GameEngine:
    """Engine for a new game of the sample world."""
    return create_engine(settings)


@pytest.fixture
def engine_for(save_store: SaveStore, scoreboard: Scoreboard):
    """Factory building an engine around an existing state."""

    def _make(state: GameState) -> GameEngine:
        return GameEngine(state, build_registry(save_store, scoreboard))

    return _make


@pytest.fixture
def minimal_world_dict() -> dict:
    """A minimal valid world for testing."""
    return {
        "title": "Minimal Test World",
        "start_room": "start",
        "rooms": [
            {
                "id": "start",
                "name": "Starting Room",
                "description": "A simple room.",
            }
        ],
    }
