"""Domain models for the dungeon world and game state."""

from dungeon_mini.models.state import GameState
from dungeon_mini.models.world import (
    AnyItem,
    Item,
    Key,
    Monster,
    Player,
    Potion,
    Room,
    World,
)

__all__ = [
    "AnyItem",
    "GameState",
    "Item",
    "Key",
    "Monster",
    "Player",
    "Potion",
    "Room",
    "World",
]
