"""Built-in world content and world file loading."""

from dungeon_mini.content.loader import load_world
from dungeon_mini.content.sample_world import create_player, create_sample_world

__all__ = ["create_player", "create_sample_world", "load_world"]
