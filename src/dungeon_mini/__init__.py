"""
DungeonMini - a small console text adventure.

This package provides:
- A world model of rooms, items, monsters and a player
- A command registry and dispatch loop
- Deterministic turn-based combat
- Save/load and a scoreboard
"""

__version__ = "0.1.0"
