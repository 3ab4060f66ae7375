"""Game engine module."""

from dungeon_mini.engine.base import ActionResult, Command, ExitCode
from dungeon_mini.engine.combat import CombatOutcome, CombatReport, resolve_combat
from dungeon_mini.engine.commands import build_registry
from dungeon_mini.engine.engine import GameEngine, TurnResult, create_engine
from dungeon_mini.engine.errors import InvalidCommandError
from dungeon_mini.engine.registry import CommandRegistry

__all__ = [
    "ActionResult",
    "CombatOutcome",
    "CombatReport",
    "Command",
    "CommandRegistry",
    "ExitCode",
    "GameEngine",
    "InvalidCommandError",
    "TurnResult",
    "build_registry",
    "create_engine",
    "resolve_combat",
]
