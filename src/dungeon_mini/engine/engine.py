"""
engine.py

PURPOSE: The dispatch step: one line of input in, one TurnResult out.
DEPENDENCIES: models, storage, opentelemetry

ARCHITECTURE NOTES:
GameEngine owns the GameState and the frozen CommandRegistry.
process_input() tokenizes a line, looks the command up, runs it and
reports back. It never prints and never exits the process:
- Success scores one point.
- InvalidCommandError is an expected failure: error=True, no score.
- Any other exception is caught, logged and reported, no score.
- Terminal results (exit, death) carry an exit code for the driver.

The engine is the "server" - it is authoritative over game state.
"""

import logging
from dataclasses import dataclass

from dungeon_mini.config import Settings
from dungeon_mini.content import create_player, create_sample_world
from dungeon_mini.engine.base import ExitCode
from dungeon_mini.engine.commands import build_registry
from dungeon_mini.engine.errors import InvalidCommandError
from dungeon_mini.engine.registry import CommandRegistry
from dungeon_mini.models.state import GameState
from dungeon_mini.models.world import World
from dungeon_mini.observability import get_tracer
from dungeon_mini.storage.saves import SaveStore
from dungeon_mini.storage.scores import Scoreboard

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


@dataclass
class TurnResult:
    """Result of processing one line of input."""

    message: str  # Text to display (empty for blank lines)
    error: bool = False  # True if the command failed
    exit_code: ExitCode | None = None  # Set when the session must end

    @property
    def terminal(self) -> bool:
        return self.exit_code is not None


def tokenize(line: str) -> tuple[str, list[str]] | None:
    """
    Split a line into a lower-case command name and its arguments.

    Returns None for blank lines.
    """
    parts = line.split()
    if not parts:
        return None
    return parts[0].lower(), parts[1:]


class GameEngine:
    """
    The core game engine.

    Manages game state and dispatches player commands.
    """

    def __init__(self, state: GameState, registry: CommandRegistry):
        self.state = state
        self.registry = registry

    def describe_current_room(self) -> str:
        return self.state.room.describe()

    def process_input(self, user_input: str) -> TurnResult:
        """
        Process a line of player input.

        This is the main entry point for the game loop.

        Args:
            user_input: Raw text from the player

        Returns:
            TurnResult with the message and, for terminal turns, an exit code
        """
        parsed = tokenize(user_input)
        if parsed is None:
            return TurnResult(message="")
        name, args = parsed

        with tracer.start_as_current_span("dispatch") as span:
            span.set_attribute("command.name", name)
            span.set_attribute("command.args", len(args))
            result = self._dispatch(name, args)
            span.set_attribute("command.error", result.error)
            span.set_attribute("game.score", self.state.score)
            return result

    def _dispatch(self, name: str, args: list[str]) -> TurnResult:
        command = self.registry.lookup(name)
        try:
            if command is None:
                raise InvalidCommandError(f"Unknown command: {name}")
            action = command.execute(self.state, args)
        except InvalidCommandError as e:
            logger.debug("Rejected %r: %s", name, e.message)
            return TurnResult(message=e.message, error=True)
        except Exception as e:
            logger.exception("Command %r failed", name)
            return TurnResult(
                message=f"Unexpected error: {type(e).__name__}: {e}",
                error=True,
            )

        if action.state is not None:
            self.state = action.state

        if action.terminal:
            return TurnResult(message=action.message, exit_code=action.exit_code)

        self.state.add_score(1)
        return TurnResult(message=action.message)


def create_engine(settings: Settings, world: World | None = None) -> GameEngine:
    """
    Build an engine for a new game.

    Args:
        settings: Application settings (paths, player stats)
        world: World to play; defaults to the built-in sample world

    Returns:
        A GameEngine standing in the world's start room
    """
    world = world or create_sample_world()
    player = create_player(
        name=settings.player_name,
        hp=settings.player_hp,
        attack=settings.player_attack,
    )
    registry = build_registry(
        SaveStore(settings.save_path()),
        Scoreboard(settings.scores_path()),
    )
    return GameEngine(GameState.new(world, player), registry)
