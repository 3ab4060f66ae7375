"""
commands.py

PURPOSE: Concrete player commands and the default registry.
DEPENDENCIES: models, storage

ARCHITECTURE NOTES:
Each command is a small class implementing Command.execute().
Validation failures raise InvalidCommandError and leave the state as it
was; everything else returns an ActionResult.

Commands that need collaborators (the registry for HELP, the save store,
the scoreboard) receive them in their constructor. build_registry() wires
them all together in display order.
"""

import gc
import logging
from collections import Counter

from dungeon_mini.engine.base import ActionResult, Command, ExitCode
from dungeon_mini.engine.combat import CombatOutcome, resolve_combat
from dungeon_mini.engine.errors import InvalidCommandError
from dungeon_mini.engine.registry import CommandRegistry
from dungeon_mini.models.state import GameState
from dungeon_mini.storage.errors import PersistenceError
from dungeon_mini.storage.saves import SaveNotFoundError, SaveStore
from dungeon_mini.storage.scores import Scoreboard

logger = logging.getLogger(__name__)


def _usage_error(command: Command) -> InvalidCommandError:
    return InvalidCommandError(f"Usage: {command.usage}")


def _join_name(command: Command, args: list[str]) -> str:
    """Join the arguments into a multi-word item name."""
    if not args:
        raise _usage_error(command)
    return " ".join(args)


class HelpCommand(Command):
    """List every registered command."""

    name = "help"

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        return ActionResult(message="Commands: " + ", ".join(self.registry.names()))


class GcStatsCommand(Command):
    """Report garbage collector counters."""

    name = "gc-stats"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        counts = gc.get_count()
        tracked = len(gc.get_objects())
        return ActionResult(
            message=f"GC: tracked={tracked} generations={counts[0]}/{counts[1]}/{counts[2]}"
        )


class LookCommand(Command):
    """Describe the current room."""

    name = "look"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        return ActionResult(message=state.room.describe())


class MoveCommand(Command):
    """Walk to a neighbouring room."""

    name = "move"
    usage = "move <direction>"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:
        if not args:
            raise _usage_error(self)

        direction = args[0]
        target = state.world.neighbor(state.current_room, direction)
        if target is None:
            raise InvalidCommandError(f"There is no way {direction}.")

        logger.debug("Moving %s from %s to %s", direction, state.current_room, target.id)
        room = state.move_to(target.id)
        return ActionResult(message=f"You go to: {room.name}\n{room.describe()}")


class TakeCommand(Command):
    """Pick an item up from the current room."""

    name = "take"
    usage = "take <item>"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:
        item_name = _join_name(self, args)
        room = state.room
        item = room.find_item(item_name)
        if item is None:
            raise InvalidCommandError(f"Item not found: {item_name}")

        room.remove_item(item)
        state.player.inventory.append(item)
        return ActionResult(message=f"Taken: {item.name}")


class InventoryCommand(Command):
    """List carried items grouped by kind."""

    name = "inventory"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        inventory = state.player.inventory
        if not inventory:
            return ActionResult(message="You are empty-handed.")

        # Counter keeps first-seen order, so the listing is stable for a given inventory.
        counts = Counter(item.kind for item in inventory)
        representatives: dict[str, str] = {}
        for item in inventory:
            representatives.setdefault(item.kind, item.name)

        lines = [
            f"- {kind.title()} ({count}): {representatives[kind]}" for kind, count in counts.items()
        ]
        return ActionResult(message="\n".join(lines))


class UseCommand(Command):
    """Use an item from the inventory."""

    name = "use"
    usage = "use <item>"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:
        item_name = _join_name(self, args)
        item = state.player.find_item(item_name)
        if item is None:
            raise InvalidCommandError(f"Item not in inventory: {item_name}")
        return ActionResult(message=item.apply(state))


class FightCommand(Command):
    """Fight the monster in the current room to the end."""

    name = "fight"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        room = state.room
        monster = room.monster
        if monster is None:
            raise InvalidCommandError("There is no monster here.")

        report = resolve_combat(state.player, monster)
        lines = list(report.log)

        if report.outcome is CombatOutcome.PLAYER_LOSES:
            lines.append("You died!")
            return ActionResult(message="\n".join(lines), exit_code=ExitCode.DEATH)

        room.monster = None
        lines.append(f"The {monster.name} is defeated!")
        return ActionResult(message="\n".join(lines))


class SaveCommand(Command):
    """Save the game and record the current score."""

    name = "save"

    def __init__(self, store: SaveStore, scoreboard: Scoreboard):
        self.store = store
        self.scoreboard = scoreboard

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        self.store.persist(state)
        message = f"Game saved to {self.store.path}"
        try:
            self.scoreboard.record_score(state.player.name, state.score)
        except PersistenceError as e:
            logger.warning("Score not recorded: %s", e)
            message += f"\nScore not recorded: {e}"
        return ActionResult(message=message)


class LoadCommand(Command):
    """Replace the session with the last saved game."""

    name = "load"

    def __init__(self, store: SaveStore):
        self.store = store

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        try:
            restored = self.store.restore()
        except SaveNotFoundError:
            raise InvalidCommandError("No saved game found.") from None
        return ActionResult(
            message=f"Game loaded.\n{restored.room.describe()}",
            state=restored,
        )


class ScoresCommand(Command):
    """Show the high-score table."""

    name = "scores"

    def __init__(self, scoreboard: Scoreboard):
        self.scoreboard = scoreboard

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        entries = self.scoreboard.list_scores()
        if not entries:
            return ActionResult(message="No scores yet.")
        lines = ["High scores:"]
        for rank, entry in enumerate(entries, start=1):
            lines.append(f"{rank}. {entry.name} - {entry.score}")
        return ActionResult(message="\n".join(lines))


class ExitCommand(Command):
    """Leave the game."""

    name = "exit"

    def execute(self, state: GameState, args: list[str]) -> ActionResult:  # noqa: ARG002
        return ActionResult(message="Goodbye!", exit_code=ExitCode.OK)


def build_registry(store: SaveStore, scoreboard: Scoreboard) -> CommandRegistry:
    """Create the frozen registry of all built-in commands."""
    registry = CommandRegistry()
    commands: list[Command] = [
        HelpCommand(registry),
        GcStatsCommand(),
        LookCommand(),
        MoveCommand(),
        TakeCommand(),
        InventoryCommand(),
        UseCommand(),
        FightCommand(),
        SaveCommand(store, scoreboard),
        LoadCommand(store),
        ScoresCommand(scoreboard),
        ExitCommand(),
    ]
    for command in commands:
        registry.register(command.name, command)
    registry.freeze()
    return registry
