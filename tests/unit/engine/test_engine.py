"""
TEST DOC: Game Engine

WHAT: Tests for the dispatch loop and the built-in commands
WHY: Engine must execute commands, score successes and survive failures
HOW: Feed lines to process_input and inspect TurnResult and state

CASES:
- Movement around the square/forest cycle
- Taking, listing and using items
- Fighting to victory and to death
- Help, look, exit, save and load
- Full walkthrough: move, take, fight

EDGE CASES:
- Blank lines and unknown commands
- Commands that raise unexpected exceptions
- Duplicate item names
"""

import pytest

from dungeon_mini.config import Settings
from dungeon_mini.engine.base import ActionResult, Command, ExitCode
from dungeon_mini.engine.commands import LookCommand
from dungeon_mini.engine.engine import GameEngine, tokenize
from dungeon_mini.engine.registry import CommandRegistry
from dungeon_mini.models.state import GameState
from dungeon_mini.models.world import Key, Potion


class TestTokenize:
    """Tests for splitting input lines."""

    def test_blank(self):
        assert tokenize("") is None
        assert tokenize("   \t ") is None

    def test_name_lowercased_args_kept(self):
        assert tokenize("  TAKE  Small   Potion ") == ("take", ["Small", "Potion"])


class TestDispatch:
    """Tests for the dispatch step itself."""

    def test_blank_line_is_ignored(self, engine: GameEngine):
        result = engine.process_input("   ")
        assert not result.error
        assert result.message == ""
        assert engine.state.score == 0

    @pytest.mark.parametrize("name", ["dance", "xyzzy", "north", "quit"])
    def test_unknown_command(self, engine: GameEngine, name: str):
        """Unknown commands fail and change nothing."""
        result = engine.process_input(name)
        assert result.error
        assert not result.terminal
        assert result.message == f"Unknown command: {name}"
        assert engine.state.score == 0
        assert engine.state.current_room == "square"

    def test_command_name_case_insensitive(self, engine: GameEngine):
        result = engine.process_input("LOOK")
        assert not result.error
        assert "Square" in result.message

    def test_success_scores_one_point(self, engine: GameEngine):
        engine.process_input("help")
        engine.process_input("look")
        assert engine.state.score == 2

    def test_unexpected_error_is_reported(self, game_state: GameState):
        """Non-validation failures are caught and the loop can continue."""

        class Boom(Command):
            name = "boom"

            def execute(self, state, args):
                raise RuntimeError("kaboom")

        registry = CommandRegistry()
        registry.register("boom", Boom())
        registry.register("look", LookCommand())
        engine = GameEngine(game_state, registry)

        result = engine.process_input("boom")
        assert result.error
        assert not result.terminal
        assert result.message == "Unexpected error: RuntimeError: kaboom"
        assert engine.state.score == 0

        assert not engine.process_input("look").error
        assert engine.state.score == 1


class TestMovement:
    """Tests for the MOVE command."""

    def test_move_north(self, engine: GameEngine):
        result = engine.process_input("move north")
        assert not result.error
        assert engine.state.current_room == "forest"
        assert "Forest: Rustling leaves" in result.message

    def test_cycle_returns_to_start(self, engine: GameEngine):
        """square -> forest -> square counts two successes."""
        engine.process_input("move north")
        engine.process_input("move south")
        assert engine.state.current_room == "square"
        assert engine.state.score == 2

    def test_move_without_direction(self, engine: GameEngine):
        result = engine.process_input("move")
        assert result.error
        assert result.message == "Usage: move <direction>"
        assert engine.state.score == 0

    def test_move_invalid_direction(self, engine: GameEngine):
        result = engine.process_input("move west")
        assert result.error
        assert result.message == "There is no way west."
        assert engine.state.current_room == "square"
        assert engine.state.score == 0


class TestTakeAndInventory:
    """Tests for TAKE and INVENTORY."""

    def test_take_moves_item(self, engine: GameEngine):
        engine.process_input("move north")
        result = engine.process_input("take small potion")
        assert not result.error
        assert result.message == "Taken: Small Potion"
        assert engine.state.room.items == []
        assert [item.name for item in engine.state.player.inventory] == ["Small Potion"]

    def test_take_then_inventory(self, engine: GameEngine):
        """The taken item is listed exactly once."""
        engine.process_input("move north")
        engine.process_input("take Small Potion")
        result = engine.process_input("inventory")
        assert result.message == "- Potion (1): Small Potion"

    def test_take_absent_item(self, engine: GameEngine):
        engine.process_input("move north")
        result = engine.process_input("take Golden Crown")
        assert result.error
        assert result.message == "Item not found: Golden Crown"
        assert len(engine.state.room.items) == 1
        assert engine.state.player.inventory == []
        assert engine.state.score == 1

    def test_take_without_name(self, engine: GameEngine):
        result = engine.process_input("take")
        assert result.error
        assert result.message == "Usage: take <item>"
        assert engine.state.player.inventory == []

    def test_take_first_of_duplicates(self, engine: GameEngine):
        engine.state.room.items.extend([Key(name="Key"), Key(name="key")])
        first = engine.state.room.items[0]
        engine.process_input("take KEY")
        assert engine.state.player.inventory == [first]
        assert engine.state.player.inventory[0] is first
        assert len(engine.state.room.items) == 1

    def test_empty_inventory(self, engine: GameEngine):
        result = engine.process_input("inventory")
        assert not result.error
        assert result.message == "You are empty-handed."

    def test_inventory_groups_by_kind(self, engine: GameEngine):
        engine.state.player.inventory.extend(
            [
                Potion(name="Small Potion", heal=5),
                Key(name="Rusty Key"),
                Potion(name="Big Potion", heal=10),
            ]
        )
        lines = engine.process_input("inventory").message.splitlines()
        assert sorted(lines) == ["- Key (1): Rusty Key", "- Potion (2): Small Potion"]


class TestUse:
    """Tests for the USE command."""

    def test_use_potion_heals_and_consumes(self, engine: GameEngine):
        player = engine.state.player
        player.inventory.append(Potion(name="Small Potion", heal=5))
        player.inventory.append(Potion(name="Small Potion", heal=5))

        result = engine.process_input("use small potion")

        assert not result.error
        assert player.hp == 25
        assert len(player.inventory) == 1
        assert "HP: 25" in result.message

    def test_use_key_keeps_it(self, engine: GameEngine):
        engine.state.player.inventory.append(Key(name="Rusty Key"))
        result = engine.process_input("use rusty key")
        assert not result.error
        assert "jingles" in result.message
        assert len(engine.state.player.inventory) == 1

    def test_use_missing_item(self, engine: GameEngine):
        result = engine.process_input("use Small Potion")
        assert result.error
        assert result.message == "Item not in inventory: Small Potion"
        assert engine.state.player.hp == 20

    def test_use_without_name(self, engine: GameEngine):
        result = engine.process_input("use")
        assert result.error
        assert result.message == "Usage: use <item>"


class TestFight:
    """Tests for the FIGHT command."""

    def test_no_monster(self, engine: GameEngine):
        result = engine.process_input("fight")
        assert result.error
        assert result.message == "There is no monster here."
        assert engine.state.score == 0

    def test_victory_clears_monster(self, engine: GameEngine):
        engine.process_input("move north")
        result = engine.process_input("fight")
        assert not result.error
        assert not result.terminal
        assert "The Wolf is defeated!" in result.message
        assert engine.state.room.monster is None
        assert engine.state.player.hp == 19

    def test_death_is_terminal(self, engine: GameEngine):
        engine.process_input("move north")
        engine.state.player.hp = 1

        result = engine.process_input("fight")

        assert result.exit_code is ExitCode.DEATH
        assert result.message.endswith("You died!")
        assert engine.state.room.monster is not None
        assert engine.state.score == 1


class TestMetaCommands:
    """Tests for help, look, gc-stats, exit, save and load."""

    def test_help_lists_in_registration_order(self, engine: GameEngine):
        result = engine.process_input("help")
        assert result.message == (
            "Commands: help, gc-stats, look, move, take, inventory, use, fight, "
            "save, load, scores, exit"
        )

    def test_look(self, engine: GameEngine):
        result = engine.process_input("look")
        assert result.message.startswith("Square: A stone square")
        assert "Exits: north" in result.message

    def test_gc_stats(self, engine: GameEngine):
        result = engine.process_input("gc-stats")
        assert not result.error
        assert result.message.startswith("GC: tracked=")

    def test_exit(self, engine: GameEngine):
        result = engine.process_input("exit")
        assert result.exit_code is ExitCode.OK
        assert result.message == "Goodbye!"
        assert engine.state.score == 0

    def test_load_without_save(self, engine: GameEngine):
        result = engine.process_input("load")
        assert result.error
        assert result.message == "No saved game found."

    def test_save_then_load(self, engine: GameEngine):
        """Loading brings back the saved room, inventory and score."""
        engine.process_input("move north")
        engine.process_input("take small potion")
        assert not engine.process_input("save").error
        saved_score = engine.state.score

        engine.process_input("move south")
        engine.process_input("use small potion")
        result = engine.process_input("load")

        assert not result.error
        assert engine.state.current_room == "forest"
        assert [item.name for item in engine.state.player.inventory] == ["Small Potion"]
        assert engine.state.player.hp == 20
        # The restored score (taken before SAVE itself scored) plus one for LOAD
        assert engine.state.score == saved_score

    def test_save_records_score(self, engine: GameEngine):
        engine.process_input("look")
        engine.process_input("save")
        result = engine.process_input("scores")
        assert "1. Hero - 1" in result.message

    def test_save_survives_scoreboard_failure(self, engine: GameEngine, settings: Settings):
        """A scoreboard that cannot be written does not undo the save."""
        settings.scores_path().mkdir()

        result = engine.process_input("save")

        assert not result.error
        assert "Game saved to" in result.message
        assert "Score not recorded" in result.message
        assert settings.save_path().is_file()
        assert engine.state.score == 1

    def test_scores_empty(self, engine: GameEngine):
        assert engine.process_input("scores").message == "No scores yet."


class TestCustomCommands:
    """New commands plug into the registry without touching the engine."""

    def test_registered_command_runs(self, game_state: GameState):
        class Shout(Command):
            name = "shout"

            def execute(self, state, args):
                return ActionResult(message=" ".join(args).upper() or "!")

        registry = CommandRegistry()
        registry.register("shout", Shout())
        engine = GameEngine(game_state, registry)

        assert engine.process_input("Shout hello there").message == "HELLO THERE"
        assert engine.state.score == 1


class TestWalkthrough:
    """End-to-end scenario on the sample world."""

    def test_move_take_fight(self, engine: GameEngine):
        assert not engine.process_input("move north").error
        assert not engine.process_input("take Small Potion").error
        result = engine.process_input("fight")

        assert not result.error
        assert result.message.splitlines() == [
            "You hit the Wolf for 5. Monster HP: 3",
            "The Wolf strikes back for 1. Your HP: 19",
            "You hit the Wolf for 5. Monster HP: -2",
            "The Wolf is defeated!",
        ]
        assert engine.state.player.hp == 19
        assert engine.state.room.monster is None
        assert engine.state.score == 3
