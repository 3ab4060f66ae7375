"""
TEST DOC: Storage

WHAT: Tests for SaveStore and Scoreboard
WHY: Save/load must round-trip the full state; scores must sort correctly
HOW: Write to a temporary data directory and read back

CASES:
- Persist then restore a modified state
- Scores listed highest first, limited to the top entries

EDGE CASES:
- Missing save file
- Corrupt save and scoreboard files
- Tied scores keep recording order
"""

import pytest

from dungeon_mini.models.state import GameState
from dungeon_mini.models.world import Potion
from dungeon_mini.storage import PersistenceError, SaveNotFoundError, SaveStore, Scoreboard


class TestSaveStore:
    def test_restore_missing(self, save_store: SaveStore):
        assert not save_store.exists()
        with pytest.raises(SaveNotFoundError):
            save_store.restore()

    def test_round_trip(self, save_store: SaveStore, game_state: GameState):
        game_state.move_to("forest")
        game_state.world.rooms["forest"].monster = None
        potion = game_state.room.items.pop()
        game_state.player.inventory.append(potion)
        game_state.player.hp = 13
        game_state.add_score(4)

        save_store.persist(game_state)
        restored = save_store.restore()

        assert restored.model_dump() == game_state.model_dump()
        assert isinstance(restored.player.inventory[0], Potion)
        assert restored.room.monster is None

    def test_persist_overwrites(self, save_store: SaveStore, game_state: GameState):
        save_store.persist(game_state)
        game_state.add_score(7)
        save_store.persist(game_state)
        assert save_store.restore().score == 7
        assert not save_store.path.with_suffix(".json.tmp").exists()

    def test_corrupt_json(self, save_store: SaveStore):
        save_store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError, match="Corrupt"):
            save_store.restore()

    def test_invalid_state(self, save_store: SaveStore):
        save_store.path.write_text('{"score": 3}', encoding="utf-8")
        with pytest.raises(PersistenceError, match="invalid"):
            save_store.restore()


class TestScoreboard:
    def test_empty(self, scoreboard: Scoreboard):
        assert scoreboard.list_scores() == []

    def test_sorted_highest_first(self, scoreboard: Scoreboard):
        scoreboard.record_score("Ann", 3)
        scoreboard.record_score("Bob", 9)
        scoreboard.record_score("Cid", 5)
        assert [(e.name, e.score) for e in scoreboard.list_scores()] == [
            ("Bob", 9),
            ("Cid", 5),
            ("Ann", 3),
        ]

    def test_ties_keep_order(self, scoreboard: Scoreboard):
        scoreboard.record_score("First", 4)
        scoreboard.record_score("Second", 4)
        assert [e.name for e in scoreboard.list_scores()] == ["First", "Second"]

    def test_limit(self, scoreboard: Scoreboard):
        for score in range(15):
            scoreboard.record_score("Hero", score)
        top = scoreboard.list_scores()
        assert len(top) == 10
        assert top[0].score == 14
        assert len(scoreboard.list_scores(limit=None)) == 15

    def test_corrupt_file(self, scoreboard: Scoreboard):
        scoreboard.path.write_text("[{]", encoding="utf-8")
        with pytest.raises(PersistenceError, match="corrupt"):
            scoreboard.list_scores()
