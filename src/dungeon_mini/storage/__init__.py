"""Save files and the scoreboard."""

from dungeon_mini.storage.errors import PersistenceError
from dungeon_mini.storage.saves import SaveNotFoundError, SaveStore
from dungeon_mini.storage.scores import Scoreboard, ScoreEntry

__all__ = [
    "PersistenceError",
    "SaveNotFoundError",
    "SaveStore",
    "ScoreEntry",
    "Scoreboard",
]
