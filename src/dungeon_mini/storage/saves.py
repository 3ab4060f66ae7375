"""
saves.py

PURPOSE: Persist and restore a complete GameState as JSON.
DEPENDENCIES: pydantic, models

ARCHITECTURE NOTES:
The whole GameState is dumped, world included, so rooms emptied of items
and monsters stay that way after a load. The file is written to a
temporary sibling first and then renamed into place.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from dungeon_mini.models.state import GameState
from dungeon_mini.storage.errors import PersistenceError

logger = logging.getLogger(__name__)


class SaveNotFoundError(PersistenceError):
    """There is no save file to restore."""


class SaveStore:
    """A single-slot save file."""

    def __init__(self, path: Path):
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def persist(self, state: GameState) -> None:
        """Write the state to disk, replacing any previous save."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(state.to_save_dict(), f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            raise PersistenceError(f"Could not write save file {self.path}: {e}") from e
        logger.info("Saved game to %s", self.path)

    def restore(self) -> GameState:
        """Read the saved state back."""
        if not self.exists():
            raise SaveNotFoundError(f"No save file at {self.path}")
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise PersistenceError(f"Could not read save file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Corrupt save file {self.path}: {e.msg}") from e

        try:
            state = GameState.from_save_dict(data)
        except ValidationError as e:
            raise PersistenceError(
                f"Save file {self.path} is invalid ({e.error_count()} errors)"
            ) from e
        logger.info("Loaded game from %s", self.path)
        return state
