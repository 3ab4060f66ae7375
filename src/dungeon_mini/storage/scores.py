"""
scores.py

PURPOSE: High-score table stored as a JSON list.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
Entries are appended in the order they are recorded. list_scores() sorts
by score, highest first; the sort is stable so equal scores keep the
order they were recorded in.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from dungeon_mini.storage.errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class ScoreEntry(BaseModel):
    """One line of the scoreboard."""

    name: str = Field(..., min_length=1)
    score: int
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


_entries_adapter = TypeAdapter(list[ScoreEntry])


class Scoreboard:
    """File-backed scoreboard."""

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> list[ScoreEntry]:
        if not self.path.is_file():
            return []
        try:
            return _entries_adapter.validate_json(self.path.read_bytes())
        except OSError as e:
            raise PersistenceError(f"Could not read scoreboard {self.path}: {e}") from e
        except ValidationError as e:
            raise PersistenceError(f"Scoreboard {self.path} is corrupt") from e

    def _write(self, entries: list[ScoreEntry]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_entries_adapter.dump_json(entries, indent=2))
        except OSError as e:
            raise PersistenceError(f"Could not write scoreboard {self.path}: {e}") from e

    def record_score(self, name: str, score: int) -> ScoreEntry:
        """Append a score to the table."""
        entry = ScoreEntry(name=name, score=score)
        entries = self._read()
        entries.append(entry)
        self._write(entries)
        logger.info("Recorded score %d for %s", score, name)
        return entry

    def list_scores(self, limit: int | None = DEFAULT_LIMIT) -> list[ScoreEntry]:
        """Scores ordered highest first, at most `limit` of them."""
        entries = sorted(self._read(), key=lambda entry: entry.score, reverse=True)
        if limit is not None:
            entries = entries[:limit]
        return entries
