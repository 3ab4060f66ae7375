"""
state.py

PURPOSE: Mutable game state that changes during play.
DEPENDENCIES: pydantic, world.py

ARCHITECTURE NOTES:
GameState owns a private copy of the World, so a session can mutate rooms
(items taken, monsters slain) without touching the definition it started
from. The current room is held as an ID into that world.
The whole state is what gets saved and loaded.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from dungeon_mini.models.world import Player, Room, World


class GameState(BaseModel):
    """
    Complete mutable state of a game in progress.

    This is what gets saved/loaded and modified during play.
    """

    world: World
    current_room: str = Field(..., description="ID of the room the player is in")
    player: Player
    score: int = Field(default=0, description="Player's current score")

    @model_validator(mode="after")
    def validate_current_room(self) -> "GameState":
        if self.current_room not in self.world.rooms:
            raise ValueError(f"Current room '{self.current_room}' not found")
        return self

    @classmethod
    def new(cls, world: World, player: Player) -> "GameState":
        """
        Create initial state for a new game.

        The world and player are deep-copied so the caller's definitions
        stay pristine.
        """
        return cls(
            world=world.model_copy(deep=True),
            current_room=world.start_room,
            player=player.model_copy(deep=True),
            score=0,
        )

    @property
    def room(self) -> Room:
        """The room the player is standing in."""
        return self.world.rooms[self.current_room]

    def move_to(self, room_id: str) -> Room:
        """Move the player to another room and return it."""
        if room_id not in self.world.rooms:
            raise KeyError(room_id)
        self.current_room = room_id
        return self.room

    def add_score(self, points: int) -> None:
        """Add to the player's score."""
        self.score += points

    def to_save_dict(self) -> dict[str, Any]:
        """Convert state to a dictionary for saving."""
        return self.model_dump(mode="json")

    @classmethod
    def from_save_dict(cls, data: dict[str, Any]) -> "GameState":
        """Load state from a saved dictionary."""
        return cls.model_validate(data)
