"""
world.py

PURPOSE: Pydantic models for the world graph (rooms, items, monsters, player).
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The World is the owning store of rooms, keyed by room ID.
Rooms refer to their neighbours by ID, never by object, so the graph
can be cyclic (square <-> forest) and still serialize as plain JSON.

Items are polymorphic: each variant subclasses Item, carries a `kind`
tag, and implements apply(). The AnyItem discriminated union is what
rooms and inventories store, so saved games restore the right variant.
New item kinds plug in by adding a subclass to AnyItem.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

if TYPE_CHECKING:
    from dungeon_mini.models.state import GameState


class Item(BaseModel, ABC):
    """Base class for anything a player can pick up."""

    kind: str
    name: str = Field(..., min_length=1, max_length=50)

    @abstractmethod
    def apply(self, state: "GameState") -> str:
        """Apply the item's effect and return the narrative text."""

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.casefold() == name.casefold()


class Potion(Item):
    """A consumable that restores a fixed amount of hit points."""

    kind: Literal["potion"] = "potion"
    heal: int = Field(..., gt=0)

    def apply(self, state: "GameState") -> str:
        player = state.player
        player.hp += self.heal
        player.discard(self)
        return f"You drink the {self.name}. HP: {player.hp}"


class Key(Item):
    """A key. Nothing to unlock yet, so using it only makes noise."""

    kind: Literal["key"] = "key"

    def apply(self, state: "GameState") -> str:  # noqa: ARG002
        return f"The {self.name} jingles. Maybe there is a door somewhere..."


AnyItem = Annotated[Potion | Key, Field(discriminator="kind")]


def find_item(items: list[AnyItem], name: str) -> Item | None:
    """Return the first item whose name matches, ignoring case."""
    for item in items:
        if item.matches(name):
            return item
    return None


class Monster(BaseModel):
    """A hostile creature. Its level doubles as its attack damage."""

    name: str = Field(..., min_length=1)
    level: int = Field(..., gt=0)
    hp: int

    @property
    def alive(self) -> bool:
        return self.hp > 0


class Player(BaseModel):
    """The single player character."""

    name: str = Field(..., min_length=1)
    hp: int
    attack: int = Field(..., gt=0)
    inventory: list[AnyItem] = Field(default_factory=list)

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def find_item(self, name: str) -> Item | None:
        """Find an inventory item by name (case-insensitive)."""
        return find_item(self.inventory, name)

    def discard(self, item: Item) -> None:
        """Remove exactly this item instance from the inventory."""
        for index, held in enumerate(self.inventory):
            if held is item:
                del self.inventory[index]
                return
        raise ValueError(f"{item.name} is not in {self.name}'s inventory")


class Room(BaseModel):
    """
    A location in the world.

    Rooms hold items, at most one monster, and exits to other rooms.
    """

    id: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9_]*$")
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    exits: dict[str, str] = Field(
        default_factory=dict,
        description="Map of direction -> room_id",
    )
    items: list[AnyItem] = Field(default_factory=list)
    monster: Monster | None = Field(default=None)

    def find_item(self, name: str) -> Item | None:
        """Find an item lying in this room by name (case-insensitive)."""
        return find_item(self.items, name)

    def remove_item(self, item: Item) -> None:
        """Remove exactly this item instance from the room."""
        for index, present in enumerate(self.items):
            if present is item:
                del self.items[index]
                return
        raise ValueError(f"{item.name} is not in {self.name}")

    def describe(self) -> str:
        """Full description: name, text, items, monster and exits."""
        lines = [f"{self.name}: {self.description}"]
        if self.items:
            lines.append("Items: " + ", ".join(item.name for item in self.items))
        if self.monster is not None:
            lines.append(f"Monster: {self.monster.name} (level {self.monster.level})")
        if self.exits:
            lines.append("Exits: " + ", ".join(self.exits))
        else:
            lines.append("There are no obvious exits.")
        return "\n".join(lines)


class World(BaseModel):
    """
    The room graph.

    World files list rooms as an array; internally they are keyed by ID.
    """

    title: str = Field(default="DungeonMini", min_length=1)
    start_room: str = Field(..., description="ID of the room a new game starts in")
    rooms: dict[str, Room] = Field(..., min_length=1)

    @field_validator("rooms", mode="before")
    @classmethod
    def index_rooms(cls, v: Any) -> Any:
        """Accept a list of rooms and key it by room ID."""
        if isinstance(v, list):
            indexed: dict[str, Any] = {}
            for index, room in enumerate(v):
                if isinstance(room, Room):
                    room_id = room.id
                elif isinstance(room, dict):
                    room_id = room.get("id")
                else:
                    raise ValueError(f"Room entries must be objects, got {type(room).__name__}")
                if not isinstance(room_id, str):
                    # Let field validation report the bad or missing id
                    indexed[f"#{index}"] = room
                    continue
                if room_id in indexed:
                    raise ValueError(f"Duplicate room id '{room_id}'")
                indexed[room_id] = room
            return indexed
        return v

    @model_validator(mode="after")
    def validate_references(self) -> "World":
        """Ensure every room ID reference is valid."""
        for key, room in self.rooms.items():
            if key != room.id:
                raise ValueError(f"Room '{room.id}' is stored under key '{key}'")

        if self.start_room not in self.rooms:
            raise ValueError(f"Start room '{self.start_room}' not found")

        for room in self.rooms.values():
            for direction, target in room.exits.items():
                if target not in self.rooms:
                    raise ValueError(
                        f"Room '{room.id}' has exit '{direction}' to unknown room '{target}'"
                    )
        return self

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by ID."""
        return self.rooms.get(room_id)

    def neighbor(self, room_id: str, direction: str) -> Room | None:
        """Get the room reached from room_id by going in direction."""
        room = self.rooms.get(room_id)
        if room is None:
            return None
        target = room.exits.get(direction)
        return self.rooms.get(target) if target is not None else None
