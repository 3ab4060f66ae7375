"""
Sample world for DungeonMini.

Three rooms in a line: the square, the forest (a potion and a wolf)
and the cave (a rusty key).
"""

from dungeon_mini.models.world import Key, Monster, Player, Potion, Room, World


def create_sample_world() -> World:
    """
    Build the default world.

    Layout:
        square --north--> forest --east--> cave
        square <--south-- forest <--west-- cave
    """
    square = Room(
        id="square",
        name="Square",
        description="A stone square with a fountain.",
        exits={"north": "forest"},
    )
    forest = Room(
        id="forest",
        name="Forest",
        description="Rustling leaves and birdsong.",
        exits={"south": "square", "east": "cave"},
        items=[Potion(name="Small Potion", heal=5)],
        monster=Monster(name="Wolf", level=1, hp=8),
    )
    cave = Room(
        id="cave",
        name="Cave",
        description="Dark and damp.",
        exits={"west": "forest"},
        items=[Key(name="Rusty Key")],
    )
    return World(start_room="square", rooms=[square, forest, cave])


def create_player(name: str = "Hero", hp: int = 20, attack: int = 5) -> Player:
    """Create a fresh player with an empty inventory."""
    return Player(name=name, hp=hp, attack=attack)
