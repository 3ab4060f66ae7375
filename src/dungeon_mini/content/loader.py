"""Load world definitions from JSON files."""

import json
from pathlib import Path

from dungeon_mini.models.world import World


def load_world(path: Path) -> World:
    """
    Read and validate a world file.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the world fails validation
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return World.model_validate(data)
