"""
registry.py

PURPOSE: Ordered registry mapping command names to Command objects.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The registry is built once at startup and frozen. Insertion order is kept
so HELP lists commands in the order they were registered.
"""

from dungeon_mini.engine.base import Command


class CommandRegistry:
    """Name -> Command lookup table."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._frozen = False

    def register(self, name: str, command: Command) -> None:
        """Register a command under a lower-case name."""
        if self._frozen:
            raise RuntimeError("Command registry is frozen")
        key = name.lower()
        if key in self._commands:
            raise ValueError(f"Command '{key}' is already registered")
        self._commands[key] = command

    def lookup(self, name: str) -> Command | None:
        """Get the command for a name, or None if unknown."""
        return self._commands.get(name.lower())

    def names(self) -> list[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)
