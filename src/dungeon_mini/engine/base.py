"""
base.py

PURPOSE: The Command interface and the result types commands return.
DEPENDENCIES: models

ARCHITECTURE NOTES:
A command either returns an ActionResult or raises InvalidCommandError.
Commands never print and never exit the process: text goes back in the
result, and ending the session is requested through exit_code so the
driver (the CLI) decides how to shut down.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from dungeon_mini.models.state import GameState


class ExitCode(IntEnum):
    """Process exit codes for terminal turns."""

    OK = 0
    DEATH = 2


@dataclass
class ActionResult:
    """Result of executing a command."""

    message: str
    exit_code: ExitCode | None = None  # Set when the session must end
    state: GameState | None = None  # Replacement state (LOAD)

    @property
    def terminal(self) -> bool:
        return self.exit_code is not None


class Command(ABC):
    """A named player command."""

    name: ClassVar[str]
    usage: ClassVar[str] = ""

    @abstractmethod
    def execute(self, state: GameState, args: list[str]) -> ActionResult:
        """
        Run the command against the game state.

        Args:
            state: The current game state (may be modified)
            args: Whitespace-separated arguments after the command name

        Returns:
            ActionResult with the text to show

        Raises:
            InvalidCommandError: If the command cannot be carried out
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
