"""Exceptions raised by command handlers."""


class InvalidCommandError(Exception):
    """
    A recoverable, expected failure of a player command.

    Missing arguments, unknown commands, bad directions and missing items
    all raise this. The dispatch loop reports the message and carries on
    without scoring the turn.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
