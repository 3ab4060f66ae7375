"""Storage exceptions."""


class PersistenceError(Exception):
    """A save file or scoreboard could not be read or written."""
