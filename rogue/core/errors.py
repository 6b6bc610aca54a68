"""Game exceptions."""


class RogueError(Exception):
    """Base exception for the game core."""


class ConfigError(RogueError, ValueError):
    """Raised when dungeon generation parameters are invalid."""


class OutOfBoundsError(RogueError, IndexError):
    """Raised when a grid coordinate lies outside the level."""
