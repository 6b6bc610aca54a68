"""Player state."""

from dataclasses import dataclass


@dataclass
class Player:
    """The single observer exploring the dungeon.

    Position is in grid coordinates on the level at index ``depth``.
    """

    x: int
    y: int
    depth: int = 0

    @property
    def position(self) -> tuple[int, int]:
        """Grid position as (x, y)."""
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Reposition the player."""
        self.x = x
        self.y = y
