"""Tile types and definitions."""

from dataclasses import dataclass
from enum import IntEnum


class TileType(IntEnum):
    """Tile type enumeration."""

    GROUND = 0
    WALL = 1
    STAIRS_DOWN = 2
    STAIRS_UP = 3


@dataclass
class Tile:
    """Represents a single tile."""

    tile_type: TileType = TileType.WALL
    visible: bool = False
    explored: bool = False

    @property
    def walkable(self) -> bool:
        """Whether the player can stand on this tile."""
        return self.tile_type != TileType.WALL

    @property
    def blocks_sight(self) -> bool:
        """Whether this tile occludes the cells behind it."""
        return self.tile_type == TileType.WALL

    def mark_visible(self) -> None:
        """Mark tile as currently seen. Seen tiles stay explored."""
        self.visible = True
        self.explored = True


TILE_CHARS = {
    TileType.GROUND: ".",
    TileType.WALL: "#",
    TileType.STAIRS_DOWN: ">",
    TileType.STAIRS_UP: "<",
}


def get_tile_color(tile_type: TileType, lit: bool = True) -> tuple[int, int, int]:
    """Get color for tile type. Unlit colors are used for explored tiles."""
    colors = {
        TileType.GROUND: ((200, 180, 50), (50, 50, 150)),
        TileType.WALL: ((130, 110, 50), (0, 0, 100)),
        TileType.STAIRS_DOWN: ((150, 75, 0), (75, 40, 0)),
        TileType.STAIRS_UP: ((0, 150, 75), (0, 75, 40)),
    }
    lit_color, dark_color = colors.get(tile_type, ((0, 0, 0), (0, 0, 0)))
    return lit_color if lit else dark_color
