"""Level/dungeon level management."""

from typing import Iterator, Optional

import pygame

from rogue.core.errors import OutOfBoundsError
from rogue.world.tiles import TILE_CHARS, Tile, TileType, get_tile_color


class Level:
    """Represents a dungeon level.

    Tiles are stored row-major in a single list; every access goes through
    ``_index`` so an out-of-range coordinate fails instead of wrapping.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize level with every cell set to wall."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Level dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [Tile(TileType.WALL) for _ in range(width * height)]
        self.rooms: list[pygame.Rect] = []
        self.stairs_up: tuple[int, int] = (0, 0)
        self.stairs_down: tuple[int, int] = (0, 0)

    @classmethod
    def from_ascii(cls, text: str) -> "Level":
        """Build a level from the characters produced by ``to_ascii``.

        Stair coordinates are taken from the ``<`` and ``>`` glyphs when present.
        """
        rows = [line.strip() for line in text.strip().splitlines()]
        kinds = {char: tile_type for tile_type, char in TILE_CHARS.items()}
        level = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            if len(row) != level.width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {level.width}")
            for x, char in enumerate(row):
                tile_type = kinds[char]
                level.set_type(x, y, tile_type)
                if tile_type == TileType.STAIRS_UP:
                    level.stairs_up = (x, y)
                elif tile_type == TileType.STAIRS_DOWN:
                    level.stairs_down = (x, y)
        return level

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside level bounds {self.width}x{self.height}"
            )
        return y * self.width + x

    def tile_at(self, x: int, y: int) -> Tile:
        """Get tile at position. Raises OutOfBoundsError outside the grid."""
        return self._tiles[self._index(x, y)]

    def set_type(self, x: int, y: int, tile_type: TileType) -> None:
        """Set tile kind at position."""
        self._tiles[self._index(x, y)].tile_type = tile_type

    def is_walkable(self, x: int, y: int) -> bool:
        """Check if position is walkable."""
        return self.in_bounds(x, y) and self.tile_at(x, y).walkable

    def blocks_sight(self, x: int, y: int) -> bool:
        """Check if position blocks sight."""
        return not self.in_bounds(x, y) or self.tile_at(x, y).blocks_sight

    def clear_visible(self) -> None:
        """Reset current visibility. Explored state is kept."""
        for tile in self._tiles:
            tile.visible = False

    def cells(self) -> Iterator[tuple[int, int, Tile]]:
        """Iterate over (x, y, tile) in row-major order."""
        for index, tile in enumerate(self._tiles):
            yield index % self.width, index // self.width, tile

    def visible_cells(self) -> set[tuple[int, int]]:
        """Coordinates of currently visible tiles."""
        return {(x, y) for x, y, tile in self.cells() if tile.visible}

    def explored_cells(self) -> set[tuple[int, int]]:
        """Coordinates of tiles seen at least once."""
        return {(x, y) for x, y, tile in self.cells() if tile.explored}

    def layout(self) -> tuple[TileType, ...]:
        """Snapshot of tile kinds, row-major."""
        return tuple(tile.tile_type for tile in self._tiles)

    def to_ascii(self, player_pos: Optional[tuple[int, int]] = None) -> str:
        """Render level as text, one line per row."""
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if player_pos == (x, y):
                    row.append("@")
                else:
                    row.append(TILE_CHARS[self.tile_at(x, y).tile_type])
            lines.append("".join(row))
        return "\n".join(lines)

    def render(
        self,
        screen: pygame.Surface,
        tile_size: int = 12,
        camera_x: int = 0,
        camera_y: int = 0,
    ) -> None:
        """Render explored tiles; tiles not currently visible are drawn dim."""
        start_x = max(0, camera_x // tile_size)
        start_y = max(0, camera_y // tile_size)
        end_x = min(self.width, (camera_x + screen.get_width()) // tile_size + 1)
        end_y = min(self.height, (camera_y + screen.get_height()) // tile_size + 1)

        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                tile = self.tile_at(x, y)
                if not tile.explored:
                    continue
                color = get_tile_color(tile.tile_type, lit=tile.visible)
                rect = pygame.Rect(
                    x * tile_size - camera_x,
                    y * tile_size - camera_y,
                    tile_size,
                    tile_size,
                )
                pygame.draw.rect(screen, color, rect)
