"""Dungeon level generation with rectangular rooms and L-shaped corridors."""

import logging
import random
from dataclasses import dataclass
from typing import List, Tuple

import pygame

from rogue.core.errors import ConfigError
from rogue.world.level import Level
from rogue.world.tiles import TileType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters shared by every level of a dungeon."""

    width: int = 80
    height: int = 50
    max_rooms: int = 30
    room_min_width: int = 6
    room_max_width: int = 10
    room_min_height: int = 6
    room_max_height: int = 10

    def validate(self) -> None:
        """Raise ConfigError if a level cannot be generated from this config."""
        if self.max_rooms < 1:
            raise ConfigError(f"max_rooms must be at least 1, got {self.max_rooms}")
        if self.width < 3 or self.height < 3:
            raise ConfigError(
                f"Grid {self.width}x{self.height} is too small to hold a room"
            )
        if self.room_min_width < 2 or self.room_min_height < 2:
            raise ConfigError("Rooms must be at least 2 cells wide and tall")
        if self.room_min_width > self.room_max_width:
            raise ConfigError(
                f"Room width range {self.room_min_width}..{self.room_max_width} is empty"
            )
        if self.room_min_height > self.room_max_height:
            raise ConfigError(
                f"Room height range {self.room_min_height}..{self.room_max_height} is empty"
            )
        # Rooms keep a one-cell wall border on every side of the grid.
        if self.room_max_width > self.width - 2:
            raise ConfigError(
                f"Room width {self.room_max_width} does not fit in grid width {self.width}"
            )
        if self.room_max_height > self.height - 2:
            raise ConfigError(
                f"Room height {self.room_max_height} does not fit in grid height {self.height}"
            )


@dataclass
class Room:
    """Represents a room in the dungeon."""

    rect: pygame.Rect
    room_id: int

    @property
    def center(self) -> Tuple[int, int]:
        """Center cell of the room."""
        return self.rect.center

    def intersects(self, other: "Room") -> bool:
        """Check overlap, counting rooms that share an edge as overlapping."""
        return (
            self.rect.left <= other.rect.right
            and self.rect.right >= other.rect.left
            and self.rect.top <= other.rect.bottom
            and self.rect.bottom >= other.rect.top
        )


class DungeonGenerator:
    """Generates dungeon levels using the room+corridor method."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize dungeon generator.

        Args:
            config: Generation parameters, validated up front
        """
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.rooms: List[Room] = []

    def generate(self, rng: random.Random) -> Level:
        """Generate a dungeon level.

        Rooms are attempted ``max_rooms`` times; rejected candidates are
        dropped, so fewer rooms may be accepted. Each accepted room is joined
        to the previous one, which keeps the whole level connected.

        Args:
            rng: Random stream; the same stream state yields the same level

        Returns:
            Generated level with stairs placed
        """
        config = self.config
        level = Level(config.width, config.height)
        self.rooms = []

        for _ in range(config.max_rooms):
            room_width = rng.randint(config.room_min_width, config.room_max_width)
            room_height = rng.randint(config.room_min_height, config.room_max_height)
            x = rng.randint(1, config.width - room_width - 1)
            y = rng.randint(1, config.height - room_height - 1)

            room = Room(
                rect=pygame.Rect(x, y, room_width, room_height),
                room_id=len(self.rooms),
            )
            if any(room.intersects(other) for other in self.rooms):
                continue

            self._carve_room(level, room.rect)
            if self.rooms:
                self._create_corridor(level, self.rooms[-1].center, room.center, rng)
            self.rooms.append(room)

        self._place_stairs(level)
        level.rooms = [room.rect for room in self.rooms]

        logger.debug(
            "Generated %dx%d level with %d/%d rooms",
            config.width,
            config.height,
            len(self.rooms),
            config.max_rooms,
        )
        return level

    def _place_stairs(self, level: Level) -> None:
        """Put stairs up in the first room and stairs down in the last."""
        first, last = self.rooms[0], self.rooms[-1]
        level.stairs_down = last.center
        if first is last:
            # A lone room holds both stairs; keep them on separate cells.
            level.stairs_up = first.rect.topleft
        else:
            level.stairs_up = first.center

        level.set_type(*level.stairs_up, TileType.STAIRS_UP)
        level.set_type(*level.stairs_down, TileType.STAIRS_DOWN)

    def _carve_room(self, level: Level, room: pygame.Rect) -> None:
        """Carve a room in the level."""
        for y in range(room.top, room.bottom):
            for x in range(room.left, room.right):
                level.set_type(x, y, TileType.GROUND)

    def _create_corridor(
        self,
        level: Level,
        start: Tuple[int, int],
        end: Tuple[int, int],
        rng: random.Random,
    ) -> None:
        """Create an L-shaped corridor between two points."""
        x1, y1 = start
        x2, y2 = end

        if rng.random() < 0.5:
            carve_h_tunnel(level, x1, x2, y1)
            carve_v_tunnel(level, y1, y2, x2)
        else:
            carve_v_tunnel(level, y1, y2, x1)
            carve_h_tunnel(level, x1, x2, y2)


def carve_h_tunnel(level: Level, x1: int, x2: int, y: int) -> None:
    """Carve a horizontal run of ground, endpoints inclusive and in any order."""
    for x in range(min(x1, x2), max(x1, x2) + 1):
        level.set_type(x, y, TileType.GROUND)


def carve_v_tunnel(level: Level, y1: int, y2: int, x: int) -> None:
    """Carve a vertical run of ground, endpoints inclusive and in any order."""
    for y in range(min(y1, y2), max(y1, y2) + 1):
        level.set_type(x, y, TileType.GROUND)
