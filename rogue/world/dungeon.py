"""Dungeon registry: the stack of levels and the player's place in it."""

import logging
import random
from enum import Enum
from typing import List, Optional

from rogue.core.errors import ConfigError
from rogue.gameplay.player import Player
from rogue.world import fov
from rogue.world.dungeon_gen import DungeonGenerator, GeneratorConfig
from rogue.world.level import Level
from rogue.world.tiles import TileType

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Stair direction."""

    DOWN = "down"
    UP = "up"


class MoveOutcome(str, Enum):
    """Result of a single-step move."""

    MOVED = "moved"
    BLOCKED = "blocked"
    OUT_OF_BOUNDS = "out_of_bounds"


class TransitionOutcome(str, Enum):
    """Result of taking the stairs."""

    DESCENDED = "descended"
    ASCENDED = "ascended"
    REJECTED = "rejected"


_STAIRS_FOR = {
    Direction.DOWN: TileType.STAIRS_DOWN,
    Direction.UP: TileType.STAIRS_UP,
}


class Dungeon:
    """Ordered levels plus the single player exploring them."""

    def __init__(self, levels: List[Level], player: Player) -> None:
        """Initialize dungeon from already generated levels."""
        if not levels:
            raise ConfigError("A dungeon needs at least one level")
        self.levels = levels
        self.player = player

    @classmethod
    def build(
        cls,
        floor_count: int,
        config: Optional[GeneratorConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Dungeon":
        """Generate every level and place the player on the first one.

        One random stream is threaded through all levels in order, so the
        layout of a floor depends on how many floors precede it.

        Args:
            floor_count: Number of levels, at least 1
            config: Generation parameters shared by all levels
            seed: Seed for a fresh random stream when ``rng`` is not given
            rng: Random stream to draw from

        Returns:
            Dungeon with visibility computed for the starting position

        Raises:
            ConfigError: If the floor count or generation parameters are invalid
        """
        if floor_count < 1:
            raise ConfigError(f"floor_count must be at least 1, got {floor_count}")

        generator = DungeonGenerator(config)
        if rng is None:
            rng = random.Random(seed)

        levels = [generator.generate(rng) for _ in range(floor_count)]

        # Nothing above the first floor or below the last one.
        first, last = levels[0], levels[-1]
        first.set_type(*first.stairs_up, TileType.GROUND)
        last.set_type(*last.stairs_down, TileType.GROUND)

        start_x, start_y = first.stairs_up
        dungeon = cls(levels, Player(start_x, start_y, depth=0))
        dungeon.refresh_visibility()

        logger.info(
            "Built dungeon with %d floors (%dx%d)",
            floor_count,
            generator.config.width,
            generator.config.height,
        )
        return dungeon

    @property
    def floor_count(self) -> int:
        """Number of levels."""
        return len(self.levels)

    @property
    def current_level(self) -> Level:
        """Level the player is on."""
        return self.levels[self.player.depth]

    def refresh_visibility(self) -> None:
        """Recompute field of view from the player's position."""
        fov.recompute(self.current_level, self.player.x, self.player.y)

    def try_move(self, dx: int, dy: int) -> MoveOutcome:
        """Step the player one cell orthogonally.

        Raises:
            ValueError: If (dx, dy) is not a single orthogonal step
        """
        if dx not in (-1, 0, 1) or dy not in (-1, 0, 1) or abs(dx) + abs(dy) != 1:
            raise ValueError(f"Invalid step ({dx}, {dy})")

        level = self.current_level
        new_x, new_y = self.player.x + dx, self.player.y + dy
        if not level.in_bounds(new_x, new_y):
            return MoveOutcome.OUT_OF_BOUNDS
        if not level.tile_at(new_x, new_y).walkable:
            return MoveOutcome.BLOCKED

        self.player.move_to(new_x, new_y)
        self.refresh_visibility()
        return MoveOutcome.MOVED

    def transition(self, direction: Direction) -> bool:
        """Move the player through the stairs under them.

        The player arrives on the destination stair leading back, so going
        down and then up returns to the starting cell. Returns False and
        changes nothing if there is no matching stair or no level beyond it.
        """
        level = self.current_level
        if level.tile_at(self.player.x, self.player.y).tile_type != _STAIRS_FOR[direction]:
            return False

        if direction == Direction.DOWN:
            target_depth = self.player.depth + 1
        else:
            target_depth = self.player.depth - 1
        if not 0 <= target_depth < self.floor_count:
            return False

        target = self.levels[target_depth]
        x, y = target.stairs_up if direction == Direction.DOWN else target.stairs_down
        self.player.depth = target_depth
        self.player.move_to(x, y)
        return True

    def try_transition(self, direction: Direction) -> TransitionOutcome:
        """Take the stairs and refresh visibility on the new level."""
        if not self.transition(direction):
            return TransitionOutcome.REJECTED

        self.refresh_visibility()
        logger.info("Player went %s to floor %d", direction.value, self.player.depth + 1)
        if direction == Direction.DOWN:
            return TransitionOutcome.DESCENDED
        return TransitionOutcome.ASCENDED
