#!/usr/bin/env python3
"""Print generated dungeon levels as ASCII for inspecting the generator."""

import argparse
import sys

from rogue.core.errors import ConfigError
from rogue.world.dungeon import Dungeon
from rogue.world.dungeon_gen import GeneratorConfig


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print generated dungeon levels")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--floors", type=int, default=5, help="Number of floors")
    parser.add_argument("--floor", type=int, default=None, help="Only print this floor (1-based)")
    parser.add_argument("--width", type=int, default=80, help="Grid width in tiles")
    parser.add_argument("--height", type=int, default=50, help="Grid height in tiles")
    parser.add_argument("--max-rooms", type=int, default=30, help="Room placement attempts")

    args = parser.parse_args()

    config = GeneratorConfig(width=args.width, height=args.height, max_rooms=args.max_rooms)
    try:
        dungeon = Dungeon.build(args.floors, config=config, seed=args.seed)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.floor is not None and not 1 <= args.floor <= dungeon.floor_count:
        print(f"Error: Floor must be between 1 and {dungeon.floor_count}")
        sys.exit(1)

    for depth, level in enumerate(dungeon.levels):
        if args.floor is not None and depth != args.floor - 1:
            continue
        player_pos = dungeon.player.position if depth == dungeon.player.depth else None
        print(f"Floor {depth + 1} ({len(level.rooms)} rooms)")
        print(level.to_ascii(player_pos))
        print()


if __name__ == "__main__":
    main()
