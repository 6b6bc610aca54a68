"""Main entry point for the game."""

import logging
import sys
from pathlib import Path

import pygame

from rogue.core.errors import ConfigError
from rogue.core.loop import GameLoop
from rogue.core.settings import DEFAULT_SETTINGS_PATH, GameSettings
from rogue.gameplay.scene import DungeonScene
from rogue.world.dungeon import Dungeon

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    """Main game entry point."""
    # Load settings
    settings_path = Path(DEFAULT_SETTINGS_PATH)
    settings = GameSettings.load(settings_path)
    if not settings_path.exists():
        settings.save(settings_path)

    setup_logging(settings.log_level)

    try:
        dungeon = Dungeon.build(
            settings.floor_count,
            config=settings.generator_config(),
            seed=settings.seed,
        )
    except ConfigError as e:
        logger.error("Invalid dungeon configuration: %s", e)
        sys.exit(1)

    pygame.init()
    screen = pygame.display.set_mode(settings.screen_size)
    pygame.display.set_caption("Rogue")

    scene = DungeonScene(settings, dungeon)
    game_loop = GameLoop(screen, scene, fps=settings.fps)
    game_loop.run()

    # Cleanup
    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
