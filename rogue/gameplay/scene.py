"""Gameplay scene."""

import pygame

from rogue.core.scenes import Scene
from rogue.core.settings import GameSettings
from rogue.gameplay.controller import PlayerController
from rogue.world.dungeon import Dungeon

BACKGROUND_COLOR = (34, 34, 34)
PLAYER_COLOR = (255, 255, 255)


class DungeonScene(Scene):
    """Explore the dungeon one step at a time."""

    def __init__(self, settings: GameSettings, dungeon: Dungeon) -> None:
        """Initialize gameplay scene."""
        super().__init__()
        self.settings = settings
        self.dungeon = dungeon
        self.controller = PlayerController(dungeon, settings.keybindings)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle events."""
        if event.type == pygame.KEYDOWN and event.key == self.settings.keybindings.quit:
            self.should_quit = True
            return
        self.controller.handle_event(event)

    def update(self, dt: float) -> None:
        """Turn-based: state only changes on input."""
        pass

    def render(self, screen: pygame.Surface) -> None:
        """Render the current level and the player."""
        tile_size = self.settings.tile_size
        screen.fill(BACKGROUND_COLOR)
        self.dungeon.current_level.render(screen, tile_size)

        player = self.dungeon.player
        player_rect = pygame.Rect(
            player.x * tile_size, player.y * tile_size, tile_size, tile_size
        )
        pygame.draw.rect(screen, PLAYER_COLOR, player_rect)
