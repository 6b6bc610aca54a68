"""Main game loop."""

import pygame

from rogue.core.scenes import Scene


class GameLoop:
    """Polls input, updates and renders a scene at a capped frame rate."""

    def __init__(self, screen: pygame.Surface, scene: Scene, fps: int = 60) -> None:
        """Initialize game loop."""
        self.screen = screen
        self.scene = scene
        self.fps = fps
        self.running = False
        self.clock = pygame.time.Clock()

    def run(self) -> None:
        """Run the game loop until the window closes or the scene quits."""
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                self.scene.handle_event(event)

            self.scene.update(dt)
            if self.scene.should_quit:
                self.running = False

            self.scene.render(self.screen)
            pygame.display.flip()
