"""Scene interface driven by the game loop."""

from abc import ABC, abstractmethod

import pygame


class Scene(ABC):
    """Base scene class."""

    def __init__(self) -> None:
        """Initialize scene."""
        self.should_quit = False

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle pygame event."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update scene logic."""
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render scene."""
        pass
