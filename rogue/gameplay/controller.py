"""Keyboard input to player intents."""

import pygame

from rogue.core.settings import KeyBindings
from rogue.world.dungeon import Dungeon, MoveOutcome, TransitionOutcome


class PlayerController:
    """Turns key presses into moves and stair transitions."""

    def __init__(self, dungeon: Dungeon, keybindings: KeyBindings) -> None:
        """Initialize player controller."""
        self.dungeon = dungeon
        self.keybindings = keybindings

    def handle_event(
        self, event: pygame.event.Event
    ) -> MoveOutcome | TransitionOutcome | None:
        """Handle input events. Returns the outcome of the intent, if any."""
        if event.type != pygame.KEYDOWN:
            return None

        step = self.keybindings.get_movement_direction(event.key)
        if step is not None:
            return self.dungeon.try_move(*step)

        direction = self.keybindings.get_stairs_direction(event.key)
        if direction is not None:
            return self.dungeon.try_transition(direction)

        return None
