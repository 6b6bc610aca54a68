"""Tests for keyboard-driven player control."""

import pygame
import pytest

from rogue.core.settings import KeyBindings
from rogue.gameplay.controller import PlayerController
from rogue.gameplay.player import Player
from rogue.world.dungeon import Dungeon, MoveOutcome, TransitionOutcome
from rogue.world.level import Level


@pytest.fixture
def controller() -> PlayerController:
    """Controller over a two-floor hand-made dungeon."""
    layout = """
    #######
    #<...>#
    #######
    """
    levels = [Level.from_ascii(layout), Level.from_ascii(layout)]
    dungeon = Dungeon(levels, Player(2, 1))
    dungeon.refresh_visibility()
    return PlayerController(dungeon, KeyBindings())


def key_down(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_movement_keys_move_player(controller: PlayerController) -> None:
    """Test movement keys dispatch single steps."""
    assert controller.handle_event(key_down(pygame.K_l)) == MoveOutcome.MOVED
    assert controller.dungeon.player.position == (3, 1)
    assert controller.handle_event(key_down(pygame.K_UP)) == MoveOutcome.BLOCKED
    assert controller.dungeon.player.position == (3, 1)


def test_stairs_keys_change_floor(controller: PlayerController) -> None:
    """Test stair keys dispatch transitions."""
    dungeon = controller.dungeon
    assert controller.handle_event(key_down(pygame.K_PERIOD)) == TransitionOutcome.REJECTED

    dungeon.player.move_to(5, 1)
    assert controller.handle_event(key_down(pygame.K_PERIOD)) == TransitionOutcome.DESCENDED
    assert dungeon.player.depth == 1
    assert dungeon.player.position == (1, 1)

    assert controller.handle_event(key_down(pygame.K_COMMA)) == TransitionOutcome.ASCENDED
    assert dungeon.player.depth == 0
    assert dungeon.player.position == (5, 1)


def test_other_events_ignored(controller: PlayerController) -> None:
    """Test unmapped keys and non-key events do nothing."""
    assert controller.handle_event(key_down(pygame.K_x)) is None
    assert controller.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_l)) is None
    assert controller.dungeon.player.position == (2, 1)
