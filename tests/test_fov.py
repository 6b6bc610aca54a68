"""Tests for shadow-cast field of view."""

import pytest

from rogue.world import fov
from rogue.world.dungeon import Dungeon, MoveOutcome
from rogue.world.dungeon_gen import carve_h_tunnel
from rogue.world.level import Level
from rogue.world.tiles import TileType


def sealed_room_level() -> Level:
    """20x20 level with one room spanning (5, 5)..(9, 9) and no exits."""
    level = Level(20, 20)
    for y in range(5, 10):
        carve_h_tunnel(level, 5, 9, y)
    return level


def open_room_level() -> Level:
    """13x11 level: open floor inside a wall border with a pillar at (7, 5)."""
    level = Level(13, 11)
    for y in range(1, 10):
        carve_h_tunnel(level, 1, 11, y)
    level.set_type(7, 5, TileType.WALL)
    return level


def test_sealed_room_sees_only_itself() -> None:
    """Test that nothing beyond the surrounding walls is visible."""
    level = sealed_room_level()
    fov.recompute(level, 7, 7)

    expected = {(x, y) for x in range(4, 11) for y in range(4, 11)}
    assert level.visible_cells() == expected


def test_doorway_limits_view() -> None:
    """Test that a doorway only reveals what lies in line with it."""
    level = sealed_room_level()
    carve_h_tunnel(level, 10, 14, 7)

    fov.recompute(level, 7, 7)

    for y in range(5, 10):
        for x in range(5, 10):
            assert level.tile_at(x, y).visible, f"Interior ({x}, {y}) not visible"
    for x in range(10, 15):
        assert level.tile_at(x, 7).visible, f"Corridor ({x}, 7) not visible"
    for cell in [(11, 5), (11, 9), (12, 4), (3, 7), (7, 3), (14, 12)]:
        assert not level.tile_at(*cell).visible, f"{cell} seen through a wall"


def test_pillar_casts_shadow() -> None:
    """Test that a wall hides the cells directly behind it."""
    level = open_room_level()
    fov.recompute(level, 5, 5)

    assert level.tile_at(7, 5).visible
    assert not level.tile_at(8, 5).visible
    assert not level.tile_at(9, 5).visible
    assert level.tile_at(8, 6).visible
    assert level.tile_at(8, 4).visible
    assert level.tile_at(11, 1).visible
    assert level.tile_at(11, 9).visible


def test_open_grid_from_corner() -> None:
    """Test an observer on the grid edge sees an unobstructed grid."""
    level = Level(5, 5)
    for y in range(5):
        carve_h_tunnel(level, 0, 4, y)

    fov.recompute(level, 0, 0)
    assert len(level.visible_cells()) == 25

    fov.recompute(level, 4, 2)
    assert len(level.visible_cells()) == 25


def test_origin_always_visible() -> None:
    """Test the observer's own tile is marked even when boxed in."""
    level = Level(3, 3)
    level.set_type(1, 1, TileType.GROUND)
    fov.recompute(level, 1, 1)

    assert level.tile_at(1, 1).visible
    assert level.tile_at(1, 1).explored
    assert len(level.visible_cells()) == 9


def test_recompute_clears_previous_view() -> None:
    """Test visible is recomputed while explored is kept."""
    level = Level.from_ascii(
        """
        #########
        #...#...#
        #...#...#
        #########
        """
    )
    fov.recompute(level, 1, 1)
    left_room = {(x, y) for x in range(1, 4) for y in range(1, 3)}
    assert left_room <= level.visible_cells()

    fov.recompute(level, 6, 2)
    assert not left_room & level.visible_cells()
    assert left_room <= level.explored_cells()


def test_recompute_never_changes_layout() -> None:
    """Test that computing visibility leaves tile kinds alone."""
    dungeon = Dungeon.build(1, seed=13)
    level = dungeon.current_level
    before = level.layout()

    fov.recompute(level, *level.stairs_down)

    assert level.layout() == before


def test_out_of_bounds_origin_fails() -> None:
    """Test that an invalid observer position is a programming error."""
    level = Level(5, 5)
    with pytest.raises(IndexError):
        fov.recompute(level, 5, 0)


@pytest.mark.parametrize("seed", [1, 42, 300])
def test_explored_is_monotonic_and_covers_visible(seed: int) -> None:
    """Test explored never shrinks and always includes the visible set."""
    dungeon = Dungeon.build(2, seed=seed)
    level = dungeon.current_level
    explored = level.explored_cells()
    steps = [(1, 0)] * 6 + [(0, 1)] * 6 + [(-1, 0)] * 6 + [(0, -1)] * 6

    for dx, dy in steps * 3:
        outcome = dungeon.try_move(dx, dy)
        assert outcome in set(MoveOutcome)

        now_explored = level.explored_cells()
        assert explored <= now_explored
        assert level.visible_cells() <= now_explored
        explored = now_explored

    for _, _, tile in level.cells():
        assert tile.explored or not tile.visible
