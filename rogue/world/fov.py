"""Field of view using recursive shadow casting."""

from rogue.world.level import Level

# Multipliers (xx, xy, yx, yy) mapping a (depth, offset) pair in octant-local
# space to a grid delta: dx = offset * xx + depth * xy, dy = offset * yx + depth * yy.
_OCTANTS = (
    (1, 0, 0, 1),
    (0, 1, 1, 0),
    (0, -1, 1, 0),
    (-1, 0, 0, 1),
    (-1, 0, 0, -1),
    (0, -1, -1, 0),
    (0, 1, -1, 0),
    (1, 0, 0, -1),
)


def recompute(level: Level, origin_x: int, origin_y: int) -> None:
    """Recompute which tiles are visible from the origin.

    Clears the current visible set, then sweeps all eight octants around the
    origin. Every tile reached is marked visible and explored; explored flags
    are never cleared, so they accumulate across calls.
    """
    level.clear_visible()
    level.tile_at(origin_x, origin_y).mark_visible()

    max_depth = level.width + level.height
    for xx, xy, yx, yy in _OCTANTS:
        _cast_light(level, origin_x, origin_y, 1, 1.0, 0.0, max_depth, xx, xy, yx, yy)


def _cast_light(
    level: Level,
    origin_x: int,
    origin_y: int,
    row: int,
    start_slope: float,
    end_slope: float,
    max_depth: int,
    xx: int,
    xy: int,
    yx: int,
    yy: int,
) -> None:
    """Scan one octant from ``row`` outward within the slope interval.

    Slopes run from ``start_slope`` (high) down to ``end_slope`` (low). A wall
    entered from open cells spawns a scan of the deeper rows on the open side,
    then the running start slope is pulled in past the wall.
    """
    if start_slope < end_slope:
        return

    next_start_slope = start_slope
    for depth in range(row, max_depth + 1):
        blocked = False
        scanned_in_bounds = False

        for offset in range(depth, -1, -1):
            # Slopes through the cell's far corners, using half-cell edges.
            left_slope = (offset + 0.5) / (depth - 0.5)
            right_slope = (offset - 0.5) / (depth + 0.5)

            if start_slope < right_slope:
                continue
            if end_slope > left_slope:
                break

            x = origin_x + offset * xx + depth * xy
            y = origin_y + offset * yx + depth * yy
            if not level.in_bounds(x, y):
                continue
            scanned_in_bounds = True

            tile = level.tile_at(x, y)
            tile.mark_visible()

            if blocked:
                if tile.blocks_sight:
                    next_start_slope = right_slope
                    continue
                blocked = False
                start_slope = next_start_slope
            elif tile.blocks_sight and depth < max_depth:
                blocked = True
                _cast_light(
                    level,
                    origin_x,
                    origin_y,
                    depth + 1,
                    start_slope,
                    left_slope,
                    max_depth,
                    xx,
                    xy,
                    yx,
                    yy,
                )
                next_start_slope = right_slope

        # Rows only move further from the grid once they leave it.
        if blocked or not scanned_in_bounds:
            break
