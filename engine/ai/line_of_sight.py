# engine/ai/line_of_sight.py

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Tuple

if TYPE_CHECKING:
    from world.game_map import GameMap

Position = Tuple[int, int]


def bresenham_line(start: Position, end: Position) -> Iterator[Position]:
    """Yield every cell on the integer Bresenham line, both ends included."""
    x, y = start
    x2, y2 = end
    dx = abs(x2 - x)
    dy = abs(y2 - y)
    sx = 1 if x < x2 else -1
    sy = 1 if y < y2 else -1
    err = dx - dy

    yield x, y
    while (x, y) != (x2, y2):
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        yield x, y


def has_line_of_sight(game_map: "GameMap", start: Position, end: Position) -> bool:
    """
    True if nothing blocks the straight line between two cells.

    The endpoints themselves are never checked: a creature standing in a
    doorway can still see and be seen. Results are not guaranteed to be
    symmetric, so callers always trace from the viewer.
    """
    for cell in bresenham_line(start, end):
        if cell == start or cell == end:
            continue
        if not game_map.in_bounds(*cell) or not game_map.is_walkable(*cell):
            return False
    return True
