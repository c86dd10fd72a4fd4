# engine/ai/movement.py

"""Single-tile movement primitives shared by every behavior."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from engine.ai.pathfinding import find_next_step
from settings import PATHFIND_MAX_ITERATIONS

if TYPE_CHECKING:
    from world.entities import Enemy
    from world.game_map import GameMap

Position = Tuple[int, int]


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def step_toward(
    enemy: "Enemy",
    target: Position,
    game_map: "GameMap",
    max_iterations: int = PATHFIND_MAX_ITERATIONS,
) -> bool:
    """Move the enemy one tile along a shortest path. Returns True if it moved."""
    step = find_next_step(game_map, enemy.position, target, max_iterations)
    if not step.moved:
        return False
    enemy.move_by(step.dx, step.dy)
    return True


def move_away_from(enemy: "Enemy", target: Position, game_map: "GameMap") -> bool:
    """
    Step directly away from target.

    Tries the diagonal first, then the horizontal part alone, then the
    vertical part alone. An axis on which the two already line up
    contributes nothing. Returns True if the enemy moved.
    """
    dx = _sign(enemy.x - target[0])
    dy = _sign(enemy.y - target[1])

    candidates = [(dx, dy)]
    if dx != 0:
        candidates.append((dx, 0))
    if dy != 0:
        candidates.append((0, dy))

    for cx, cy in candidates:
        if cx == 0 and cy == 0:
            continue
        nx, ny = enemy.x + cx, enemy.y + cy
        if game_map.in_bounds(nx, ny) and game_map.is_walkable(nx, ny):
            enemy.move_to(nx, ny)
            return True
    return False
