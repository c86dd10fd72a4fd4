# engine/ai/pathfinding.py

"""
Breadth-first grid pathfinding.

Each call searches from scratch (no caching between turns) and returns only
the first step of a shortest 4-connected path. The search is capped by a
node-expansion budget so a huge open floor can never stall a turn.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Deque, Dict, Optional, Tuple

from engine.error_handler import get_logger
from settings import PATHFIND_MAX_ITERATIONS
from telemetry.logger import telemetry

if TYPE_CHECKING:
    from world.game_map import GameMap

Position = Tuple[int, int]

log = get_logger("ai.pathfinding")

# Exploration order matters for tie-breaking between equal-length paths
NEIGHBOR_OFFSETS: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class PathOutcome(Enum):
    STEP = "step"
    ALREADY_THERE = "already_there"
    NO_PATH = "no_path"
    ITERATION_LIMIT = "iteration_limit"


@dataclass(frozen=True)
class PathStep:
    outcome: PathOutcome
    dx: int = 0
    dy: int = 0

    @property
    def moved(self) -> bool:
        return self.outcome is PathOutcome.STEP


def find_next_step(
    game_map: "GameMap",
    start: Position,
    goal: Position,
    max_iterations: int = PATHFIND_MAX_ITERATIONS,
) -> PathStep:
    """
    Return the first step of a shortest path from start to goal.

    Neighbours must be in bounds and walkable; the goal cell is reached
    like any other cell, so the mover may path onto an occupied goal.
    """
    if start == goal:
        return PathStep(PathOutcome.ALREADY_THERE)

    queue: Deque[Position] = deque([start])
    parents: Dict[Position, Optional[Position]] = {start: None}
    expansions = 0
    found = False

    while queue:
        if expansions >= max_iterations:
            break
        current = queue.popleft()
        expansions += 1
        if current == goal:
            found = True
            break

        cx, cy = current
        for ox, oy in NEIGHBOR_OFFSETS:
            nxt = (cx + ox, cy + oy)
            if nxt in parents:
                continue
            if not game_map.is_walkable(nxt[0], nxt[1]):
                continue
            parents[nxt] = current
            queue.append(nxt)

    if not found:
        if queue:
            log.warning(
                "Pathfinding from %s to %s hit the %d expansion limit",
                start, goal, max_iterations,
            )
            telemetry.log(
                "pathfind_limit",
                start=list(start), goal=list(goal), max_iterations=max_iterations,
            )
            return PathStep(PathOutcome.ITERATION_LIMIT)
        log.debug("No path from %s to %s", start, goal)
        return PathStep(PathOutcome.NO_PATH)

    # Walk back from the goal to the cell right after start
    step = goal
    while parents[step] != start:
        step = parents[step]
    return PathStep(PathOutcome.STEP, step[0] - start[0], step[1] - start[1])
