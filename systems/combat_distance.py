# systems/combat_distance.py

"""
Combat distance buckets.

Tactical combat measures separation in three dimensions: grid x/y plus a
simulated depth axis (height band for enemies). Depth is weighted 1.5x.
The raw distance is then bucketed; ranged enemies use the bucket to
decide whether to shoot or back off.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

# Bucket upper bounds (inclusive)
DISTANCE_MELEE_MAX = 1
DISTANCE_CLOSE_MAX = 3
DISTANCE_MEDIUM_MAX = 6
DISTANCE_FAR_MAX = 10


class CombatDistance(IntEnum):
    MELEE = 0      # touching
    CLOSE = 1      # adjacent squares, near
    MEDIUM = 2     # across the room
    FAR = 3        # long range, safe
    EXTREME = 4    # almost unreachable


@dataclass(frozen=True)
class Position3D:
    x: int
    y: int
    depth: int = 0

    def distance_to(self, other: "Position3D") -> int:
        dx = abs(other.x - self.x)
        dy = abs(other.y - self.y)
        dz = (abs(other.depth - self.depth) * 3) // 2
        return dx + dy + dz


DistanceClassifier = Callable[[Position3D, Position3D], CombatDistance]


def distance_to_category(raw_distance: int) -> CombatDistance:
    if raw_distance <= DISTANCE_MELEE_MAX:
        return CombatDistance.MELEE
    if raw_distance <= DISTANCE_CLOSE_MAX:
        return CombatDistance.CLOSE
    if raw_distance <= DISTANCE_MEDIUM_MAX:
        return CombatDistance.MEDIUM
    if raw_distance <= DISTANCE_FAR_MAX:
        return CombatDistance.FAR
    return CombatDistance.EXTREME


def classify_combat_distance(origin: Position3D, target: Position3D) -> CombatDistance:
    """Default classifier used by the enemy AI."""
    return distance_to_category(origin.distance_to(target))
