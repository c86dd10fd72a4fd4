# systems/statuses.py

from dataclasses import dataclass
from enum import Enum
from typing import List


class StatusType(Enum):
    BLEED = "bleed"
    POISON = "poison"
    FORTIFY = "fortify"
    HASTE = "haste"
    BURN = "burn"
    FREEZE = "freeze"
    STUN = "stun"


# Kinds that deal damage when ticked, with the noun used in the log
DAMAGE_OVER_TIME = {
    StatusType.BLEED: "bleeding",
    StatusType.POISON: "poison",
    StatusType.BURN: "burn",
}

# Kinds that cost the unit its turn
INCAPACITATING = frozenset({StatusType.FREEZE, StatusType.STUN})


@dataclass
class StatusEffect:
    """
    Status effect on an enemy.

    duration:
        Number of *turns of the affected unit* remaining.
    magnitude:
        Strength; for damage-over-time kinds, damage per tick (minimum 1).
    """
    kind: StatusType
    duration: int = 0
    magnitude: int = 0

    @property
    def damage_per_tick(self) -> int:
        if self.kind not in DAMAGE_OVER_TIME:
            return 0
        return max(1, self.magnitude)


def apply_status(statuses: List[StatusEffect], incoming: StatusEffect) -> StatusEffect:
    """
    Add a status, or merge it into the active one of the same kind.

    Merging keeps the larger duration and the larger magnitude, so
    reapplying never weakens an effect. Returns the active effect.
    """
    for s in statuses:
        if s.kind == incoming.kind:
            s.duration = max(s.duration, incoming.duration)
            s.magnitude = max(s.magnitude, incoming.magnitude)
            return s
    effect = StatusEffect(incoming.kind, incoming.duration, incoming.magnitude)
    statuses.append(effect)
    return effect


def tick_statuses(statuses: List[StatusEffect]) -> List[StatusEffect]:
    """
    Advance all statuses by one 'turn' for the affected unit.

    - Decrements duration.
    - Removes expired statuses.
    - Returns the damage-over-time effects that fired this tick, in order,
      so the caller can apply and report each one.
    """
    fired: List[StatusEffect] = []
    remaining: List[StatusEffect] = []

    for s in statuses:
        if s.kind in DAMAGE_OVER_TIME:
            fired.append(StatusEffect(s.kind, s.duration, s.magnitude))

        s.duration -= 1
        if s.duration > 0:
            remaining.append(s)

    statuses[:] = remaining
    return fired


def has_status(statuses: List[StatusEffect], kind: StatusType) -> bool:
    return any(s.kind == kind and s.duration > 0 for s in statuses)


def is_incapacitated(statuses: List[StatusEffect]) -> bool:
    return any(s.kind in INCAPACITATING and s.duration > 0 for s in statuses)
