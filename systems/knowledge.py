# systems/knowledge.py

"""
Per-enemy tactical knowledge.

Every enemy watches what the player does and keeps a tally. The tally
drives two things:

- the enemy's intelligence tier (Basic -> Learning -> Adapted -> Master),
  which only ever goes up during the enemy's lifetime;
- the "dominant tactic", the most common player behavior among the last
  few observations, used by Adapted-tier enemies to pick a counter.

How much evidence each tier needs, and which dominant tactics count as
"aggressive", live in a TierPolicy so they can be tuned or swapped from
configuration without touching the behaviors.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Deque, Dict, FrozenSet, Iterable, Mapping, Tuple

from engine.error_handler import ConfigError
from settings import KNOWLEDGE_HISTORY_SIZE, LEARNING_KITE_THRESHOLD, TIER_THRESHOLDS

if TYPE_CHECKING:
    from world.entities import Enemy, Position


class AITier(IntEnum):
    BASIC = 0
    LEARNING = 1
    ADAPTED = 2
    MASTER = 3


class PlayerTactic(IntEnum):
    NONE = 0
    MELEE = 1     # closing in / trading blows
    RANGED = 2
    FLEE = 3
    KITE = 4      # backing away from an enemy


_TIER_NAMES: Dict[str, AITier] = {
    "learning": AITier.LEARNING,
    "adapted": AITier.ADAPTED,
    "master": AITier.MASTER,
}


@dataclass(frozen=True)
class TierPolicy:
    """
    Swappable rules that turn observations into behavior.

    thresholds:
        (min_observations, tier) pairs; the highest tier whose threshold is
        met wins. Fewer observations than every threshold means BASIC.
    learning_kite_threshold:
        times kited before a Learning enemy takes a second step.
    aggressive_tactics:
        dominant tactics an Adapted enemy answers with a double step.
    """
    thresholds: Tuple[Tuple[int, AITier], ...] = (
        (TIER_THRESHOLDS["learning"], AITier.LEARNING),
        (TIER_THRESHOLDS["adapted"], AITier.ADAPTED),
        (TIER_THRESHOLDS["master"], AITier.MASTER),
    )
    learning_kite_threshold: int = LEARNING_KITE_THRESHOLD
    aggressive_tactics: FrozenSet[PlayerTactic] = frozenset(
        {PlayerTactic.MELEE, PlayerTactic.FLEE, PlayerTactic.KITE}
    )

    def tier_for(self, observations: int) -> AITier:
        tier = AITier.BASIC
        for minimum, candidate in self.thresholds:
            if observations >= minimum and candidate > tier:
                tier = candidate
        return tier

    @classmethod
    def from_mapping(
        cls,
        thresholds: Mapping[str, int],
        learning_kite_threshold: int = LEARNING_KITE_THRESHOLD,
        aggressive_tactics: Iterable[str] = ("melee", "flee", "kite"),
    ) -> "TierPolicy":
        """
        Build a policy from config-style values, e.g.
        {"learning": 3, "adapted": 7, "master": 10}.

        Raises ConfigError for unknown tier names, negative counts, or
        thresholds that do not rise with the tier.
        """
        pairs = []
        for name, minimum in thresholds.items():
            tier = _TIER_NAMES.get(name)
            if tier is None:
                raise ConfigError(f"Unknown tier {name!r} in tier thresholds")
            if not isinstance(minimum, int) or minimum < 0:
                raise ConfigError(f"Tier threshold for {name!r} must be a non-negative integer")
            pairs.append((minimum, tier))
        pairs.sort(key=lambda pair: pair[1])
        for (low, _), (high, tier) in zip(pairs, pairs[1:]):
            if high <= low:
                raise ConfigError(f"Threshold for {tier.name.lower()!r} must exceed the tier below it")

        if learning_kite_threshold < 0:
            raise ConfigError("learning_kite_threshold must be non-negative")

        try:
            tactics = frozenset(PlayerTactic[name.upper()] for name in aggressive_tactics)
        except KeyError as exc:
            raise ConfigError(f"Unknown player tactic {exc.args[0]!r}") from exc

        return cls(
            thresholds=tuple(pairs),
            learning_kite_threshold=learning_kite_threshold,
            aggressive_tactics=tactics,
        )


DEFAULT_POLICY = TierPolicy()


def _new_history() -> Deque[PlayerTactic]:
    return deque(maxlen=KNOWLEDGE_HISTORY_SIZE)


@dataclass
class TacticalKnowledge:
    """Everything one enemy has learned about the player."""
    times_kited: int = 0
    times_choked: int = 0      # no observer records chokepoint fighting yet
    times_ranged_spam: int = 0
    times_melee: int = 0
    times_fled: int = 0
    total_observations: int = 0

    # Most recent player tactics, oldest first
    history: Deque[PlayerTactic] = field(default_factory=_new_history)

    # Counter-tactic success tracking
    counter_successes: int = 0
    counter_attempts: int = 0

    tier: AITier = AITier.BASIC

    def record_action(self, tactic: PlayerTactic, policy: TierPolicy = DEFAULT_POLICY) -> None:
        """Record one observed player tactic and re-evaluate the tier."""
        if tactic is PlayerTactic.NONE:
            return
        self.history.append(tactic)
        self.total_observations += 1
        if tactic is PlayerTactic.KITE:
            self.times_kited += 1
        elif tactic is PlayerTactic.MELEE:
            self.times_melee += 1
        elif tactic is PlayerTactic.RANGED:
            self.times_ranged_spam += 1
        elif tactic is PlayerTactic.FLEE:
            self.times_fled += 1
        self.update_tier(policy)

    def update_tier(self, policy: TierPolicy = DEFAULT_POLICY) -> AITier:
        """Raise the tier to what the evidence supports; never lower it."""
        self.tier = max(self.tier, policy.tier_for(self.total_observations))
        return self.tier

    def dominant_tactic(self) -> PlayerTactic:
        """
        Most common tactic in the recent history.

        Ties go to the lowest tactic value; an empty history reads as MELEE.
        """
        counts = {t: 0 for t in PlayerTactic if t is not PlayerTactic.NONE}
        for tactic in self.history:
            counts[tactic] += 1
        best = PlayerTactic.MELEE
        for tactic in sorted(counts):
            if counts[tactic] > counts[best]:
                best = tactic
        return best


def _manhattan(a: "Position", b: "Position") -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def observe_player_move(
    enemies: Iterable["Enemy"],
    previous: "Position",
    current: "Position",
    policy: TierPolicy = DEFAULT_POLICY,
) -> None:
    """
    Let every enemy learn from the player's last move.

    Moving away from an enemy counts as kiting it, moving closer counts as
    melee pressure; a move that keeps the distance teaches nothing.
    """
    for enemy in enemies:
        old_dist = _manhattan(previous, enemy.position)
        new_dist = _manhattan(current, enemy.position)
        if new_dist > old_dist:
            enemy.knowledge.record_action(PlayerTactic.KITE, policy)
        elif new_dist < old_dist:
            enemy.knowledge.record_action(PlayerTactic.MELEE, policy)
