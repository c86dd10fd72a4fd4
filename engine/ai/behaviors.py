# engine/ai/behaviors.py

"""
Tiered melee behaviors.

Every melee enemy that is not a boss or an archer acts according to its
intelligence tier. The mapping lives in MELEE_BEHAVIORS; a new tier
handler can be plugged in with register_behavior().

A handler is called as handler(ai, enemy, player, game_map, log) where
`ai` is the EnemyAI running the turn (config, policy, shared rng).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from engine.ai.movement import manhattan_distance, step_toward
from engine.error_handler import get_logger
from systems.knowledge import AITier

if TYPE_CHECKING:
    from engine.ai.core import EnemyAI
    from engine.message_log import MessageLog
    from world.entities import Enemy, Player
    from world.game_map import GameMap

BehaviorHandler = Callable[
    ["EnemyAI", "Enemy", "Player", "GameMap", "MessageLog"], None
]

log = get_logger("ai.behaviors")

MELEE_BEHAVIORS: Dict[AITier, BehaviorHandler] = {}


def register_behavior(tier: AITier, handler: BehaviorHandler) -> BehaviorHandler:
    """Register (or replace) the handler for a tier."""
    MELEE_BEHAVIORS[tier] = handler
    return handler


def advance_toward_player(
    ai: "EnemyAI",
    enemy: "Enemy",
    player: "Player",
    game_map: "GameMap",
    steps: int,
) -> int:
    """Take up to `steps` pathfinding steps. Returns how many were taken."""
    taken = 0
    for _ in range(steps):
        if not step_toward(enemy, player.position, game_map, ai.config.pathfind_max_iterations):
            break
        taken += 1
    return taken


def behavior_basic(ai, enemy, player, game_map, message_log) -> None:
    advance_toward_player(ai, enemy, player, game_map, 1)


def behavior_learning(ai, enemy, player, game_map, message_log) -> None:
    """Chase harder once the player has shown a habit of kiting."""
    steps = 1
    if enemy.knowledge.times_kited >= ai.policy.learning_kite_threshold:
        steps = 2
    advance_toward_player(ai, enemy, player, game_map, steps)


def behavior_adapted(ai, enemy, player, game_map, message_log) -> None:
    """Double-step against the player's dominant tactic if it is an aggressive one."""
    steps = 1
    if enemy.knowledge.dominant_tactic() in ai.policy.aggressive_tactics:
        steps = 2
    advance_toward_player(ai, enemy, player, game_map, steps)


def behavior_master(ai, enemy, player, game_map, message_log) -> None:
    """
    Close the gap in bursts of up to three steps.

    Airborne masters near the player may also dive one height band.
    """
    dist = manhattan_distance(enemy.position, player.position)

    steps = 1
    if dist > 2:
        steps += 1
    if dist > 4:
        steps += 1
    advance_toward_player(ai, enemy, player, game_map, steps)

    if not enemy.is_grounded and dist <= ai.config.master_descend_range:
        if ai.rng.randint(0, ai.config.master_descend_odds - 1) == 0:
            enemy.descend()
            log.debug("%s descends to %s", enemy.name, enemy.height.name)


register_behavior(AITier.BASIC, behavior_basic)
register_behavior(AITier.LEARNING, behavior_learning)
register_behavior(AITier.ADAPTED, behavior_adapted)
register_behavior(AITier.MASTER, behavior_master)
