# engine/ai/core.py

"""
Per-turn orchestration of enemy decisions.

EnemyAI.take_turn runs one enemy through a fixed sequence, stopping at the
first step that ends its turn:

    tier update -> status tick -> dead? -> frozen/stunned?
        -> boss pattern | archer policy | tiered melee behavior
"""

from __future__ import annotations

import random
import time
from typing import TYPE_CHECKING, Iterable, Optional

from engine.ai.archer import behavior_archer
from engine.ai.behaviors import MELEE_BEHAVIORS, behavior_basic
from engine.ai.bosses import run_boss_pattern
from engine.config import AIConfig, get_config
from engine.error_handler import get_logger
from engine.feedback import Feedback, SilentFeedback
from engine.message_log import MessageType
from systems.combat_distance import DistanceClassifier, classify_combat_distance
from systems.knowledge import TierPolicy
from systems.statuses import DAMAGE_OVER_TIME, is_incapacitated, tick_statuses
from telemetry.logger import telemetry

if TYPE_CHECKING:
    from engine.message_log import MessageLog
    from world.entities import Enemy, Player
    from world.game_map import GameMap

log = get_logger("ai.core")


class EnemyAI:
    """
    Runs enemy turns.

    One instance owns the random generator every randomized decision draws
    from (master descent, boss teleports), so seeding it makes a whole
    fight reproducible.
    """

    def __init__(
        self,
        config: Optional[AIConfig] = None,
        rng: Optional[random.Random] = None,
        classifier: DistanceClassifier = classify_combat_distance,
        feedback: Optional[Feedback] = None,
        policy: Optional[TierPolicy] = None,
    ) -> None:
        self.config = config or get_config()
        self.rng = rng or random.Random(self.config.seed)
        self.classifier = classifier
        self.feedback = feedback or SilentFeedback()
        self.policy = policy or self.config.tier_policy()

    def take_turn(
        self,
        enemy: "Enemy",
        player: "Player",
        game_map: "GameMap",
        message_log: "MessageLog",
    ) -> None:
        enemy.knowledge.update_tier(self.policy)
        enemy.cooldowns.ms_per_turn = self.config.ms_per_turn
        enemy.cooldowns.tick()

        for effect in tick_statuses(enemy.statuses):
            damage = effect.damage_per_tick
            enemy.take_damage(damage)
            message_log.add(
                MessageType.DAMAGE,
                f"{enemy.name} suffers {damage} damage from {DAMAGE_OVER_TIME[effect.kind]}!",
            )

        if not enemy.is_alive:
            self._record(enemy, "dead")
            return

        if is_incapacitated(enemy.statuses):
            message_log.add(MessageType.WARNING, f"{enemy.name} is unable to act!")
            self._record(enemy, "incapacitated")
            return

        if enemy.is_boss:
            branch = run_boss_pattern(self, enemy, player, game_map, message_log)
            self._record(enemy, f"boss:{branch}")
            return

        if enemy.is_archer:
            branch = behavior_archer(self, enemy, player, game_map, message_log)
            self._record(enemy, f"archer:{branch}")
            return

        handler = MELEE_BEHAVIORS.get(enemy.knowledge.tier, behavior_basic)
        handler(self, enemy, player, game_map, message_log)
        self._record(enemy, f"melee:{enemy.knowledge.tier.name.lower()}")

    def _record(self, enemy: "Enemy", branch: str) -> None:
        log.debug(
            "%s at %s [%s] -> %s",
            enemy.name, enemy.position, enemy.knowledge.tier.name, branch,
        )
        telemetry.tick_turn()
        if telemetry.should_log_turn():
            telemetry.log(
                "enemy_turn",
                enemy=enemy.name,
                type=enemy.enemy_type.value,
                tier=enemy.knowledge.tier.name,
                branch=branch,
                position=list(enemy.position),
            )


def run_enemy_turns(
    enemies: Iterable["Enemy"],
    player: "Player",
    game_map: "GameMap",
    message_log: "MessageLog",
    ai: Optional[EnemyAI] = None,
) -> int:
    """
    Give every living enemy one turn, in list order.

    Returns how many enemies acted.
    """
    ai = ai or EnemyAI()
    started = time.perf_counter()
    acted = 0
    for enemy in enemies:
        if not enemy.is_alive:
            continue
        ai.take_turn(enemy, player, game_map, message_log)
        acted += 1
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    log.debug("Enemy round: %d turns in %.2f ms", acted, elapsed_ms)
    return acted
