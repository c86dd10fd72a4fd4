# engine/ai/archer.py

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from engine.ai.behaviors import advance_toward_player
from engine.ai.cooldowns import RANGED_ATTACK
from engine.ai.line_of_sight import has_line_of_sight
from engine.ai.movement import move_away_from
from engine.error_handler import get_logger
from engine.message_log import MessageType
from systems.combat_distance import CombatDistance, Position3D

if TYPE_CHECKING:
    from engine.ai.core import EnemyAI
    from engine.feedback import Feedback
    from engine.message_log import MessageLog
    from world.entities import Enemy, Player
    from world.game_map import GameMap

log = get_logger("ai.archer")

# Depth used for 3D distance: grounded archers stand at 0, airborne ones at 2
GROUND_DEPTH = 0
AIRBORNE_DEPTH = 2


def ranged_attack(
    enemy: "Enemy",
    player: "Player",
    base_damage: int,
    depth: int,
    message_log: "MessageLog",
    feedback: Optional["Feedback"] = None,
) -> int:
    """
    Shoot at the player. Returns the damage dealt (0 if it bounced).

    Deeper dungeon floors make arrows hit harder; armor soaks the rest.
    """
    damage = max(0, base_damage + depth // 2 - player.stats.defense)

    if damage > 0:
        player.take_damage(damage)
        message_log.add(MessageType.DAMAGE, f"{enemy.name} shoots an arrow for {damage} damage!")
        if feedback is not None:
            feedback.flash_damage()
            feedback.play_hit_sound()
    else:
        message_log.add(MessageType.COMBAT, f"{enemy.name}'s arrow bounces off your armor!")
    return damage


def archer_position(enemy: "Enemy") -> Position3D:
    depth = GROUND_DEPTH if enemy.is_grounded else AIRBORNE_DEPTH
    return Position3D(enemy.x, enemy.y, depth)


def behavior_archer(
    ai: "EnemyAI",
    enemy: "Enemy",
    player: "Player",
    game_map: "GameMap",
    message_log: "MessageLog",
) -> str:
    """
    Keep the player at bow range.

    Too close -> back off. Medium/far with a clear shot and the bow ready ->
    fire. Anything else -> close in. Returns the branch taken.
    """
    band = ai.classifier(archer_position(enemy), Position3D(player.x, player.y, GROUND_DEPTH))

    if band <= CombatDistance.CLOSE:
        move_away_from(enemy, player.position, game_map)
        return "retreat"

    if band in (CombatDistance.MEDIUM, CombatDistance.FAR):
        if (
            has_line_of_sight(game_map, enemy.position, player.position)
            and enemy.cooldowns.ready(RANGED_ATTACK, ai.config.archer_shot_cooldown_ms)
        ):
            ranged_attack(
                enemy,
                player,
                ai.config.archer_base_damage,
                ai.config.dungeon_depth,
                message_log,
                ai.feedback,
            )
            enemy.cooldowns.trigger(RANGED_ATTACK)
            return "shoot"

    advance_toward_player(ai, enemy, player, game_map, 1)
    return "advance"
