# engine/ai/bosses.py

"""
Boss attack patterns.

Every boss cycles through three phases. Each turn bumps the boss's own
action counter and the phase is counter % 3, so the first turn a boss
takes is phase 1. Flavor messages are throttled per boss by the
BOSS_MESSAGE cooldown; movement is never throttled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from engine import glyphs
from engine.ai.behaviors import advance_toward_player, behavior_master
from engine.ai.cooldowns import BOSS_MESSAGE
from engine.ai.movement import manhattan_distance, move_away_from
from engine.error_handler import get_logger
from engine.message_log import MessageType
from systems.enemies import EnemyType

if TYPE_CHECKING:
    from engine.ai.core import EnemyAI
    from engine.message_log import MessageLog
    from world.entities import Enemy, Player
    from world.game_map import GameMap

BossPattern = Callable[
    ["EnemyAI", "Enemy", "Player", "GameMap", "MessageLog", int, int], str
]

log = get_logger("ai.bosses")

BOSS_PATTERNS: Dict[EnemyType, BossPattern] = {}


def register_boss_pattern(enemy_type: EnemyType, pattern: BossPattern) -> BossPattern:
    BOSS_PATTERNS[enemy_type] = pattern
    return pattern


def _announce(
    ai: "EnemyAI",
    enemy: "Enemy",
    message_log: "MessageLog",
    message_type: MessageType,
    text: str,
) -> bool:
    """Post a flavor message if this boss's message cooldown allows it."""
    if not enemy.cooldowns.ready(BOSS_MESSAGE, ai.config.boss_message_cooldown_ms):
        return False
    message_log.add(message_type, text)
    enemy.cooldowns.trigger(BOSS_MESSAGE)
    return True


def pattern_stone_golem(ai, enemy, player, game_map, message_log, phase: int, dist: int) -> str:
    if phase == 0:
        _announce(ai, enemy, message_log, MessageType.WARNING,
                  f"{glyphs.shield()} {enemy.name} braces for impact!")
        advance_toward_player(ai, enemy, player, game_map, 1)
        return "brace"
    if phase == 1 and dist <= 2:
        _announce(ai, enemy, message_log, MessageType.COMBAT, f"{enemy.name} charges at you!")
        advance_toward_player(ai, enemy, player, game_map, 2)
        return "charge"
    advance_toward_player(ai, enemy, player, game_map, 1)
    return "advance"


def _teleport_near_player(ai: "EnemyAI", enemy: "Enemy", player: "Player", game_map: "GameMap") -> bool:
    radius = ai.config.boss_teleport_radius
    tx = player.x + ai.rng.randint(-radius, radius)
    ty = player.y + ai.rng.randint(-radius, radius)
    if not game_map.in_bounds(tx, ty) or not game_map.is_walkable(tx, ty):
        log.debug("%s teleport target (%d, %d) rejected", enemy.name, tx, ty)
        return False
    enemy.move_to(tx, ty)
    return True


def pattern_shadow_lord(ai, enemy, player, game_map, message_log, phase: int, dist: int) -> str:
    if phase == 0 and dist > 2:
        _announce(ai, enemy, message_log, MessageType.WARNING,
                  f"{glyphs.ice()} {enemy.name} prepares a frost attack!")
        move_away_from(enemy, player.position, game_map)
        return "frost"
    if phase == 1:
        _announce(ai, enemy, message_log, MessageType.COMBAT, f"{enemy.name} teleports!")
        _teleport_near_player(ai, enemy, player, game_map)
        return "teleport"
    _announce(ai, enemy, message_log, MessageType.WARNING,
              f"{glyphs.fire()} {enemy.name} channels fire magic!")
    advance_toward_player(ai, enemy, player, game_map, 1)
    return "fire"


def pattern_dragon(ai, enemy, player, game_map, message_log, phase: int, dist: int) -> str:
    if phase in (0, 2):
        if dist > 3:
            _announce(ai, enemy, message_log, MessageType.WARNING,
                      f"{glyphs.fire()} {enemy.name} breathes fire!")
            return "breath"
        _announce(ai, enemy, message_log, MessageType.COMBAT,
                  f"{enemy.name} retreats to optimal range!")
        move_away_from(enemy, player.position, game_map)
        return "retreat"
    if dist <= 4:
        move_away_from(enemy, player.position, game_map)
        return "reposition"
    advance_toward_player(ai, enemy, player, game_map, 1)
    return "advance"


register_boss_pattern(EnemyType.STONE_GOLEM, pattern_stone_golem)
register_boss_pattern(EnemyType.SHADOW_LORD, pattern_shadow_lord)
register_boss_pattern(EnemyType.DRAGON, pattern_dragon)


def run_boss_pattern(
    ai: "EnemyAI",
    enemy: "Enemy",
    player: "Player",
    game_map: "GameMap",
    message_log: "MessageLog",
) -> str:
    """Advance the boss's phase counter and run its pattern. Returns the branch taken."""
    enemy.boss_action_count += 1
    phase = enemy.boss_action_count % 3
    dist = manhattan_distance(enemy.position, player.position)

    pattern = BOSS_PATTERNS.get(enemy.enemy_type)
    if pattern is None:
        log.debug("%s has no boss pattern, using master behavior", enemy.name)
        behavior_master(ai, enemy, player, game_map, message_log)
        return "master"
    return pattern(ai, enemy, player, game_map, message_log, phase, dist)
