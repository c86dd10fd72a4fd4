"""
Enemy AI.

Pathfinding, line of sight, movement, tiered behaviors, archer and boss
policies, and the per-turn orchestrator.
"""

from .cooldowns import CooldownTracker
from .pathfinding import PathOutcome, PathStep, find_next_step
from .line_of_sight import bresenham_line, has_line_of_sight
from .movement import manhattan_distance, move_away_from, step_toward
from .behaviors import MELEE_BEHAVIORS, register_behavior
from .archer import behavior_archer, ranged_attack
from .bosses import BOSS_PATTERNS, register_boss_pattern, run_boss_pattern
from .core import EnemyAI, run_enemy_turns

__all__ = [
    "CooldownTracker",
    "PathOutcome",
    "PathStep",
    "find_next_step",
    "bresenham_line",
    "has_line_of_sight",
    "manhattan_distance",
    "move_away_from",
    "step_toward",
    "MELEE_BEHAVIORS",
    "register_behavior",
    "behavior_archer",
    "ranged_attack",
    "BOSS_PATTERNS",
    "register_boss_pattern",
    "run_boss_pattern",
    "EnemyAI",
    "run_enemy_turns",
]
