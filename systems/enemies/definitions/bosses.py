"""
Floor bosses.

Each of these runs a dedicated three-phase pattern in engine.ai.bosses.
"""

from ..types import Archetype, EnemyDefinition, EnemyType, HeightLevel
from ..registry import register_definition


def register_boss_definitions() -> None:
    """Register all boss definitions."""

    register_definition(EnemyDefinition(
        enemy_type=EnemyType.STONE_GOLEM, name="Stone Golem", glyph="#",
        archetype=Archetype.MELEE, is_boss=True,
        base_hp=30, base_attack=3, base_defense=3, base_speed=4, color="boss",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.SHADOW_LORD, name="Shadow Lord", glyph="&",
        archetype=Archetype.MELEE, is_boss=True,
        base_hp=25, base_attack=4, base_defense=2, base_speed=14, color="boss",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.DRAGON, name="Dragon", glyph="D",
        archetype=Archetype.MELEE, is_boss=True,
        base_hp=20, base_attack=4, base_defense=2, base_speed=9,
        default_height=HeightLevel.FLYING, color="boss",
    ))
