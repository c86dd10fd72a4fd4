"""
Regular dungeon monsters.

Weak lowercase-glyph monsters, the goblin archer, and the uppercase
elites. Stats are the values at spawn; depth scaling is the spawner's job.
"""

from ..types import Archetype, EnemyDefinition, EnemyType, HeightLevel
from ..registry import register_definition


def register_monster_definitions() -> None:
    """Register all non-boss enemy definitions."""

    # --- Weak monsters -----------------------------------------------------

    register_definition(EnemyDefinition(
        enemy_type=EnemyType.RAT, name="Rat", glyph="r", archetype=Archetype.MELEE,
        base_hp=3, base_attack=1, base_defense=0, base_speed=15, color="weak",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.SPIDER, name="Spider", glyph="s", archetype=Archetype.MELEE,
        base_hp=4, base_attack=2, base_defense=0, base_speed=12, color="weak",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.GOBLIN, name="Goblin", glyph="g", archetype=Archetype.MELEE,
        base_hp=6, base_attack=2, base_defense=1, base_speed=10,
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.KOBOLD, name="Kobold", glyph="k", archetype=Archetype.MELEE,
        base_hp=5, base_attack=3, base_defense=0, base_speed=11,
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.ORC, name="Orc", glyph="o", archetype=Archetype.MELEE,
        base_hp=10, base_attack=4, base_defense=2, base_speed=8, color="strong",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.ZOMBIE, name="Zombie", glyph="z", archetype=Archetype.MELEE,
        base_hp=12, base_attack=3, base_defense=3, base_speed=5, color="strong",
    ))

    # --- Ranged ------------------------------------------------------------

    # Lower HP, keeps distance
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.ARCHER, name="Goblin Archer", glyph="a", archetype=Archetype.ARCHER,
        base_hp=5, base_attack=4, base_defense=0, base_speed=11,
    ))

    # --- Elites ------------------------------------------------------------

    register_definition(EnemyDefinition(
        enemy_type=EnemyType.GNOME, name="Gnome", glyph="G", archetype=Archetype.MELEE,
        base_hp=8, base_attack=5, base_defense=1, base_speed=10, color="elite",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.OGRE, name="Ogre", glyph="O", archetype=Archetype.MELEE,
        base_hp=20, base_attack=6, base_defense=3, base_speed=6, color="elite",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.TROLL, name="Troll", glyph="T", archetype=Archetype.MELEE,
        base_hp=25, base_attack=5, base_defense=4, base_speed=7, color="elite",
    ))
    register_definition(EnemyDefinition(
        enemy_type=EnemyType.LICH, name="Lich", glyph="L", archetype=Archetype.MELEE,
        base_hp=40, base_attack=12, base_defense=3, base_speed=10,
        default_height=HeightLevel.LOW_AIR, color="boss",
    ))

    # --- Corpse run --------------------------------------------------------

    register_definition(EnemyDefinition(
        enemy_type=EnemyType.CORPSE, name="Vengeful Spirit", glyph="C", archetype=Archetype.MELEE,
        base_hp=15, base_attack=5, base_defense=2, base_speed=10,
        default_height=HeightLevel.LOW_AIR, color="corpse",
    ))
