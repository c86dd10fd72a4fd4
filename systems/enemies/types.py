"""
Enemy type definitions.

Contains the enums and the definition dataclass every spawned enemy is
built from.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class EnemyType(Enum):
    # Weak monsters
    RAT = "rat"
    SPIDER = "spider"
    GOBLIN = "goblin"
    KOBOLD = "kobold"
    ORC = "orc"
    ZOMBIE = "zombie"
    # Ranged monsters
    ARCHER = "archer"
    # Strong monsters
    GNOME = "gnome"
    OGRE = "ogre"
    TROLL = "troll"
    DRAGON = "dragon"
    LICH = "lich"
    # Floor bosses
    STONE_GOLEM = "stone_golem"
    SHADOW_LORD = "shadow_lord"
    # Special
    CORPSE = "corpse"


class Archetype(Enum):
    """Broad behavior family: melee chasers or kiting archers."""
    MELEE = "melee"
    ARCHER = "archer"


class HeightLevel(IntEnum):
    """
    Vertical band of an enemy.

    - GROUND:  normal enemies, melee can hit
    - LOW_AIR: hovering enemies, jump attacks can hit
    - FLYING:  only ranged/magic can hit
    """
    GROUND = 0
    LOW_AIR = 1
    FLYING = 2


@dataclass(frozen=True)
class EnemyDefinition:
    """
    Defines a *type* of enemy that can be spawned in the dungeon.

    - enemy_type:      stable id (used for lookups and boss routing)
    - name:            display name used in log messages
    - glyph:           map character
    - archetype:       MELEE or ARCHER behavior family
    - is_boss:         routes the enemy to its boss pattern
    - base_*:          stats at spawn
    - default_height:  height band at spawn
    """
    enemy_type: EnemyType
    name: str
    glyph: str
    archetype: Archetype

    base_hp: int
    base_attack: int
    base_defense: int
    base_speed: int

    is_boss: bool = False
    default_height: HeightLevel = HeightLevel.GROUND
    color: str = "common"
