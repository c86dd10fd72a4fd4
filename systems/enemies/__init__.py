"""
Enemy system module.

Enemy types, behavior families, height bands and the definition registry.
All public APIs are exported from this module.
"""

from .types import Archetype, EnemyDefinition, EnemyType, HeightLevel
from .registry import (
    ENEMY_DEFINITIONS,
    register_definition, get_definition,
    is_boss_type, is_archer_type,
)

# Register all definitions on import
from .definitions import register_all_definitions
register_all_definitions()

__all__ = [
    "Archetype",
    "EnemyDefinition",
    "EnemyType",
    "HeightLevel",
    "ENEMY_DEFINITIONS",
    "register_definition",
    "get_definition",
    "is_boss_type",
    "is_archer_type",
]
