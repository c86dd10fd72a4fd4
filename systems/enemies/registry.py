"""
Enemy registry system.

Manages the global registry of enemy definitions.
"""

from typing import Dict

from engine.error_handler import ValidationError
from .types import Archetype, EnemyDefinition, EnemyType


# Global registry
ENEMY_DEFINITIONS: Dict[EnemyType, EnemyDefinition] = {}


def register_definition(definition: EnemyDefinition) -> EnemyDefinition:
    """Register an enemy definition."""
    ENEMY_DEFINITIONS[definition.enemy_type] = definition
    return definition


def get_definition(enemy_type: EnemyType) -> EnemyDefinition:
    """Get an enemy definition by type."""
    try:
        return ENEMY_DEFINITIONS[enemy_type]
    except KeyError as exc:
        raise ValidationError(f"No enemy definition registered for {enemy_type!r}") from exc


def is_boss_type(enemy_type: EnemyType) -> bool:
    """True if enemies of this type run a boss pattern."""
    definition = ENEMY_DEFINITIONS.get(enemy_type)
    return definition is not None and definition.is_boss


def is_archer_type(enemy_type: EnemyType) -> bool:
    definition = ENEMY_DEFINITIONS.get(enemy_type)
    return definition is not None and definition.archetype is Archetype.ARCHER
