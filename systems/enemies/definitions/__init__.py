"""
Enemy definitions.

Structure:
- monsters.py: regular monsters, the goblin archer, elites
- bosses.py: floor bosses with dedicated attack patterns
"""

from . import monsters
from . import bosses


def register_all_definitions() -> None:
    """Register every enemy definition."""
    monsters.register_monster_definitions()
    bosses.register_boss_definitions()
