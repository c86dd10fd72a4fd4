# world/entities.py

from dataclasses import dataclass, field
from typing import List, Tuple

from engine.ai.cooldowns import CooldownTracker
from systems.enemies import (
    Archetype,
    EnemyType,
    HeightLevel,
    get_definition,
    is_boss_type,
)
from systems.knowledge import TacticalKnowledge
from systems.stats import Stats
from systems.statuses import StatusEffect, StatusType, apply_status, has_status

Position = Tuple[int, int]

__all__ = ["Entity", "Player", "Enemy", "HeightLevel", "Position"]


@dataclass
class Entity:
    """Base entity that lives on the grid."""
    x: int
    y: int

    @property
    def position(self) -> Position:
        return self.x, self.y

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


@dataclass
class Player(Entity):
    """
    Player entity.
    Only what the enemy AI needs to read or hurt.
    """
    name: str = "Hero"
    stats: Stats = field(default_factory=lambda: Stats(max_hp=30, hp=30, attack=6, defense=1))

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def defense(self) -> int:
        return self.stats.defense

    def take_damage(self, amount: int) -> None:
        self.stats.hp = max(0, self.stats.hp - amount)

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0


@dataclass
class Enemy(Entity):
    """
    A hostile creature with its own memory.

    Everything that changes from turn to turn (knowledge, statuses,
    cooldowns, boss phase counter) lives on the instance; nothing is shared
    between enemies.
    """
    enemy_type: EnemyType = EnemyType.GOBLIN
    name: str = "Goblin"
    glyph: str = "g"
    archetype: Archetype = Archetype.MELEE
    stats: Stats = field(default_factory=Stats)

    knowledge: TacticalKnowledge = field(default_factory=TacticalKnowledge)
    statuses: List[StatusEffect] = field(default_factory=list)
    height: HeightLevel = HeightLevel.GROUND
    cooldowns: CooldownTracker = field(default_factory=CooldownTracker)
    boss_action_count: int = 0

    @classmethod
    def spawn(cls, enemy_type: EnemyType, x: int, y: int) -> "Enemy":
        """Create a fresh enemy from its registered definition."""
        definition = get_definition(enemy_type)
        stats = Stats(
            max_hp=definition.base_hp,
            hp=definition.base_hp,
            attack=definition.base_attack,
            defense=definition.base_defense,
            speed=definition.base_speed,
        )
        return cls(
            x=x,
            y=y,
            enemy_type=enemy_type,
            name=definition.name,
            glyph=definition.glyph,
            archetype=definition.archetype,
            stats=stats,
            height=definition.default_height,
        )

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    @property
    def is_boss(self) -> bool:
        return is_boss_type(self.enemy_type)

    @property
    def is_archer(self) -> bool:
        return self.archetype is Archetype.ARCHER

    @property
    def is_grounded(self) -> bool:
        return self.height == HeightLevel.GROUND

    def descend(self) -> bool:
        """Drop one height band. Returns False if already on the ground."""
        if self.is_grounded:
            return False
        self.height = HeightLevel(self.height - 1)
        return True

    def take_damage(self, amount: int) -> None:
        self.stats.hp = max(0, self.stats.hp - amount)

    def apply_status(self, effect: StatusEffect) -> None:
        apply_status(self.statuses, effect)

    def has_status(self, kind: StatusType) -> bool:
        return has_status(self.statuses, kind)
