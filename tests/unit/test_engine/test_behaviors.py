"""
Unit tests for the tiered melee behaviors.
"""

import pytest

from engine.ai.behaviors import MELEE_BEHAVIORS, register_behavior
from engine.ai.movement import manhattan_distance
from systems.enemies import EnemyType, HeightLevel
from systems.knowledge import AITier, PlayerTactic
from world.entities import Enemy, Player
from world.game_map import GameMap


def run_tier(ai, tier, enemy, player, game_map, message_log):
    MELEE_BEHAVIORS[tier](ai, enemy, player, game_map, message_log)


@pytest.fixture
def corridor():
    """A long open strip: 30 wide, 3 tall."""
    return GameMap.filled(30, 3)


class TestBehaviorTable:
    """Tests for the tier -> behavior table."""

    def test_every_tier_has_a_behavior(self):
        assert set(MELEE_BEHAVIORS) == set(AITier)

    def test_register_behavior_replaces_handler(self, monkeypatch, ai, corridor, message_log):
        """A registered handler is what runs for that tier."""
        calls = []
        monkeypatch.setitem(MELEE_BEHAVIORS, AITier.BASIC, MELEE_BEHAVIORS[AITier.BASIC])
        register_behavior(AITier.BASIC, lambda *args: calls.append(args))

        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 1)
        run_tier(ai, AITier.BASIC, enemy, Player(10, 1), corridor, message_log)
        assert len(calls) == 1
        assert enemy.position == (0, 1)


class TestBasicAndLearning:
    """Tests for the BASIC and LEARNING tiers."""

    def test_basic_takes_one_step(self, ai, corridor, message_log):
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        run_tier(ai, AITier.BASIC, enemy, Player(5, 0), corridor, message_log)
        assert enemy.position == (1, 0)

    def test_learning_single_step_below_kite_threshold(self, ai, corridor, message_log):
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        enemy.knowledge.times_kited = 2
        run_tier(ai, AITier.LEARNING, enemy, Player(10, 0), corridor, message_log)
        assert enemy.position == (1, 0)

    def test_learning_double_step_when_kited(self, ai, corridor, message_log):
        """Three kites make a learning enemy chase twice as fast."""
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        enemy.knowledge.times_kited = 3
        run_tier(ai, AITier.LEARNING, enemy, Player(10, 0), corridor, message_log)
        assert enemy.position == (2, 0)


class TestAdapted:
    """Tests for the ADAPTED tier."""

    def test_empty_history_counts_as_melee(self, ai, corridor, message_log):
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        run_tier(ai, AITier.ADAPTED, enemy, Player(10, 0), corridor, message_log)
        assert enemy.position == (2, 0)

    @pytest.mark.parametrize("tactic,expected_x", [
        (PlayerTactic.MELEE, 2),
        (PlayerTactic.FLEE, 2),
        (PlayerTactic.KITE, 2),
        (PlayerTactic.RANGED, 1),
    ])
    def test_steps_by_dominant_tactic(self, ai, corridor, message_log, tactic, expected_x):
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        for _ in range(4):
            enemy.knowledge.record_action(tactic)
        run_tier(ai, AITier.ADAPTED, enemy, Player(10, 0), corridor, message_log)
        assert enemy.position == (expected_x, 0)


class TestMaster:
    """Tests for the MASTER tier."""

    @pytest.mark.parametrize("distance,expected_steps", [
        (1, 1),
        (2, 1),
        (3, 2),
        (4, 2),
        (5, 3),
        (10, 3),
    ])
    def test_step_bursts(self, ai, corridor, message_log, distance, expected_steps):
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        run_tier(ai, AITier.MASTER, enemy, Player(distance, 0), corridor, message_log)
        assert enemy.position == (min(expected_steps, distance), 0)

    def test_never_more_than_three_steps(self, ai, open_map, message_log):
        for distance in range(0, 19):
            enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
            player = Player(distance, 0)
            run_tier(ai, AITier.MASTER, enemy, player, open_map, message_log)
            assert manhattan_distance((0, 0), enemy.position) <= 3

    def test_airborne_master_dives_on_roll(self, ai, corridor, message_log, fixed_rng):
        ai.rng = fixed_rng(0)
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        enemy.height = HeightLevel.FLYING
        run_tier(ai, AITier.MASTER, enemy, Player(2, 0), corridor, message_log)
        assert enemy.height is HeightLevel.LOW_AIR

    def test_airborne_master_stays_up_on_miss(self, ai, corridor, message_log, fixed_rng):
        ai.rng = fixed_rng(1)
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        enemy.height = HeightLevel.FLYING
        run_tier(ai, AITier.MASTER, enemy, Player(2, 0), corridor, message_log)
        assert enemy.height is HeightLevel.FLYING

    def test_no_roll_when_out_of_range(self, ai, corridor, message_log, fixed_rng):
        """Distance is taken before moving: 3 tiles away never dives."""
        ai.rng = fixed_rng(0)
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        enemy.height = HeightLevel.LOW_AIR
        run_tier(ai, AITier.MASTER, enemy, Player(3, 0), corridor, message_log)
        assert enemy.height is HeightLevel.LOW_AIR
        assert ai.rng.calls == 0

    def test_grounded_master_never_rolls(self, ai, corridor, message_log, fixed_rng):
        ai.rng = fixed_rng(0)
        enemy = Enemy.spawn(EnemyType.GOBLIN, 0, 0)
        run_tier(ai, AITier.MASTER, enemy, Player(1, 0), corridor, message_log)
        assert enemy.height is HeightLevel.GROUND
        assert ai.rng.calls == 0
