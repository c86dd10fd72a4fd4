"""
Unit tests for the status effects system.
"""

import pytest
from systems.statuses import (
    StatusEffect,
    StatusType,
    apply_status,
    has_status,
    is_incapacitated,
    tick_statuses,
)


class TestStatusEffect:
    """Tests for StatusEffect dataclass."""

    def test_status_effect_defaults(self):
        """Test status effect default values."""
        status = StatusEffect(StatusType.HASTE)
        assert status.duration == 0
        assert status.magnitude == 0

    @pytest.mark.parametrize("kind,magnitude,expected", [
        (StatusType.POISON, 0, 1),
        (StatusType.BLEED, 3, 3),
        (StatusType.BURN, 2, 2),
        (StatusType.FORTIFY, 5, 0),
        (StatusType.FREEZE, 5, 0),
    ])
    def test_damage_per_tick(self, kind, magnitude, expected):
        """Damage-over-time kinds deal at least 1; others deal none."""
        assert StatusEffect(kind, 3, magnitude).damage_per_tick == expected


class TestApplyStatus:
    """Tests for apply_status merging."""

    def test_adds_new_kind(self):
        statuses = []
        apply_status(statuses, StatusEffect(StatusType.BURN, 2, 1))
        assert statuses == [StatusEffect(StatusType.BURN, 2, 1)]

    def test_merge_takes_max_of_both_fields(self):
        """{K,2,1} + {K,5,3} -> {K,5,3}."""
        statuses = [StatusEffect(StatusType.POISON, 2, 1)]
        apply_status(statuses, StatusEffect(StatusType.POISON, 5, 3))
        assert statuses == [StatusEffect(StatusType.POISON, 5, 3)]

    def test_merge_never_weakens(self):
        statuses = [StatusEffect(StatusType.POISON, 5, 3)]
        apply_status(statuses, StatusEffect(StatusType.POISON, 2, 1))
        assert statuses == [StatusEffect(StatusType.POISON, 5, 3)]

    def test_mixed_merge(self):
        statuses = [StatusEffect(StatusType.BLEED, 5, 1)]
        apply_status(statuses, StatusEffect(StatusType.BLEED, 2, 4))
        assert statuses == [StatusEffect(StatusType.BLEED, 5, 4)]

    def test_incoming_effect_not_aliased(self):
        statuses = []
        incoming = StatusEffect(StatusType.STUN, 1)
        apply_status(statuses, incoming)
        statuses[0].duration = 9
        assert incoming.duration == 1


class TestTickStatuses:
    """Tests for tick_statuses function."""

    def test_tick_statuses_decrements_duration(self):
        """Test that status durations are decremented and expired ones pruned."""
        statuses = [
            StatusEffect(StatusType.HASTE, duration=3),
            StatusEffect(StatusType.FORTIFY, duration=1),
        ]

        fired = tick_statuses(statuses)

        assert statuses == [StatusEffect(StatusType.HASTE, duration=2)]
        assert fired == []

    def test_tick_reports_damage_over_time(self):
        """Every DOT effect fires once per tick, including on its last turn."""
        statuses = [
            StatusEffect(StatusType.POISON, duration=1, magnitude=2),
            StatusEffect(StatusType.FREEZE, duration=2),
            StatusEffect(StatusType.BURN, duration=3, magnitude=0),
        ]

        fired = tick_statuses(statuses)

        assert [(e.kind, e.damage_per_tick) for e in fired] == [
            (StatusType.POISON, 2),
            (StatusType.BURN, 1),
        ]
        assert [s.kind for s in statuses] == [StatusType.FREEZE, StatusType.BURN]

    def test_zero_duration_removed(self):
        statuses = [StatusEffect(StatusType.STUN, duration=0)]
        tick_statuses(statuses)
        assert statuses == []


class TestQueries:
    """Tests for has_status and is_incapacitated."""

    def test_has_status(self):
        statuses = [StatusEffect(StatusType.HASTE, 2)]
        assert has_status(statuses, StatusType.HASTE) is True
        assert has_status(statuses, StatusType.POISON) is False

    @pytest.mark.parametrize("kind,expected", [
        (StatusType.FREEZE, True),
        (StatusType.STUN, True),
        (StatusType.POISON, False),
        (StatusType.HASTE, False),
    ])
    def test_is_incapacitated(self, kind, expected):
        assert is_incapacitated([StatusEffect(kind, 1)]) is expected

    def test_expired_stun_does_not_incapacitate(self):
        assert is_incapacitated([StatusEffect(StatusType.STUN, 0)]) is False
