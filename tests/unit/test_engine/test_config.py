"""
Unit tests for the AI configuration.
"""

import json

import pytest

from engine.config import AIConfig
from engine.error_handler import ConfigError
from systems.knowledge import AITier, PlayerTactic


class TestAIConfigDefaults:
    """Tests for default values."""

    def test_defaults(self):
        config = AIConfig()
        assert config.pathfind_max_iterations == 10_000
        assert config.archer_shot_cooldown_ms == 4000
        assert config.boss_message_cooldown_ms == 5000
        assert config.tier_thresholds == {"learning": 3, "adapted": 7, "master": 10}
        assert config.seed is None

    def test_default_policy(self):
        policy = AIConfig().tier_policy()
        assert policy.tier_for(2) is AITier.BASIC
        assert policy.tier_for(3) is AITier.LEARNING
        assert policy.tier_for(7) is AITier.ADAPTED
        assert policy.tier_for(10) is AITier.MASTER
        assert policy.aggressive_tactics == {PlayerTactic.MELEE, PlayerTactic.FLEE, PlayerTactic.KITE}


class TestFromDict:
    """Tests for AIConfig.from_dict."""

    def test_overlays_given_keys(self):
        config = AIConfig()
        config.from_dict({"archer_base_damage": 6, "seed": 42})
        assert config.archer_base_damage == 6
        assert config.seed == 42
        assert config.ms_per_turn == 1000

    def test_partial_thresholds_merge(self):
        config = AIConfig()
        config.from_dict({"tier_thresholds": {"master": 20}})
        assert config.tier_thresholds == {"learning": 3, "adapted": 7, "master": 20}
        assert config.tier_policy().tier_for(15) is AITier.ADAPTED

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="Unknown AI config keys"):
            AIConfig().from_dict({"wall_hack": True})

    @pytest.mark.parametrize("data", [
        {"archer_shot_cooldown_ms": -1},
        {"pathfind_max_iterations": "lots"},
        {"master_descend_odds": 0},
        {"seed": "abc"},
        {"use_unicode_glyphs": "yes"},
        {"tier_thresholds": {"adapted": 2}},
        {"tier_thresholds": {"legendary": 50}},
        {"aggressive_tactics": ["teleport"]},
    ])
    def test_invalid_values_rejected(self, data):
        config = AIConfig()
        before = config.to_dict()
        with pytest.raises(ConfigError):
            config.from_dict(data)
        assert config.to_dict() == before


class TestSaveLoad:
    """Tests for config persistence."""

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "ai.json"
        config = AIConfig()
        config.from_dict({"boss_teleport_radius": 3, "aggressive_tactics": ["kite"]})
        assert config.save(path) is True

        loaded = AIConfig()
        assert loaded.load(path) is True
        assert loaded.boss_teleport_radius == 3
        assert loaded.tier_policy().aggressive_tactics == {PlayerTactic.KITE}

    def test_missing_file(self, tmp_path):
        assert AIConfig().load(tmp_path / "absent.json") is False

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            AIConfig().load(path)
        assert excinfo.value.user_message == "The AI config file is corrupted."

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        with pytest.raises(ConfigError):
            AIConfig().load(path)
