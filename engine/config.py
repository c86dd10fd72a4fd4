"""
AI configuration: tunables loaded from / saved to a JSON file.

Defaults come from settings.py; a config file only needs the keys it
wants to override.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import settings
from engine.error_handler import ConfigError, get_logger, log_error
from systems.knowledge import TierPolicy

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "ai_settings.json"

log = get_logger("config")

# Integer tunables that must never be negative
_NON_NEGATIVE_INTS = (
    "pathfind_max_iterations",
    "ms_per_turn",
    "archer_shot_cooldown_ms",
    "boss_message_cooldown_ms",
    "archer_base_damage",
    "learning_kite_threshold",
    "master_descend_range",
    "boss_teleport_radius",
    "dungeon_depth",
)


class AIConfig:
    """Manages enemy AI tunables."""

    def __init__(self) -> None:
        self.pathfind_max_iterations: int = settings.PATHFIND_MAX_ITERATIONS
        self.ms_per_turn: int = settings.MS_PER_TURN
        self.archer_shot_cooldown_ms: int = settings.ARCHER_SHOT_COOLDOWN_MS
        self.boss_message_cooldown_ms: int = settings.BOSS_MESSAGE_COOLDOWN_MS
        self.archer_base_damage: int = settings.ARCHER_BASE_DAMAGE
        self.tier_thresholds: Dict[str, int] = dict(settings.TIER_THRESHOLDS)
        self.learning_kite_threshold: int = settings.LEARNING_KITE_THRESHOLD
        self.aggressive_tactics: List[str] = ["melee", "flee", "kite"]
        self.master_descend_range: int = settings.MASTER_DESCEND_RANGE
        self.master_descend_odds: int = settings.MASTER_DESCEND_ODDS
        self.boss_teleport_radius: int = settings.BOSS_TELEPORT_RADIUS
        self.use_unicode_glyphs: bool = settings.USE_UNICODE_GLYPHS
        self.dungeon_depth: int = 1      # feeds the archer's depth bonus
        self.seed: Optional[int] = None  # None means unseeded

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "pathfind_max_iterations": self.pathfind_max_iterations,
            "ms_per_turn": self.ms_per_turn,
            "archer_shot_cooldown_ms": self.archer_shot_cooldown_ms,
            "boss_message_cooldown_ms": self.boss_message_cooldown_ms,
            "archer_base_damage": self.archer_base_damage,
            "tier_thresholds": dict(self.tier_thresholds),
            "learning_kite_threshold": self.learning_kite_threshold,
            "aggressive_tactics": list(self.aggressive_tactics),
            "master_descend_range": self.master_descend_range,
            "master_descend_odds": self.master_descend_odds,
            "boss_teleport_radius": self.boss_teleport_radius,
            "use_unicode_glyphs": self.use_unicode_glyphs,
            "dungeon_depth": self.dungeon_depth,
            "seed": self.seed,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """
        Overlay values from a dictionary.

        Raises ConfigError on unknown keys or invalid values; on error the
        config is left unchanged.
        """
        known = self.to_dict()
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown AI config keys: {', '.join(unknown)}")

        merged = {**known, **data}
        if "tier_thresholds" in data:
            merged["tier_thresholds"] = {**known["tier_thresholds"], **data["tier_thresholds"]}
        self._validate(merged)

        for key, value in merged.items():
            setattr(self, key, value)

    @staticmethod
    def _validate(values: Dict[str, Any]) -> None:
        for key in _NON_NEGATIVE_INTS:
            value = values[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
        odds = values["master_descend_odds"]
        if isinstance(odds, bool) or not isinstance(odds, int) or odds < 1:
            raise ConfigError(f"master_descend_odds must be at least 1, got {odds!r}")
        seed = values["seed"]
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {seed!r}")
        if not isinstance(values["use_unicode_glyphs"], bool):
            raise ConfigError("use_unicode_glyphs must be true or false")
        # Builds (and so validates) the tier table
        TierPolicy.from_mapping(
            values["tier_thresholds"],
            values["learning_kite_threshold"],
            values["aggressive_tactics"],
        )

    def tier_policy(self) -> TierPolicy:
        return TierPolicy.from_mapping(
            self.tier_thresholds,
            self.learning_kite_threshold,
            self.aggressive_tactics,
        )

    def save(self, path: Optional[Path] = None) -> bool:
        """Save config to file."""
        path = path or CONFIG_FILE
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            log_error(e, "save_config")
            return False

    def load(self, path: Optional[Path] = None) -> bool:
        """
        Load config from file.

        Returns False if the file does not exist. Malformed JSON or invalid
        values raise ConfigError.
        """
        path = path or CONFIG_FILE
        if not path.exists():
            log.debug("No AI config at %s, using defaults", path)
            return False

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"{path} is not valid JSON: {e}",
                user_message="The AI config file is corrupted.",
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")
        self.from_dict(data)
        log.info("Loaded AI config from %s", path)
        return True


# Global config instance
_config = AIConfig()


def get_config() -> AIConfig:
    """Get the global config instance."""
    return _config


def load_config(path: Optional[Path] = None) -> AIConfig:
    """Load and return the config."""
    _config.load(path)
    return _config


def save_config(path: Optional[Path] = None) -> bool:
    """Save the global config."""
    return _config.save(path)
