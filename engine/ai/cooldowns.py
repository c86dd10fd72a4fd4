# engine/ai/cooldowns.py

from typing import Dict

from settings import MS_PER_TURN

# Cooldown keys used by the behaviors
RANGED_ATTACK = "ranged_attack"
BOSS_MESSAGE = "boss_message"


class CooldownTracker:
    """
    Per-enemy cooldown bookkeeping on a simulated clock.

    The clock counts milliseconds of *game* time and only moves when the
    owning enemy takes a turn (tick) or a caller advances it explicitly, so
    two runs with the same inputs see the same cooldowns.
    """

    def __init__(self, ms_per_turn: int = MS_PER_TURN) -> None:
        self.ms_per_turn = ms_per_turn
        self.now_ms: int = 0
        self._last_triggered: Dict[str, int] = {}

    def tick(self) -> int:
        """Advance the clock by one turn. Returns the new time."""
        self.now_ms += self.ms_per_turn
        return self.now_ms

    def advance(self, ms: int) -> int:
        self.now_ms += ms
        return self.now_ms

    def ready(self, key: str, cooldown_ms: int) -> bool:
        last = self._last_triggered.get(key)
        if last is None:
            return True
        return self.now_ms - last >= cooldown_ms

    def trigger(self, key: str) -> None:
        self._last_triggered[key] = self.now_ms

    def last_triggered(self, key: str):
        return self._last_triggered.get(key)

    def __repr__(self) -> str:
        return f"CooldownTracker(now_ms={self.now_ms}, keys={sorted(self._last_triggered)})"
