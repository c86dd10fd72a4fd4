from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from settings import MESSAGE_LOG_MAX

# Type alias for RGB colors used in UI rendering
Color = Tuple[int, int, int]


class MessageType(Enum):
    INFO = "info"
    COMBAT = "combat"
    DAMAGE = "damage"
    HEAL = "heal"
    WARNING = "warning"
    LOOT = "loot"
    LEVEL = "level"
    DEATH = "death"
    DEBUG = "debug"


# ---------------------------------------------------------------------------
# Category → color helpers (used by the HUD to tint log lines)
# ---------------------------------------------------------------------------

_CATEGORY_COLORS: dict[MessageType, Color] = {
    MessageType.INFO: (220, 220, 220),
    MessageType.COMBAT: (255, 135, 0),
    MessageType.DAMAGE: (255, 0, 0),
    MessageType.HEAL: (0, 255, 0),
    MessageType.WARNING: (255, 255, 0),
    MessageType.LOOT: (255, 175, 0),
    MessageType.LEVEL: (0, 255, 255),
    MessageType.DEATH: (255, 0, 0),
    MessageType.DEBUG: (140, 140, 140),
}


def get_category_color(message_type: MessageType) -> Optional[Color]:
    """
    Map a message category to an RGB color.

    Returns None if the category has no color, so callers can fall back
    to default text colors.
    """
    return _CATEGORY_COLORS.get(message_type)


@dataclass(frozen=True)
class LogEntry:
    message_type: MessageType
    text: str


class MessageLog:
    """
    Categorized message history fed by the enemy AI.

    Features:
    - Stores entries as (category, text) pairs
    - Tracks the latest visible message (last_message)
    - Supports multi-line messages (each line becomes a log entry)
    - Automatically clamps log size to prevent memory bloat
    """

    def __init__(self, max_size: int = MESSAGE_LOG_MAX) -> None:
        """
        Initialize a new message log.

        Args:
            max_size: Maximum number of log entries to keep
        """
        self.entries: List[LogEntry] = []
        self.max_size: int = max_size
        self._last_message: str = ""

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def _append_lines(self, message_type: MessageType, lines: List[str]) -> None:
        """
        Internal helper to append one or more log lines sharing a category.
        """
        self.entries.extend(LogEntry(message_type, line) for line in lines)

        # Clamp log size (keep most recent entries)
        max_len = max(1, int(self.max_size))
        if len(self.entries) > max_len:
            self.entries = self.entries[-max_len:]

        self._last_message = lines[-1]

    def add(self, message_type: MessageType, value: str) -> None:
        """
        Add a categorized message.

        Multi-line strings are split; each non-empty line becomes its own
        entry. Empty or whitespace-only strings are ignored.
        """
        raw = "" if value is None else str(value)
        raw = raw.replace("\r\n", "\n").replace("\r", "\n")
        lines = [ln.strip() for ln in raw.split("\n") if ln.strip()]
        if not lines:
            return
        self._append_lines(message_type, lines)

    def info(self, value: str) -> None:
        self.add(MessageType.INFO, value)

    def warning(self, value: str) -> None:
        self.add(MessageType.WARNING, value)

    @property
    def last_message(self) -> str:
        """Latest message text, mirroring the final entry added."""
        return self._last_message

    def texts(self, message_type: Optional[MessageType] = None) -> List[str]:
        """Return entry texts, optionally filtered to one category."""
        return [
            e.text for e in self.entries
            if message_type is None or e.message_type is message_type
        ]

    def __len__(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        """Clear all messages and reset the log."""
        self.entries = []
        self._last_message = ""
