from __future__ import annotations

import json
import time
import uuid
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from engine.error_handler import get_logger

_log = get_logger("telemetry")


def _timestamp() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


@dataclass
class TelemetryLogger:
    """
    JSON-lines event stream for offline analysis of AI decisions.

    Every row carries the wall time ("t", "ts"), seconds since init
    ("dt"), a per-run session id and the event name. Nothing is written
    until init() gives the logger a path.
    """
    path: Optional[Path] = None
    enabled: bool = True
    flush_each_write: bool = False
    sample_every_n_turns: int = 1   # keep 1 enemy_turn event out of every N
    session: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    counts: Counter = field(default_factory=Counter)
    _turns_seen: int = 0
    _opened_at: float = field(default_factory=time.time)

    @property
    def events_written(self) -> int:
        return sum(self.counts.values())

    def init(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        self.path = path
        self.enabled = True
        self._opened_at = time.time()
        self.log("telemetry_init", file=str(path))

    def close(self) -> None:
        """Write a per-event summary row and stop logging."""
        if self.path is not None and self.counts:
            self.log("telemetry_summary", counts=dict(self.counts))
        self.path = None

    def log(self, event: str, **fields: Any) -> None:
        if self.path is None or not self.enabled:
            return

        now = time.time()
        row: Dict[str, Any] = {
            "t": now,
            "ts": _timestamp(),
            "dt": round(now - self._opened_at, 4),
            "session": self.session,
            "event": event,
        }
        row.update(fields)

        try:
            with self.path.open("a", encoding="utf-8") as out:
                out.write(json.dumps(row, ensure_ascii=False) + "\n")
                if self.flush_each_write:
                    out.flush()
        except OSError as exc:
            _log.warning("Telemetry disabled after write failure: %s", exc)
            self.enabled = False
            return
        self.counts[event] += 1

    def tick_turn(self) -> int:
        self._turns_seen += 1
        return self._turns_seen

    def should_log_turn(self) -> bool:
        if self.sample_every_n_turns <= 0:
            return False
        return self._turns_seen % self.sample_every_n_turns == 0


# shared instance used by the AI modules
telemetry = TelemetryLogger()
