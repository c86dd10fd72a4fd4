"""
Logging setup and error types for the enemy AI.

- configure_logging(): the "dungeon_ai" package logger, writing a dated
  file under logs/ plus console output for warnings and up
- get_logger(): per-module child loggers ("dungeon_ai.ai.pathfinding", ...)
- GameError / ConfigError / ValidationError: raised only at the edges
  (config files, map strings, registry lookups). The turn loop itself
  never raises; a failed decision is logged and the enemy does nothing.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

LOGGER_NAME = "dungeon_ai"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)


def configure_logging(
    log_dir: Optional[Path] = LOG_DIR,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    (Re)install the package handlers.

    log_dir=None skips the file log. Calling again replaces the handlers
    instead of stacking duplicates.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"ai_{datetime.now():%Y%m%d}.log"
        to_file = logging.FileHandler(log_file, encoding="utf-8")
        to_file.setLevel(logging.DEBUG)
        to_file.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(to_file)

    to_console = logging.StreamHandler()
    to_console.setLevel(console_level)
    to_console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(to_console)
    return logger


if not logger.handlers:
    configure_logging()


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. get_logger("ai.pathfinding")."""
    return logger.getChild(name)


class GameError(Exception):
    """Base exception; user_message is safe to show to a player."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ConfigError(GameError):
    """Bad AI configuration (file contents, tier tables, tunables)."""


class ValidationError(GameError):
    """Malformed input data: ASCII maps, unknown enemy types."""


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an exception with where it happened.

    Args:
        error: The exception that occurred
        context: Operation name, e.g. "load_config" or "parse_map"
    """
    logger.error(
        "Error in %s: %s: %s", context or "unknown", type(error).__name__, error,
        exc_info=error,
    )
