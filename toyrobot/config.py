"""
Central configuration for the toy robot simulator: tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("TOYROBOT_TRACE", "0")).lower() in ("1", "true", "yes", "on")

# Table is a fixed 5x5 grid; valid coordinates are 0..GRID_SIZE-1 on both axes
GRID_SIZE: int = 5

# Lines starting with this marker (after leading whitespace) are skipped by the line source
COMMENT_PREFIX: str = "#"

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level_from_env() -> str:
    raw = os.getenv("TOYROBOT_LOG_LEVEL")
    if not raw:
        return "WARNING"
    level = raw.strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


LOG_LEVEL_DEFAULT: str = _log_level_from_env()

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"


def resolve_log_level(name: str) -> int:
    """Map a level name (including TRACE) to its numeric logging level."""
    name = name.strip().upper()
    if name == "TRACE":
        return TRACE
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {name}")
    return getattr(logging, name)
