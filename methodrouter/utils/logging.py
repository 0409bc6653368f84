"""Loguru helpers for enabling methodrouter log output."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}

_STDERR_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Enable methodrouter logs on stderr and, optionally, a rotating file."""
    level = level.upper()
    stderr_id = _SINK_IDS.pop("stderr", None)
    if stderr_id is not None:
        logger.remove(stderr_id)
    _SINK_IDS["stderr"] = logger.add(sys.stderr, level=level, format=_STDERR_FORMAT)
    if log_file is not None:
        ensure_rotating_log_file(Path(log_file), level=level)
    logger.enable("methodrouter")


def ensure_rotating_log_file(path: Path, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given file path."""
    path = path.expanduser()
    key = str(path)
    if key in _SINK_IDS:
        return path
    path.parent.mkdir(parents=True, exist_ok=True)
    _SINK_IDS[key] = logger.add(
        key,
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return path


def reset_logging() -> None:
    """Remove sinks added by configure_logging and silence the library again."""
    for sink_id in _SINK_IDS.values():
        logger.remove(sink_id)
    _SINK_IDS.clear()
    logger.disable("methodrouter")
