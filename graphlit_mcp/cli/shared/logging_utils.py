"""Loguru helpers for CLI commands. Stdout belongs to the MCP transport, so logs go to stderr."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".graphlit-mcp" / "logs"

_SINK_IDS: dict[str, int] = {}


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> Path | None:
    """Replace the default sink with a stderr sink; optionally add a rotating file sink."""
    logger.remove()
    _SINK_IDS.clear()
    _SINK_IDS["stderr"] = logger.add(sys.stderr, level=level.upper(), backtrace=False, diagnose=False)
    if log_file is None:
        return None
    return ensure_rotating_log_file(Path(log_file), level=level)


def ensure_rotating_log_file(path: str | Path, level: str = "INFO") -> Path:
    """Ensure a rotating log sink at ``path``; a bare name goes under ``LOG_DIR``."""
    log_path = Path(path).expanduser()
    if not log_path.suffix and len(log_path.parts) == 1:
        log_path = LOG_DIR / f"{log_path.name}.log"
    key = str(log_path)
    if key in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _SINK_IDS[key] = logger.add(
        key,
        level=level.upper(),
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return log_path
