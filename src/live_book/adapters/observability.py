"""Runtime logging configuration with bounded retention."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

_CONFIGURED = False


def _int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def configure_runtime_logging(level_override: str | None = None) -> None:
    """Configure console + rotating file logs once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (
        level_override or os.environ.get("LIVE_BOOK_LOG_LEVEL", "WARNING")
    ).strip().upper() or "WARNING"
    level = getattr(logging, level_name, logging.WARNING)
    log_path = Path(
        os.environ.get("LIVE_BOOK_LOG_PATH", "work/logs/live_book.log").strip()
        or "work/logs/live_book.log"
    )
    max_bytes = _int_env(
        "LIVE_BOOK_LOG_MAX_BYTES", 1024 * 1024, minimum=64 * 1024, maximum=50 * 1024 * 1024
    )
    backup_count = _int_env("LIVE_BOOK_LOG_BACKUP_COUNT", 5, minimum=1, maximum=60)

    log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    # stderr only carries warnings and above; passages own stdout.
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(max(level, logging.WARNING))

    file_handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(stream_handler)
    root.addHandler(file_handler)

    _CONFIGURED = True
