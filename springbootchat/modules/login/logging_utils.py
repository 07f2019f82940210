"""
springbootchat/modules/login/logging_utils.py

Purpose
-------
Append-only JSON-lines logging for the login flow.

Public API
----------
- get_logger(file_path=None, level=logging.INFO) -> logging.Logger
- log_event(logger, op, phase, message, extra: dict = {}, level=logging.INFO)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from ...config import LOGIN_LOG_FILE

__all__ = ["get_logger", "log_event"]

_LOGGER_NAME = "springbootchat.login"


def _ensure_log_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
        return True
    except OSError:
        return False


def get_logger(file_path: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Return a configured logger that writes JSON-lines to logs/login.log by default.
    Reuses the same logger (no duplicate handlers) across calls.

    Args:
        file_path: Optional custom path to the log file.
        level: Logging level (default INFO).
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        return logger

    # Mirror to stderr at WARNING+
    sh = logging.StreamHandler()
    sh.setLevel(logging.WARNING)
    sh.setFormatter(_JsonLineFormatter())
    logger.addHandler(sh)

    log_file = Path(file_path) if file_path else LOGIN_LOG_FILE
    if not _ensure_log_dir(log_file.parent):
        # No writable log dir: stderr only
        return logger

    fh = logging.FileHandler(str(log_file), mode="a", encoding="utf-8", delay=True)
    fh.setLevel(level)
    fh.setFormatter(_JsonLineFormatter())
    logger.addHandler(fh)
    return logger


class _JsonLineFormatter(logging.Formatter):
    """
    Minimal JSON-lines formatter:
      {"ts":"2025-09-16T12:00:01.123Z","level":"INFO","name":"springbootchat.login","msg":"...","extra":{...}}
    """
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(record.msecs):03d}Z",
            "level": record.levelname,
            "name": record.name,
            "thread": record.threadName,
            "msg": record.getMessage(),
        }
        if hasattr(record, "extra_payload") and isinstance(record.extra_payload, dict):
            payload["extra"] = record.extra_payload
        return json.dumps(payload, ensure_ascii=False, default=str)


def log_event(
    logger: logging.Logger,
    op: str,
    phase: str,
    message: str,
    extra: Dict[str, object] | None = None,
    level: int = logging.INFO,
) -> None:
    """
    Log a structured event line.

    Args:
        logger: Any logger; the JSON formatter from get_logger() renders `extra`.
        op: Operation name, e.g. "login".
        phase: Phase within the operation: "validate", "skip", "dispatch",
               "background", "complete", "cancel".
        message: Human-readable short message.
        extra: Optional additional key/values (nickname, host, result...).
        level: Logging level (default INFO).
    """
    extra_payload = {"op": op, "phase": phase}
    if extra:
        # required keys win
        for k, v in extra.items():
            if k not in extra_payload:
                extra_payload[k] = v

    logger.log(level, message, extra={"extra_payload": extra_payload})
