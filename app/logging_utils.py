"""
Structured logging helpers for aggregation workflows.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON.
    """

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))


def configure_logging() -> None:
    """
    Configure root logging once from LOG_LEVEL, teeing to LOG_FILE when set.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = os.getenv("LOG_FILE", "").strip()
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=_LOG_FORMAT,
        handlers=handlers,
    )
