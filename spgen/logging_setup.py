"""
Logging setup for the command-line shell.

The library modules only create loggers; handlers are installed here,
and only when the shell asks for them.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record: time, level, logger, message and, when
    the record carries one, the exception type and text.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["exception"] = {"type": type(exc).__name__, "message": str(exc)}
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(log_format: str = "text", log_level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger.

    Args:
        log_format: "json" or "text".
        log_level: level name, e.g. "DEBUG". Unknown names fall back to INFO.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(handler)
