"""Structured logging setup for the card generator."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "streakcard"
_HANDLER_MARKER = "_streakcard_handler"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_logging(
    json_output: bool = False,
    level: str | int = "INFO",
    log_file: Path | None = None,
    keep_files: int = 7,
) -> logging.Logger:
    """Attach console (and optional rotating file) handlers to the ``streakcard`` logger.

    Calling it again replaces the handlers it installed earlier, so a CLI can
    reconfigure after parsing its arguments.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level if isinstance(level, int) else level.upper())
    logger.propagate = False

    stream_handler = logging.StreamHandler(sys.stderr)
    if json_output:
        stream_handler.setFormatter(JsonFormatter())
    else:
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(_tag(stream_handler))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            backupCount=max(2, keep_files),
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(_tag(file_handler))

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)
