"""Structured logging configuration for the item specification service."""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

# `extra=` keys copied into the JSON line when present on a record
_EXTRA_FIELDS = (
    "request_id",
    "http_method",
    "http_path",
    "http_status",
    "duration_ms",
    "attributes",
)


class JSONFormatter(logging.Formatter):
    """JSON structured log formatter for production."""
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        return json.dumps(log_entry, default=str)


def _level(name: Optional[str], fallback: int) -> int:
    if not name:
        return fallback
    return getattr(logging, name.upper(), fallback)


def setup_logging(
    level: str = "INFO",
    json_output: bool = True,
    engine_level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Install a single stdout handler on the root logger.

    ``engine_level`` overrides the level of the ``itemspec`` loggers only
    (e.g. DEBUG to trace which resolution stage produced an estimate).
    Returns the installed handler.
    """
    root = logging.getLogger()
    root_level = _level(level, logging.INFO)
    root.setLevel(root_level)

    handler = logging.StreamHandler(stream or sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
        ))
    root.handlers = [handler]

    logging.getLogger("itemspec").setLevel(_level(engine_level, logging.NOTSET))

    # Access lines come from RequestTimingMiddleware
    for name in ["uvicorn.access", "httpcore", "httpx"]:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
