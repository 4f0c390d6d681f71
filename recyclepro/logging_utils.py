"""Structured JSON logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_RESERVED_LOG_RECORD_FIELDS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "thread",
    "threadName",
    "taskName",
}


class JsonLogFormatter(logging.Formatter):
    """Render stdlib LogRecord objects as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        data = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_FIELDS and not key.startswith("_")
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        payload = {
            "timestamp": timestamp,
            "level": record.levelname.lower(),
            "module": record.name,
            "event": record.getMessage(),
            "data": data,
        }
        return json.dumps(payload, default=str, separators=(",", ":"))


def configure_logging(level: int | None = None, json_output: bool | None = None) -> None:
    """Configure root logging once. Defaults come from settings."""
    from recyclepro.config import settings

    root = logging.getLogger()
    if getattr(root, "_recyclepro_logging", False):
        return

    handler = logging.StreamHandler()
    if json_output if json_output is not None else settings.LOG_JSON:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root.handlers.clear()
    root.setLevel(level if level is not None else settings.LOG_LEVEL)
    root.addHandler(handler)
    root._recyclepro_logging = True  # type: ignore[attr-defined]


def log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **data) -> None:
    """Emit structured event data under the standard schema."""
    logger.log(level, event, extra=data)


def truncate_text(value: str, max_len: int = 80) -> str:
    """Truncate free text (addresses, WKT) for safe logging."""
    if not value or len(value) <= max_len:
        return value or ""
    return value[:max_len] + "..."
