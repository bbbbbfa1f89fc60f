"""Logging configuration helpers.

Updates:
    v0.1.0 - 2026-10-12 - Structured JSON logging with an optional plain-text format.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, TextIO

_configured = False
_handler: logging.Handler | None = None

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Custom formatter that emits structured JSON log records."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extract_extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    config: dict[str, Any] | None = None, *, stream: TextIO | None = None
) -> None:
    """Configure application-wide logging.

    Args:
        config (dict[str, Any] | None): Logging settings. Supports ``level``
            (default ``WARNING``) and ``format`` (``json`` or ``text``).
        stream (TextIO | None): Destination stream; stderr when omitted.
    """

    global _configured, _handler
    if _configured:
        return

    config = config or {}
    level_name = str(config.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    handler = logging.StreamHandler(stream) if stream else logging.StreamHandler()
    if str(config.get("format", "json")).lower() == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _handler = handler
    _configured = True


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }


def set_runtime_level(level_name: str) -> None:
    """Adjust logging level at runtime.

    Args:
        level_name (str): Desired logging level name (e.g., ``DEBUG``, ``INFO``).

    Raises:
        ValueError: If the level name is not recognized by the logging module.
    """

    if not level_name:
        return
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger().setLevel(level)
    if _handler:
        _handler.setLevel(level)
