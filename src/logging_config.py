"""Process-wide logging setup: JSON lines on stdout for the platform log collector."""

import json
import logging
import logging.config
from datetime import UTC, datetime
from typing import Any


# Request metadata attached via ``extra=``; absent on most records.
EXTRA_FIELDS: tuple[str, ...] = (
    "method",
    "path",
    "status",
    "duration_ms",
    "request_id",
    "client",
)


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Known ``extra`` attributes are copied to top-level keys when present, so
    the formatter never raises on records that lack them (third-party logs).
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger (and uvicorn's) through :class:`JsonFormatter`."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "src.logging_config.JsonFormatter"},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"level": level.upper(), "handlers": ["default"]},
            "loggers": {
                # Access lines come from AccessLogMiddleware instead.
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )
