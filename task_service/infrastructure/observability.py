"""Structured Logging: one JSON object per log line, or plain text for local runs.

Invariants:
    - Each JSON line has timestamp (record creation time, UTC), level, logger, message
    - Request-scoped extras are copied only when set on the record
    - setup_logging() owns exactly one root handler, however often it runs
"""

import logging
import json
from datetime import datetime, timezone

# Extras passed by routes, error handlers and the store lifecycle
EXTRA_FIELDS = ("task_id", "error_code", "path", "method", "task_count")
HANDLER_NAME = "task_service"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler, replacing one installed earlier."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
