"""Structured Logging — JSON log lines carrying registration context.

Invariants:
    - Every line has timestamp, level, logger name and message
    - Registration context (login, user_id, error_code, path) added only when set
    - At most one signup handler on the root logger, however often setup runs

Design Decisions:
    - Handler found again by name: a second lifespan (tests, reload) swaps it
      instead of duplicating every line
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "signup"
CONTEXT_FIELDS = ("login", "user_id", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, fields: tuple[str, ...] = CONTEXT_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key)
            for key in self.fields
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the signup handler on the root logger."""
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
