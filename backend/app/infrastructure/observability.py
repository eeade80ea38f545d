"""Structured Logging — JSON log lines for request and fixture events.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Domain extras (resource, record_id, error_code, path, count) appear only when set
    - setup_logging is idempotent: one "responserift" handler on the root logger

Design Decisions:
    - Own JSONFormatter on stdlib logging: no extra dependency for a mock server
    - Text format for local runs (LOG_FORMAT=text)
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "responserift"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DOMAIN_EXTRAS = ("resource", "record_id", "error_code", "path", "count")


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key) for key in DOMAIN_EXTRAS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the app handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_build_handler(fmt))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
