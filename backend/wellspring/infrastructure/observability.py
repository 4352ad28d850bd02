"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (entity, entity_id, admin_id, error_code, category, severity,
      debug_info, path) surfaced when present
    - JSON format in production, human-readable in development
    - Secrets (passwords, hashes, tokens, client secrets) are never passed as extras

Design Decisions:
    - stdlib logging with a small JSONFormatter, no logging library
    - setup_logging is idempotent: apps are built per test and per worker, so
      each call swaps out the handler it installed before instead of stacking another
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "entity", "entity_id", "admin_id", "error_code", "category", "severity",
    "debug_info", "path", "amount",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _AppHandler(logging.StreamHandler):
    """Marker type so repeated setup_logging calls don't stack handlers."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application. Replaces a previous call's handler."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _AppHandler):
            logging.root.removeHandler(existing)
    handler = _AppHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
