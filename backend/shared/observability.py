"""
Logging setup for the SurveyWallet backend.

JSON output for production, human-readable text for development.
Called once on startup from the application lifespan.
"""

import json
import logging
from datetime import datetime, timezone

# Extra record attributes surfaced in JSON output when present
_EXTRA_FIELDS = ("error_code", "path", "user_email", "survey_id", "collection")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger. Safe to call more than once."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_surveywallet", False):
            root.removeHandler(existing)
    handler._surveywallet = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
