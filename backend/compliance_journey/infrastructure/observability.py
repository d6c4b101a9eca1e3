"""Structured Logging — one JSON object per line for catalog and API events.

Invariants:
    - Every line carries timestamp (the record's creation time, UTC), level, logger, message
    - Journey context passed via `extra=` (tool, persona, phase, error code, request
      path, catalog size) is copied to top-level keys only when set
    - setup_logging() is idempotent: calling it again swaps the handler, never stacks one

Design Decisions:
    - stdlib logging + json: the loader and the API only need flat key/value context
    - fmt="text" for local runs and tests (JOURNEY_LOG_FORMAT)
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "tool_id", "persona_id", "phase_id", "error_code", "path", "tool_count",
)

_HANDLER_NAME = "compliance_journey"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key]) for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app's root handler (replacing a previous one) and set the level."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
