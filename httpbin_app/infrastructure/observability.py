"""Structured Logging: one JSON object per line for the fixture service.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Request-scoped extras (path, method, status_code, pacing values, ...) appear
      only when the caller passed them
    - HTTPBIN_LOG_FORMAT=json emits JSON lines, anything else a plain text line

Design Decisions:
    - A logging.Formatter subclass on the stdlib logger: route loggers and the
      lifespan lines share one handler on the root logger
    - Re-running setup_logging replaces its handler, so building several apps
      in one process does not duplicate lines
    - setup_logging runs from each app lifespan
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "path", "method", "error_code", "status_code",
    "seconds", "numbytes", "lines", "encoding",
)


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

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


_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach one stream handler to the root logger at `level`."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, "_httpbin", False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._httpbin = True
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
