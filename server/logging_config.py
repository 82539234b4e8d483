"""
Logging configuration for the GitHub Guardian server.

- Production (ENVIRONMENT=production): one JSON object per line
- Development (default): Human-readable format for terminal

Every record carries the id of the HTTP request it was logged under (set by
the request middleware in main.py), so one analysis can be followed from the
form post through the Gemini call.
"""

import logging
import json
import os
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST = "-"

request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST)


def new_request_id(incoming: str | None = None) -> str:
    """Reuse a caller-supplied id when it is short and printable."""
    if incoming and len(incoming) <= 64 and incoming.isprintable():
        return incoming
    return uuid.uuid4().hex[:12]


class RequestContextFilter(logging.Filter):
    """Stamps each record with the current request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """JSON log formatter for log collectors that parse stdout."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", None) or request_id_var.get(),
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(environment: str | None = None, log_level: str | None = None) -> None:
    """Configure the root logger from arguments or ENVIRONMENT / LOG_LEVEL."""
    environment = (environment or os.getenv("ENVIRONMENT", "development")).lower()
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Remove any existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())

    if environment == "production":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        ))

    root_logger.addHandler(handler)

    # Third-party loggers: access lines duplicate ours, SDK debug is noisy
    for name in ("uvicorn.access", "httpx", "google_genai"):
        logging.getLogger(name).setLevel(logging.WARNING)
