"""Logging setup shared by the HTTP service and the CLI."""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

# Set by the request middleware so log lines can be correlated per request.
request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

PACKAGE_LOGGER = "pairsum"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_ctx.get(),
        }
        entry.update(getattr(record, "extra_data", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(
            {k: v for k, v in entry.items() if v is not None}, default=str
        )


def setup_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``pairsum`` logger.

    Safe to call repeatedly; earlier handlers are replaced.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        JSONFormatter() if json_output
        else logging.Formatter("%(asctime)s %(levelname)-8s [%(name)s] %(message)s")
    )
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False
    return package_logger
