from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Attributes passed through ``extra=`` that end up in the JSON line.
CONTEXT_KEYS = ("employee_id", "week_id", "days", "path", "method", "status_code")


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message and the payroll context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({k: getattr(record, k) for k in CONTEXT_KEYS if getattr(record, k, None) is not None})

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
    # request lines come from the payroll controller
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
