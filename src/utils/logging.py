"""Structured JSON logging configuration.

Nothing in this package configures logging on import. An application that
embeds these modules calls setup_structured_logging() once at startup.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Any

DEFAULT_LOG_LEVEL = 'INFO'


class JSONFormatter(logging.Formatter):
    """Render each log record as a single JSON object."""

    # LogRecord attributes that are not user-supplied extra fields
    _RESERVED = set(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("...", extra={"email": ...}) sets record.email
        for key, value in record.__dict__.items():
            if key not in self._RESERVED and not callable(value):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_structured_logging(level: str | None = None):
    """Install JSONFormatter on the root logger.

    The level comes from ``level``, then LOG_LEVEL, then INFO.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel((level or os.getenv('LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper())
    root_logger.handlers = [handler]
