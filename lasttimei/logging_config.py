"""JSON logging for Lambda/CloudWatch and the local API."""

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Optional

from lasttimei.config import LOG_LEVEL


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "context"):
            log_data["context"] = record.context
        return json.dumps(log_data, default=str)


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Route the root logger to stdout as JSON.

    Args:
        log_level: DEBUG, INFO, WARNING, ... Defaults to LOG_LEVEL env var.
    """
    level = (log_level or LOG_LEVEL).upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": "lasttimei.logging_config.JSONFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        # botocore is chatty at DEBUG
        "loggers": {"botocore": {"level": "WARNING"}, "boto3": {"level": "WARNING"}},
    })
