# backend/utils/logging_config.py

import json
import logging
from typing import Optional

from utils import config


class JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("method", "path", "status", "records"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Install a single stream handler on the root logger.
    Safe to call more than once; the last call wins.
    """
    handler = logging.StreamHandler()
    if (fmt or config.LOG_FORMAT) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    logging.basicConfig(
        handlers=[handler],
        level=(level or config.LOG_LEVEL),
        force=True,
    )
