#!/usr/bin/env python3
"""
Purpose:
    Configures the `modelschema` package logger from a level name, with an
    optional JSON line formatter.
"""

import json
import logging
import os
from datetime import datetime
from typing import Optional, Union

PACKAGE_LOGGER: str = "modelschema"

_TEXT_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Formatter that emits one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data)


def parse_level(level: Union[int, str, None]) -> int:
    """
    Map a level name ("debug", "INFO") or number to a logging level.
    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = logging.INFO, json_format: Optional[bool] = None) -> logging.Logger:
    """
    Configure the package logger.

    Replaces handlers previously installed by this function, so repeated
    calls do not duplicate output.

    Args:
        level: Logging level (name or number, default INFO)
        json_format: Whether to use JSON formatting.
                     If None, checks the MODELSCHEMA_JSON_LOGS env var.
    """
    if json_format is None:
        json_format = os.environ.get("MODELSCHEMA_JSON_LOGS", "0").lower() in ("1", "true", "yes")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(parse_level(level))

    for h in list(logger.handlers):
        if getattr(h, "_modelschema_handler", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._modelschema_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
