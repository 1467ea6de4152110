# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging for the converter and its command-line front end."""

import json
import logging
import sys
from typing import Any

LOGGER_NAME = "checkstyle_sarif"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    """Single-line human readable records."""

    default_fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def __init__(self, fmt: str | None = None) -> None:
        super().__init__(fmt or self.default_fmt)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """Route the package loggers to stderr.

    Output is kept off stdout because SARIF may be written there.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
