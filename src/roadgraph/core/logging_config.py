"""
Logging setup for applications embedding Roadgraph.

The package logs through module-level loggers under ``roadgraph``. Searches
attach ``algorithm``, ``nodes_visited`` and ``duration_ms`` to their records,
which the JSON formatter writes out as fields.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from roadgraph.core.config import settings

PACKAGE_LOGGER = "roadgraph"

# Attributes present on every LogRecord; anything else was passed via ``extra``
_STANDARD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _STANDARD_FIELDS:
                data[key] = value

        return json.dumps(data, default=str)


def get_log_level(level_name: str) -> int:
    """
    Convert log level name to logging constant.

    Args:
        level_name: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logging level constant, INFO for unknown names
    """
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the ``roadgraph`` logger.

    Calling it again replaces the handlers installed by the previous call.
    The root logger is left alone.

    Args:
        log_level: Log level name; defaults to ``settings.log_level``
        log_file: Path to a rotating log file (disabled when None)
        json_logs: Whether to use JSON format for file logs
        enable_console: Whether to log to stderr

    Returns:
        The configured package logger
    """
    level = get_log_level(log_level or settings.log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    text_format = logging.Formatter(
        "%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(text_format)
        package_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter() if json_logs else text_format)
        package_logger.addHandler(file_handler)

    package_logger.debug(
        f"Logging initialized: level={logging.getLevelName(level)}, "
        f"json_logs={json_logs}, console={enable_console}, file={log_file is not None}"
    )

    return package_logger
