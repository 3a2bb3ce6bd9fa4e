"""
Structured logging for recordgate.

JSON output through python-json-logger by default, plain text for local
development. Level and format come from the LOG_LEVEL and LOG_FORMAT
settings in recordgate.config.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from recordgate.config import config

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that adds timestamp, level, logger and module fields."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def setup_logger(
    name: str = "recordgate",
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text"

    Returns:
        Configured logger instance
    """
    log_level = LOG_LEVELS.get((level or config.log_level).upper(), logging.INFO)
    format_type = format_type or config.log_format

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if format_type == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Module loggers ("recordgate.mutation.memory", ...) stop here, not at root
    logger.propagate = False

    return logger


def get_logger(name: str = "recordgate") -> logging.Logger:
    """
    Get a logger instance.

    Module loggers are children of the "recordgate" logger, which is
    configured on first use.
    """
    root = logging.getLogger("recordgate")
    if not root.handlers:
        setup_logger("recordgate")
    return logging.getLogger(name)
