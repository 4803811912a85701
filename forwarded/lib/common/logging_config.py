"""Logging configuration for forwarded-header extraction.

Loggers:
    forwarded         - service-level messages (startup, configuration)
    forwarded.parser  - dropped Forwarded segments, at DEBUG
    forwarded.web     - request logging and peer-address rewrites
"""

import json
import logging
import sys
from typing import Optional


LOGGER_NAME = "forwarded"
PARSER_LOGGER = f"{LOGGER_NAME}.parser"
WEB_LOGGER = f"{LOGGER_NAME}.web"

# Attributes passed through ``extra=`` by the web layer
FORWARDED_RECORD_FIELDS = (
    "peer",
    "client",
    "forwarded_by",
    "forwarded_for",
    "forwarded_host",
    "forwarded_proto",
)


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including any forwarded fields on the record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in FORWARDED_RECORD_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    log_dropped_segments: bool = False,
) -> logging.Logger:
    """Setup logging configuration.

    Handlers are attached to the ``forwarded`` logger only; the child loggers
    propagate to it.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format
        log_dropped_segments: Report dropped Forwarded segments regardless
            of ``level``

    Returns:
        Configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Handlers stay at NOTSET so a child logger's own level decides
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    parser_logger = logging.getLogger(PARSER_LOGGER)
    parser_logger.setLevel(logging.DEBUG if log_dropped_segments else logging.NOTSET)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
