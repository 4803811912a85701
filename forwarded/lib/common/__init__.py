"""Common utilities for forwarded-header extraction."""

from .headers import (
    HEADER_FORWARDED,
    HEADER_X_FORWARDED_BY,
    HEADER_X_FORWARDED_FOR,
    HEADER_X_FORWARDED_HOST,
    HEADER_X_FORWARDED_PROTO,
    get_header,
    first_list_entry,
    parse_header_line,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "HEADER_FORWARDED",
    "HEADER_X_FORWARDED_BY",
    "HEADER_X_FORWARDED_FOR",
    "HEADER_X_FORWARDED_HOST",
    "HEADER_X_FORWARDED_PROTO",
    "get_header",
    "first_list_entry",
    "parse_header_line",
    "setup_logging",
    "get_logger",
]
