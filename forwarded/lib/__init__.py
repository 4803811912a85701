"""Core extraction logic for forwarded headers."""

from .parser import ParsedForwarded, parse_forwarded, parse_forwarded_value
from .extractors import (
    Field,
    Extractor,
    LegacyExtractor,
    StandardExtractor,
    OrderedExtractor,
    DEFAULT_EXTRACTOR,
    build_extractor,
    get,
    forwarded_by,
    forwarded_for,
    forwarded_host,
    forwarded_proto,
)

__all__ = [
    "ParsedForwarded",
    "parse_forwarded",
    "parse_forwarded_value",
    "Field",
    "Extractor",
    "LegacyExtractor",
    "StandardExtractor",
    "OrderedExtractor",
    "DEFAULT_EXTRACTOR",
    "build_extractor",
    "get",
    "forwarded_by",
    "forwarded_for",
    "forwarded_host",
    "forwarded_proto",
]
