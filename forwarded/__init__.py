"""Client-origin metadata from Forwarded and X-Forwarded-* request headers.

Usage:
    import forwarded

    forwarded.forwarded_for(request.headers)   # "192.0.2.43"

    extractor = forwarded.OrderedExtractor(
        forwarded.LegacyExtractor(),
        forwarded.StandardExtractor(),
    )
    extractor.forwarded_host(request.headers)
"""

from .lib import (
    ParsedForwarded,
    parse_forwarded,
    parse_forwarded_value,
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

__version__ = "1.0.0"

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
