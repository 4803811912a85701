"""Header lookup utilities for forwarded-header extraction."""

from typing import Any, Mapping


# Header names consumed by the extractors
HEADER_FORWARDED = "Forwarded"
HEADER_X_FORWARDED_BY = "X-Forwarded-By"
HEADER_X_FORWARDED_FOR = "X-Forwarded-For"
HEADER_X_FORWARDED_HOST = "X-Forwarded-Host"
HEADER_X_FORWARDED_PROTO = "X-Forwarded-Proto"


def get_header(headers: Mapping[str, Any], name: str) -> str:
    """Get the first value of a header, case-insensitively.

    Accepts plain dicts (``{"X-Forwarded-For": "1.2.3.4"}``), multi-valued
    dicts (``{"X-Forwarded-For": ["1.2.3.4", "5.6.7.8"]}``) and starlette
    ``Headers``. When a header appears on several lines only the first line
    is returned.

    Args:
        headers: Request headers mapping (may be None)
        name: Header name to look up

    Returns:
        Header value, or empty string if not present
    """
    if not headers:
        return ""

    key = name.lower()
    for k, v in headers.items():
        if k.lower() != key:
            continue
        if isinstance(v, (list, tuple)):
            return v[0] if v else ""
        return v or ""
    return ""


def first_list_entry(value: str) -> str:
    """Return the first entry of a comma-separated header value, trimmed.

    Args:
        value: Raw header value (e.g. "1.1.1.1, 2.2.2.2")

    Returns:
        First entry with surrounding whitespace removed
    """
    if not value:
        return ""
    return value.split(",")[0].strip()


def parse_header_line(line: str) -> tuple:
    """Split a raw "Name: value" header line.

    Args:
        line: Header line as typed on a command line

    Returns:
        Tuple of (name, value)

    Raises:
        ValueError: If the line has no colon or an empty name
    """
    name, sep, value = line.partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Invalid header line: {line!r} (expected 'Name: value')")
    return name, value.strip()
