"""Tolerant parser for the RFC 7239 ``Forwarded`` header.

The parser never raises on string input. Anything it does not understand is
dropped and the corresponding field reads as empty.

Known simplifications:

* ``;`` and ``,`` are treated as the same delimiter, so the distinction
  between "next hop" and "next attribute of the same hop" is lost. All ``for``
  and ``by`` values end up in one ordered list each.
* ``host`` and ``proto`` keep the last value seen if a key repeats, even
  when that value is empty.
* Quoted strings are not tokenized, so a ``;`` or ``,`` inside quotes still
  splits the segment.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from .common.headers import HEADER_FORWARDED, get_header
from .common.logging_config import PARSER_LOGGER, get_logger


logger = get_logger(PARSER_LOGGER)

SEGMENT_DELIMITERS = re.compile(r"[;,]")


@dataclass
class ParsedForwarded:
    """Fields recovered from a single ``Forwarded`` header value."""

    fors: List[str] = field(default_factory=list)
    bys: List[str] = field(default_factory=list)
    host: str = ""
    proto: str = ""

    @property
    def first_for(self) -> str:
        return self.fors[0] if self.fors else ""

    @property
    def first_by(self) -> str:
        return self.bys[0] if self.bys else ""


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1].strip()
    return value


def parse_forwarded_value(value: str, lowercase_values: bool = True) -> ParsedForwarded:
    """Parse a raw ``Forwarded`` header value.

    Args:
        value: Header value, e.g. "for=192.0.2.43;proto=http"
        lowercase_values: Lower-case values as well as keys

    Returns:
        ParsedForwarded (all fields empty if nothing was recognized)
    """
    parsed = ParsedForwarded()
    if not value:
        return parsed

    if lowercase_values:
        value = value.lower()

    for segment in SEGMENT_DELIMITERS.split(value):
        parts = segment.split("=")
        if len(parts) != 2:
            if segment.strip():
                logger.debug(f"Dropping malformed Forwarded segment: {segment!r}")
            continue

        key = parts[0].strip().lower()
        val = _unquote(parts[1].strip())

        # Empty values still count: "for=" is an empty first hop, "proto=" clears proto
        if key == "for":
            parsed.fors.append(val)
        elif key == "by":
            parsed.bys.append(val)
        elif key == "host":
            parsed.host = val
        elif key == "proto":
            parsed.proto = val
        else:
            logger.debug(f"Dropping unrecognized Forwarded segment: {segment!r}")

    return parsed


def parse_forwarded(headers: Mapping[str, Any], lowercase_values: bool = True) -> ParsedForwarded:
    """Parse the ``Forwarded`` header out of a header collection.

    Args:
        headers: Request headers (case-insensitive lookup)
        lowercase_values: Lower-case values as well as keys

    Returns:
        ParsedForwarded for the first ``Forwarded`` header line
    """
    return parse_forwarded_value(get_header(headers, HEADER_FORWARDED), lowercase_values)
