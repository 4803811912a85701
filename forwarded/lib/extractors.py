"""
Forwarding Extractors

Defines the Extractor contract and its implementations: the legacy
``X-Forwarded-*`` reader, the RFC 7239 ``Forwarded`` reader, and an ordered
composition that falls back from one extractor to the next per field.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Union

from .common.headers import (
    HEADER_X_FORWARDED_BY,
    HEADER_X_FORWARDED_FOR,
    HEADER_X_FORWARDED_HOST,
    HEADER_X_FORWARDED_PROTO,
    get_header,
    first_list_entry,
)
from .parser import parse_forwarded


Headers = Mapping[str, Any]


class Field(str, Enum):
    """Forwarding fields an extractor can report"""
    BY = "by"
    FOR = "for"
    HOST = "host"
    PROTO = "proto"


class Extractor(ABC):
    """
    Abstract base class for forwarding extractors.

    An extractor is stateless: given a header collection it returns a string
    for each Field, or an empty string when it has no signal for that field.
    """

    @abstractmethod
    def get(self, field: Union[Field, str], headers: Headers) -> str:
        """
        Extract one field from the headers.

        Args:
            field: Field to extract (Field member or its string value)
            headers: Request headers

        Returns:
            Extracted value, or empty string if not determinable
        """
        pass

    def forwarded_by(self, headers: Headers) -> str:
        return self.get(Field.BY, headers)

    def forwarded_for(self, headers: Headers) -> str:
        return self.get(Field.FOR, headers)

    def forwarded_host(self, headers: Headers) -> str:
        return self.get(Field.HOST, headers)

    def forwarded_proto(self, headers: Headers) -> str:
        return self.get(Field.PROTO, headers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class LegacyExtractor(Extractor):
    """
    Reads the legacy X-Forwarded-By/For/Host/Proto headers.

    By and For may carry a comma-separated chain; the first (client-most)
    entry is returned. Host and Proto are returned trimmed, without splitting.
    """

    HEADER_NAMES = {
        Field.BY: HEADER_X_FORWARDED_BY,
        Field.FOR: HEADER_X_FORWARDED_FOR,
        Field.HOST: HEADER_X_FORWARDED_HOST,
        Field.PROTO: HEADER_X_FORWARDED_PROTO,
    }

    def get(self, field: Union[Field, str], headers: Headers) -> str:
        field = Field(field)
        value = get_header(headers, self.HEADER_NAMES[field])
        if not value:
            return ""

        if field in (Field.BY, Field.FOR):
            return first_list_entry(value)
        return value.strip()


class StandardExtractor(Extractor):
    """
    Reads the RFC 7239 ``Forwarded`` header.

    The header is parsed on every call; nothing is cached between calls.
    """

    def __init__(self, lowercase_values: bool = True):
        """
        Initialize the extractor.

        Args:
            lowercase_values: Lower-case extracted values (keys are always
                matched case-insensitively)
        """
        self.lowercase_values = lowercase_values

    def get(self, field: Union[Field, str], headers: Headers) -> str:
        field = Field(field)
        parsed = parse_forwarded(headers, lowercase_values=self.lowercase_values)

        if field == Field.FOR:
            return parsed.first_for
        if field == Field.BY:
            return parsed.first_by
        if field == Field.HOST:
            return parsed.host
        return parsed.proto

    def __repr__(self) -> str:
        return f"StandardExtractor(lowercase_values={self.lowercase_values})"


class OrderedExtractor(Extractor):
    """
    Tries extractors in priority order, independently for each field.

    The first non-empty result wins, so a composed result may take For from
    one extractor and Host from another. An OrderedExtractor is itself an
    Extractor and can be nested.
    """

    def __init__(self, *extractors: Extractor):
        self._extractors: Tuple[Extractor, ...] = tuple(extractors)

    @property
    def extractors(self) -> Tuple[Extractor, ...]:
        return self._extractors

    def get(self, field: Union[Field, str], headers: Headers) -> str:
        field = Field(field)
        for extractor in self._extractors:
            value = extractor.get(field, headers)
            if value:
                return value
        return ""

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self._extractors)
        return f"OrderedExtractor({inner})"


EXTRACTOR_NAMES = ("standard", "legacy")


def build_extractor(names: Union[str, Iterable[str]], lowercase_values: bool = True) -> Extractor:
    """
    Build an extractor from an ordered list of strategy names.

    Args:
        names: Strategy names ("standard", "legacy") in priority order, either
            an iterable or a comma-separated string
        lowercase_values: Passed to the standard extractor

    Returns:
        OrderedExtractor over the named extractors

    Raises:
        ValueError: If a name is not a known strategy
    """
    if isinstance(names, str):
        names = names.split(",")

    extractors = []
    for name in names:
        name = name.strip().lower()
        if not name:
            continue
        if name == "standard":
            extractors.append(StandardExtractor(lowercase_values=lowercase_values))
        elif name == "legacy":
            extractors.append(LegacyExtractor())
        else:
            raise ValueError(
                f"Unknown extraction strategy '{name}' "
                f"(expected one of: {', '.join(EXTRACTOR_NAMES)})"
            )

    return OrderedExtractor(*extractors)


# Built once at import and never mutated
DEFAULT_EXTRACTOR: Extractor = OrderedExtractor(StandardExtractor(), LegacyExtractor())


def get(field: Union[Field, str], headers: Headers) -> str:
    """Extract a field using the default policy (Forwarded, then X-Forwarded-*)."""
    return DEFAULT_EXTRACTOR.get(field, headers)


def forwarded_by(headers: Headers) -> str:
    return DEFAULT_EXTRACTOR.get(Field.BY, headers)


def forwarded_for(headers: Headers) -> str:
    return DEFAULT_EXTRACTOR.get(Field.FOR, headers)


def forwarded_host(headers: Headers) -> str:
    return DEFAULT_EXTRACTOR.get(Field.HOST, headers)


def forwarded_proto(headers: Headers) -> str:
    return DEFAULT_EXTRACTOR.get(Field.PROTO, headers)
