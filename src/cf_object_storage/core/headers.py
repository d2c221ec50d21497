"""
Container header parsing
Shorthand expansion and header-name:header-value token handling
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .errors import HeaderParseError

# Shortcuts accepted in place of full header tokens
SHORT_HEADERS: Mapping[str, str] = MappingProxyType({
    "-gr": "X-Container-Read:.r:*",
    "-rm-gr": "X-Remove-Container-Read:1",
})

# Headers a container HEAD returns that describe the response or the
# container statistics; everything else is carried over on rename
RESPONSE_ONLY_HEADERS = frozenset({
    "date",
    "content-length",
    "content-type",
    "accept-ranges",
    "last-modified",
    "etag",
    "connection",
    "x-timestamp",
    "x-put-timestamp",
    "x-trans-id",
    "x-openstack-request-id",
    "x-container-object-count",
    "x-container-bytes-used",
})


def expand_shorthand(token: str) -> str:
    """Return the full header string for a shorthand token, or the token itself"""
    return SHORT_HEADERS.get(token, token)


def parse_header(token: str) -> Tuple[str, str]:
    """
    Split a header token into (name, value)

    Shorthands are expanded first. Only the first colon separates name from
    value, so "X-Container-Read:.r:*" keeps ".r:*" intact.
    """
    header = expand_shorthand(token)
    name, sep, value = header.partition(":")
    if not sep:
        raise HeaderParseError(token)
    return name, value


def parse_headers(tokens: Iterable[str]) -> Dict[str, str]:
    """Parse all tokens into one mapping, last duplicate wins"""
    headers = {}
    for token in tokens:
        name, value = parse_header(token)
        headers[name] = value
    return headers


def format_header(name: str, value: str) -> str:
    """Serialize a header back into a name:value token"""
    return f"{name}:{value}"


def is_settable(name: str) -> bool:
    """Check if a header can be sent when creating a container"""
    return name.lower() not in RESPONSE_ONLY_HEADERS


def carried_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Drop response-only headers before carrying them over to a new container"""
    return {name: value for name, value in headers.items() if is_settable(name)}
