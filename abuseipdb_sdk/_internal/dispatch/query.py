"""URL assembly helpers for the request dispatcher."""

import re
from urllib.parse import quote, unquote, unquote_plus, urlencode

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# RFC 3986 pchar, minus unreserved characters which quote never escapes
_PATH_SAFE = ":@!$&'()*+,;="


class QueryParseError(ValueError):
    """Raised when a query string is not valid URL-query syntax."""


def parse_query(query: str) -> list[tuple[str, str]]:
    """Parse a raw query string into decoded (key, value) pairs.

    Pairs are separated by "&"; empty segments are skipped and a segment
    without "=" yields an empty value. "+" decodes to a space.

    Args:
        query: Raw query string, e.g. "ipAddress=1.2.3.4&maxAgeInDays=30".

    Returns:
        Decoded pairs in their original order.

    Raises:
        QueryParseError: On a ";" separator, an invalid percent-escape, or
            escapes that do not decode to UTF-8.
    """
    pairs: list[tuple[str, str]] = []
    for segment in query.split("&"):
        if not segment:
            continue
        if ";" in segment:
            raise QueryParseError("invalid semicolon separator in query")
        key, _, value = segment.partition("=")
        pairs.append((_unescape(key), _unescape(value)))
    return pairs


def encode_query(pairs: list[tuple[str, str]]) -> str:
    """Serialize pairs into canonical percent-encoded form, sorted by key."""
    return urlencode(sorted(pairs, key=lambda pair: pair[0]))


def join_url(root: str, path: str) -> str:
    """Join a relative path onto the API root with single "/" separators.

    Each segment is percent-escaped, so "?" and "#" stay part of the path.
    Segments that are already escaped are not escaped twice.
    """
    root = root.rstrip("/")
    path = "/".join(_escape_segment(part) for part in path.split("/") if part)
    if not path:
        return root
    return f"{root}/{path}"


def _unescape(text: str) -> str:
    match = _INVALID_ESCAPE.search(text)
    if match:
        raise QueryParseError(f"invalid URL escape {text[match.start():match.start() + 3]!r}")
    try:
        return unquote_plus(text, errors="strict")
    except UnicodeDecodeError as e:
        raise QueryParseError(f"invalid UTF-8 in URL escape: {e}") from e


def _escape_segment(segment: str) -> str:
    return quote(unquote(segment), safe=_PATH_SAFE)
