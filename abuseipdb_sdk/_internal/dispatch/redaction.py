"""Redaction of credentials in debug output."""

from collections.abc import Iterable, Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "key",
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(
    headers: Mapping[str, str] | Iterable[tuple[str, str]],
) -> dict[str, str]:
    """Return a copy of headers with credential values replaced.

    Header names are matched case-insensitively. The input is never mutated.

    Args:
        headers: A mapping or a sequence of (name, value) pairs.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    items = headers.items() if isinstance(headers, Mapping) else headers
    result = {}
    for name, value in items:
        if name.lower() in REDACT_HEADERS:
            result[name] = REDACTED_VALUE
        else:
            result[name] = value
    return result
