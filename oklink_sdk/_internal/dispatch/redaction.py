"""Redaction of credentials in debug output."""

from collections.abc import Mapping

from oklink_sdk._internal.http import ACCESS_KEY_HEADER

REDACT_HEADERS: frozenset[str] = frozenset({
    ACCESS_KEY_HEADER.lower(),
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of request headers with credential values replaced.

    Header names are matched case-insensitively. The original mapping is
    never mutated.

    Args:
        headers: The request headers to redact.

    Returns:
        A new dictionary with credential values replaced by "[REDACTED]".
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_HEADERS else value
        for name, value in headers.items()
    }
