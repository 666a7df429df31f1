"""Redaction of credentials in debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_HEADERS: frozenset[str] = frozenset({
    "x-hasura-admin-secret",
    "x-hasura-access-key",
    "authorization",
    "cookie",
    "set-cookie",
})

REDACT_KEYS: frozenset[str] = frozenset({
    "admin_secret",
    "access_key",
    "password",
    "secret",
    "token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of `headers` with credential values replaced.

    Header names are matched case-insensitively. The input is never mutated.
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_HEADERS else value
        for name, value in headers.items()
    }


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON-like value.

    Creates a deep copy of dicts and lists - the original is never mutated.
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
