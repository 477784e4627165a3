"""Helpers for safe debug logging.

The security state carries caller-supplied identity and delegation blobs.
This module redacts those fields before command payloads and state
snapshots reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "identityjson",
        "identity_json",
        "delegationjson",
        "delegation_json",
    }
)


def redact_for_log(value: Any, *, max_string: int = 256) -> Any:
    """Return a copy of *value* with sensitive blobs masked and long strings cut."""
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS and isinstance(v, str):
                redacted[key] = f"<redacted:{len(v)}ch>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string)
        return redacted

    return value
