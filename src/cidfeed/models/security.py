"""Security state models.

The blobs are opaque: they are trimmed and stored verbatim, never parsed.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from cidfeed.models._base import CidfeedModel


def normalize_blob(value: Any) -> Any:
    """Trim a blob; whitespace-only or empty text becomes ``None``.

    Non-string values are passed through for field validation to reject.
    """
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SecurityState(CidfeedModel):
    """Caller-supplied security blobs persisted without validation."""

    identity_json: str | None = None
    delegation_json: str | None = None
    revocation_queue_json: str | None = None
    audit_log_json: str | None = None
    failed_flush_queue_json: str | None = None

    @field_validator(
        "identity_json",
        "delegation_json",
        "revocation_queue_json",
        "audit_log_json",
        "failed_flush_queue_json",
        mode="before",
    )
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        return normalize_blob(value)


class FlushRevocationResult(CidfeedModel):
    """Partition of a revocation batch into flushed and failed ids."""

    flushed_ids: list[str] = Field(default_factory=list)
    failed_ids: list[str] = Field(default_factory=list)
