"""Base model for cidfeed command payloads and persisted state.

Every model inherits from :class:`CidfeedModel` which provides:

* ``alias_generator=to_camel`` so snake_case fields are exchanged with
  the UI (and written to disk) as camelCase keys.
* ``populate_by_name`` so either spelling is accepted on input.
* Frozen instances, so snapshots handed out by the stores cannot be
  mutated behind the store's lock.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CidfeedModel(BaseModel):
    """Base for cidfeed models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys, as returned to the UI."""
        return self.model_dump(mode="json", by_alias=True)
