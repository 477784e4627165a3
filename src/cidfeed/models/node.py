"""Simulated private node status models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from cidfeed._constants import MAX_PEER_COUNT, mode_peer_count
from cidfeed.exceptions import UnknownNodeModeError
from cidfeed.models._base import CidfeedModel


class NodeStartMode(StrEnum):
    """Onboarding modes accepted by ``start_private_node_mode``."""

    EASY = "easy"
    PRIVATE = "private"

    @classmethod
    def _missing_(cls, value: object) -> NodeStartMode | None:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @classmethod
    def parse(cls, value: object) -> NodeStartMode:
        """Parse a UI supplied mode, ignoring case and surrounding whitespace.

        Raises :class:`UnknownNodeModeError` for anything else.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownNodeModeError(str(value)) from None

    @property
    def peer_count(self) -> int:
        return mode_peer_count(self.value)


class PrivateNodeStatus(CidfeedModel):
    """Snapshot of the simulated private node.

    Parameters
    ----------
    online : bool
        Whether the node has been started.
    peer_count : int
        Simulated peer counter (unsigned 16-bit).  Not a measurement of
        any live connection.
    """

    online: bool = False
    peer_count: int = Field(default=0, ge=0, le=MAX_PEER_COUNT)
