"""Data models for cidfeed commands and persisted state."""

from cidfeed.models._base import CidfeedModel
from cidfeed.models.node import NodeStartMode, PrivateNodeStatus
from cidfeed.models.security import FlushRevocationResult, SecurityState, normalize_blob

__all__ = [
    "CidfeedModel",
    "FlushRevocationResult",
    "NodeStartMode",
    "PrivateNodeStatus",
    "SecurityState",
    "normalize_blob",
]
