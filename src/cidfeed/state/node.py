"""Simulated private node store."""

from __future__ import annotations

import logging
from pathlib import Path

from cidfeed._constants import DEFAULT_PEER_COUNT, MAX_PEER_COUNT
from cidfeed.models.node import NodeStartMode, PrivateNodeStatus
from cidfeed.state.guard import StateGuard
from cidfeed.state.mirror import JsonFileMirror

_logger = logging.getLogger(__name__)


class PrivateNodeStore:
    """In-memory private node status mirrored to disk.

    Every operation returns the snapshot current after it ran.  Snapshots
    are frozen models and safe to hand to callers.
    """

    def __init__(self, mirror: JsonFileMirror[PrivateNodeStatus] | None = None) -> None:
        self._mirror = mirror if mirror is not None else JsonFileMirror(None, PrivateNodeStatus)
        self._guard = StateGuard("private node")
        self._state = self._mirror.load()

    @classmethod
    def open(cls, path: Path | None) -> PrivateNodeStore:
        """Create a store mirrored to *path* (``None`` for memory only)."""
        return cls(JsonFileMirror(path, PrivateNodeStatus))

    @property
    def guard(self) -> StateGuard:
        return self._guard

    def _commit(self, state: PrivateNodeStatus) -> PrivateNodeStatus:
        self._state = state
        self._mirror.save(state)
        _logger.debug("Private node online=%s peers=%d", state.online, state.peer_count)
        return state

    def status(self) -> PrivateNodeStatus:
        with self._guard.hold():
            return self._state

    def start(self) -> PrivateNodeStatus:
        """Bring the node online, seeding the default peer count if it has none."""
        with self._guard.hold():
            peer_count = self._state.peer_count or DEFAULT_PEER_COUNT
            return self._commit(self._state.model_copy(update={"online": True, "peer_count": peer_count}))

    def start_with_mode(self, mode: NodeStartMode | str) -> PrivateNodeStatus:
        """Bring the node online with the fixed peer count of *mode*.

        Raises :class:`~cidfeed.exceptions.UnknownNodeModeError` for an
        unrecognized mode; the state is left untouched in that case.
        """
        parsed = mode if isinstance(mode, NodeStartMode) else NodeStartMode.parse(mode)
        with self._guard.hold():
            return self._commit(PrivateNodeStatus(online=True, peer_count=parsed.peer_count))

    def stop(self) -> PrivateNodeStatus:
        with self._guard.hold():
            return self._commit(PrivateNodeStatus(online=False, peer_count=0))

    def simulate_peer_join(self) -> PrivateNodeStatus:
        """Count one more peer while online; saturates at the 16-bit maximum."""
        with self._guard.hold():
            if not self._state.online:
                return self._state
            peer_count = min(self._state.peer_count + 1, MAX_PEER_COUNT)
            return self._commit(self._state.model_copy(update={"peer_count": peer_count}))
