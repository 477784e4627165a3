"""Security state store."""

from __future__ import annotations

import logging
from pathlib import Path

from cidfeed._redact import redact_for_log
from cidfeed.models.security import SecurityState
from cidfeed.state.guard import StateGuard
from cidfeed.state.mirror import JsonFileMirror

_logger = logging.getLogger(__name__)


class SecurityStateStore:
    """Opaque security blobs mirrored to disk."""

    def __init__(self, mirror: JsonFileMirror[SecurityState] | None = None) -> None:
        self._mirror = mirror if mirror is not None else JsonFileMirror(None, SecurityState)
        self._guard = StateGuard("security")
        self._state = self._mirror.load()

    @classmethod
    def open(cls, path: Path | None) -> SecurityStateStore:
        return cls(JsonFileMirror(path, SecurityState))

    @property
    def guard(self) -> StateGuard:
        return self._guard

    def get(self) -> SecurityState:
        with self._guard.hold():
            return self._state

    def set(self, state: SecurityState) -> SecurityState:
        """Overwrite all five blobs with *state* and persist."""
        with self._guard.hold():
            self._state = state
            self._mirror.save(state)
        _logger.debug("Security state updated: %s", redact_for_log(state.to_payload()))
        return state
