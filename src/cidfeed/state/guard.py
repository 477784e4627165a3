"""Coarse state lock with poisoning.

A store that fails halfway through a mutation may hold a half-applied
record.  The guard remembers that and refuses all later access.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator

from cidfeed.exceptions import StatePoisonedError

_logger = logging.getLogger(__name__)


class StateGuard:
    """Serialize all access to one state record."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextlib.contextmanager
    def hold(self) -> Iterator[None]:
        """Hold the lock for the duration of the block.

        Raises :class:`StatePoisonedError` if an earlier holder failed.
        Any exception escaping the block poisons the guard.
        """
        with self._lock:
            if self._poisoned:
                raise StatePoisonedError(f"{self._name} state is poisoned by an earlier failure")
            try:
                yield
            except BaseException:
                self._poisoned = True
                _logger.error("%s state poisoned", self._name, exc_info=True)
                raise
