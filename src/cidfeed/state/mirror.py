"""Best-effort JSON file mirror for a state record.

Loading never fails: a missing, unreadable or malformed file yields the
model defaults.  Saving never raises: write failures are logged at DEBUG
and dropped.  There is no atomic replace and no retry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import ValidationError

from cidfeed.models._base import CidfeedModel

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=CidfeedModel)


class JsonFileMirror(Generic[ModelT]):
    """Mirror one model instance to one flat JSON object on disk.

    A ``path`` of ``None`` disables the mirror: ``load`` returns defaults
    and ``save`` does nothing.
    """

    def __init__(self, path: Path | None, model: type[ModelT]) -> None:
        self._path = path
        self._model = model

    @property
    def path(self) -> Path | None:
        return self._path

    def load(self) -> ModelT:
        if self._path is None:
            return self._model()

        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            _logger.debug("No state file at %s; using defaults", self._path)
            return self._model()
        except (OSError, UnicodeDecodeError):
            _logger.debug("Could not read state file %s; using defaults", self._path, exc_info=True)
            return self._model()

        try:
            state = self._model.model_validate_json(text, strict=True)
        except ValidationError:
            _logger.debug("Malformed state file %s; using defaults", self._path, exc_info=True)
            return self._model()
        _logger.debug("Loaded %s from %s", self._model.__name__, self._path)
        return state

    def save(self, state: ModelT) -> bool:
        """Write *state*; returns whether the write succeeded."""
        if self._path is None:
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(state.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except (OSError, ValueError):
            _logger.debug("Failed to persist %s to %s", self._model.__name__, self._path, exc_info=True)
            return False
        return True
