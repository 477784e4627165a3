"""Custom exception hierarchy for cidfeed."""

from __future__ import annotations


class CidfeedError(Exception):
    """Base exception for all cidfeed errors."""


class CidfeedConfigError(CidfeedError):
    """Invalid or missing configuration."""


class StatePoisonedError(CidfeedError):
    """A state store was left inconsistent by an earlier failure.

    Raised on every access after a mutation failed while the store lock
    was held.  This is not recoverable within the process.
    """


class CommandError(CidfeedError):
    """A UI command could not be completed.

    ``str(exc)`` is the error string reported back to the UI.
    """

    def __init__(self, message: str, *, command: str = "") -> None:
        self.command = command
        super().__init__(message)


class UnknownCommandError(CommandError):
    """No handler is registered under the requested command name."""


class CommandPayloadError(CommandError):
    """The command payload is missing fields or has the wrong types."""


class UnknownNodeModeError(CommandError):
    """Start mode is not one of the supported private node modes."""

    def __init__(self, mode: str, *, command: str = "") -> None:
        self.mode = mode
        super().__init__(f"unsupported node mode: {mode}", command=command)
