"""cidfeed - Backend shell for the CIDFeed desktop application."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cidfeed-shell")
except PackageNotFoundError:
    __version__ = "0+local"
from cidfeed.backend import CidfeedBackend
from cidfeed.commands import CommandRegistry
from cidfeed.config import ShellConfig
from cidfeed.exceptions import (
    CidfeedConfigError,
    CidfeedError,
    CommandError,
    CommandPayloadError,
    StatePoisonedError,
    UnknownCommandError,
    UnknownNodeModeError,
)
from cidfeed.models import (
    FlushRevocationResult,
    NodeStartMode,
    PrivateNodeStatus,
    SecurityState,
)
from cidfeed.revocation import flush_revocation_queue
from cidfeed.state import PrivateNodeStore, SecurityStateStore

__all__ = [
    "__version__",
    "CidfeedBackend",
    "CidfeedConfigError",
    "CidfeedError",
    "CommandError",
    "CommandPayloadError",
    "CommandRegistry",
    "FlushRevocationResult",
    "NodeStartMode",
    "PrivateNodeStatus",
    "PrivateNodeStore",
    "SecurityState",
    "SecurityStateStore",
    "ShellConfig",
    "StatePoisonedError",
    "UnknownCommandError",
    "UnknownNodeModeError",
    "flush_revocation_queue",
]
