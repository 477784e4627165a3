"""State/store layer.

Each store owns one in-memory record behind a single coarse lock and
mirrors it to a JSON file after every mutation.
"""

from cidfeed.state.guard import StateGuard
from cidfeed.state.mirror import JsonFileMirror
from cidfeed.state.node import PrivateNodeStore
from cidfeed.state.security import SecurityStateStore

__all__ = [
    "JsonFileMirror",
    "PrivateNodeStore",
    "SecurityStateStore",
    "StateGuard",
]
