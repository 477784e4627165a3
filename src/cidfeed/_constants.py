"""Internal constants shared across the package."""

APP_IDENTIFIER = "app.cidfeed.desktop"
NODE_STATE_FILE = "private-node-state.json"
SECURITY_STATE_FILE = "security-state.json"

# ------------------------------------------------------------------
# Simulated private node peer counts
# ------------------------------------------------------------------

#: Peer count assigned by a plain start when the node has none yet.
DEFAULT_PEER_COUNT = 3
#: Peer counts are unsigned 16-bit values.
MAX_PEER_COUNT = 0xFFFF

_MODE_PEER_COUNTS: dict[str, int] = {"easy": 4, "private": 2}
VALID_NODE_MODES: tuple[str, ...] = tuple(_MODE_PEER_COUNTS)


def mode_peer_count(mode: str) -> int:
    """Return the fixed peer count for a start *mode*.

    Raises :class:`ValueError` for modes without a mapping.
    """
    count = _MODE_PEER_COUNTS.get(mode)
    if count is None:
        raise ValueError(f"mode must be one of {VALID_NODE_MODES}, got {mode!r}")
    return count


# ------------------------------------------------------------------
# Revocation flush stub
# ------------------------------------------------------------------

#: Revocation ids with this prefix always fail to flush (test simulation).
FAIL_PREFIX = "fail-"
