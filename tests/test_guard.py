from __future__ import annotations

import threading

import pytest

from cidfeed.exceptions import StatePoisonedError
from cidfeed.models.node import PrivateNodeStatus
from cidfeed.state.guard import StateGuard
from cidfeed.state.mirror import JsonFileMirror
from cidfeed.state.node import PrivateNodeStore


def test_failure_inside_hold_poisons_guard() -> None:
    guard = StateGuard("test")

    with pytest.raises(RuntimeError):
        with guard.hold():
            raise RuntimeError("boom")

    assert guard.poisoned
    with pytest.raises(StatePoisonedError):
        with guard.hold():
            pass


class _ExplodingMirror(JsonFileMirror[PrivateNodeStatus]):
    def save(self, state: PrivateNodeStatus) -> bool:
        raise RuntimeError("unexpected")


def test_poisoned_store_refuses_every_later_call() -> None:
    store = PrivateNodeStore(_ExplodingMirror(None, PrivateNodeStatus))

    with pytest.raises(RuntimeError):
        store.start()

    for operation in (store.status, store.start, store.stop, store.simulate_peer_join):
        with pytest.raises(StatePoisonedError):
            operation()


def test_concurrent_peer_joins_are_serialized() -> None:
    store = PrivateNodeStore()
    store.start_with_mode("private")

    def _join() -> None:
        for _ in range(250):
            store.simulate_peer_join()

    threads = [threading.Thread(target=_join) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.status().peer_count == 2 + 8 * 250
