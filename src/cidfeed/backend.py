"""Backend shell for the CIDFeed desktop application."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cidfeed.commands import CommandRegistry, build_registry
from cidfeed.config import ShellConfig
from cidfeed.models.node import NodeStartMode, PrivateNodeStatus
from cidfeed.models.security import FlushRevocationResult, SecurityState
from cidfeed.revocation import flush_revocation_queue
from cidfeed.state.node import PrivateNodeStore
from cidfeed.state.security import SecurityStateStore

_logger = logging.getLogger(__name__)


class CidfeedBackend:
    """Process-wide state container behind the UI commands.

    Usage::

        backend = CidfeedBackend(ShellConfig.from_env())
        status = await backend.invoke("start_private_node_mode", {"mode": "easy"})

    Persisted state is loaded once, when the backend is constructed.
    """

    def __init__(
        self,
        config: ShellConfig | None = None,
        *,
        node_store: PrivateNodeStore | None = None,
        security_store: SecurityStateStore | None = None,
    ) -> None:
        self._config = config if config is not None else ShellConfig.from_env()
        persist = self._config.persist
        if node_store is None:
            node_store = PrivateNodeStore.open(self._config.node_state_path if persist else None)
        if security_store is None:
            security_store = SecurityStateStore.open(self._config.security_state_path if persist else None)
        self._node = node_store
        self._security = security_store
        self._commands = build_registry(self._node, self._security)
        _logger.debug("Backend ready data_dir=%s persist=%s", self._config.data_dir, persist)

    @property
    def config(self) -> ShellConfig:
        return self._config

    @property
    def node(self) -> PrivateNodeStore:
        return self._node

    @property
    def security(self) -> SecurityStateStore:
        return self._security

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    # ------------------------------------------------------------------
    # UI dispatch
    # ------------------------------------------------------------------

    async def invoke(self, command: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        """Run a UI command by name; see :meth:`CommandRegistry.invoke`."""
        return await self._commands.invoke(command, payload)

    # ------------------------------------------------------------------
    # Private node
    # ------------------------------------------------------------------

    def node_status(self) -> PrivateNodeStatus:
        return self._node.status()

    def start_private_node(self) -> PrivateNodeStatus:
        return self._node.start()

    def start_private_node_mode(self, mode: NodeStartMode | str) -> PrivateNodeStatus:
        return self._node.start_with_mode(mode)

    def stop_private_node(self) -> PrivateNodeStatus:
        return self._node.stop()

    def simulate_peer_join(self) -> PrivateNodeStatus:
        return self._node.simulate_peer_join()

    # ------------------------------------------------------------------
    # Security state
    # ------------------------------------------------------------------

    def get_security_state(self) -> SecurityState:
        return self._security.get()

    def set_security_state(
        self,
        *,
        identity_json: str | None = None,
        delegation_json: str | None = None,
        revocation_queue_json: str | None = None,
        audit_log_json: str | None = None,
        failed_flush_queue_json: str | None = None,
    ) -> SecurityState:
        """Overwrite all security blobs; omitted blobs become absent."""
        state = SecurityState(
            identity_json=identity_json,
            delegation_json=delegation_json,
            revocation_queue_json=revocation_queue_json,
            audit_log_json=audit_log_json,
            failed_flush_queue_json=failed_flush_queue_json,
        )
        return self._security.set(state)

    def flush_revocation_queue(self, revocation_ids: Iterable[str]) -> FlushRevocationResult:
        return flush_revocation_queue(revocation_ids)
