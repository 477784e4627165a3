"""UI command table and dispatcher.

Command names and payload keys match the desktop UI bindings.  Handlers
are synchronous and take the store locks, so :meth:`CommandRegistry.invoke`
runs them in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from cidfeed._redact import redact_for_log
from cidfeed.exceptions import CommandError, CommandPayloadError, UnknownCommandError
from cidfeed.models._base import CidfeedModel
from cidfeed.models.security import SecurityState
from cidfeed.revocation import flush_revocation_queue
from cidfeed.state.node import PrivateNodeStore
from cidfeed.state.security import SecurityStateStore

_logger = logging.getLogger(__name__)

Payload = Mapping[str, Any]
Handler = Callable[[Payload], CidfeedModel | None]


class StartModePayload(CidfeedModel):
    mode: str


class FlushRevocationPayload(CidfeedModel):
    revocation_ids: list[str]


class CommandRegistry:
    """Map command names to handlers and run them."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        if name in self._handlers:
            raise ValueError(f"command already registered: {name}")
        self._handlers[name] = handler

    def names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    async def invoke(self, command: str, payload: Payload | None = None) -> dict[str, Any] | None:
        """Run *command* and return its JSON-compatible result.

        Raises
        ------
        UnknownCommandError
            No handler is registered for *command*.
        CommandPayloadError
            The payload failed validation.
        CommandError
            The handler rejected the request (e.g. an unknown node mode).
        """
        handler = self._handlers.get(command)
        if handler is None:
            raise UnknownCommandError(f"unknown command: {command}", command=command)

        _logger.debug("Invoking command=%s payload=%s", command, redact_for_log(payload))
        try:
            result = await asyncio.to_thread(handler, payload if payload is not None else {})
        except ValidationError as exc:
            raise CommandPayloadError(
                f"invalid payload for {command}: {exc.error_count()} validation error(s)",
                command=command,
            ) from exc
        except CommandError as exc:
            if not exc.command:
                exc.command = command
            raise

        if result is None:
            return None
        return result.to_payload()


def build_registry(node: PrivateNodeStore, security: SecurityStateStore) -> CommandRegistry:
    """Register every UI command against the given stores."""

    def _set_security_state(payload: Payload) -> None:
        security.set(SecurityState.model_validate(payload))

    registry = CommandRegistry()
    registry.register("node_status", lambda _payload: node.status())
    registry.register("start_private_node", lambda _payload: node.start())
    registry.register(
        "start_private_node_mode",
        lambda payload: node.start_with_mode(StartModePayload.model_validate(payload).mode),
    )
    registry.register("stop_private_node", lambda _payload: node.stop())
    registry.register("simulate_peer_join", lambda _payload: node.simulate_peer_join())
    registry.register("get_security_state", lambda _payload: security.get())
    registry.register("set_security_state", _set_security_state)
    registry.register(
        "flush_revocation_queue",
        lambda payload: flush_revocation_queue(FlushRevocationPayload.model_validate(payload).revocation_ids),
    )
    return registry
