"""Tests for the command/state models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cidfeed._constants import MAX_PEER_COUNT, VALID_NODE_MODES, mode_peer_count
from cidfeed.exceptions import UnknownNodeModeError
from cidfeed.models.node import NodeStartMode, PrivateNodeStatus
from cidfeed.models.security import FlushRevocationResult


class TestNodeStartMode:
    def test_every_mode_has_a_peer_count(self) -> None:
        for mode in NodeStartMode:
            assert mode.peer_count == mode_peer_count(mode.value)
        assert set(VALID_NODE_MODES) == {mode.value for mode in NodeStartMode}

    def test_parse_ignores_case_and_whitespace(self) -> None:
        assert NodeStartMode.parse("  eAsY\n") is NodeStartMode.EASY

    @pytest.mark.parametrize("value", ["", "private-node", "turbo", 4, None])
    def test_parse_rejects_unknown(self, value: object) -> None:
        with pytest.raises(UnknownNodeModeError):
            NodeStartMode.parse(value)

    def test_mode_peer_count_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            mode_peer_count("turbo")


class TestPrivateNodeStatus:
    def test_payload_uses_camel_case(self) -> None:
        assert PrivateNodeStatus(online=True, peer_count=2).to_payload() == {"online": True, "peerCount": 2}

    def test_accepts_alias_on_input(self) -> None:
        assert PrivateNodeStatus.model_validate({"peerCount": 9}).peer_count == 9

    @pytest.mark.parametrize("peers", [-1, MAX_PEER_COUNT + 1])
    def test_peer_count_is_unsigned_16_bit(self, peers: int) -> None:
        with pytest.raises(ValidationError):
            PrivateNodeStatus(peer_count=peers)


def test_flush_result_payload() -> None:
    result = FlushRevocationResult(flushed_ids=["a"], failed_ids=["b"])
    assert result.to_payload() == {"flushedIds": ["a"], "failedIds": ["b"]}


def test_models_package_exports_only_models() -> None:
    import cidfeed.models

    assert "mode_peer_count" not in cidfeed.models.__all__
    assert "VALID_NODE_MODES" not in cidfeed.models.__all__
