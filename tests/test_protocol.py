# Area: Shared Tests
"""Tests for wire envelope helpers."""

import pytest

from holdem_agent._shared.protocol import (
    build_action,
    build_envelope,
    build_join,
    decode_envelope,
    encode_envelope,
)
from holdem_agent.errors import DecodeError


class TestBuild:

    def test_envelope_shape(self):
        assert build_envelope("info", "x") == {"type": "info", "payload": "x"}

    def test_join(self):
        assert build_join("HoldemBot") == {"type": "join", "payload": {"name": "HoldemBot"}}

    def test_action_without_amount(self):
        assert build_action("call") == {"type": "action", "payload": {"actionType": "call"}}

    def test_action_with_amount(self):
        envelope = build_action("raise", 40)
        assert envelope["payload"] == {"actionType": "raise", "amount": 40}

    def test_encode_is_compact(self):
        assert encode_envelope(build_action("check")) == \
            '{"type":"action","payload":{"actionType":"check"}}'


class TestDecode:

    def test_text(self):
        assert decode_envelope('{"type": "info", "payload": "hi"}') == ("info", "hi")

    def test_missing_payload_is_none(self):
        assert decode_envelope('{"type": "info"}') == ("info", None)

    @pytest.mark.parametrize("raw", [
        "not json",
        "[1, 2]",
        '{"payload": 1}',
        '{"type": 7}',
        '{"type": ""}',
        b"\xff\xfe",
    ])
    def test_rejects(self, raw):
        with pytest.raises(DecodeError):
            decode_envelope(raw)
