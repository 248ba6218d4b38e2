# Area: Runner Tests
"""Tests for AgentRunner — connect, join, receive loop, reconnect."""

from unittest.mock import patch

import pytest

from fakes import FakeTransport, hand_message, state_message
from holdem_agent.demo_oracle import DemoOracle
from holdem_agent.errors import ConfigError, TransportClosedError
from holdem_agent.runner import AgentRunner


MOCK_SLEEP_TIME = "holdem_agent.runner.time"

CONFIG = {
    "server_url": "ws://test:8080",
    "agent_name": "HoldemBot",
    "cooldown_seconds": 0,
    "reconnect_delay_seconds": 3,
}


def _runner(transport, config=None):
    runner = AgentRunner(
        config=config or CONFIG,
        oracle=DemoOracle(),
        transport=transport,
        run_decisions_inline=True,
        configure_logging=False,
    )
    return runner


class TestRunLoop:

    def test_joins_then_plays(self):
        transport = FakeTransport(inbox=[
            '{"type": "info", "payload": "Welcome"}',
            hand_message(),
            state_message(to_call=0),
        ])
        runner = _runner(transport)
        transport.on_empty = runner.stop

        runner.run()

        envelopes = transport.sent_envelopes()
        assert envelopes[0] == {"type": "join", "payload": {"name": "HoldemBot"}}
        assert envelopes[1] == {"type": "action", "payload": {"actionType": "check"}}
        assert transport.connect_count == 1
        assert transport.close_count >= 1

    def test_bad_messages_do_not_stop_loop(self):
        transport = FakeTransport(inbox=[
            "garbage",
            '{"type": "state", "payload": {"players": 5}}',
            hand_message(),
            state_message(to_call=0),
        ])
        runner = _runner(transport)
        transport.on_empty = runner.stop

        runner.run()

        assert transport.sent_actions() == [{"actionType": "check"}]

    def test_reconnects_and_rejoins(self):
        transport = FakeTransport(inbox=[
            TransportClosedError("reset by peer"),
            hand_message(),
            state_message(to_call=0),
        ])
        runner = _runner(transport)
        transport.on_empty = runner.stop

        with patch(MOCK_SLEEP_TIME) as mock_time:
            runner.run()

        mock_time.sleep.assert_called_once_with(3.0)
        assert transport.connect_count == 2
        joins = [e for e in transport.sent_envelopes() if e["type"] == "join"]
        assert len(joins) == 2
        assert transport.sent_actions() == [{"actionType": "check"}]

    def test_rejoin_under_new_id_keeps_acting(self):
        transport = FakeTransport(inbox=[
            hand_message(),
            state_message(to_call=0, my_id="old-uuid", current="old-uuid"),
            TransportClosedError("reset by peer"),
            hand_message(),
            state_message(to_call=0, my_id="new-uuid", current="new-uuid"),
        ])
        runner = _runner(transport)
        transport.on_empty = runner.stop

        with patch(MOCK_SLEEP_TIME):
            runner.run()

        assert runner.agent.store.my_player_id == "new-uuid"
        assert transport.sent_actions() == [{"actionType": "check"}, {"actionType": "check"}]

    def test_rejoin_forgets_old_hand(self):
        transport = FakeTransport(inbox=[
            hand_message(),
            TransportClosedError("reset by peer"),
            state_message(to_call=0, my_id="new-uuid", current="new-uuid"),
        ])
        runner = _runner(transport)
        transport.on_empty = runner.stop

        with patch(MOCK_SLEEP_TIME):
            runner.run()

        assert runner.agent.store.hand is None
        assert transport.sent_actions() == []

    def test_failed_connect_retries(self):
        transport = FakeTransport(inbox=[hand_message()])
        attempts = []
        original_connect = transport.connect

        def flaky_connect():
            attempts.append(1)
            if len(attempts) == 1:
                raise TransportClosedError("refused")
            original_connect()

        transport.connect = flaky_connect
        runner = _runner(transport)
        transport.on_empty = runner.stop

        with patch(MOCK_SLEEP_TIME):
            runner.run()

        assert len(attempts) == 2
        assert transport.sent_envelopes()[0]["type"] == "join"


class TestFeed:

    def test_feed_dispatches_without_transport_loop(self):
        transport = FakeTransport()
        runner = _runner(transport)

        assert runner.feed(hand_message()) == "player_hand"
        assert runner.feed(state_message(to_call=0)) == "state"
        assert transport.sent_actions() == [{"actionType": "check"}]
        assert transport.connect_count == 0


class TestConstruction:

    def test_invalid_config_raises(self):
        with pytest.raises(ConfigError):
            _runner(FakeTransport(), config={"server_url": "", "agent_name": "x"})

    def test_defaults_filled_in(self):
        runner = _runner(FakeTransport(), config={"agent_name": "Solo"})
        assert runner.config["server_url"] == "ws://localhost:8080"
        assert runner.recv_timeout == 1.0
        assert runner.agent.agent_name == "Solo"

    def test_builds_oracle_from_config(self):
        runner = AgentRunner(config={"oracle": "demo"}, transport=FakeTransport(),
                             configure_logging=False)
        try:
            assert isinstance(runner.oracle, DemoOracle)
        finally:
            runner.agent.shutdown()
