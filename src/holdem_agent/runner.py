# Area: Runner
"""
holdem_agent.runner — Main event loop
=====================================

The AgentRunner is what users instantiate and call .run() on.
It owns the connection to the game server: connect, announce the agent
with ``join``, then receive and dispatch messages in a single blocking
loop. A dropped connection is re-established after
``reconnect_delay_seconds``. Each join starts a new session: the
server assigns a fresh player id, so the agent forgets its id, hand
and guard state before joining again.
"""

from __future__ import annotations
import logging
import signal
import threading
import time
from typing import Any, Dict, Optional

from ._core.dispatcher import MessageDispatcher
from ._runner_config import (
    DEFAULTS,
    build_oracle,
    send_failure_policy,
    validate_config,
    zero_call_fold_policy,
)
from ._shared.logging_config import setup_logging
from ._shared.protocol import build_join, encode_envelope
from ._shared.transport import Transport, WebSocketTransport
from .agent import PokerAgent
from .errors import TransportClosedError
from .oracle import DecisionOracle

logger = logging.getLogger("holdem_agent")


class AgentRunner:
    """
    Main entry point.

    Usage
    -----
        from holdem_agent import AgentRunner, DemoOracle

        config = {
            "server_url": "ws://localhost:8080",
            "agent_name": "HoldemBot",
            "cooldown_seconds": 2.0,
            "oracle_timeout_seconds": 15,
        }

        runner = AgentRunner(config=config, oracle=DemoOracle())
        runner.run()

    Without ``oracle`` the one named by ``config["oracle"]`` is built.
    Without ``transport`` a WebSocketTransport to ``server_url`` is used.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        oracle: Optional[DecisionOracle] = None,
        transport: Optional[Transport] = None,
        run_decisions_inline: bool = False,
        configure_logging: bool = True,
    ):
        self.config = {**DEFAULTS, **config}
        validate_config(self.config)

        if configure_logging:
            setup_logging(
                log_file_path=self.config.get("log_file"),
                level=self.config.get("log_level", "INFO"),
            )

        self.oracle = oracle if oracle is not None else build_oracle(self.config)
        self.transport = transport or WebSocketTransport(self.config["server_url"])

        self.agent = PokerAgent(
            agent_name=self.config["agent_name"],
            oracle=self.oracle,
            transport=self.transport,
            cooldown_seconds=float(self.config["cooldown_seconds"]),
            oracle_timeout_seconds=float(self.config["oracle_timeout_seconds"]),
            zero_call_fold_policy=zero_call_fold_policy(self.config),
            send_failure_policy=send_failure_policy(self.config),
            run_decisions_inline=run_decisions_inline,
        )
        self.dispatcher = MessageDispatcher(self.agent)

        self.recv_timeout = float(self.config["recv_timeout_seconds"])
        self.reconnect_delay = float(self.config["reconnect_delay_seconds"])
        self._running = False
        self._connected = False

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """
        Start the agent event loop. Blocks until interrupted (Ctrl+C)
        or ``stop()`` is called.
        """
        self._running = True

        # Graceful shutdown on Ctrl+C
        previous_handler = None
        if threading.current_thread() is threading.main_thread():
            def _signal_handler(sig, frame):
                logger.info("\nShutting down gracefully...")
                self._running = False
            previous_handler = signal.signal(signal.SIGINT, _signal_handler)

        logger.info("=" * 60)
        logger.info("  Hold'em Agent Runner — Starting")
        logger.info(f"  Server:   {self.config['server_url']}")
        logger.info(f"  Name:     {self.config['agent_name']}")
        logger.info(f"  Oracle:   {self.oracle.name}")
        logger.info(f"  Cooldown: {self.config['cooldown_seconds']}s")
        logger.info("=" * 60)

        try:
            while self._running:
                try:
                    if not self._connected:
                        self._connect()
                    self._receive_once()
                except TransportClosedError as e:
                    self._connected = False
                    logger.warning(f"Connection lost: {e}")
                    self.transport.close()
                    if self._running:
                        logger.info(f"Reconnecting in {self.reconnect_delay}s")
                        time.sleep(self.reconnect_delay)
                except KeyboardInterrupt:
                    break
                except Exception as e:
                    logger.error(f"Loop error: {e}", exc_info=True)
        finally:
            if previous_handler is not None:
                signal.signal(signal.SIGINT, previous_handler)
            self._cleanup()

    def stop(self) -> None:
        """Ask the loop to exit after the current iteration."""
        self._running = False

    def feed(self, raw: Any) -> Optional[str]:
        """Dispatch one raw message without going through the transport."""
        return self.dispatcher.dispatch(raw)

    # ── Internals ─────────────────────────────────────────────

    def _connect(self) -> None:
        self.transport.connect()
        # Every join seats a new player id
        self.agent.reset_session()
        self.transport.send(encode_envelope(build_join(self.config["agent_name"])))
        self._connected = True
        logger.info(f"── Joined as {self.config['agent_name']}")

    def _receive_once(self) -> None:
        raw = self.transport.recv(timeout=self.recv_timeout)
        if raw is None:
            return
        logger.debug(f"── Received: {raw}")
        self.dispatcher.dispatch(raw)

    def _cleanup(self) -> None:
        self.agent.shutdown(wait=True)
        self.transport.close()
        self._connected = False
        logger.info("Runner stopped.")
