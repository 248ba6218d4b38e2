# Area: Agent
"""
holdem_agent.agent — The poker agent
====================================

Glues the state store, turn guard, decision pipeline and action emitter
together. The dispatcher calls one ``handle_*`` method per decoded
message.

A claimed decision runs on a single worker thread so the receive loop
keeps dispatching new hands, info and error messages while the oracle
is thinking. Pass ``run_decisions_inline=True`` to run decisions on
the calling thread instead (tests, scripts).
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from ._core.emitter import ActionEmitter
from ._core.enums import SendFailurePolicy, ZeroCallFoldPolicy
from ._core.models import Card, GameSnapshot
from ._core.pipeline import DEFAULT_ORACLE_TIMEOUT_SECONDS, DecisionPipeline
from ._core.state_store import GameStateStore
from ._core.turn_guard import DEFAULT_COOLDOWN_SECONDS, Claim, TurnGuard
from ._shared.transport import Transport
from .errors import SendError
from .oracle import DecisionOracle

logger = logging.getLogger("holdem_agent.agent")


class PokerAgent:
    """
    One seat at one table.

    Usage
    -----
        agent = PokerAgent("HoldemBot", oracle=DemoOracle(), transport=transport)
        dispatcher = MessageDispatcher(agent)
        dispatcher.dispatch(raw_message)   # for every inbound message
    """

    def __init__(
        self,
        agent_name: str,
        oracle: DecisionOracle,
        transport: Transport,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        oracle_timeout_seconds: float = DEFAULT_ORACLE_TIMEOUT_SECONDS,
        zero_call_fold_policy: ZeroCallFoldPolicy = ZeroCallFoldPolicy.FORBID,
        send_failure_policy: SendFailurePolicy = SendFailurePolicy.HOLD,
        run_decisions_inline: bool = False,
    ):
        self.agent_name = agent_name
        self.store = GameStateStore(agent_name=agent_name)
        self.guard = TurnGuard(cooldown_seconds=cooldown_seconds)
        self.pipeline = DecisionPipeline(
            oracle=oracle,
            oracle_timeout_seconds=oracle_timeout_seconds,
            zero_call_fold_policy=zero_call_fold_policy,
        )
        self.emitter = ActionEmitter(transport)
        self.send_failure_policy = send_failure_policy

        self.last_action: Optional[Dict[str, Any]] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        if not run_decisions_inline:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="holdem-decision",
            )
        self._pending: Optional[Future] = None

    # ── Inbound handlers ─────────────────────────────────────

    def handle_snapshot(self, snapshot: GameSnapshot) -> Optional[Claim]:
        self.store.update_snapshot(snapshot)
        claim = self.guard.evaluate(snapshot, self.store)
        if claim is None:
            return None

        hand = list(self.store.hand or [])
        logger.info(
            f"── Our turn: round={snapshot.current_betting_round} "
            f"pot={snapshot.pot} to_call={snapshot.minimum_bet_for_call}"
        )
        if self._executor is None:
            self._act(claim, snapshot, hand)
        else:
            self._pending = self._executor.submit(self._act, claim, snapshot, hand)
        return claim

    def handle_hand(self, cards: List[Card]) -> None:
        self.store.install_hand(cards)
        self.guard.reset_for_new_hand()

    def handle_info(self, payload: Any) -> None:
        logger.info(f"Server info: {payload}")

    def handle_error(self, payload: Any) -> None:
        logger.warning(f"Server error: {payload}")

    def reset_session(self) -> None:
        """Start over after a (re)join: new player id, no hand, fresh guard."""
        self.store.reset_identity()
        self.guard.reset_for_new_hand()

    # ── Decision execution ───────────────────────────────────

    def _act(self, claim: Claim, snapshot: GameSnapshot, hand: List[Card]) -> bool:
        """Run the pipeline and send its action. Resolves the claim."""
        try:
            outcome = self.pipeline.decide(snapshot, hand)

            if not self.guard.is_current(claim):
                logger.info("New hand dealt while deciding; action dropped")
                self.guard.complete(claim, success=False)
                return False

            envelope = self.emitter.emit(outcome.decision, outcome.ctx)
        except SendError as e:
            logger.error(f"{e}")
            self._on_send_failure(claim)
            return False
        except Exception as e:
            logger.error(f"Decision failed: {e}", exc_info=True)
            self.guard.complete(claim, success=False)
            return False

        self.last_action = envelope
        self.guard.complete(claim, success=True)
        return True

    def _on_send_failure(self, claim: Claim) -> None:
        if self.send_failure_policy is SendFailurePolicy.RELEASE:
            logger.info("Releasing claim after send failure; next snapshot may retry")
            self.guard.complete(claim, success=False)
        else:
            logger.info("Holding claim after send failure")
            self.guard.hold(claim)

    # ── Lifecycle ────────────────────────────────────────────

    def wait_idle(self, timeout: Optional[float] = None) -> None:
        """Block until the most recent decision has finished."""
        pending = self._pending
        if pending is not None:
            pending.result(timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
