# Area: Core
"""
holdem_agent._core.pipeline — Decision pipeline
===============================================

Wraps the oracle call for one decision point:

1. build the DecisionContext
2. call the oracle under a deadline
3. decode the reply (structured, JSON-in-text or keyword fallback)
4. normalize (no call on zero, raise floor, zero-call fold policy)

Oracle failures never escape: the pipeline always returns a Decision,
folding by default when the oracle cannot answer (checking instead when
there is nothing to call and folding for free is forbidden).
"""

from __future__ import annotations
import logging
from typing import List, NamedTuple, Optional

from ..errors import OracleError
from ..oracle import DecisionOracle
from ..types import DecisionContext
from .context_builder import ContextBuilder
from .decision_parser import parse_decision
from .enums import ZeroCallFoldPolicy
from .models import ActionType, Card, Decision, GameSnapshot
from .normalizer import normalize_decision
from .timeout import TimeoutHandler

logger = logging.getLogger("holdem_agent.pipeline")

DEFAULT_ORACLE_TIMEOUT_SECONDS = 15.0
ORACLE_FAILURE_REASONING = "Decision oracle unavailable; folding by default"
ORACLE_FAILURE_CHECK_REASONING = "Decision oracle unavailable; checking by default"


class DecisionOutcome(NamedTuple):
    """
    A normalized decision and the context it was made for.

    ``oracle_failed`` means the oracle produced nothing usable and the
    default fold was taken. Normalization still runs on that fold: with
    nothing to call under ``ZeroCallFoldPolicy.FORBID`` it becomes a
    check, and the reasoning says so.
    """
    decision: Decision
    ctx: DecisionContext
    oracle_failed: bool


class DecisionPipeline:
    """Builds context, consults the oracle and normalizes its answer."""

    def __init__(
        self,
        oracle: DecisionOracle,
        oracle_timeout_seconds: float = DEFAULT_ORACLE_TIMEOUT_SECONDS,
        zero_call_fold_policy: ZeroCallFoldPolicy = ZeroCallFoldPolicy.FORBID,
        context_builder: Optional[ContextBuilder] = None,
    ):
        self.oracle = oracle
        self.oracle_timeout_seconds = oracle_timeout_seconds
        self.zero_call_fold_policy = zero_call_fold_policy
        self.context_builder = context_builder or ContextBuilder()

    def decide(self, snapshot: GameSnapshot, hand: List[Card]) -> DecisionOutcome:
        ctx = self.context_builder.build_decision_ctx(snapshot, hand)
        oracle_name = getattr(self.oracle, "name", type(self.oracle).__name__)
        logger.debug(f"[ORACLE] Consulting {oracle_name} (timeout={self.oracle_timeout_seconds}s)")

        oracle_failed = False
        try:
            raw = TimeoutHandler(
                self.oracle_timeout_seconds, oracle_name, dict(ctx),
            ).run(self.oracle.recommend, ctx)
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                raise OracleError(oracle_name, "empty response", dict(ctx))
            decision = parse_decision(raw)
        except OracleError as e:
            logger.warning(f"[ORACLE] {e}")
            logger.debug(e.format_error_log())
            decision = default_decision()
            oracle_failed = True
        except Exception as e:
            logger.warning(f"[ORACLE] {oracle_name} raised {e.__class__.__name__}: {e}",
                           exc_info=True)
            decision = default_decision()
            oracle_failed = True

        decision = normalize_decision(decision, ctx, self.zero_call_fold_policy)
        if oracle_failed and decision.action_type is ActionType.CHECK:
            decision = decision.model_copy(update={"reasoning": ORACLE_FAILURE_CHECK_REASONING})
        logger.debug(f"[ORACLE] Decision: {decision.to_payload()}")
        return DecisionOutcome(decision=decision, ctx=ctx, oracle_failed=oracle_failed)


def default_decision() -> Decision:
    """Fold, with the diagnostic reasoning used for oracle failures."""
    return Decision(action_type=ActionType.FOLD, reasoning=ORACLE_FAILURE_REASONING)
