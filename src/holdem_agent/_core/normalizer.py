# Area: Core
"""
holdem_agent._core.normalizer — Decision normalization
======================================================

Applies the table-independent action rules to a decoded Decision:

- nothing to call → a ``call`` becomes a ``check``
- nothing to call → a ``fold`` follows the zero-call fold policy
- a ``raise`` never goes below the minimum raise amount
"""

from __future__ import annotations
import logging

from ..types import DecisionContext
from .enums import ZeroCallFoldPolicy
from .models import ActionType, Decision

logger = logging.getLogger("holdem_agent.normalizer")


def normalize_decision(
    decision: Decision,
    ctx: DecisionContext,
    zero_call_fold_policy: ZeroCallFoldPolicy = ZeroCallFoldPolicy.FORBID,
) -> Decision:
    """Return a Decision that respects the call/check and raise-floor rules."""
    amount_to_call = ctx["amountToCall"]
    action = decision.action_type

    if amount_to_call == 0 and action is ActionType.CALL:
        logger.info("Nothing to call: call → check")
        return decision.model_copy(update={"action_type": ActionType.CHECK})

    if (amount_to_call == 0 and action is ActionType.FOLD
            and zero_call_fold_policy is ZeroCallFoldPolicy.FORBID):
        logger.info("Nothing to call: fold → check")
        return decision.model_copy(update={"action_type": ActionType.CHECK})

    if action is ActionType.RAISE:
        return decision.model_copy(update={"amount": raise_floor(decision, ctx)})

    return decision


def raise_floor(decision: Decision, ctx: DecisionContext) -> int:
    """Raise amount with the minimum raise substituted or enforced."""
    minimum = ctx["minimumRaiseAmount"]
    if decision.amount is None:
        return minimum
    if decision.amount < minimum:
        logger.info(f"Raise {decision.amount} below minimum, using {minimum}")
        return minimum
    return decision.amount
