# Area: Oracles
"""
holdem_agent.oracle — The decision oracle interface
===================================================

Subclass DecisionOracle and implement ``recommend``. The agent calls it
once per decision point with a fresh DecisionContext.

``recommend`` may return any of:
- a Decision
- a dict shaped like DecisionResult
- raw text (typically an LLM reply) containing such a JSON object

Anything it raises, and any deadline it misses, is treated as an oracle
failure: the agent folds by default and keeps running.

Type Definitions
----------------
    from holdem_agent import DecisionContext, DecisionResult

    >>> DecisionContext.__annotations__
    {'playerHand': List[CardInfo], ...}
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Optional

from ._shared.llm_client import BaseLLMClient
from .types import DecisionContext


class DecisionOracle(ABC):
    """
    Abstract base class for decision oracles.

    ``name`` is used in log lines and error reports.
    """

    name: str = "oracle"

    @abstractmethod
    def recommend(self, ctx: DecisionContext) -> Any:
        """
        Called when it is the agent's turn at a new decision point.

        Parameters
        ----------
        ctx : DecisionContext
            {
                "playerHand": [{"rank": "A", "suit": "hearts"}, ...],
                "communityCards": [...],
                "activePlayers": [{"name": str, "chips": int, "currentBet": int}],
                "pot": int,
                "amountToCall": int,        # 0 → checking is free
                "minimumRaiseAmount": int,
                "bettingRound": str         # "preflop", "flop", ...
            }

        Returns
        -------
        DecisionResult, Decision or str
            {"actionType": "raise", "amount": 40, "reasoning": "..."}

        Example
        -------
        >>> def recommend(self, ctx):
        ...     if ctx["amountToCall"] == 0:
        ...         return {"actionType": "check"}
        ...     return {"actionType": "call"}
        """
        ...


PROMPT_TEMPLATE = (
    "You are a professional Texas Hold'em poker player. "
    "Given the following JSON context, recommend the statistically strongest "
    "move: fold, check, call or raise. "
    "Never commit all your chips (all-in, or a raise that amounts to all-in) "
    "unless your probability of winning the hand is above 95%. "
    "If you raise, choose an amount no smaller than minimumRaiseAmount. "
    "If amountToCall is 0, checking is free: prefer check over fold. "
    "Reply ONLY with a single JSON object: "
    '{{"actionType": string, "amount": number (only when actionType is "raise"), '
    '"reasoning": string}}. Do not add any other text.\n'
    "Context: {context}\n"
    "Recommended action:"
)


def build_prompt(ctx: DecisionContext) -> str:
    """Render the LLM prompt for one decision point."""
    return PROMPT_TEMPLATE.format(context=json.dumps(ctx, sort_keys=True))


class LLMOracle(DecisionOracle):
    """
    Oracle backed by a large language model.

    Sends ``build_prompt(ctx)`` to the client and returns the raw reply;
    the decision pipeline decodes it.
    """

    def __init__(self, client: BaseLLMClient, name: Optional[str] = None):
        self.client = client
        self.name = name or client.name

    def recommend(self, ctx: DecisionContext) -> str:
        return self.client.generate(build_prompt(ctx))
