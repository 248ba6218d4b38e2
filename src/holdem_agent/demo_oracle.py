# Area: Oracles
"""
holdem_agent.demo_oracle — Demo Decision Oracle
===============================================

A ready-to-use DecisionOracle that works out of the box, without any
API key or network access. It plays a simple fixed strategy:

- raises the minimum with a pocket pair of tens or better
- checks whenever checking is free
- calls when the price is small relative to the pot
- folds everything else

Usage:
    from holdem_agent import DemoOracle, AgentRunner

    runner = AgentRunner(config=config, oracle=DemoOracle())
    runner.run()
"""

from typing import Any, Dict

from .oracle import DecisionOracle
from .types import DecisionContext

RANK_ORDER = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
_RANK_ALIASES = {"T": "10", "JACK": "J", "QUEEN": "Q", "KING": "K", "ACE": "A"}


def rank_value(rank: str) -> int:
    """Index of a rank in RANK_ORDER; -1 for anything unrecognised."""
    key = str(rank).strip().upper()
    key = _RANK_ALIASES.get(key, key)
    try:
        return RANK_ORDER.index(key)
    except ValueError:
        return -1


class DemoOracle(DecisionOracle):
    """Rule-based oracle for demo mode and offline runs."""

    name = "demo"

    def __init__(self, call_pot_fraction: float = 0.5):
        """
        Args:
            call_pot_fraction: Call when amountToCall <= pot * this.
        """
        self.call_pot_fraction = call_pot_fraction

    def recommend(self, ctx: DecisionContext) -> Dict[str, Any]:
        ranks = [rank_value(c["rank"]) for c in ctx.get("playerHand", [])]
        premium_pair = (
            len(ranks) == 2
            and ranks[0] == ranks[1]
            and ranks[0] >= RANK_ORDER.index("10")
        )
        to_call = ctx["amountToCall"]

        if premium_pair:
            return {
                "actionType": "raise",
                "amount": ctx["minimumRaiseAmount"],
                "reasoning": "Pocket pair of tens or better",
            }

        if to_call == 0:
            return {"actionType": "check", "reasoning": "Checking is free"}

        if to_call <= ctx["pot"] * self.call_pot_fraction:
            return {"actionType": "call", "reasoning": "Price is small relative to the pot"}

        return {"actionType": "fold", "reasoning": "Price too high for this hand"}
