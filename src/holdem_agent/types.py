"""
holdem_agent.types — TypedDict schemas for the oracle boundary
==============================================================

This module documents the exact structure of the context dictionary
passed to every DecisionOracle and the result it is expected to return.

Keys use the server's camelCase spelling so the context can be dumped
straight into an LLM prompt. All types are exported from the package:

    from holdem_agent import DecisionContext, DecisionResult

Use __annotations__ to inspect fields:

    >>> DecisionContext.__annotations__
    {'playerHand': List[CardInfo], 'communityCards': List[CardInfo], ...}
"""

from typing import TypedDict, List, Literal


# ============================================
# recommend() Input
# ============================================

class CardInfo(TypedDict):
    """One playing card."""
    rank: str               # e.g., "A", "10", "K"
    suit: str               # e.g., "hearts", "h"


class ActivePlayerInfo(TypedDict):
    """A player still contesting the pot (active or all-in)."""
    name: str               # display name
    chips: int              # chips behind
    currentBet: int         # chips committed this betting round


class DecisionContext(TypedDict):
    """Context passed to DecisionOracle.recommend().

    Fields
    ------
    playerHand : List[CardInfo]
        The agent's private cards.
    communityCards : List[CardInfo]
        Board cards dealt so far (0, 3, 4 or 5).
    activePlayers : List[ActivePlayerInfo]
        Players whose status is active or all-in, in seat order.
    pot : int
        Chips in the pot.
    amountToCall : int
        Chips the agent must add to call. 0 means checking is free.
    minimumRaiseAmount : int
        Smallest legal raise amount.
    bettingRound : str
        Betting-round tag, e.g., "preflop", "flop", "turn", "river".
    """
    playerHand: List[CardInfo]
    communityCards: List[CardInfo]
    activePlayers: List[ActivePlayerInfo]
    pot: int
    amountToCall: int
    minimumRaiseAmount: int
    bettingRound: str


# ============================================
# recommend() Output
# ============================================

class _DecisionRequired(TypedDict):
    actionType: Literal["fold", "check", "call", "raise"]


class DecisionResult(_DecisionRequired, total=False):
    """Structured result an oracle may return from recommend().

    Fields
    ------
    actionType : str
        One of "fold", "check", "call", "raise".
    amount : int
        Raise amount. Only meaningful when actionType is "raise".
    reasoning : str
        Optional free-text explanation, logged with the action.
    """
    amount: int
    reasoning: str
