# Area: Core
"""
holdem_agent._core.context_builder — Build oracle context dicts
===============================================================

Constructs the DecisionContext handed to the oracle at each decision
point. A context is built fresh every time and never cached.
"""

from __future__ import annotations
from typing import List

from ..types import ActivePlayerInfo, CardInfo, DecisionContext
from .models import Card, GameSnapshot, PlayerStatus

CONTESTING_STATUSES = (PlayerStatus.ACTIVE, PlayerStatus.ALL_IN)


def _card_info(card: Card) -> CardInfo:
    return {"rank": card.rank, "suit": card.suit}


class ContextBuilder:
    """Builds DecisionContext dicts from the table snapshot and hand."""

    def build_decision_ctx(self, snapshot: GameSnapshot,
                           hand: List[Card]) -> DecisionContext:
        """
        Build context for DecisionOracle.recommend().

        Parameters
        ----------
        snapshot : GameSnapshot
            The snapshot that opened this decision point.
        hand : list of Card
            The agent's private cards.

        Returns
        -------
        DecisionContext
            Only players still contesting the pot are listed.
        """
        active_players: List[ActivePlayerInfo] = [
            {"name": p.name, "chips": p.chips, "currentBet": p.current_bet}
            for p in snapshot.players
            if p.status in CONTESTING_STATUSES
        ]

        return {
            "playerHand": [_card_info(c) for c in hand],
            "communityCards": [_card_info(c) for c in snapshot.community_cards],
            "activePlayers": active_players,
            "pot": snapshot.pot,
            "amountToCall": snapshot.minimum_bet_for_call,
            "minimumRaiseAmount": snapshot.minimum_raise_amount,
            "bettingRound": snapshot.current_betting_round or "",
        }
