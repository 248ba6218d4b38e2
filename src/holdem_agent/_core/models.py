# Area: Core
"""
holdem_agent._core.models — Wire models for the poker server
============================================================

Pydantic models for the payloads the server broadcasts and the
decisions the agent produces. Field names follow Python conventions;
aliases carry the server's camelCase spelling.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PlayerStatus(str, Enum):
    """Seat status as reported by the server."""
    ACTIVE = "active"
    FOLDED = "folded"
    ALL_IN = "all-in"
    SPECTATOR = "spectator"
    SITTING_OUT = "sitting-out"
    UNKNOWN = "unknown"


KNOWN_STATUSES = frozenset(status.value for status in PlayerStatus)


class ActionType(str, Enum):
    """Actions the agent can send."""
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Card(_WireModel):
    """Immutable playing card."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    rank: str
    suit: str

    def __str__(self) -> str:
        return f"{self.rank}{self.suit[:1]}"


class Player(_WireModel):
    """One seat at the table."""

    id: str
    name: str
    chips: int = 0
    status: PlayerStatus = PlayerStatus.ACTIVE
    current_bet: int = Field(0, alias="currentBet")
    is_dealer: bool = Field(False, alias="isDealer")
    is_small_blind: bool = Field(False, alias="isSmallBlind")
    is_big_blind: bool = Field(False, alias="isBigBlind")
    is_spectator: bool = Field(False, alias="isSpectator")

    @field_validator("status", mode="before")
    @classmethod
    def _unrecognized_status(cls, value):
        # Unrecognized statuses decode as a non-active seat
        if isinstance(value, str) and value not in KNOWN_STATUSES:
            return PlayerStatus.UNKNOWN
        return value


class GameSnapshot(_WireModel):
    """Full point-in-time description of the table."""

    players: List[Player] = Field(default_factory=list)
    community_cards: List[Card] = Field(default_factory=list, alias="communityCards")
    pot: int = 0
    current_betting_round: Optional[str] = Field(None, alias="currentBettingRound")
    current_player_id: Optional[str] = Field(None, alias="currentPlayerId")
    game_phase: Optional[str] = Field(None, alias="gamePhase")
    message: str = ""
    minimum_raise_amount: int = Field(0, alias="minimumRaiseAmount")
    minimum_bet_for_call: int = Field(0, alias="minimumBetForCall")

    def find_player(self, player_id: Optional[str]) -> Optional[Player]:
        if player_id is None:
            return None
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def find_player_by_name(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None


class Decision(_WireModel):
    """An action recommendation.

    ``amount`` is only kept for raises; it is dropped for every other
    action type. A raise may arrive without an amount, in which case the
    minimum raise amount is substituted downstream.
    """

    action_type: ActionType = Field(alias="actionType")
    amount: Optional[int] = None
    reasoning: Optional[str] = None

    @model_validator(mode="after")
    def _amount_only_for_raise(self) -> "Decision":
        if self.action_type is not ActionType.RAISE and self.amount is not None:
            self.amount = None
        return self

    def to_payload(self) -> dict:
        """Outbound ``action`` payload: actionType plus amount for raises."""
        payload = {"actionType": self.action_type.value}
        if self.action_type is ActionType.RAISE and self.amount is not None:
            payload["amount"] = self.amount
        return payload
