# Area: Core
"""
holdem_agent._core.fingerprint — Snapshot identity keys
=======================================================

Two derived keys drive the turn guard:

Fingerprint
    {game phase, betting round, current-turn id, pot, minimum to call,
    status message}. Two snapshots with equal fingerprints are treated
    as the same server notification delivered twice.

RoundKey
    {game phase, betting round, pot, status message}. Identifies one
    decision window; the agent acts at most once per (round key, bet
    level) pair.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from .models import GameSnapshot


class Fingerprint(NamedTuple):
    game_phase: Optional[str]
    betting_round: Optional[str]
    current_player_id: Optional[str]
    pot: int
    minimum_bet_for_call: int
    message: str


class RoundKey(NamedTuple):
    game_phase: Optional[str]
    betting_round: Optional[str]
    pot: int
    message: str


def fingerprint(snapshot: GameSnapshot) -> Fingerprint:
    return Fingerprint(
        game_phase=snapshot.game_phase,
        betting_round=snapshot.current_betting_round,
        current_player_id=snapshot.current_player_id,
        pot=snapshot.pot,
        minimum_bet_for_call=snapshot.minimum_bet_for_call,
        message=snapshot.message,
    )


def round_key(snapshot: GameSnapshot) -> RoundKey:
    return RoundKey(
        game_phase=snapshot.game_phase,
        betting_round=snapshot.current_betting_round,
        pot=snapshot.pot,
        message=snapshot.message,
    )
