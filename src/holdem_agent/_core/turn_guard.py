# Area: Core
"""
holdem_agent._core.turn_guard — Exactly-once turn guard
=======================================================

Decides whether an incoming snapshot is a new decision point the agent
must act on. The server may resend the same state, echo the agent's
own action back, or broadcast several snapshots for one turn; the guard
lets exactly one action through per (round key, bet level).

All bookkeeping lives in one ``TurnGuardState`` value and is only
mutated under the guard lock. Claiming a decision point is a
compare-and-set on ``acted``; the lock is never held while the oracle
runs.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .enums import GuardEvent, GuardPhase
from .fingerprint import Fingerprint, RoundKey, fingerprint, round_key
from .models import GameSnapshot
from .state_store import GameStateStore

logger = logging.getLogger("holdem_agent.guard")

DEFAULT_COOLDOWN_SECONDS = 2.0


# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    GuardPhase.IDLE: {
        GuardEvent.NOT_ELIGIBLE: GuardPhase.IDLE,
        GuardEvent.ALREADY_ACTED: GuardPhase.IDLE,
        GuardEvent.COOLDOWN_ACTIVE: GuardPhase.COOLING,
        GuardEvent.CONDITIONS_MET: GuardPhase.ELIGIBLE,
        GuardEvent.HAND_RESET: GuardPhase.IDLE,
    },
    GuardPhase.ELIGIBLE: {
        GuardEvent.CLAIMED: GuardPhase.ACTING,
        GuardEvent.CLAIM_LOST: GuardPhase.IDLE,
        GuardEvent.NOT_ELIGIBLE: GuardPhase.IDLE,
        GuardEvent.HAND_RESET: GuardPhase.IDLE,
    },
    GuardPhase.ACTING: {
        GuardEvent.ACTION_SENT: GuardPhase.COOLING,
        GuardEvent.ACTION_FAILED: GuardPhase.IDLE,
        GuardEvent.HAND_RESET: GuardPhase.IDLE,
    },
    GuardPhase.COOLING: {
        GuardEvent.NOT_ELIGIBLE: GuardPhase.IDLE,
        GuardEvent.ALREADY_ACTED: GuardPhase.IDLE,
        GuardEvent.COOLDOWN_ACTIVE: GuardPhase.COOLING,
        GuardEvent.CONDITIONS_MET: GuardPhase.ELIGIBLE,
        GuardEvent.HAND_RESET: GuardPhase.IDLE,
    },
}


@dataclass
class TurnGuardState:
    """Per-hand-and-round bookkeeping for the guard."""
    last_round_key: Optional[RoundKey] = None
    last_bet_level: int = 0
    acted: bool = False
    last_action_at: float = 0.0
    fingerprint: Optional[Fingerprint] = None
    phase: GuardPhase = GuardPhase.IDLE
    hand_epoch: int = 0


class Claim(NamedTuple):
    """A decision point this agent has claimed and must now resolve."""
    round_key: RoundKey
    bet_level: int
    hand_epoch: int


class TurnGuard:
    """
    State machine gating every outbound action.

    Usage::

        claim = guard.evaluate(snapshot, store)
        if claim is not None:
            ok = run_decision_and_send(...)
            guard.complete(claim, success=ok)
    """

    def __init__(self, cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS):
        self.cooldown_seconds = cooldown_seconds
        self.state = TurnGuardState()
        self._lock = threading.Lock()

    @property
    def phase(self) -> GuardPhase:
        return self.state.phase

    # ── Snapshot evaluation ──────────────────────────────────

    def evaluate(self, snapshot: GameSnapshot,
                 store: GameStateStore) -> Optional[Claim]:
        """
        Run one snapshot through the guard.

        Returns a Claim when the snapshot is a new decision point that
        this call claimed, otherwise None.
        """
        fp = fingerprint(snapshot)
        with self._lock:
            s = self.state

            if fp == s.fingerprint:
                logger.debug("Duplicate snapshot ignored")
                return None

            # A decision is in flight; look at this snapshot again later
            if s.phase is GuardPhase.ACTING:
                logger.debug("Decision in flight, snapshot deferred")
                return None

            s.fingerprint = fp

            if not store.can_act(snapshot):
                self._fire(GuardEvent.NOT_ELIGIBLE)
                return None

            now = time.monotonic()
            if s.last_action_at and now - s.last_action_at < self.cooldown_seconds:
                logger.debug(
                    "Within cooldown (%.2fs since last action)",
                    now - s.last_action_at,
                )
                self._fire(GuardEvent.COOLDOWN_ACTIVE)
                return None

            key = round_key(snapshot)
            bet_level = snapshot.minimum_bet_for_call
            if key != s.last_round_key:
                logger.debug(f"New round: {key}")
                s.acted = False
                s.last_bet_level = 0
            elif bet_level > s.last_bet_level:
                logger.debug(f"Bet level raised: {s.last_bet_level} → {bet_level}")
                s.acted = False

            if s.acted:
                self._fire(GuardEvent.ALREADY_ACTED)
                return None

            self._fire(GuardEvent.CONDITIONS_MET)
            if not self._try_claim():
                self._fire(GuardEvent.CLAIM_LOST)
                return None

            self._fire(GuardEvent.CLAIMED)
            return Claim(round_key=key, bet_level=bet_level, hand_epoch=s.hand_epoch)

    def _try_claim(self) -> bool:
        """Compare-and-set ``acted`` from False to True. Caller holds the lock."""
        if self.state.acted:
            return False
        self.state.acted = True
        return True

    # ── Claim resolution ─────────────────────────────────────

    def is_current(self, claim: Claim) -> bool:
        """True while no new hand has been dealt since the claim was made."""
        with self._lock:
            return claim.hand_epoch == self.state.hand_epoch

    def complete(self, claim: Claim, success: bool) -> bool:
        """
        Resolve a claim after the decision pipeline finished.

        On success the decision point is recorded and the cooldown
        starts. On failure the claim is released so a later snapshot can
        retry. Claims from a previous hand are discarded.

        Returns:
            True if the claim was applied, False if it was stale.
        """
        with self._lock:
            s = self.state
            if claim.hand_epoch != s.hand_epoch:
                logger.info("Discarding decision from a previous hand")
                return False

            if success:
                s.last_round_key = claim.round_key
                s.last_bet_level = claim.bet_level
                s.last_action_at = time.monotonic()
                self._fire(GuardEvent.ACTION_SENT)
            else:
                s.acted = False
                self._fire(GuardEvent.ACTION_FAILED)
            return True

    def hold(self, claim: Claim) -> bool:
        """
        Keep a claim whose action could not be delivered.

        The decision point stays marked as handled, the same way a sent
        action would, but no cooldown starts.
        """
        with self._lock:
            s = self.state
            if claim.hand_epoch != s.hand_epoch:
                return False
            s.last_round_key = claim.round_key
            s.last_bet_level = claim.bet_level
            self._fire(GuardEvent.ACTION_FAILED)
            return True

    # ── Reset ────────────────────────────────────────────────

    def reset_for_new_hand(self) -> None:
        """Unconditional full reset when a new hand is dealt."""
        with self._lock:
            self._fire(GuardEvent.HAND_RESET)
            epoch = self.state.hand_epoch + 1
            self.state = TurnGuardState(hand_epoch=epoch)
            logger.debug(f"Guard reset for hand #{epoch}")

    # ── Internals ────────────────────────────────────────────

    def _fire(self, event: GuardEvent) -> GuardPhase:
        current = self.state.phase
        valid = TRANSITIONS.get(current, {})
        if event not in valid:
            raise ValueError(f"Invalid transition: {event.value} from {current.value}")
        next_phase = valid[event]
        if next_phase is not current:
            logger.debug(f"Guard: {current.value} → {next_phase.value} ({event.value})")
        self.state.phase = next_phase
        return next_phase
