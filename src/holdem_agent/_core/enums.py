# Area: Core
"""
holdem_agent._core.enums — Turn Guard State Machine Enums
=========================================================

Defines the phases and events of the turn guard state machine.
"""

from enum import Enum


class GuardPhase(Enum):
    """
    Phases of the turn guard.

    Phase transitions:
    IDLE -> ELIGIBLE (on CONDITIONS_MET)
    COOLING -> ELIGIBLE (on CONDITIONS_MET, cooldown elapsed)
    IDLE/COOLING -> COOLING (on COOLDOWN_ACTIVE)
    ELIGIBLE -> ACTING (on CLAIMED)
    ELIGIBLE -> IDLE (on CLAIM_LOST)
    ACTING -> COOLING (on ACTION_SENT)
    ACTING -> IDLE (on ACTION_FAILED)
    IDLE/ELIGIBLE/COOLING -> IDLE (on NOT_ELIGIBLE or ALREADY_ACTED)
    Any phase -> IDLE (on HAND_RESET)
    """
    IDLE = "IDLE"
    ELIGIBLE = "ELIGIBLE"
    ACTING = "ACTING"
    COOLING = "COOLING"


class GuardEvent(Enum):
    """
    Events that move the turn guard between phases.

    - NOT_ELIGIBLE: not our turn, not active, no hand, or identity unknown
    - COOLDOWN_ACTIVE: snapshot arrived inside the post-action window
    - ALREADY_ACTED: decision point already handled
    - CONDITIONS_MET: a fresh decision point is actionable
    - CLAIMED: the decision point was claimed for this agent
    - CLAIM_LOST: another delivery claimed it first
    - ACTION_SENT: the action left the agent
    - ACTION_FAILED: the decision or send failed (claim released or held)
    - HAND_RESET: a new hand was dealt
    """
    NOT_ELIGIBLE = "NOT_ELIGIBLE"
    COOLDOWN_ACTIVE = "COOLDOWN_ACTIVE"
    ALREADY_ACTED = "ALREADY_ACTED"
    CONDITIONS_MET = "CONDITIONS_MET"
    CLAIMED = "CLAIMED"
    CLAIM_LOST = "CLAIM_LOST"
    ACTION_SENT = "ACTION_SENT"
    ACTION_FAILED = "ACTION_FAILED"
    HAND_RESET = "HAND_RESET"


class ZeroCallFoldPolicy(Enum):
    """What to do when the oracle folds although checking is free."""
    FORBID = "forbid"       # replace the fold with a check
    ALLOW = "allow"         # send the fold as recommended


class SendFailurePolicy(Enum):
    """What the turn guard does with a claim whose action failed to send."""
    HOLD = "hold"           # keep the claim; the decision point stays handled
    RELEASE = "release"     # release the claim so a later snapshot can retry
