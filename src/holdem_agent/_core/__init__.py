# Area: Core
"""
Core decision machinery for one seat at the table.

This package contains:
- Wire models for snapshots, cards and decisions
- Game state store and turn guard (exactly-once acting)
- Decision pipeline (context, oracle call, parsing, normalization)
- Message dispatcher and action emitter
"""

from .models import ActionType, Card, Decision, GameSnapshot, Player, PlayerStatus
from .enums import GuardEvent, GuardPhase, SendFailurePolicy, ZeroCallFoldPolicy
from .fingerprint import Fingerprint, RoundKey, fingerprint, round_key
from .state_store import GameStateStore
from .turn_guard import Claim, TurnGuard, TurnGuardState
from .context_builder import ContextBuilder
from .decision_parser import parse_decision
from .normalizer import normalize_decision
from .pipeline import DecisionOutcome, DecisionPipeline
from .emitter import ActionEmitter
from .dispatcher import MessageDispatcher

__all__ = [
    "ActionType",
    "Card",
    "Decision",
    "GameSnapshot",
    "Player",
    "PlayerStatus",
    "GuardEvent",
    "GuardPhase",
    "SendFailurePolicy",
    "ZeroCallFoldPolicy",
    "Fingerprint",
    "RoundKey",
    "fingerprint",
    "round_key",
    "GameStateStore",
    "Claim",
    "TurnGuard",
    "TurnGuardState",
    "ContextBuilder",
    "parse_decision",
    "normalize_decision",
    "DecisionOutcome",
    "DecisionPipeline",
    "ActionEmitter",
    "MessageDispatcher",
]
