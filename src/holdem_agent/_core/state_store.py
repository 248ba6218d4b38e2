# Area: Core
"""
holdem_agent._core.state_store — Game state store
=================================================

Holds the latest table snapshot, the agent's private hand and the
agent's own player id. The id is resolved lazily: the first snapshot
that seats a player with the configured name fixes it until
``reset_identity`` starts a new session (the server hands out a fresh
id on every ``join``).
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Card, GameSnapshot, Player, PlayerStatus

logger = logging.getLogger("holdem_agent.state")


@dataclass
class GameStateStore:
    """
    Latest known state of the table, from the agent's point of view.

    Snapshots replace each other wholesale. The hand is replaced on
    every ``player_hand`` notification.
    """
    agent_name: str
    latest_snapshot: Optional[GameSnapshot] = None
    hand: Optional[List[Card]] = None
    my_player_id: Optional[str] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    # ── Updates ──────────────────────────────────────────────

    def update_snapshot(self, snapshot: GameSnapshot) -> None:
        with self._lock:
            self.latest_snapshot = snapshot
            if self.my_player_id is None:
                me = snapshot.find_player_by_name(self.agent_name)
                if me is not None:
                    self.my_player_id = me.id
                    logger.info(f"Resolved own player id: {me.id} ({self.agent_name})")

    def install_hand(self, cards: List[Card]) -> None:
        """Clear the stale hand and install the newly dealt one."""
        with self._lock:
            self.hand = list(cards)
        logger.info(f"New hand: {' '.join(str(c) for c in cards)}")

    def reset_identity(self) -> None:
        """Forget the session: own id, hand and snapshot. The id resolves again by name."""
        with self._lock:
            self.my_player_id = None
            self.hand = None
            self.latest_snapshot = None
        logger.info("Session identity cleared")

    # ── Queries ──────────────────────────────────────────────

    def has_hand(self) -> bool:
        return bool(self.hand)

    def is_my_turn(self, snapshot: Optional[GameSnapshot] = None) -> bool:
        snapshot = snapshot or self.latest_snapshot
        if snapshot is None or self.my_player_id is None:
            return False
        return snapshot.current_player_id == self.my_player_id

    def my_player(self, snapshot: Optional[GameSnapshot] = None) -> Optional[Player]:
        snapshot = snapshot or self.latest_snapshot
        if snapshot is None:
            return None
        return snapshot.find_player(self.my_player_id)

    def can_act(self, snapshot: GameSnapshot) -> bool:
        """Own turn, own status active, and a hand is held."""
        if not self.is_my_turn(snapshot):
            return False
        me = self.my_player(snapshot)
        if me is None or me.status is not PlayerStatus.ACTIVE:
            return False
        return self.has_hand()
