# Area: Core
"""
holdem_agent._core.dispatcher — Message dispatcher
==================================================

Decodes each inbound envelope and routes it to the agent by type.
Malformed messages are logged and dropped; unknown types are ignored.
Dispatching never stops because of a bad message.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from .._shared.protocol import (
    MSG_ERROR,
    MSG_INFO,
    MSG_PLAYER_HAND,
    MSG_STATE,
    decode_envelope,
)
from .models import Card, GameSnapshot

if TYPE_CHECKING:
    from ..agent import PokerAgent

logger = logging.getLogger("holdem_agent.dispatcher")

_HAND_ADAPTER = TypeAdapter(List[Card])


class MessageDispatcher:
    """
    Stateless router in front of a PokerAgent.

    One call to ``dispatch`` handles exactly one raw message.
    """

    def __init__(self, agent: "PokerAgent"):
        self.agent = agent

    def dispatch(self, raw: Any) -> Optional[str]:
        """
        Decode and route one inbound message.

        Returns the handled message type, or None if the message was
        dropped or ignored.
        """
        try:
            message_type, payload = decode_envelope(raw)

            if message_type == MSG_STATE:
                snapshot = _decode_snapshot(payload)
                self.agent.handle_snapshot(snapshot)

            elif message_type == MSG_PLAYER_HAND:
                cards = _decode_hand(payload)
                self.agent.handle_hand(cards)

            elif message_type == MSG_INFO:
                self.agent.handle_info(payload)

            elif message_type == MSG_ERROR:
                self.agent.handle_error(payload)

            else:
                logger.debug(f"No handler for type={message_type}")
                return None

        except DecodeError as e:
            logger.warning(f"Dropped message: {e}")
            return None

        return message_type


def _decode_snapshot(payload: Any) -> GameSnapshot:
    try:
        return GameSnapshot.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(_summarize(e), raw_message=payload, message_type=MSG_STATE) from e


def _decode_hand(payload: Any) -> List[Card]:
    try:
        return _HAND_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise DecodeError(_summarize(e), raw_message=payload,
                          message_type=MSG_PLAYER_HAND) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors()[:3]:
        loc = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{loc or '<payload>'}: {item.get('msg')}")
    return "; ".join(parts)
