# Area: Shared
"""
holdem_agent._shared.protocol — Wire envelope helpers
=====================================================

Every message in either direction is a JSON object::

    {"type": "<message type>", "payload": <object>}
"""

import json
from typing import Any, Dict, Optional, Tuple

from ..errors import DecodeError

# Inbound message types
MSG_STATE = "state"
MSG_PLAYER_HAND = "player_hand"
MSG_INFO = "info"
MSG_ERROR = "error"

# Outbound message types
MSG_JOIN = "join"
MSG_ACTION = "action"


def build_envelope(message_type: str, payload: Any) -> Dict[str, Any]:
    """Build a wire envelope dict."""
    return {"type": message_type, "payload": payload}


def encode_envelope(envelope: Dict[str, Any]) -> str:
    """Serialize an envelope for the transport."""
    return json.dumps(envelope, separators=(",", ":"))


def build_join(agent_name: str) -> Dict[str, Any]:
    """Envelope announcing the agent to the table."""
    return build_envelope(MSG_JOIN, {"name": agent_name})


def build_action(action_type: str, amount: Optional[int] = None) -> Dict[str, Any]:
    """Envelope carrying one action. ``amount`` is only sent when given."""
    payload: Dict[str, Any] = {"actionType": action_type}
    if amount is not None:
        payload["amount"] = amount
    return build_envelope(MSG_ACTION, payload)


def decode_envelope(raw: Any) -> Tuple[str, Any]:
    """
    Split a raw inbound message into (message_type, payload).

    Raises:
        DecodeError: If the message is not a JSON object with a string
            ``type``.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"not UTF-8: {e}", raw_message=raw) from e

    if isinstance(raw, str):
        try:
            body = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON: {e}", raw_message=raw) from e
    else:
        body = raw

    if not isinstance(body, dict):
        raise DecodeError("envelope is not an object", raw_message=raw)

    message_type = body.get("type")
    if not isinstance(message_type, str) or not message_type:
        raise DecodeError("missing or invalid 'type'", raw_message=raw)

    return message_type, body.get("payload")
