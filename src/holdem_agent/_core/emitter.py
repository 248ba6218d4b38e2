# Area: Core
"""
holdem_agent._core.emitter — Action emitter
===========================================

The only path by which an action leaves the agent. Serializes one
``action`` envelope per call and hands it to the transport.
"""

from __future__ import annotations
import logging
from typing import Any, Dict

from ..errors import SendError
from .._shared.protocol import build_action, encode_envelope
from .._shared.transport import Transport
from ..types import DecisionContext
from .models import ActionType, Decision
from .normalizer import raise_floor

logger = logging.getLogger("holdem_agent.emitter")


class ActionEmitter:
    """Sends actions on a transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    def emit(self, decision: Decision, ctx: DecisionContext) -> Dict[str, Any]:
        """
        Send exactly one action envelope.

        Returns:
            The envelope that was sent.

        Raises:
            SendError: If the transport fails.
        """
        if decision.action_type is ActionType.RAISE:
            envelope = build_action(decision.action_type.value, raise_floor(decision, ctx))
        else:
            envelope = build_action(decision.action_type.value)

        try:
            self.transport.send(encode_envelope(envelope))
        except Exception as e:
            raise SendError(envelope, e) from e

        reasoning = f" — {decision.reasoning}" if decision.reasoning else ""
        logger.info(f"── Sent action: {envelope['payload']}{reasoning}")
        return envelope
