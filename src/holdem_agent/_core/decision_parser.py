# Area: Core
"""
holdem_agent._core.decision_parser — Oracle response decoding
=============================================================

Turns whatever the oracle returned into a Decision.

Accepted shapes:
- a Decision instance (used as-is)
- a mapping ``{"actionType": ..., "amount": ..., "reasoning": ...}``
- free text containing such a JSON object, possibly wrapped in code
  fences or prose

When strict decoding fails, a keyword classifier scans the text for
"fold", "call", "raise", "check" (in that order) and falls back to a
fold when none is present.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .models import ActionType, Decision

logger = logging.getLogger("holdem_agent.parser")

# Priority order matters: the first keyword found wins.
KEYWORD_PRIORITY = (
    ActionType.FOLD,
    ActionType.CALL,
    ActionType.RAISE,
    ActionType.CHECK,
)

FALLBACK_REASONING = "Parsed from unstructured oracle response"

_RAISE_AMOUNT = re.compile(r"raise\D{0,20}?(\d+)", re.IGNORECASE)


def parse_decision(response: Any) -> Decision:
    """Decode an oracle response. Never raises for str/mapping/Decision input."""
    if isinstance(response, Decision):
        return response

    if isinstance(response, Mapping):
        decision = _validate(response)
        if decision is not None:
            return decision
        return classify_text(json.dumps(dict(response), default=str))

    text = response if isinstance(response, str) else str(response)
    decision = decode_json_decision(text)
    if decision is not None:
        return decision

    logger.debug("Structured decode failed, using keyword classifier")
    return classify_text(text)


def decode_json_decision(text: str) -> Optional[Decision]:
    """Find the first JSON object in ``text`` and validate it as a Decision."""
    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            obj, _ = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        if isinstance(obj, dict):
            decision = _validate(obj)
            if decision is not None:
                return decision
        start = text.find("{", start + 1)
    return None


def classify_text(text: str) -> Decision:
    """Keyword fallback for responses that are not valid JSON decisions."""
    lowered = text.lower()
    for action in KEYWORD_PRIORITY:
        if action.value in lowered:
            amount = _raise_amount(text) if action is ActionType.RAISE else None
            return Decision(action_type=action, amount=amount,
                            reasoning=FALLBACK_REASONING)
    return Decision(action_type=ActionType.FOLD, reasoning=FALLBACK_REASONING)


def _raise_amount(text: str) -> Optional[int]:
    match = _RAISE_AMOUNT.search(text)
    if match:
        return int(match.group(1))
    return None


def _validate(data: Mapping[str, Any]) -> Optional[Decision]:
    payload = dict(data)
    if isinstance(payload.get("actionType"), str):
        payload["actionType"] = payload["actionType"].strip().lower()
    try:
        return Decision.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"Decision validation failed: {e.errors()}")
        return None
