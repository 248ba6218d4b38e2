"""
holdem_agent.errors — Custom exception classes
==============================================

Defines the exception hierarchy for the agent.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class HoldemAgentError(Exception):
    """Base exception for all holdem_agent package errors."""
    pass


class ConfigError(HoldemAgentError):
    """Raised when the runner configuration is invalid."""
    pass


class DecodeError(HoldemAgentError):
    """Raised when an inbound envelope or its payload cannot be decoded."""

    def __init__(self, reason: str, raw_message: Any = None,
                 message_type: Optional[str] = None):
        self.reason = reason
        self.raw_message = raw_message
        self.message_type = message_type
        label = f" ({message_type})" if message_type else ""
        super().__init__(f"Could not decode inbound message{label}: {reason}")


class OracleError(HoldemAgentError):
    """Raised when the decision oracle fails to produce a response."""

    def __init__(self, oracle_name: str, reason: str,
                 input_payload: Optional[Dict[str, Any]] = None):
        self.oracle_name = oracle_name
        self.reason = reason
        self.input_payload = input_payload or {}
        super().__init__(f"Oracle '{oracle_name}' failed: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="ORACLE_FAILURE",
            oracle_name=self.oracle_name,
            deadline_seconds=None,
            reason=self.reason,
            input_payload=self.input_payload,
        )


class OracleTimeoutError(OracleError):
    """Raised when the oracle exceeds its deadline."""

    def __init__(self, oracle_name: str, deadline_seconds: float,
                 input_payload: Optional[Dict[str, Any]] = None):
        self.deadline_seconds = deadline_seconds
        super().__init__(
            oracle_name,
            f"timed out after {deadline_seconds} seconds",
            input_payload,
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="ORACLE_TIMEOUT",
            oracle_name=self.oracle_name,
            deadline_seconds=self.deadline_seconds,
            reason=self.reason,
            input_payload=self.input_payload,
        )


class TransportClosedError(HoldemAgentError):
    """Raised by a transport when the connection to the server is gone."""
    pass


class SendError(HoldemAgentError):
    """Raised when the transport fails while emitting an action."""

    def __init__(self, envelope: Dict[str, Any], cause: Optional[BaseException] = None):
        self.envelope = envelope
        self.cause = cause
        super().__init__(f"Failed to send {envelope.get('type', '?')} envelope: {cause}")


def _format_error_block(
    error_type: str,
    oracle_name: str,
    deadline_seconds: Optional[float],
    reason: str,
    input_payload: Dict[str, Any],
) -> str:
    """Format a structured error block for the log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " ORACLE ERROR — DEFAULTING TO FOLD",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Oracle:       {oracle_name}",
    ]

    if deadline_seconds is not None:
        lines.append(f" Deadline:     {deadline_seconds} seconds")

    lines.append(f" Reason:       {reason}")
    lines.append("")
    lines.append(" ── DECISION CONTEXT " + "─" * 43)
    lines.append(_indent_json(input_payload))
    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
