# Area: Shared
"""
Shared utilities used by the agent and the runner.

This package contains:
- Wire protocol helpers (envelopes)
- WebSocket transport
- LLM clients for the oracle
- Logging configuration
"""

from .logging_config import setup_logging
from .protocol import build_action, build_envelope, build_join, decode_envelope, encode_envelope
from .transport import Transport, WebSocketTransport
from .llm_client import AnthropicClient, BaseLLMClient, GeminiClient, MockLLMClient

__all__ = [
    "setup_logging",
    "build_action",
    "build_envelope",
    "build_join",
    "decode_envelope",
    "encode_envelope",
    "Transport",
    "WebSocketTransport",
    "AnthropicClient",
    "BaseLLMClient",
    "GeminiClient",
    "MockLLMClient",
]
