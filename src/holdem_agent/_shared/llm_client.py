# Area: Shared
"""
holdem_agent._shared.llm_client — LLM client abstraction
========================================================

Thin clients that turn a prompt into reply text.

  - AnthropicClient: Anthropic Claude API (``anthropic`` SDK)
  - GeminiClient:    Google Gemini ``generateContent`` REST endpoint
  - MockLLMClient:   canned replies for tests

Every client raises OracleError on failure; none of them returns an
empty string to signal an error.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from ..errors import ConfigError, OracleError

logger = logging.getLogger("holdem_agent.llm")

# Default LLM settings
DEFAULT_ANTHROPIC_MODEL = "claude-3-haiku-20240307"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_MAX_TOKENS = 300
DEFAULT_TIMEOUT_SECONDS = 15.0

GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)


class BaseLLMClient(ABC):
    """Abstract base for LLM clients."""

    name: str = "llm"

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate text from prompt. Raises OracleError on failure."""
        ...


class AnthropicClient(BaseLLMClient):
    """Anthropic Claude API client."""

    name = "anthropic"

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        api_key: Optional[str] = None,
        sdk_client: Any = None,
    ):
        self.model = model or DEFAULT_ANTHROPIC_MODEL
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client = sdk_client if sdk_client is not None else self._init_client(api_key)

    @staticmethod
    def _init_client(api_key: Optional[str]) -> Any:
        api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            raise ConfigError("ANTHROPIC_API_KEY is not set")
        try:
            from anthropic import Anthropic
        except ImportError as e:
            raise ConfigError(
                "The anthropic package is required: pip install 'holdem-agent[llm]'"
            ) from e
        return Anthropic(api_key=api_key)

    def generate(self, prompt: str) -> str:
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
                timeout=self.timeout,
            )
        except Exception as e:
            raise OracleError(self.name, f"request failed: {e}") from e

        if response.content and len(response.content) > 0:
            text = getattr(response.content[0], "text", "")
            if text:
                return text
        raise OracleError(self.name, "empty response")


class GeminiClient(BaseLLMClient):
    """
    Google Gemini REST client.

    Env vars:
    - GEMINI_API_KEY: API key sent as ``X-goog-api-key``
    """

    name = "gemini"

    def __init__(
        self,
        model: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.model = model or DEFAULT_GEMINI_MODEL
        self.timeout = timeout
        self._api_key = api_key or os.environ.get("GEMINI_API_KEY", "")
        if not self._api_key:
            raise ConfigError("GEMINI_API_KEY is not set")
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return GEMINI_API_URL.format(model=self.model)

    def generate(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": self._api_key,
        }
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            resp = self._session.post(
                self.url, json=body, headers=headers,
                timeout=(self.timeout, self.timeout),
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.Timeout as e:
            raise OracleError(self.name, f"request timed out: {e}") from e
        except (requests.exceptions.RequestException, ValueError) as e:
            raise OracleError(self.name, f"request failed: {e}") from e

        return self._extract_text(data)

    def _extract_text(self, data: Dict[str, Any]) -> str:
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise OracleError(self.name, "response has no candidate text") from e
        if not text:
            raise OracleError(self.name, "empty response")
        return text


class MockLLMClient(BaseLLMClient):
    """Mock client for testing."""

    name = "mock"

    def __init__(self, responses: Optional[Dict[str, str]] = None,
                 default: Optional[str] = None):
        self._responses = responses or {}
        self._default = default
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        for key, response in self._responses.items():
            if key in prompt:
                return response
        if self._default is not None:
            return self._default
        raise OracleError(self.name, "no canned response for prompt")
