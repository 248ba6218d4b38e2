# Area: Shared
"""
holdem_agent._shared.transport — Message channel to the game server
===================================================================

``Transport`` is the bidirectional text channel the agent talks over.
``WebSocketTransport`` implements it on top of ``websocket-client``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import websocket

from ..errors import TransportClosedError

logger = logging.getLogger("holdem_agent.transport")


class Transport(ABC):
    """Abstract bidirectional message channel."""

    @abstractmethod
    def connect(self) -> None:
        ...

    @abstractmethod
    def send(self, text: str) -> None:
        """Send one message. Raises on failure."""
        ...

    @abstractmethod
    def recv(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Receive one message.

        Returns None when ``timeout`` elapses without a message.

        Raises:
            TransportClosedError: If the connection is gone.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        ...


class WebSocketTransport(Transport):
    """Blocking WebSocket client."""

    def __init__(self, url: str, connect_timeout: float = 10.0):
        self.url = url
        self.connect_timeout = connect_timeout
        self._ws: Optional[websocket.WebSocket] = None

    @property
    def connected(self) -> bool:
        return self._ws is not None and self._ws.connected

    def connect(self) -> None:
        logger.info(f"Connecting to {self.url}")
        try:
            self._ws = websocket.create_connection(self.url, timeout=self.connect_timeout)
        except (OSError, websocket.WebSocketException) as e:
            self._ws = None
            raise TransportClosedError(f"Could not connect to {self.url}: {e}") from e
        logger.info("Connected")

    def send(self, text: str) -> None:
        if self._ws is None:
            raise TransportClosedError("Not connected")
        try:
            self._ws.send(text)
        except (OSError, websocket.WebSocketException) as e:
            raise TransportClosedError(f"Send failed: {e}") from e

    def recv(self, timeout: Optional[float] = None) -> Optional[str]:
        if self._ws is None:
            raise TransportClosedError("Not connected")
        self._ws.settimeout(timeout)
        try:
            data = self._ws.recv()
        except websocket.WebSocketTimeoutException:
            return None
        except (OSError, websocket.WebSocketException) as e:
            raise TransportClosedError(f"Connection lost: {e}") from e
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        if data == "" and not self._ws.connected:
            raise TransportClosedError("Connection closed by server")
        return data

    def close(self) -> None:
        if self._ws is not None:
            try:
                self._ws.close()
            except (OSError, websocket.WebSocketException) as e:
                logger.debug(f"Error while closing websocket: {e}")
            self._ws = None
