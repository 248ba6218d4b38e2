# Area: Core
"""
holdem_agent._core.timeout — Oracle deadline enforcement
========================================================

Runs an oracle call with a wall-clock deadline.

Decisions run on a worker thread, so ``signal.SIGALRM`` (main thread
only) cannot be used. The call runs on a daemon thread instead and the
caller waits at most ``seconds`` for it. A call that misses the deadline
is abandoned, not interrupted: its result is discarded when it
eventually returns.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from ..errors import OracleTimeoutError


class TimeoutHandler:
    """Runs a callable with a deadline."""

    def __init__(self, seconds: float, oracle_name: str,
                 input_payload: Optional[Dict[str, Any]] = None):
        self.seconds = seconds
        self.oracle_name = oracle_name
        self.input_payload = input_payload or {}

    def run(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Call ``fn(*args, **kwargs)`` and return its result.

        Raises:
            OracleTimeoutError: If the call does not finish in time.
            Exception: Whatever ``fn`` raised, re-raised in the caller.
        """
        outcome: Dict[str, Any] = {}

        def _target() -> None:
            try:
                outcome["result"] = fn(*args, **kwargs)
            except BaseException as e:  # re-raised in the caller thread
                outcome["error"] = e

        worker = threading.Thread(
            target=_target, name=f"oracle-{self.oracle_name}", daemon=True,
        )
        worker.start()
        worker.join(self.seconds)

        if worker.is_alive():
            raise OracleTimeoutError(
                oracle_name=self.oracle_name,
                deadline_seconds=self.seconds,
                input_payload=self.input_payload,
            )
        if "error" in outcome:
            raise outcome["error"]
        return outcome.get("result")
