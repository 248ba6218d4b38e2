"""
holdem_agent — Texas Hold'em Agent Package
==========================================

A client that joins a poker table over WebSocket, keeps the latest game
snapshot, and acts exactly once per decision point using a pluggable
decision oracle.

Quick Start (no API key needed):
    from holdem_agent import AgentRunner, DemoOracle
    runner = AgentRunner(config={"server_url": "ws://localhost:8080"},
                         oracle=DemoOracle())
    runner.run()

Custom Oracle:
    from holdem_agent import AgentRunner, DecisionOracle
    class MyOracle(DecisionOracle): ...  # Implement recommend()
    runner = AgentRunner(config=config, oracle=MyOracle())
    runner.run()

Type Definitions
----------------
All oracle input/output types are available for import:

    from holdem_agent import DecisionContext, DecisionResult, CardInfo
"""

from .oracle import DecisionOracle, LLMOracle
from .demo_oracle import DemoOracle
from .agent import PokerAgent
from .runner import AgentRunner
from ._core.enums import SendFailurePolicy, ZeroCallFoldPolicy
from ._core.models import ActionType, Card, Decision, GameSnapshot, Player, PlayerStatus
from .errors import (
    HoldemAgentError,
    ConfigError,
    DecodeError,
    OracleError,
    OracleTimeoutError,
    SendError,
    TransportClosedError,
)
from .types import (
    CardInfo,
    ActivePlayerInfo,
    DecisionContext,
    DecisionResult,
)

__all__ = [
    # Main classes
    "DecisionOracle",
    "LLMOracle",
    "DemoOracle",
    "PokerAgent",
    "AgentRunner",
    # Policies
    "SendFailurePolicy",
    "ZeroCallFoldPolicy",
    # Wire models
    "ActionType",
    "Card",
    "Decision",
    "GameSnapshot",
    "Player",
    "PlayerStatus",
    # Errors
    "HoldemAgentError",
    "ConfigError",
    "DecodeError",
    "OracleError",
    "OracleTimeoutError",
    "SendError",
    "TransportClosedError",
    # Oracle types
    "CardInfo",
    "ActivePlayerInfo",
    "DecisionContext",
    "DecisionResult",
]
__version__ = "1.0.0"
