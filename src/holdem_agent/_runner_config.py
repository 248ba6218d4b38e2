# Area: Shared
"""
holdem_agent._runner_config — Runner Configuration
==================================================

Loading, validation and constants for AgentRunner.

Sources, lowest precedence first:
    1. DEFAULTS
    2. JSON config file (``--config``)
    3. ``.env`` file (python-dotenv; never overrides the real environment)
    4. Environment variables (ENV_MAPPINGS)
"""

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from dotenv import load_dotenv

from ._core.enums import SendFailurePolicy, ZeroCallFoldPolicy
from .errors import ConfigError

if TYPE_CHECKING:
    from .oracle import DecisionOracle

logger = logging.getLogger("holdem_agent")

DEFAULTS: Dict[str, Any] = {
    "server_url": "ws://localhost:8080",
    "agent_name": "HoldemBot",
    "oracle": "demo",
    "oracle_model": None,
    "oracle_timeout_seconds": 15.0,
    "cooldown_seconds": 2.0,
    "zero_call_fold_policy": ZeroCallFoldPolicy.FORBID.value,
    "send_failure_policy": SendFailurePolicy.HOLD.value,
    "reconnect_delay_seconds": 5.0,
    "recv_timeout_seconds": 1.0,
    "log_file": "holdem_agent.log",
    "log_level": "INFO",
}

ENV_MAPPINGS = {
    "POKER_SERVER_URL": "server_url",
    "POKER_AGENT_NAME": "agent_name",
    "POKER_ORACLE": "oracle",
    "POKER_ORACLE_MODEL": "oracle_model",
    "POKER_ORACLE_TIMEOUT": "oracle_timeout_seconds",
    "POKER_COOLDOWN_SECONDS": "cooldown_seconds",
    "POKER_ZERO_CALL_FOLD_POLICY": "zero_call_fold_policy",
    "POKER_SEND_FAILURE_POLICY": "send_failure_policy",
    "POKER_RECONNECT_DELAY": "reconnect_delay_seconds",
    "POKER_LOG_FILE": "log_file",
    "POKER_LOG_LEVEL": "log_level",
}

REQUIRED_CONFIG_KEYS = [
    "server_url",
    "agent_name",
]

# Keys that must hold a number > 0
POSITIVE_NUMBER_KEYS = [
    "oracle_timeout_seconds",
    "recv_timeout_seconds",
]

# Keys that must hold a number >= 0
NON_NEGATIVE_NUMBER_KEYS = [
    "cooldown_seconds",
    "reconnect_delay_seconds",
]

ORACLE_NAMES = ("demo", "anthropic", "gemini")


def load_config(config_path: Optional[str] = None,
                env_file: Optional[str] = ".env") -> Dict[str, Any]:
    """
    Assemble the runner config from defaults, file and environment.

    Args:
        config_path: Optional JSON config file.
        env_file: ``.env`` file to load, or None to skip it.

    Raises:
        ConfigError: If the config file is missing or not a JSON object,
            or an environment value cannot be parsed.
    """
    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(path, encoding="utf-8") as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must hold a JSON object")
        config.update(file_config)

    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    # Override with environment variables
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in POSITIVE_NUMBER_KEYS or config_key in NON_NEGATIVE_NUMBER_KEYS:
                try:
                    value = float(value)
                except ValueError as e:
                    raise ConfigError(f"{env_key} must be a number, got {value!r}") from e
            config[config_key] = value

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate a runner config.

    Args:
        config: Configuration dict

    Raises:
        ConfigError: If required keys are missing or a value is invalid
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise ConfigError(f"Missing required config keys: {missing}")

    oracle = str(config.get("oracle", DEFAULTS["oracle"])).lower()
    if oracle not in ORACLE_NAMES:
        raise ConfigError(
            f"Unknown oracle {config.get('oracle')!r}; expected one of {list(ORACLE_NAMES)}"
        )

    for key in POSITIVE_NUMBER_KEYS + NON_NEGATIVE_NUMBER_KEYS:
        value = config.get(key, DEFAULTS[key])
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        if key in POSITIVE_NUMBER_KEYS and value <= 0:
            raise ConfigError(f"{key} must be positive, got {value}")
        if value < 0:
            raise ConfigError(f"{key} must not be negative, got {value}")

    # Raise on unknown policy values
    zero_call_fold_policy(config)
    send_failure_policy(config)


def zero_call_fold_policy(config: Dict[str, Any]) -> ZeroCallFoldPolicy:
    value = config.get("zero_call_fold_policy", DEFAULTS["zero_call_fold_policy"])
    try:
        return ZeroCallFoldPolicy(str(value).lower())
    except ValueError as e:
        allowed = [p.value for p in ZeroCallFoldPolicy]
        raise ConfigError(f"zero_call_fold_policy must be one of {allowed}, got {value!r}") from e


def send_failure_policy(config: Dict[str, Any]) -> SendFailurePolicy:
    value = config.get("send_failure_policy", DEFAULTS["send_failure_policy"])
    try:
        return SendFailurePolicy(str(value).lower())
    except ValueError as e:
        allowed = [p.value for p in SendFailurePolicy]
        raise ConfigError(f"send_failure_policy must be one of {allowed}, got {value!r}") from e


def build_oracle(config: Dict[str, Any]) -> "DecisionOracle":
    """
    Build the DecisionOracle named by ``config["oracle"]``.

    Raises:
        ConfigError: If the oracle needs an API key or package that is missing.
    """
    from .demo_oracle import DemoOracle
    from .oracle import LLMOracle
    from ._shared.llm_client import AnthropicClient, GeminiClient

    name = str(config.get("oracle", DEFAULTS["oracle"])).lower()
    model = config.get("oracle_model") or None
    timeout = float(config.get("oracle_timeout_seconds", DEFAULTS["oracle_timeout_seconds"]))

    if name == "demo":
        return DemoOracle()
    if name == "anthropic":
        return LLMOracle(AnthropicClient(model=model, timeout=timeout))
    if name == "gemini":
        return LLMOracle(GeminiClient(model=model, timeout=timeout))
    raise ConfigError(f"Unknown oracle {name!r}; expected one of {list(ORACLE_NAMES)}")
