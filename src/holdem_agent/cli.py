# Area: Runner
"""
holdem_agent.cli — Command-line interface
=========================================

Provides the CLI entry point for running the agent.

Usage:
    holdem-agent --demo                          # Offline rule-based oracle
    holdem-agent --config config.json            # Run with config file
    python -m holdem_agent --server ws://host:8080 --name Bot7

The oracle is picked by (highest first):
    1. CLI flag: --demo
    2. Environment variable: POKER_ORACLE
    3. Config key: oracle
"""

import argparse
import sys
from typing import List, Optional

from ._runner_config import load_config
from .errors import ConfigError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="holdem-agent",
        description="Hold'em Agent - play Texas Hold'em over WebSocket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  holdem-agent --demo
  holdem-agent --config config.json
  holdem-agent --server ws://localhost:8080 --name HoldemBot
  POKER_ORACLE=anthropic holdem-agent --config config.json
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the offline demo oracle (no API key needed)",
    )

    parser.add_argument(
        "--server",
        type=str,
        help="Game server WebSocket URL (overrides server_url)",
    )

    parser.add_argument(
        "--name",
        type=str,
        help="Name to join the table with (overrides agent_name)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.demo:
            config["oracle"] = "demo"
        if args.server:
            config["server_url"] = args.server
        if args.name:
            config["agent_name"] = args.name
        if args.log_level:
            config["log_level"] = args.log_level.upper()

        # Import runner here so --help stays fast
        from .runner import AgentRunner
        runner = AgentRunner(config=config)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via config file, .env or environment variables.", file=sys.stderr)
        return 1

    runner.run()
    return 0
