# Area: Shared
"""
fair_rps.cli - Command-line interface
=====================================

Provides the CLI entry point for playing a fair round or verifying
a revealed commitment.

Usage:
    fair-rps rock paper scissors                       # Play a round
    fair-rps rock paper scissors lizard spock -v       # Play with INFO logs
    fair-rps --config game.json                        # Moves from config
    fair-rps --verify <HMAC> <KEY> <MOVE>              # Check a reveal

Settings can also come from environment variables (or a .env file):
    FAIR_RPS_MOVES, FAIR_RPS_LOG_FILE, FAIR_RPS_LOG_LEVEL, FAIR_RPS_COLOR
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from ._config import GameConfig, load_config
from ._core.commitment import verify_digest
from ._core.session import GameSession
from ._shared.logging_config import log_and_terminate, log_fatal_error, setup_logging
from ._shared.table import HelpTableRenderer
from .console import GameConsole
from .errors import ConfigError, InvalidMoveSetError, RandomSourceUnavailableError

logger = logging.getLogger("fair_rps.cli")

USAGE_EXAMPLE = "Example: fair-rps rock paper scissors"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description=(
            "Rock-paper-scissors for any odd number of moves, "
            "with an HMAC proof that the computer did not cheat"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fair-rps rock paper scissors
  fair-rps rock paper scissors lizard spock
  fair-rps --verify 3A1F...C9 9B0E...77 paper
  FAIR_RPS_MOVES=rock,paper,scissors fair-rps
        """,
    )

    parser.add_argument(
        "moves",
        nargs="*",
        help="Odd number (>= 3) of unique moves, in cycle order",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at INFO level",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )

    parser.add_argument(
        "--verify",
        nargs=3,
        metavar=("HMAC", "KEY", "MOVE"),
        help="Check that HMAC was computed from KEY and MOVE, then exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Merge file/env config with command-line overrides."""
    config = load_config(args.config)
    if args.moves:
        config["moves"] = args.moves
    if args.log_file:
        config["log_file"] = args.log_file
    if args.verbose:
        config["log_level"] = "INFO"
    if args.no_color:
        config["color"] = False
    return GameConfig(**config)


def run_verify(digest: str, key: str, move: str) -> int:
    """Print whether the revealed key and move reproduce the digest."""
    if verify_digest(digest, key, move):
        print(f"Verified: HMAC matches move {move!r}")
        return 0
    print(f"Mismatch: HMAC does not match move {move!r} under the given key")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (ConfigError, ValidationError) as e:
        print(f"Error: Invalid configuration:\n{e}", file=sys.stderr)
        return 1

    setup_logging(config.log_file, config.log_level, color=config.color)

    if args.verify:
        return run_verify(*args.verify)

    try:
        session = GameSession(config.moves)
    except InvalidMoveSetError as e:
        log_fatal_error(e)
        print(USAGE_EXAMPLE, file=sys.stderr)
        return 1
    except RandomSourceUnavailableError as e:
        log_and_terminate(e)

    console = GameConsole(session, renderer=HelpTableRenderer(color=config.color))
    try:
        console.run()
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
