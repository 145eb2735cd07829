"""
fair_rps - Provably fair rock-paper-scissors
============================================

Rock-paper-scissors generalized to any odd number of moves. The
computer commits to its move with an HMAC-SHA256 digest before you
play, and reveals the key afterwards so you can check it.

Quick Start:
    fair-rps rock paper scissors lizard spock

From Python:
    from fair_rps import GameSession
    session = GameSession(["rock", "paper", "scissors"])
    print(session.digest)          # publish before the user plays
    result = session.play(1)       # user picks "rock"
    result.message, result.key_hex
    result.verify()                # True

Rules:
    Moves sit on a cycle in the order given. Each move beats the
    (N-1)/2 moves after it and loses to the (N-1)/2 moves before it.
"""

from ._core import (
    Commitment,
    GameSession,
    Outcome,
    RuleTable,
    SessionState,
    build_rules,
    commit,
    compute_digest,
    generate_key,
    validate_moves,
    verify_digest,
)
from ._shared.table import HelpTableRenderer
from .errors import (
    ConfigError,
    FairRPSError,
    IndexOutOfRangeError,
    InvalidMoveSetError,
    InvalidTransitionError,
    RandomSourceUnavailableError,
    RuleInvariantError,
    SessionNotResolvedError,
    SessionResolvedError,
)
from .types import Move, MoveList, RoundResult

__all__ = [
    # Main classes
    "GameSession",
    "RuleTable",
    "Commitment",
    "RoundResult",
    "HelpTableRenderer",
    # Functions
    "build_rules",
    "validate_moves",
    "commit",
    "compute_digest",
    "generate_key",
    "verify_digest",
    # Enums and aliases
    "Outcome",
    "SessionState",
    "Move",
    "MoveList",
    # Errors
    "FairRPSError",
    "ConfigError",
    "InvalidMoveSetError",
    "IndexOutOfRangeError",
    "InvalidTransitionError",
    "SessionResolvedError",
    "SessionNotResolvedError",
    "RuleInvariantError",
    "RandomSourceUnavailableError",
]
__version__ = "1.0.0"
