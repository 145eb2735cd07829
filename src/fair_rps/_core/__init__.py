# Area: Core
"""
Core game logic: cyclic rules, keyed commitment and the round session.

This package contains:
- Rule generation for any odd number of moves
- HMAC-SHA256 commitment over the computer's move
- The session state machine and GameSession
"""

from .enums import Outcome, SessionEvent, SessionState
from .rules import RuleTable, build_rules, validate_moves
from .commitment import (
    KEY_BYTES,
    Commitment,
    commit,
    compute_digest,
    generate_key,
    verify_digest,
)
from .state_machine import SessionStateMachine
from .session import GameSession

__all__ = [
    "Outcome",
    "SessionEvent",
    "SessionState",
    "RuleTable",
    "build_rules",
    "validate_moves",
    "KEY_BYTES",
    "Commitment",
    "commit",
    "compute_digest",
    "generate_key",
    "verify_digest",
    "SessionStateMachine",
    "GameSession",
]
