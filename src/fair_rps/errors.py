# Area: Shared
"""
fair_rps.errors - Custom exception classes
==========================================

Defines the exception hierarchy for move-set validation, session
misuse and randomness failures.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
import json


class FairRPSError(Exception):
    """Base exception for all fair_rps package errors."""

    error_type = "FAIR_RPS_ERROR"

    def context(self) -> Dict[str, Any]:
        return {}

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message=str(self),
            context=self.context(),
            problems=None,
        )


class InvalidMoveSetError(FairRPSError, ValueError):
    """Raised when the move list is even, too short or has duplicates."""

    error_type = "INVALID_MOVE_SET"

    def __init__(self, moves: Sequence[str], problems: List[str]):
        self.moves = list(moves)
        self.problems = problems
        super().__init__(
            "Invalid move set: " + "; ".join(problems)
        )

    def context(self) -> Dict[str, Any]:
        return {"moves": self.moves, "count": len(self.moves)}

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message="Please provide an odd number (>= 3) of unique moves.",
            context=self.context(),
            problems=self.problems,
        )


class IndexOutOfRangeError(FairRPSError, IndexError):
    """Raised when a 1-based move index falls outside [1, N]."""

    error_type = "INDEX_OUT_OF_RANGE"

    def __init__(self, index: Any, move_count: int):
        self.index = index
        self.move_count = move_count
        super().__init__(
            f"Move index {index!r} is outside 1..{move_count}"
        )

    def context(self) -> Dict[str, Any]:
        return {"index": self.index, "move_count": self.move_count}


class InvalidTransitionError(FairRPSError, ValueError):
    """Raised when a session event is not allowed in the current state."""

    error_type = "INVALID_TRANSITION"

    def __init__(self, event: str, state: str):
        self.event = event
        self.state = state
        super().__init__(f"Invalid transition: {event} from {state}")

    def context(self) -> Dict[str, Any]:
        return {"event": self.event, "state": self.state}


class SessionResolvedError(InvalidTransitionError):
    """Raised when a session that was already played is used again."""

    error_type = "SESSION_RESOLVED"


class SessionNotResolvedError(InvalidTransitionError):
    """Raised when secret data is requested before the round is played."""

    error_type = "SESSION_NOT_RESOLVED"


class RuleInvariantError(FairRPSError):
    """Raised when a rule table disagrees with itself across perspectives."""

    error_type = "RULE_INVARIANT"

    def __init__(self, row: str, column: str, forward: str, backward: str):
        self.row = row
        self.column = column
        self.forward = forward
        self.backward = backward
        super().__init__(
            f"Rule table is inconsistent: {row} vs {column} is {forward}, "
            f"but {column} vs {row} is {backward}"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "column": self.column,
            "forward": self.forward,
            "backward": self.backward,
        }


class ConfigError(FairRPSError, ValueError):
    """Raised when a config file cannot be read or is not a JSON object."""

    error_type = "CONFIG_ERROR"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load config file {path}: {reason}")

    def context(self) -> Dict[str, Any]:
        return {"path": self.path, "reason": self.reason}


class RandomSourceUnavailableError(FairRPSError, RuntimeError):
    """Raised when the OS cannot provide cryptographically secure randomness."""

    error_type = "RANDOM_SOURCE_UNAVAILABLE"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"No cryptographically secure random source available: {reason}"
        )

    def context(self) -> Dict[str, Any]:
        return {"reason": self.reason}


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
    problems: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal and log output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " FAIR-RPS ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    if problems:
        lines.append("")
        lines.append(" ── PROBLEMS " + "─" * 51)
        for problem in problems:
            lines.append(f" • {problem}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
