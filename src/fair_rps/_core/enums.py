# Area: Core
"""
fair_rps._core.enums - Outcome and session state machine enums
===============================================================

Defines round outcomes and the states and events of a game session.
"""

from enum import Enum


class Outcome(Enum):
    """
    Result of a row move played against a column move.

    Always stated from the row move's perspective.
    """
    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"

    def inverted(self) -> "Outcome":
        """Return the same result seen from the other side."""
        if self is Outcome.WIN:
            return Outcome.LOSE
        if self is Outcome.LOSE:
            return Outcome.WIN
        return Outcome.DRAW


class SessionState(Enum):
    """
    States of the game session state machine.

    State transitions:
    CREATED -> COMMITTED (on COMMIT)
    COMMITTED -> AWAITING_MOVE (on SHOW_MENU)
    AWAITING_MOVE -> AWAITING_MOVE (on SHOW_MENU)
    COMMITTED -> RESOLVED (on PLAY)
    AWAITING_MOVE -> RESOLVED (on PLAY)
    """
    CREATED = "CREATED"
    COMMITTED = "COMMITTED"
    AWAITING_MOVE = "AWAITING_MOVE"
    RESOLVED = "RESOLVED"


class SessionEvent(Enum):
    """
    Events that trigger session state transitions.

    - COMMIT: computer move chosen and digest published
    - SHOW_MENU: move menu presented to the user
    - PLAY: user move submitted and round resolved
    """
    COMMIT = "COMMIT"
    SHOW_MENU = "SHOW_MENU"
    PLAY = "PLAY"
