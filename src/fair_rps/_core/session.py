# Area: Core
"""
fair_rps._core.session - One round of the fair game
===================================================

GameSession owns the move list, the rule table and the computer's
commitment. Construction picks the computer move and publishes the
digest; ``play`` resolves the user's move and reveals the key.

The rule table is read as ``rules[computer_move][user_move]``; the
user-facing message is the inverse of that outcome.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..errors import IndexOutOfRangeError, SessionNotResolvedError
from ..types import RoundResult
from .commitment import Commitment, commit, random_index
from .enums import SessionEvent, SessionState
from .rules import RuleTable, build_rules
from .state_machine import SessionStateMachine

logger = logging.getLogger("fair_rps.session")


class GameSession:
    """
    A single committed round.

    Attributes:
        moves: Immutable move list, in cycle order
        rules: Outcome relation derived from ``moves``
        digest: Published HMAC of the computer's move
    """

    def __init__(
        self,
        moves: Sequence[str],
        *,
        computer_move: Optional[str] = None,
        key: Optional[bytes] = None,
    ):
        """
        Build the rules and commit to a computer move.

        Args:
            moves: Odd number (>= 3) of unique move labels
            computer_move: Fixed computer move, bypassing randomness (tests)
            key: Fixed secret key, bypassing key generation (tests)

        Raises:
            InvalidMoveSetError: If ``moves`` is not a valid move set
            ValueError: If ``computer_move`` is not one of ``moves``
        """
        self._state = SessionStateMachine()
        self.moves: Tuple[str, ...] = tuple(moves)
        self.rules: RuleTable = build_rules(self.moves)

        if computer_move is None:
            computer_move = self.moves[random_index(len(self.moves))]
        elif computer_move not in self.moves:
            raise ValueError(f"Computer move {computer_move!r} is not in the move list")

        self._commitment: Commitment = commit(computer_move, key)
        self._result: Optional[RoundResult] = None
        self._state.transition(SessionEvent.COMMIT)
        logger.info(f"Committed to a move among {len(self.moves)}: HMAC {self.digest}")

    @property
    def state(self) -> SessionState:
        return self._state.current_state

    @property
    def resolved(self) -> bool:
        return self._state.is_resolved

    @property
    def digest(self) -> str:
        return self._commitment.digest

    @property
    def computer_move(self) -> str:
        self._require_resolved("computer_move")
        return self._commitment.move

    @property
    def key(self) -> bytes:
        self._require_resolved("key")
        return self._commitment.key

    @property
    def key_hex(self) -> str:
        self._require_resolved("key_hex")
        return self._commitment.key_hex

    @property
    def result(self) -> Optional[RoundResult]:
        return self._result

    def show_menu(self) -> List[Tuple[int, str]]:
        """Return ``(index, move)`` menu entries, 1-based, and await a move."""
        self._state.transition(SessionEvent.SHOW_MENU)
        return [(index, move) for index, move in enumerate(self.moves, start=1)]

    def help_table(self) -> RuleTable:
        """Return the rule table for display. Does not change state."""
        self._state.require_help_allowed()
        return self.rules

    def play(self, user_move_index: int) -> RoundResult:
        """
        Resolve the round against the user's 1-based move index.

        Args:
            user_move_index: Index in 1..N

        Returns:
            RoundResult revealing the computer move and the secret key

        Raises:
            IndexOutOfRangeError: If the index is not an int in 1..N
            SessionResolvedError: If the session was already played
        """
        self._state.require(SessionEvent.PLAY)

        if (
            isinstance(user_move_index, bool)
            or not isinstance(user_move_index, int)
            or not 1 <= user_move_index <= len(self.moves)
        ):
            raise IndexOutOfRangeError(user_move_index, len(self.moves))

        user_move = self.moves[user_move_index - 1]
        computer_move = self._commitment.move
        outcome = self.rules.check_pair(computer_move, user_move)

        self._state.transition(SessionEvent.PLAY)
        self._result = RoundResult.from_computer_outcome(
            user_move=user_move,
            computer_move=computer_move,
            outcome=outcome,
            digest=self._commitment.digest,
            key_hex=self._commitment.key_hex,
        )
        logger.info(
            f"Round resolved: user={user_move} computer={computer_move} "
            f"-> {self._result.message}"
        )
        logger.debug(f"Revealed HMAC key: {self._commitment.key_hex}")
        return self._result

    def _require_resolved(self, attribute: str) -> None:
        if not self.resolved:
            raise SessionNotResolvedError(f"READ_{attribute.upper()}", self.state.value)
