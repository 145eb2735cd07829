"""
fair_rps.types - Public data types
==================================

Types handed across the package boundary: move aliases and the
round transcript returned by ``GameSession.play``.

    >>> result = session.play(1)
    >>> result.message
    'You win!'
    >>> result.model_dump_json()
    '{"user_move": "rock", "computer_move": "paper", ...}'
"""

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from ._core.commitment import verify_digest
from ._core.enums import Outcome

Move = str
MoveList = Sequence[Move]

USER_MESSAGES = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.DRAW: "Draw!",
}


class RoundResult(BaseModel):
    """Transcript of a resolved round.

    Fields
    ------
    user_move : str
        The move the user picked.
    computer_move : str
        The move the computer committed to.
    outcome : Outcome
        Result from the computer's perspective (row = computer move).
    user_outcome : Outcome
        The same result from the user's perspective.
    message : str
        "You win!", "You lose!" or "Draw!".
    digest : str
        The HMAC published before the user played.
    key_hex : str
        The revealed secret key, uppercase hex.
    """

    model_config = ConfigDict(frozen=True)

    user_move: str
    computer_move: str
    outcome: Outcome
    user_outcome: Outcome
    message: str
    digest: str
    key_hex: str

    @classmethod
    def from_computer_outcome(
        cls,
        *,
        user_move: str,
        computer_move: str,
        outcome: Outcome,
        digest: str,
        key_hex: str,
    ) -> "RoundResult":
        user_outcome = outcome.inverted()
        return cls(
            user_move=user_move,
            computer_move=computer_move,
            outcome=outcome,
            user_outcome=user_outcome,
            message=USER_MESSAGES[user_outcome],
            digest=digest,
            key_hex=key_hex,
        )

    def verify(self) -> bool:
        """Recompute the HMAC from the revealed key and computer move."""
        return verify_digest(self.digest, self.key_hex, self.computer_move)
