# Area: Core
"""
fair_rps._core.rules - Cyclic rule generator
============================================

Builds the full pairwise Win/Lose/Draw relation for an odd number of
moves arranged on a cycle. The move at index i beats the (N-1)/2 moves
that follow it and loses to the (N-1)/2 moves that precede it.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from ..errors import InvalidMoveSetError, RuleInvariantError
from .enums import Outcome

MIN_MOVES = 3


def validate_moves(moves: Sequence[str]) -> None:
    """
    Check that a move list can define a fair cyclic game.

    Labels are compared by exact string equality: "Rock" and "rock"
    are different moves, and surrounding whitespace is significant.

    Raises:
        InvalidMoveSetError: If the count is even or below 3, labels repeat,
            or a label cannot be encoded as UTF-8
    """
    problems: List[str] = []
    if len(moves) < MIN_MOVES:
        problems.append(f"at least {MIN_MOVES} moves are required, got {len(moves)}")
    if len(moves) % 2 == 0:
        problems.append(f"the number of moves must be odd, got {len(moves)}")
    unencodable = [label for label in moves if not _is_utf8_encodable(label)]
    if unencodable:
        problems.append(
            "move labels must be valid UTF-8: " + ", ".join(ascii(label) for label in unencodable)
        )
    duplicates = sorted(label for label, count in Counter(moves).items() if count > 1)
    if duplicates:
        problems.append(f"duplicate moves: {', '.join(duplicates)}")
    if problems:
        raise InvalidMoveSetError(moves, problems)


def _is_utf8_encodable(label: str) -> bool:
    try:
        label.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class RuleTable:
    """
    Read-only outcome relation over a move list.

    ``table[row][column]`` is the outcome for ``row`` played against
    ``column``.
    """

    def __init__(self, moves: Sequence[str], relation: Dict[str, Dict[str, Outcome]]):
        self._moves: Tuple[str, ...] = tuple(moves)
        self._rows: Mapping[str, Mapping[str, Outcome]] = MappingProxyType(
            {move: MappingProxyType(dict(relation[move])) for move in self._moves}
        )

    @property
    def moves(self) -> Tuple[str, ...]:
        return self._moves

    def __getitem__(self, row: str) -> Mapping[str, Outcome]:
        return self._rows[row]

    def __iter__(self) -> Iterator[str]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def outcome(self, row: str, column: str) -> Outcome:
        return self._rows[row][column]

    def beats(self, move: str) -> List[str]:
        """Moves that ``move`` wins against, in cycle order."""
        return [m for m in self._moves if self._rows[move][m] is Outcome.WIN]

    def beaten_by(self, move: str) -> List[str]:
        """Moves that win against ``move``, in cycle order."""
        return [m for m in self._moves if self._rows[move][m] is Outcome.LOSE]

    def check_pair(self, row: str, column: str) -> Outcome:
        """
        Look up ``row`` vs ``column`` and confirm the reverse lookup agrees.

        Raises:
            RuleInvariantError: If the two perspectives are not inverses
        """
        forward = self._rows[row][column]
        backward = self._rows[column][row]
        if backward is not forward.inverted() or (row != column and forward is Outcome.DRAW):
            raise RuleInvariantError(row, column, forward.value, backward.value)
        return forward

    def check_invariants(self) -> None:
        """Verify the Draw diagonal and pairwise asymmetry over the whole table."""
        for row in self._moves:
            if self._rows[row][row] is not Outcome.DRAW:
                raise RuleInvariantError(row, row, self._rows[row][row].value, Outcome.DRAW.value)
            for column in self._moves:
                self.check_pair(row, column)

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            row: {column: outcome.value for column, outcome in cells.items()}
            for row, cells in self._rows.items()
        }

    def __repr__(self) -> str:
        return f"RuleTable(moves={list(self._moves)!r})"


def build_rules(moves: Sequence[str]) -> RuleTable:
    """
    Derive the complete outcome relation from the cyclic order of ``moves``.

    Args:
        moves: Ordered, unique move labels; odd count of at least 3

    Returns:
        RuleTable where every move beats exactly (N-1)/2 others

    Raises:
        InvalidMoveSetError: If ``moves`` fails validation
    """
    validate_moves(moves)

    count = len(moves)
    win_count = (count - 1) // 2
    relation: Dict[str, Dict[str, Outcome]] = {}

    for index, move in enumerate(moves):
        row: Dict[str, Outcome] = {move: Outcome.DRAW}
        for offset in range(1, win_count + 1):
            row[moves[(index + offset) % count]] = Outcome.WIN
            row[moves[(index - offset) % count]] = Outcome.LOSE
        relation[move] = row

    rules = RuleTable(moves, relation)
    rules.check_invariants()
    return rules
