# Area: Shared
"""
fair_rps._shared.table - Help table rendering
=============================================

Renders a RuleTable as an N x N grid: computer moves as rows, user
moves as columns, each cell the outcome for the user's (column) move.
"""

from typing import List

from tabulate import tabulate

from .._core.enums import Outcome
from .._core.rules import RuleTable

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"     # Column headers (user moves)
YELLOW = "\033[33m"    # Row headers (computer moves)
BLUE = "\033[34m"      # Win
RED = "\033[31m"       # Lose
WHITE = "\033[37m"     # Draw
RESET = "\033[0m"

OUTCOME_COLORS = {
    Outcome.WIN: BLUE,
    Outcome.LOSE: RED,
    Outcome.DRAW: WHITE,
}

CORNER_LABEL = "v PC\\User >"

HELP_INTRO = (
    "Help - Results from the user's point of view:\n"
    "Win: Your move beats the computer's move.\n"
    "Lose: Your move is beaten by the computer's move.\n"
    "Draw: Both you and the computer have made the same move.\n"
)


class HelpTableRenderer:
    """
    Formats rule tables for the terminal.

    Args:
        color: Wrap headers and cells in ANSI color codes
        tablefmt: Any tabulate table format
    """

    def __init__(self, color: bool = True, tablefmt: str = "grid"):
        self.color = color
        self.tablefmt = tablefmt

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"

    def render_table(self, rules: RuleTable) -> str:
        headers = [CORNER_LABEL] + [self._paint(move, GREEN) for move in rules.moves]
        rows: List[List[str]] = []
        for row_move in rules.moves:
            row = [self._paint(row_move, YELLOW)]
            for column_move in rules.moves:
                outcome = rules.outcome(column_move, row_move)
                row.append(self._paint(outcome.value, OUTCOME_COLORS[outcome]))
            rows.append(row)
        return tabulate(rows, headers=headers, tablefmt=self.tablefmt)

    def render(self, rules: RuleTable) -> str:
        """Intro text followed by the table."""
        return HELP_INTRO + "\n" + self.render_table(rules)
