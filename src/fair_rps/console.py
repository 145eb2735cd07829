"""
fair_rps.console - Interactive round
====================================

Prints the commitment and the menu, then reads one line per prompt
until the user plays a move or exits.
"""

import logging
from typing import Callable, Optional

from ._core.session import GameSession
from ._shared.table import HelpTableRenderer
from .types import RoundResult

logger = logging.getLogger("fair_rps.console")

EXIT_CHOICE = "0"
HELP_CHOICE = "?"
PROMPT = "Enter your move: "
INVALID_INPUT = "Invalid input. Please try again."


class GameConsole:
    """
    Line-based front end for a GameSession.

    Args:
        session: The committed session to play
        renderer: Formats the help table
        input_func: Reads one line given a prompt (``input`` by default)
        output_func: Writes one line (``print`` by default)
    """

    def __init__(
        self,
        session: GameSession,
        renderer: Optional[HelpTableRenderer] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        self.session = session
        self.renderer = renderer or HelpTableRenderer()
        self._input = input_func or input
        self._output = output_func or print

    def show_commitment(self) -> None:
        self._output(f"HMAC: {self.session.digest}")

    def show_menu(self) -> None:
        self._output("Available moves:")
        for index, move in self.session.show_menu():
            self._output(f"{index} - {move}")
        self._output(f"{EXIT_CHOICE} - exit")
        self._output(f"{HELP_CHOICE} - help")

    def show_help(self) -> None:
        self._output(self.renderer.render(self.session.help_table()))

    def show_result(self, result: RoundResult) -> None:
        self._output(f"Your move: {result.user_move}")
        self._output(f"Computer move: {result.computer_move}")
        self._output(result.message)
        self._output(f"HMAC key: {result.key_hex}")

    def parse_choice(self, line: str) -> Optional[int]:
        """Return a 1-based move index, or None if ``line`` is not one."""
        choice = line.strip()
        if not (choice.isascii() and choice.isdecimal()):
            return None
        index = int(choice)
        if 1 <= index <= len(self.session.moves):
            return index
        return None

    def run(self) -> Optional[RoundResult]:
        """
        Play one round interactively.

        Returns:
            The RoundResult, or None if the user exited without playing
        """
        self.show_commitment()
        self.show_menu()

        while True:
            try:
                line = self._input(PROMPT)
            except EOFError:
                logger.info("Input closed before a move was played")
                return None

            choice = line.strip()
            if choice == EXIT_CHOICE:
                logger.info("User exited without playing")
                return None
            if choice == HELP_CHOICE:
                self.show_help()
                continue

            index = self.parse_choice(choice)
            if index is None:
                logger.debug(f"Rejected menu input: {line!r}")
                self._output(INVALID_INPUT)
                continue

            result = self.session.play(index)
            self.show_result(result)
            return result
