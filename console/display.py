"""
Console display for TicTacToe.
Draws the board, the score and the results in the terminal.
"""

import os
from typing import Callable, Optional

from logic.board import Board, Outcome, Party
from logic.config import MatchSettings
from logic.match_controller import Score

from .config import ConsoleConfig
from .messages import MessageCatalog


class ConsoleDisplay:
    """
    Prints everything the player sees.

    It only reads the board and the score it is given and never
    changes them.
    """

    def __init__(
        self,
        messages: MessageCatalog,
        config: Optional[ConsoleConfig] = None,
        output: Callable[[str], None] = print,
        input_func: Callable[[str], str] = input
    ):
        """
        Args:
            messages: Message catalog.
            config: Console configuration. Uses defaults if not provided.
            output: Where lines are written (print by default).
            input_func: Used to wait for Enter between rounds.
        """
        self.messages = messages
        self.config = config or ConsoleConfig()
        self.output = output
        self.input_func = input_func

        self.settings: Optional[MatchSettings] = None
        self.score = Score()

    def prompt(self, key: str, **values):
        """Print a catalog message as a prompt line."""
        text = self.messages.format(key, **values) if values else self.messages[key]
        self.output(f"{ConsoleConfig.PROMPT_PREFIX}{text}")

    def clear(self):
        if self.config.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    def banner(self, title: str):
        line = "=" * ConsoleConfig.BANNER_WIDTH
        self.output("\n" + line)
        self.output(f"   {title}")
        self.output(line + "\n")

    def show_welcome(self, winning_score: int):
        self.clear()
        self.prompt("welcome", winning_score=winning_score)
        self.output("")

    def show_goodbye(self):
        self.prompt("goodbye")

    def show_match_start(self, settings: MatchSettings):
        self.settings = settings
        self.score = Score()
        self.output("")
        self.prompt("opponent", opponent=settings.opponent_name)

    def _name(self, party: Party) -> str:
        if self.settings is None:
            return party.value.capitalize()
        if party == Party.HUMAN:
            return self.settings.human_name
        return self.settings.opponent_name

    def _score_line(self) -> str:
        settings = self.settings or MatchSettings()
        return self.messages.format(
            "score",
            name=self._name(Party.HUMAN),
            human_marker=settings.human_marker,
            human_score=self.score.human,
            opponent=self._name(Party.COMPUTER),
            computer_marker=settings.computer_marker,
            computer_score=self.score.computer,
        )

    def render_board(self, board: Board) -> str:
        """
        Draw the board as text.

        Returns:
            The 11-line grid.
        """
        lines = []
        for index, row in enumerate(board.rows()):
            lines.append("     |     |")
            lines.append("  {}  |  {}  |  {}".format(*row))
            lines.append("     |     |")
            if index < 2:
                lines.append("-----+-----+-----")
        return "\n".join(lines)

    def show_board(self, board: Board):
        self.clear()
        if self.settings is not None:
            self.prompt(
                "markers",
                name=self.settings.human_name,
                human_marker=self.settings.human_marker,
                opponent=self.settings.opponent_name,
                computer_marker=self.settings.computer_marker,
            )
        self.output(f"{ConsoleConfig.PROMPT_PREFIX}{self._score_line()}")
        self.output("")
        self.output(self.render_board(board))
        self.output("")

    def show_round_result(self, outcome: Outcome, score: Score):
        self.score = score
        if outcome == Outcome.TIE:
            self.prompt("tie")
        else:
            self.prompt("win", winner=self._name(outcome.winner))
        self.output(f"{ConsoleConfig.PROMPT_PREFIX}{self._score_line()}")

        if self.config.pause_between_rounds:
            self.prompt("continue")
            self.input_func("")

    def show_champion(self, champion: Party, score: Score):
        self.score = score
        self.banner(self.messages.format("champion", champion=self._name(champion)))
