"""
Game configuration for TicTacToe.
Default rules of a match plus the settings chosen for one match.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import EMPTY_MARKER
from .errors import ConfigurationError
from .move_strategy import Difficulty


class GameConfig:
    """
    Default match rules.
    Change these values to change the game!
    """

    # ==================== MATCH SETTINGS ====================
    # Rounds a party must win to become champion
    WIN_THRESHOLD = 5

    # Alternate who moves first every round after the first
    ALTERNATE_FIRST_MOVE = True

    # ==================== MARKER SETTINGS ====================
    COMPUTER_MARKER = "O"

    # Letters the human may pick (the computer's O is reserved)
    HUMAN_MARKER_ALPHABET = tuple(string.ascii_uppercase.replace(COMPUTER_MARKER, ""))
    DEFAULT_HUMAN_MARKER = "X"
    DEFAULT_HUMAN_NAME = "Player"

    # ==================== OPPONENTS ====================
    # Each difficulty tier plays under its own name
    OPPONENT_NAMES = {
        Difficulty.EASY: "WALL-E",
        Difficulty.INTERMEDIATE: "R2D2",
        Difficulty.ADVANCED: "Optimus Prime",
    }
    DEFAULT_DIFFICULTY = Difficulty.ADVANCED


class FirstMove(Enum):
    """Who starts the first round of a match."""
    HUMAN = 1
    COMPUTER = 2
    RANDOM = 3   # Decided once per match


@dataclass
class MatchSettings:
    """
    Everything chosen before a match starts.
    """
    difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY
    human_marker: str = GameConfig.DEFAULT_HUMAN_MARKER
    human_name: str = GameConfig.DEFAULT_HUMAN_NAME
    first_move: FirstMove = FirstMove.HUMAN
    win_threshold: int = GameConfig.WIN_THRESHOLD
    alternate_first_move: bool = GameConfig.ALTERNATE_FIRST_MOVE
    computer_marker: str = GameConfig.COMPUTER_MARKER
    seed: Optional[int] = None      # Seed for the computer's random choices

    @property
    def opponent_name(self) -> str:
        return GameConfig.OPPONENT_NAMES[self.difficulty]

    def validate(self) -> "MatchSettings":
        """
        Check the settings and normalize the human marker to upper case.

        Returns:
            The settings themselves, for chaining.

        Raises:
            ConfigurationError: If the settings can't be played.
        """
        if self.win_threshold < 1:
            raise ConfigurationError(
                f"Win threshold must be at least 1, got {self.win_threshold}"
            )

        computer_marker = self.computer_marker or ""
        if len(computer_marker) != 1 or computer_marker.isspace():
            raise ConfigurationError(
                f"Computer marker {self.computer_marker!r} must be one visible character"
            )

        marker = (self.human_marker or "").upper()
        if marker not in GameConfig.HUMAN_MARKER_ALPHABET:
            raise ConfigurationError(
                f"Marker {self.human_marker!r} is not allowed. "
                f"Pick one letter other than {self.computer_marker}."
            )
        if marker == self.computer_marker or marker == EMPTY_MARKER:
            raise ConfigurationError(f"Marker {marker!r} is reserved")

        self.human_marker = marker
        return self
