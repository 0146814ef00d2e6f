"""
Logic module for TicTacToe.
Handles the board, rules, computer opponent, rounds and matches.

Squares are numbered 1-9, left to right, top to bottom.
"""

__version__ = "1.0.0"

from .errors import (
    GameError,
    InvalidMoveError,
    NoMovesAvailableError,
    RoundOverError,
    ConfigurationError,
)
from .board import Board, Party, Outcome, EMPTY_MARKER, CENTER_SQUARE
from .line_scanner import LineScanner, WIN_LINES
from .move_strategy import MoveStrategy, Difficulty
from .config import GameConfig, MatchSettings, FirstMove
from .round_controller import RoundController, round_outcome
from .match_controller import MatchController, MatchStatus, Score
from .move_validator import MoveValidator, ValidationResult
