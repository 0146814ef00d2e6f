"""
Computer opponent for TicTacToe.
Picks the computer's square according to a difficulty tier.
"""

import random
from enum import Enum
from typing import Callable, Dict, Optional

from .board import Board, CENTER_SQUARE
from .errors import NoMovesAvailableError
from .line_scanner import LineScanner


class Difficulty(Enum):
    """Computer difficulty levels (values match the menu choices)."""
    EASY = 1          # Random squares
    INTERMEDIATE = 2  # Blocks the human, otherwise random
    ADVANCED = 3      # Wins, blocks, takes the center, otherwise random


class MoveStrategy:
    """
    Chooses a free square for the computer.

    ADVANCED always checks in this order:
    1. A square that wins the round for the computer
    2. A square that stops the human from winning
    3. The center square
    4. Any free square at random

    EASY is step 4 alone. INTERMEDIATE is step 2 then step 4.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        computer_marker: str,
        human_marker: str,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            difficulty: Which tier to play.
            computer_marker: Marker the computer plays with.
            human_marker: Marker the human plays with.
            rng: Random source. Pass a seeded Random for repeatable games.
        """
        self.difficulty = difficulty
        self.computer_marker = computer_marker
        self.human_marker = human_marker
        self.rng = rng or random.Random()

        self._tiers: Dict[Difficulty, Callable[[Board], int]] = {
            Difficulty.EASY: self._easy_move,
            Difficulty.INTERMEDIATE: self._intermediate_move,
            Difficulty.ADVANCED: self._advanced_move,
        }

    def choose_move(self, board: Board) -> int:
        """
        Pick the computer's next square.

        Args:
            board: Current board. It is not modified.

        Returns:
            A free square number (1-9).

        Raises:
            NoMovesAvailableError: If the board is full.
        """
        if board.is_full():
            raise NoMovesAvailableError("No free squares left for the computer")

        return self._tiers[self.difficulty](board)

    def _easy_move(self, board: Board) -> int:
        return self.rng.choice(board.unoccupied_positions())

    def _intermediate_move(self, board: Board) -> int:
        block = self.find_defensive_square(board)
        if block is not None:
            return block
        return self._easy_move(board)

    def _advanced_move(self, board: Board) -> int:
        win = self.find_offensive_square(board)
        if win is not None:
            return win

        block = self.find_defensive_square(board)
        if block is not None:
            return block

        if board.is_empty(CENTER_SQUARE):
            return CENTER_SQUARE

        return self._easy_move(board)

    def find_offensive_square(self, board: Board) -> Optional[int]:
        """Square that completes a line for the computer, if any."""
        return LineScanner(board).open_position_on_line_with_count(
            self.computer_marker, 2
        )

    def find_defensive_square(self, board: Board) -> Optional[int]:
        """Square that stops the human completing a line, if any."""
        return LineScanner(board).open_position_on_line_with_count(
            self.human_marker, 2
        )


# Quick test
if __name__ == "__main__":
    print("Testing MoveStrategy...")

    # Test 1: should block the human on the top row
    board = Board()
    board.occupy(1, "X")
    board.occupy(2, "X")
    medium = MoveStrategy(Difficulty.INTERMEDIATE, "O", "X", random.Random(0))
    move = medium.choose_move(board)
    print(f"Intermediate move: {move}")
    assert move == 3, f"Expected 3, got {move}"

    # Test 2: should win instead of blocking
    board.occupy(4, "O")
    board.occupy(5, "O")
    hard = MoveStrategy(Difficulty.ADVANCED, "O", "X", random.Random(0))
    move = hard.choose_move(board)
    print(f"Advanced move: {move}")
    assert move == 6, f"Expected 6, got {move}"

    print("\nMoveStrategy test done!")
