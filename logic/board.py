"""
Board for TicTacToe.
Holds the 9 squares of a round and answers win/tie questions.
"""

from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidMoveError
from .line_scanner import Line, LineScanner


# Marker of a square nobody has taken yet
EMPTY_MARKER = " "

# Squares are numbered 1-9, left to right, top to bottom:
#   1 | 2 | 3
#   4 | 5 | 6
#   7 | 8 | 9
BOARD_POSITIONS = tuple(range(1, 10))
CENTER_SQUARE = 5


class Party(Enum):
    """The two sides of a match."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Party":
        """Get the other side."""
        return Party.COMPUTER if self == Party.HUMAN else Party.HUMAN


class Outcome(Enum):
    """How a round ended."""
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"

    @property
    def winner(self) -> Optional[Party]:
        """The party that won, or None for a tie."""
        if self == Outcome.HUMAN_WIN:
            return Party.HUMAN
        if self == Outcome.COMPUTER_WIN:
            return Party.COMPUTER
        return None


class Board:
    """
    The 3x3 board of a single round.

    Squares only ever go from empty to taken. Taking a square that is
    already taken raises InvalidMoveError and leaves the board unchanged.
    """

    def __init__(self):
        # Index 0 holds square 1
        self._cells: List[str] = [EMPTY_MARKER] * len(BOARD_POSITIONS)

    def _check_position(self, position: int):
        if position not in BOARD_POSITIONS:
            raise InvalidMoveError(
                f"Square {position!r} is not on the board. Must be 1-9."
            )

    def occupy(self, position: int, marker: str):
        """
        Put a marker on a square.

        Args:
            position: Square number (1-9).
            marker: The marker of the party moving.

        Raises:
            InvalidMoveError: If the square is off the board or taken,
                or the marker is the empty marker.
        """
        self._check_position(position)

        if not marker or marker == EMPTY_MARKER:
            raise InvalidMoveError(f"{marker!r} is not a player marker")

        current = self._cells[position - 1]
        if current != EMPTY_MARKER:
            raise InvalidMoveError(
                f"Square {position} is already taken by {current}"
            )

        self._cells[position - 1] = marker

    def marker_at(self, position: int) -> str:
        """Get the marker on a square (EMPTY_MARKER if free)."""
        self._check_position(position)
        return self._cells[position - 1]

    def is_empty(self, position: int) -> bool:
        """Check whether a square is still free."""
        return self.marker_at(position) == EMPTY_MARKER

    def unoccupied_positions(self) -> List[int]:
        """
        Get the free squares.

        Returns:
            Square numbers in ascending order.
        """
        return [
            position for position in BOARD_POSITIONS
            if self._cells[position - 1] == EMPTY_MARKER
        ]

    def occupied_count(self) -> int:
        return len(BOARD_POSITIONS) - len(self.unoccupied_positions())

    def is_full(self) -> bool:
        return not self.unoccupied_positions()

    def winner(self) -> Optional[str]:
        """
        Get the marker that holds a full line.

        Returns:
            The winning marker, or None if no line is complete.
        """
        line = self.winning_line()
        if line is None:
            return None
        return self.marker_at(line[0])

    def winning_line(self) -> Optional[Line]:
        """Get the completed line, if there is one."""
        return LineScanner(self).completed_line()

    def snapshot(self) -> Tuple[str, ...]:
        """Read-only copy of the 9 squares, square 1 first."""
        return tuple(self._cells)

    def rows(self) -> List[Tuple[str, str, str]]:
        """The squares grouped into 3 rows, for drawing."""
        return [
            (self._cells[i], self._cells[i + 1], self._cells[i + 2])
            for i in range(0, len(self._cells), 3)
        ]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = list(self._cells)
        return new_board

    def reset(self):
        """Empty every square for a new round."""
        self._cells = [EMPTY_MARKER] * len(BOARD_POSITIONS)

    def __repr__(self) -> str:
        return f"Board({''.join(self._cells)!r})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for square, marker in [(5, "X"), (1, "O"), (3, "X"), (7, "O"), (4, "O")]:
        board.occupy(square, marker)
        print(f"{marker} takes {square} -> free: {board.unoccupied_positions()}")

    print(f"Winner: {board.winner()}  line: {board.winning_line()}")
    assert board.winner() == "O"

    try:
        board.occupy(5, "O")
    except InvalidMoveError as e:
        print(f"Rejected: {e}")

    print("\nBoard test done!")
