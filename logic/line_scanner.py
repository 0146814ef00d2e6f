"""
Line scanner for TicTacToe.
Knows the 8 winning lines and answers questions about who holds them.
"""

from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


Line = Tuple[int, int, int]

# All possible winning lines, squares numbered 1-9 row by row.
# The order matters: the first qualifying line wins every scan.
WIN_LINES: Tuple[Line, ...] = (
    # Rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # Columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # Diagonals
    (1, 5, 9),
    (3, 5, 7),
)


class LineScanner:
    """
    Reads the winning lines of a board.

    Used both for win detection and by the computer to find squares
    that win or block. Never changes the board.
    """

    WIN_LINES = WIN_LINES

    def __init__(self, board: "Board"):
        """
        Args:
            board: The board to read from.
        """
        self.board = board

    def count_markers_on_line(self, line: Line, marker: str) -> int:
        """
        Count how many squares of a line hold a marker.

        Args:
            line: Three square numbers.
            marker: The marker to count.

        Returns:
            A number from 0 to 3.
        """
        return sum(1 for square in line if self.board.marker_at(square) == marker)

    def open_position_on_line_with_count(
        self,
        marker: str,
        target_count: int
    ) -> Optional[int]:
        """
        Find an empty square on a line where a marker holds exactly
        target_count squares.

        Lines are checked in WIN_LINES order, squares in line order.

        Args:
            marker: The marker to look for.
            target_count: How many squares of the line it must hold.

        Returns:
            The first matching empty square, or None.
        """
        for line in self.WIN_LINES:
            if self.count_markers_on_line(line, marker) != target_count:
                continue
            for square in line:
                if self.board.is_empty(square):
                    return square
        return None

    def completed_line(self) -> Optional[Line]:
        """
        Get the first line fully held by one marker.

        Returns:
            The line, or None if no line is complete.
        """
        for line in self.WIN_LINES:
            first = self.board.marker_at(line[0])
            if self.board.is_empty(line[0]):
                continue
            if self.count_markers_on_line(line, first) == 3:
                return line
        return None
