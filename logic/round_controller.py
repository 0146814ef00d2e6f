"""
Round flow for TicTacToe.
Alternates turns between the human and the computer on one board
until someone wins or the board is full.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

from .board import Board, Outcome, Party
from .errors import RoundOverError
from .move_strategy import MoveStrategy


class HumanInput(Protocol):
    """Anything that can ask the human for a square."""

    def request_human_move(self, valid_positions: List[int]) -> int:
        """Must return one of valid_positions."""
        ...


class BoardObserver(Protocol):
    """Anything that wants to see the board after every move."""

    def show_board(self, board: Board) -> None:
        ...


@dataclass
class Move:
    """A square taken during a round."""
    party: Party
    position: int
    marker: str


def round_outcome(
    board: Board,
    human_marker: str,
    computer_marker: str
) -> Optional[Outcome]:
    """
    Work out the outcome of a round from the board alone.

    Args:
        board: The board to judge.
        human_marker: The human's marker.
        computer_marker: The computer's marker.

    Returns:
        The Outcome, or None if the round is still going.
    """
    winner = board.winner()
    if winner == human_marker:
        return Outcome.HUMAN_WIN
    if winner == computer_marker:
        return Outcome.COMPUTER_WIN
    if board.is_full():
        return Outcome.TIE
    return None


class RoundController:
    """
    Plays a single round.

    States:
    - awaiting a move from active_party
    - over, with a fixed outcome

    The caller decides who moves first; the controller never does.
    """

    def __init__(
        self,
        board: Board,
        human_marker: str,
        computer_marker: str,
        strategy: MoveStrategy,
        human_input: HumanInput,
        starting_party: Party,
        observer: Optional[BoardObserver] = None
    ):
        """
        Args:
            board: A fresh (empty) board owned by this round.
            human_marker: The human's marker.
            computer_marker: The computer's marker.
            strategy: Chooses the computer's squares.
            human_input: Asks the human for squares.
            starting_party: Who moves first this round.
            observer: Optional display that is shown the board after
                every move.
        """
        self.board = board
        self.human_marker = human_marker
        self.computer_marker = computer_marker
        self.strategy = strategy
        self.human_input = human_input
        self.observer = observer

        self.active_party: Optional[Party] = starting_party
        self.moves: List[Move] = []
        self._outcome: Optional[Outcome] = None

        # A board handed over mid-game may already be finished
        self._check_round_over()

    @property
    def outcome(self) -> Optional[Outcome]:
        """The outcome once the round is over, None before."""
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome is not None

    def marker_for(self, party: Party) -> str:
        return self.human_marker if party == Party.HUMAN else self.computer_marker

    def play_turn(self) -> Optional[Outcome]:
        """
        Let the active party take one square.

        If the human's square is rejected by the board, InvalidMoveError
        propagates and the round stays on the human's turn.

        Returns:
            The outcome if this move ended the round, None otherwise.

        Raises:
            RoundOverError: If the round has already ended.
        """
        if self.is_over:
            raise RoundOverError(f"Round is over ({self._outcome.value})")

        party = self.active_party
        if party == Party.HUMAN:
            position = self.human_input.request_human_move(
                self.board.unoccupied_positions()
            )
        else:
            position = self.strategy.choose_move(self.board)

        marker = self.marker_for(party)
        self.board.occupy(position, marker)
        self.moves.append(Move(party=party, position=position, marker=marker))

        if self.observer is not None:
            self.observer.show_board(self.board.copy())

        if self._check_round_over():
            return self._outcome

        self.active_party = party.opposite()
        return None

    def play(self) -> Outcome:
        """
        Play turns until the round ends.

        Returns:
            The outcome of the round.
        """
        if self.observer is not None and not self.moves:
            self.observer.show_board(self.board.copy())

        while not self.is_over:
            self.play_turn()

        return self._outcome

    def _check_round_over(self) -> bool:
        outcome = round_outcome(self.board, self.human_marker, self.computer_marker)
        if outcome is None:
            return False

        self._outcome = outcome
        self.active_party = None
        return True
