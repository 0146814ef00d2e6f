"""
Match flow for TicTacToe.
Plays rounds on fresh boards, keeps the score and crowns a champion.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from .board import Board, Outcome, Party
from .config import FirstMove, MatchSettings
from .errors import GameError
from .move_strategy import MoveStrategy
from .round_controller import BoardObserver, HumanInput, RoundController


class MatchDisplay(BoardObserver, Protocol):
    """What the match shows between rounds."""

    def show_match_start(self, settings: MatchSettings) -> None:
        ...

    def show_round_result(self, outcome: Outcome, score: "Score") -> None:
        ...

    def show_champion(self, champion: Party, score: "Score") -> None:
        ...


class MatchStatus(Enum):
    IN_PROGRESS = "in_progress"
    OVER = "over"


@dataclass
class Score:
    """Rounds won by each party in the current match."""
    human: int = 0
    computer: int = 0

    def increment(self, party: Party):
        if party == Party.HUMAN:
            self.human += 1
        else:
            self.computer += 1

    def for_party(self, party: Party) -> int:
        return self.human if party == Party.HUMAN else self.computer

    def reset(self):
        self.human = 0
        self.computer = 0

    def copy(self) -> "Score":
        return Score(human=self.human, computer=self.computer)


class MatchController:
    """
    Runs a match made of rounds.

    Game flow:
    1. A new match resets the score and decides who starts
    2. Each round is played on a fresh board
    3. The round's winner scores a point (ties score nothing)
    4. The first party to reach the win threshold is champion
    5. The play-again collaborator decides whether a new match starts
    """

    def __init__(
        self,
        settings: MatchSettings,
        human_input: HumanInput,
        display: Optional[MatchDisplay] = None,
        ask_play_again: Optional[Callable[[], bool]] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            settings: Match settings (validated here).
            human_input: Asks the human for squares.
            display: Optional display shown every board and result.
            ask_play_again: Returns True to start a new match after the
                current one ends. Without it only one match is played.
            rng: Random source for the computer and the first-move draw.
                Defaults to a Random seeded with settings.seed.
        """
        self.settings = settings.validate()
        self.human_input = human_input
        self.display = display
        self.ask_play_again = ask_play_again
        self.rng = rng or random.Random(settings.seed)

        self.score = Score()
        self.status = MatchStatus.IN_PROGRESS
        self.champion: Optional[Party] = None
        self.rounds_played = 0
        self.board = Board()
        self.current_round: Optional[RoundController] = None

        self.first_to_move = Party.HUMAN
        self.strategy = self._build_strategy()
        self.new_match()

    def _build_strategy(self) -> MoveStrategy:
        return MoveStrategy(
            self.settings.difficulty,
            computer_marker=self.settings.computer_marker,
            human_marker=self.settings.human_marker,
            rng=self.rng
        )

    @property
    def is_over(self) -> bool:
        return self.status == MatchStatus.OVER

    def new_match(self, settings: Optional[MatchSettings] = None):
        """
        Reset the score and start a new match.

        Args:
            settings: New settings for this match, or None to keep the
                current ones.
        """
        if settings is not None:
            self.settings = settings.validate()
            self.strategy = self._build_strategy()

        self.score.reset()
        self.status = MatchStatus.IN_PROGRESS
        self.champion = None
        self.rounds_played = 0
        self.current_round = None

        # Random first move is drawn once per match, not per round
        first_move = self.settings.first_move
        if first_move == FirstMove.RANDOM:
            self.first_to_move = self.rng.choice([Party.HUMAN, Party.COMPUTER])
        elif first_move == FirstMove.COMPUTER:
            self.first_to_move = Party.COMPUTER
        else:
            self.first_to_move = Party.HUMAN

        if self.display is not None:
            self.display.show_match_start(self.settings)

    def starting_party_for_round(self, round_index: int) -> Party:
        """
        Who moves first in a given round (0 = first round).
        """
        if self.settings.alternate_first_move and round_index % 2 == 1:
            return self.first_to_move.opposite()
        return self.first_to_move

    def start_round(self) -> RoundController:
        """
        Set up the next round on a fresh board.

        Returns:
            The round, ready for play() or play_turn().
        """
        if self.is_over:
            raise GameError("Match is over. Start a new match first.")

        self.board = Board()
        self.current_round = RoundController(
            board=self.board,
            human_marker=self.settings.human_marker,
            computer_marker=self.settings.computer_marker,
            strategy=self.strategy,
            human_input=self.human_input,
            starting_party=self.starting_party_for_round(self.rounds_played),
            observer=self.display
        )
        return self.current_round

    def finish_round(self, round_controller: RoundController) -> Outcome:
        """
        Score a finished round and check for a champion.

        Args:
            round_controller: A round that is over.

        Returns:
            The round's outcome.
        """
        if not round_controller.is_over:
            raise GameError("Round is not over yet")

        outcome = round_controller.outcome
        winner = outcome.winner
        if winner is not None:
            self.score.increment(winner)
        self.rounds_played += 1
        self.current_round = None

        if self.display is not None:
            self.display.show_round_result(outcome, self.score.copy())

        for party in (Party.HUMAN, Party.COMPUTER):
            if self.score.for_party(party) >= self.settings.win_threshold:
                self.status = MatchStatus.OVER
                self.champion = party
                if self.display is not None:
                    self.display.show_champion(party, self.score.copy())
                break

        return outcome

    def play_round(self) -> Outcome:
        """Play one full round and score it."""
        round_controller = self.start_round()
        round_controller.play()
        return self.finish_round(round_controller)

    def play_match(self) -> Party:
        """
        Play rounds until someone is champion.

        Returns:
            The champion.
        """
        while not self.is_over:
            self.play_round()
        return self.champion

    def run(self, next_settings: Optional[Callable[[], MatchSettings]] = None):
        """
        Play matches until the human doesn't want to play again.

        Args:
            next_settings: Optional callable asked for the settings of
                every match after the first.
        """
        while True:
            self.play_match()

            if self.ask_play_again is None or not self.ask_play_again():
                break

            settings = next_settings() if next_settings is not None else None
            self.new_match(settings)
