"""
Main script for TicTacToe.

This script ties together:
- Logic (board, computer opponent, rounds, matches)
- Console (prompts, messages, board drawing)

Run this script to play TicTacToe against the computer!
"""

import argparse
import random
from typing import Optional

# Logic imports
from logic.config import FirstMove, GameConfig, MatchSettings
from logic.errors import ConfigurationError
from logic.match_controller import MatchController
from logic.move_strategy import Difficulty

# Console imports
from console.config import ConsoleConfig
from console.display import ConsoleDisplay
from console.messages import MessageCatalog
from console.prompts import ConsolePrompts


FIRST_MOVE_CHOICES = {
    "human": FirstMove.HUMAN,
    "computer": FirstMove.COMPUTER,
    "random": FirstMove.RANDOM,
}


class TicTacToeGame:
    """
    Console controller for a TicTacToe session.

    Game flow:
    1. Ask for name, marker, difficulty and who goes first
    2. Play rounds until someone reaches the win threshold
    3. Ask whether to play another match
    """

    def __init__(
        self,
        defaults: Optional[MatchSettings] = None,
        console_config: Optional[ConsoleConfig] = None,
        ask_name: bool = True,
        ask_marker: bool = True,
        ask_difficulty: bool = True,
        ask_first_move: bool = True,
        input_func=input,
        output=print
    ):
        """
        Args:
            defaults: Settings decided up front (e.g. from the command line).
            console_config: Console settings.
            ask_*: Whether to ask for that setting instead of using the default.
            input_func: Reads one line of input.
            output: Writes one line of output.
        """
        self.defaults = defaults or MatchSettings()
        self.messages = MessageCatalog.load()
        self.display = ConsoleDisplay(
            self.messages, console_config, output=output, input_func=input_func
        )
        self.prompts = ConsolePrompts(
            self.messages, input_func=input_func, output=output
        )
        self._ask = dict(
            ask_name=ask_name,
            ask_marker=ask_marker,
            ask_difficulty=ask_difficulty,
            ask_first_move=ask_first_move,
        )
        self.match: Optional[MatchController] = None

    def _collect_settings(self) -> MatchSettings:
        return self.prompts.collect_settings(self.defaults, **self._ask)

    def start(self):
        """Play matches until the player is done."""
        self.display.show_welcome(self.defaults.win_threshold)

        settings = self._collect_settings()

        # Name and marker stay the same for every later match
        self._ask["ask_name"] = False
        self._ask["ask_marker"] = False

        self.match = MatchController(
            settings,
            human_input=self.prompts,
            display=self.display,
            ask_play_again=self.prompts.ask_play_again,
            rng=random.Random(settings.seed),
        )
        self.match.run(next_settings=self._collect_settings)

        self.display.show_goodbye()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        type=int,
        choices=[d.value for d in Difficulty],
        help="1 = Easy, 2 = Intermediate, 3 = Advanced (asked if omitted)"
    )
    parser.add_argument(
        "--marker",
        help=f"Your marker, any letter except {GameConfig.COMPUTER_MARKER} (asked if omitted)"
    )
    parser.add_argument("--name", help="Your name (asked if omitted)")
    parser.add_argument(
        "--first",
        choices=sorted(FIRST_MOVE_CHOICES),
        help="Who moves first in the first round (asked if omitted)"
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=GameConfig.WIN_THRESHOLD,
        help="Rounds needed to become champion"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--no-alternate",
        action="store_true",
        help="Keep the same first mover every round"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen or pause between rounds"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Play in a window instead of the terminal"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> MatchSettings:
    """Build the default match settings from the command line."""
    settings = MatchSettings(
        win_threshold=args.threshold,
        alternate_first_move=not args.no_alternate,
        seed=args.seed,
    )
    if args.difficulty is not None:
        settings.difficulty = Difficulty(args.difficulty)
    if args.marker is not None:
        settings.human_marker = args.marker
    if args.name is not None:
        settings.human_name = args.name
    if args.first is not None:
        settings.first_move = FIRST_MOVE_CHOICES[args.first]
    return settings


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = settings_from_args(args)
    try:
        settings.validate()
    except ConfigurationError as e:
        parser.error(str(e))

    # Window mode
    if args.ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(settings)
        ui.run()
        return

    # Console mode
    game = TicTacToeGame(
        defaults=settings,
        console_config=ConsoleConfig(
            clear_screen=not args.no_clear,
            pause_between_rounds=not args.no_clear,
        ),
        ask_name=args.name is None,
        ask_marker=args.marker is None,
        ask_difficulty=args.difficulty is None,
        ask_first_move=args.first is None,
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user. Goodbye!")


if __name__ == "__main__":
    main()
