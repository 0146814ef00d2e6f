"""
Console prompts for TicTacToe.
Asks the human questions and keeps asking until the answer is valid.
"""

from typing import Callable, List, Optional, Sequence

from logic.config import FirstMove, GameConfig, MatchSettings
from logic.move_strategy import Difficulty
from logic.move_validator import MoveValidator, ValidationResult

from .config import ConsoleConfig
from .messages import MessageCatalog


MENU_CHOICES = ("1", "2", "3")


def joinor(items: Sequence[object], delimiter: str = ", ", word: str = "or") -> str:
    """
    Join items for a prompt, e.g. [1, 2, 3] -> "1, 2, or 3".

    Args:
        items: Things to list.
        delimiter: Separator between items.
        word: Word before the last item.

    Returns:
        The joined text.
    """
    items = [str(item) for item in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {word} {items[1]}"
    return f"{delimiter.join(items[:-1])}{delimiter}{word} {items[-1]}"


class ConsolePrompts:
    """
    Reads answers from the keyboard.

    Every ask_* method loops until the validator accepts the answer, so
    callers always get a usable value.
    """

    def __init__(
        self,
        messages: MessageCatalog,
        validator: Optional[MoveValidator] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Args:
            messages: Message catalog.
            validator: Answer validator. Uses a new MoveValidator if not provided.
            input_func: Reads one line (input by default).
            output: Writes one line (print by default).
        """
        self.messages = messages
        self.validator = validator or MoveValidator()
        self.input_func = input_func
        self.output = output

    def prompt(self, key: str, **values):
        text = self.messages.format(key, **values) if values else self.messages[key]
        self.output(f"{ConsoleConfig.PROMPT_PREFIX}{text}")

    def _ask(
        self,
        key: str,
        validate: Callable[[str], ValidationResult],
        retry_key: Optional[str] = None,
        **values
    ):
        while True:
            self.prompt(key, **values)
            result = validate(self.input_func(""))
            if result.is_valid:
                return result.value
            if retry_key is not None:
                self.prompt(retry_key, **values)

    def request_human_move(self, valid_positions: List[int]) -> int:
        """
        Ask for a square until a free one is chosen.

        Args:
            valid_positions: Free squares.

        Returns:
            One of valid_positions.
        """
        return self._ask(
            "choose_square",
            lambda text: self.validator.validate_square(text, valid_positions),
            retry_key="invalid_square",
            empty_squares=joinor(valid_positions),
        )

    def ask_name(self) -> str:
        return self._ask("player_name", self.validator.validate_name, "invalid_name")

    def ask_marker(self) -> str:
        return self._ask(
            "player_marker",
            self.validator.validate_marker,
            "invalid_marker",
            computer_marker=GameConfig.COMPUTER_MARKER,
        )

    def ask_difficulty(self) -> Difficulty:
        answer = self._ask(
            "difficulty",
            lambda text: self.validator.validate_choice(text, MENU_CHOICES),
            "enter_valid_option",
        )
        return Difficulty(int(answer))

    def ask_first_move(self, name: str, opponent: str) -> FirstMove:
        answer = self._ask(
            "who_goes_first",
            lambda text: self.validator.validate_choice(text, MENU_CHOICES),
            "enter_valid_option",
            name=name,
            opponent=opponent,
        )
        return FirstMove(int(answer))

    def ask_play_again(self) -> bool:
        return self._ask("play_again", self.validator.validate_yes_no, "invalid_yes_no")

    def collect_settings(self, defaults: Optional[MatchSettings] = None,
                         ask_name: bool = True, ask_marker: bool = True,
                         ask_difficulty: bool = True,
                         ask_first_move: bool = True) -> MatchSettings:
        """
        Ask for every setting that isn't already decided.

        Args:
            defaults: Starting settings (e.g. from the command line).
            ask_*: Set to False to keep the default for that setting.

        Returns:
            Validated match settings.
        """
        settings = defaults or MatchSettings()

        if ask_name:
            settings.human_name = self.ask_name()
        if ask_marker:
            settings.human_marker = self.ask_marker()
        if ask_difficulty:
            settings.difficulty = self.ask_difficulty()
        if ask_first_move:
            settings.first_move = self.ask_first_move(
                settings.human_name, settings.opponent_name
            )

        return settings.validate()
