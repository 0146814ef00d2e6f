"""
Console configuration for TicTacToe.
Settings for the terminal front end: messages, screen clearing, pauses.
"""

from pathlib import Path


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values based on your terminal!
    """

    # ==================== MESSAGES ====================
    # YAML file with every line of text shown to the player
    MESSAGES_PATH = Path(__file__).parent / "messages.yml"

    # Prefix for prompts, e.g. "=> Choose a square"
    PROMPT_PREFIX = "=> "

    # ==================== SCREEN SETTINGS ====================
    # Clear the terminal before drawing the board
    CLEAR_SCREEN = True

    # Wait for Enter after each round result
    PAUSE_BETWEEN_ROUNDS = True

    # Width of the "=====" banner lines
    BANNER_WIDTH = 60

    def __init__(self, clear_screen: bool = CLEAR_SCREEN,
                 pause_between_rounds: bool = PAUSE_BETWEEN_ROUNDS):
        self.clear_screen = clear_screen
        self.pause_between_rounds = pause_between_rounds
