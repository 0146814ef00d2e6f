"""
Console module for TicTacToe.
Handles prompts, messages and drawing in the terminal.
"""

from .config import ConsoleConfig
from .messages import MessageCatalog
from .display import ConsoleDisplay
from .prompts import ConsolePrompts, joinor
