"""
Errors raised by the game logic.

Every error here is local to the call that raised it. Nothing in the
board or the controllers is left half-updated when one is raised.
"""


class GameError(Exception):
    """Base class for all game logic errors."""


class InvalidMoveError(GameError):
    """A square is out of range, already taken, or the marker is invalid."""


class NoMovesAvailableError(GameError):
    """The computer was asked to move on a full board."""


class RoundOverError(GameError):
    """A move was requested after the round already ended."""


class ConfigurationError(GameError):
    """Match settings are not playable (bad marker, threshold, etc.)."""
