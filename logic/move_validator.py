"""
Input validator for TicTacToe.
Checks the text a human types before it reaches the game.
"""

import re
from typing import Optional, Sequence
from dataclasses import dataclass

from .config import GameConfig


YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


@dataclass
class ValidationResult:
    """Result of validating one answer."""
    is_valid: bool
    value: object = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates what the human types.

    Rules:
    1. A square must be a number of a free square
    2. A marker must be one letter from the allowed alphabet
    3. A name must contain at least one letter or digit
    4. Menu answers must be one of the offered choices
    """

    def validate_square(
        self,
        text: str,
        valid_positions: Sequence[int]
    ) -> ValidationResult:
        """
        Validate a square choice.

        Args:
            text: What the human typed.
            valid_positions: Free squares.

        Returns:
            ValidationResult with the square number as value.
        """
        text = text.strip()
        # Only plain 0-9; isdigit() also accepts things like superscripts
        if not text or not all(char in "0123456789" for char in text):
            return ValidationResult(
                is_valid=False,
                error_message=f"{text!r} is not a square number"
            )

        square = int(text)
        if square not in valid_positions:
            return ValidationResult(
                is_valid=False,
                error_message=f"Square {square} is not available"
            )

        return ValidationResult(is_valid=True, value=square)

    def validate_marker(self, text: str) -> ValidationResult:
        """Validate a marker letter (case-insensitive, stored upper case)."""
        marker = text.strip().upper()
        if marker not in GameConfig.HUMAN_MARKER_ALPHABET:
            return ValidationResult(
                is_valid=False,
                error_message=f"{text.strip()!r} is not an allowed marker"
            )
        return ValidationResult(is_valid=True, value=marker)

    def validate_name(self, text: str) -> ValidationResult:
        name = text.strip()
        if not re.search(r"\w", name):
            return ValidationResult(
                is_valid=False,
                error_message="Name must contain a letter or number"
            )
        return ValidationResult(is_valid=True, value=name)

    def validate_choice(
        self,
        text: str,
        choices: Sequence[str]
    ) -> ValidationResult:
        """Validate a menu answer such as '1', '2' or '3'."""
        answer = text.strip()
        if answer not in choices:
            return ValidationResult(
                is_valid=False,
                error_message=f"Choose one of {', '.join(choices)}"
            )
        return ValidationResult(is_valid=True, value=answer)

    def validate_yes_no(self, text: str) -> ValidationResult:
        """
        Validate a yes/no answer.

        Returns:
            ValidationResult with True for yes, False for no.
        """
        answer = text.strip().lower()
        if answer in YES_ANSWERS:
            return ValidationResult(is_valid=True, value=True)
        if answer in NO_ANSWERS:
            return ValidationResult(is_valid=True, value=False)
        return ValidationResult(
            is_valid=False,
            error_message="Please answer y or n"
        )


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    validator = MoveValidator()

    result = validator.validate_square("5", [1, 5, 9])
    print(f"Square '5': valid={result.is_valid}, value={result.value}")

    result = validator.validate_square("2", [1, 5, 9])
    print(f"Square '2': valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_marker("o")
    print(f"Marker 'o': valid={result.is_valid}, error={result.error_message}")

    print("\nMoveValidator test done!")
