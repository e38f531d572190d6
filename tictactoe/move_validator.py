"""
Move validator for TicTacToe.
Validates that a placement follows the rules before the host applies it.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .board import BOARD_CELLS, is_empty

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell must be on the board
    3. Can only place on empty cells
    4. In vs-AI mode the human can't move on the AI's turn
    """

    def validate_move(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a human placement.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not (0 <= index < BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}."
            )

        cell = game_state.board[index]
        if not is_empty(cell):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {cell}"
            )

        if game_state.is_ai_turn:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the AI to move!"
            )

        return ValidationResult(is_valid=True)
