"""
AI player for TicTacToe.
Picks a move with a fixed list of rules: win, block, center, corner, side.
"""

import random
from typing import Optional

from .board import (
    Board, CENTER, CORNERS, SIDES, Mark,
    check_board, empty_cells, is_empty, to_row_col,
)
from .win_checker import evaluate


def _completes_line(board: Board, index: int, mark) -> bool:
    """True if placing mark at index would win for mark."""
    trial = list(board)
    trial[index] = mark
    outcome = evaluate(trial)
    return outcome is not None and outcome.winner == mark


def select_move(
    board: Board,
    self_mark,
    opponent_mark,
    rng: Optional[random.Random] = None,
) -> Optional[int]:
    """
    Choose the next cell for self_mark.

    Rules, in order, first one that applies wins:
    1. Take a cell that wins right now.
    2. Take a cell the opponent would win with next turn.
    3. Take the center.
    4. Take a random free corner.
    5. Take a random free side.

    Every empty cell is tried for rule 1 before any is tried for rule 2,
    so a win is always preferred over a block.

    Args:
        board: 9-cell board. Not modified.
        self_mark: The mark we are choosing a move for.
        opponent_mark: The other player's mark.
        rng: Source of randomness for corners/sides. Anything with a
            choice() method works. A fresh random.Random() is used if None.

    Returns:
        Cell index 0-8, or None if the board is full.

    Raises:
        ValueError: on a malformed board or identical marks.
    """
    check_board(board)
    if is_empty(self_mark) or is_empty(opponent_mark):
        raise ValueError("Both marks must be non-empty")
    if self_mark == opponent_mark:
        raise ValueError(f"Self and opponent marks are both {self_mark!r}")

    empty = empty_cells(board)
    if not empty:
        return None

    # Win now
    for index in empty:
        if _completes_line(board, index, self_mark):
            return index

    # Block
    for index in empty:
        if _completes_line(board, index, opponent_mark):
            return index

    if CENTER in empty:
        return CENTER

    if rng is None:
        rng = random.Random()

    corners = [i for i in CORNERS if i in empty]
    if corners:
        return rng.choice(corners)

    sides = [i for i in SIDES if i in empty]
    if sides:
        return rng.choice(sides)

    return None


class AIPlayer:
    """
    A simple rule-based TicTacToe opponent.

    It wins if it can, blocks if it must, and otherwise prefers the
    center, then corners, then sides. It does not look further ahead,
    so it can be beaten.
    """

    def __init__(self, mark: Mark = Mark.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            rng: Random source for corner/side picks.
        """
        self.mark = Mark(mark)
        self.opponent = self.mark.opposite()
        self.rng = rng if rng is not None else random.Random()

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the move for the current position.

        Returns:
            Cell index, or None if no moves available.
        """
        return select_move(board, self.mark, self.opponent, self.rng)

    def get_move_suggestion(self, board: Board) -> str:
        """Get a human-readable move suggestion."""
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = to_row_col(move)
        # Cells are numbered 1-9 on the printed board
        return f"Place {self.mark} at cell {move + 1} (row {row}, col {col})"
