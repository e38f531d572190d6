"""
Win checker for TicTacToe.
Finds a completed line on a board; the host decides what a full board means.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, LINES, check_board, is_empty, is_full


@dataclass(frozen=True)
class Outcome:
    """A finished line: who won and along which cells."""
    winner: str                   # The mark that completed the line
    line: Tuple[int, int, int]    # One of LINES


def evaluate(board: Board) -> Optional[Outcome]:
    """
    Check the board for a completed line.

    Lines are scanned rows first, then columns, then diagonals, and the
    first complete one is returned. A full board with no line is still
    "no result" here.

    Args:
        board: 9-cell board. Not modified.

    Returns:
        Outcome for the first complete line, or None if there is none.
    """
    check_board(board)

    for a, b, c in LINES:
        if not is_empty(board[a]) and board[a] == board[b] == board[c]:
            return Outcome(winner=board[a], line=(a, b, c))

    return None


class WinChecker:
    """
    Checks for win and draw conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: Board) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            board: The current board.

        Returns:
            The winning mark, or None if no winner yet.
        """
        outcome = evaluate(board)
        return outcome.winner if outcome else None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line if there is one."""
        outcome = evaluate(board)
        return outcome.line if outcome else None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND no line is complete.
        """
        return evaluate(board) is None and is_full(board)
