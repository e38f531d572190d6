"""
Board geometry for TicTacToe.
Cell indices, winning lines, and small helpers shared by the rules and the AI.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple


class Mark(str, Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


# 3x3 board, row-major: index = row * 3 + col
BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

EMPTY = None

# All possible winning lines. Order matters: the first complete line is reported.
LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)

Board = Sequence[Optional[str]]


def new_board() -> List[Optional[str]]:
    """Create an empty board."""
    return [EMPTY] * BOARD_CELLS


def is_empty(cell) -> bool:
    """None, "" and other falsy values all count as an empty cell."""
    return not cell


def check_board(board: Board):
    """
    Make sure a board has exactly 9 cells.

    Raises:
        ValueError: if the board has the wrong length.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(
            f"Board must have {BOARD_CELLS} cells, got {len(board)}"
        )


def check_index(index: int):
    """Raise ValueError if index is not a cell on the board."""
    if not (0 <= index < BOARD_CELLS):
        raise ValueError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")


def empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        Indices of empty cells, ascending.
    """
    return [i for i, cell in enumerate(board) if is_empty(cell)]


def is_full(board: Board) -> bool:
    """True if there is no empty cell left."""
    return all(not is_empty(cell) for cell in board)


def place(board: Board, index: int, mark) -> List[Optional[str]]:
    """
    Place a mark on a copy of the board.

    Args:
        board: The current board (not modified).
        index: Cell to place the mark on (0-8).
        mark: The mark to place.

    Returns:
        A new board with the mark placed.

    Raises:
        ValueError: if the index is out of range or the cell is occupied.
    """
    check_board(board)
    check_index(index)
    if not is_empty(board[index]):
        raise ValueError(f"Cell {index} is already occupied by {board[index]}")

    new = list(board)
    new[index] = mark
    return new


def to_row_col(index: int) -> Tuple[int, int]:
    """Convert a flat index to (row, col)."""
    return divmod(index, BOARD_SIZE)


def format_board(board: Board, highlight: Iterable[int] = ()) -> str:
    """
    Render the board as a text grid.

    Empty cells show their 1-based number so a human can pick them.
    Highlighted cells (e.g. the winning line) are wrapped in brackets.
    """
    highlight = set(highlight)
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            cell = board[index]
            text = str(index + 1) if is_empty(cell) else str(cell)
            if index in highlight:
                cells.append(f"[{text}]")
            else:
                cells.append(f" {text} ")
        lines.append("|".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
