"""
TicTacToe
=========
Rules engine and a simple rule-based opponent for 3x3 TicTacToe.

The two core calls are pure and never modify the board they are given:
- evaluate(board): find a completed line
- select_move(board, self_mark, opponent_mark): pick the AI's next cell
"""

from .board import (
    BOARD_CELLS, CENTER, CORNERS, LINES, SIDES, Mark,
    empty_cells, format_board, is_full, new_board, place,
)
from .win_checker import Outcome, WinChecker, evaluate
from .ai_player import AIPlayer, select_move
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameMode, GameState, Scores
from .config import GameConfig

__version__ = "1.0.0"
