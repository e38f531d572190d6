"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the play mode, and the match score.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .board import Mark, check_index, format_board, is_full, new_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import Outcome, evaluate

if TYPE_CHECKING:
    from .ai_player import AIPlayer


class GameMode(Enum):
    """Who plays the second mark."""
    TWO_PLAYER = "2p"   # Two humans share the board
    VS_AI = "ai"        # Human against AIPlayer


@dataclass
class Scores:
    """Cumulative results across the rounds of one match."""
    x: int = 0
    o: int = 0
    draw: int = 0

    def record(self, outcome: Optional[Outcome]):
        """Count a finished round. None means the round was a draw."""
        if outcome is None:
            self.draw += 1
        elif outcome.winner == Mark.X:
            self.x += 1
        else:
            self.o += 1

    def reset(self):
        self.x = self.o = self.draw = 0

    def __str__(self) -> str:
        return f"X: {self.x}  O: {self.o}  Draw: {self.draw}"


@dataclass
class GameState:
    """
    The complete state of a TicTacToe match.

    Tracks:
    - The 9-cell board of the current round
    - Current player
    - Play mode and which mark the AI uses
    - Move history of the round
    - Round result and cumulative scores
    """

    # The board - None means empty, otherwise a Mark
    board: List[Optional[Mark]] = field(default_factory=new_board)

    # Current player's turn
    current_player: Mark = GameConfig.FIRST_PLAYER

    mode: GameMode = GameMode(GameConfig.DEFAULT_MODE)
    ai_mark: Mark = GameConfig.AI_MARK

    scores: Scores = field(default_factory=Scores)

    # Cells played this round, in order
    moves: List[int] = field(default_factory=list)

    # Round result
    outcome: Optional[Outcome] = None
    is_draw: bool = False
    is_game_over: bool = False

    # Last result message for the host to show
    notification: str = ""

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner if self.outcome else None

    @property
    def human_mark(self) -> Mark:
        return self.ai_mark.opposite()

    @property
    def is_ai_turn(self) -> bool:
        """True when the host should ask the AI for a move."""
        return (
            self.mode == GameMode.VS_AI
            and not self.is_game_over
            and self.current_player == self.ai_mark
        )

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark for a human move.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.

        Raises:
            ValueError: if index is not a cell on the board.
        """
        check_index(index)

        result = MoveValidator().validate_move(self, index)
        if not result.is_valid:
            print(result.error_message)
            return False

        self._apply(index)
        return True

    def play_ai_move(self, ai_player: "AIPlayer") -> Optional[int]:
        """
        Let the AI take its turn.

        Returns:
            The cell the AI played, or None if it wasn't the AI's turn
            or there was no move left.
        """
        if not self.is_ai_turn:
            return None

        move = ai_player.get_best_move(self.board)
        if move is None:
            return None

        self._apply(move)
        return move

    def _apply(self, index: int):
        """Place the mark, check for the end of the round, switch turns."""
        self.board[index] = self.current_player
        self.moves.append(index)

        self.outcome = evaluate(self.board)
        if self.outcome is not None:
            self.is_game_over = True
            self.notification = f"Player {self.outcome.winner} wins!"
            self.scores.record(self.outcome)
        elif is_full(self.board):
            self.is_draw = True
            self.is_game_over = True
            self.notification = "It's a draw."
            self.scores.record(None)

        self.current_player = self.current_player.opposite()

    def reset_board(self):
        """Start a new round. Scores are kept."""
        self.board = new_board()
        self.current_player = GameConfig.FIRST_PLAYER
        self.moves = []
        self.outcome = None
        self.is_draw = False
        self.is_game_over = False
        self.notification = ""

    def new_match(self):
        """Start a new round and clear the scores."""
        self.reset_board()
        self.scores.reset()

    def set_mode(self, mode: GameMode):
        """Switch play mode. The current round is thrown away."""
        self.mode = GameMode(mode)
        self.reset_board()

    def status_text(self) -> str:
        """One-line status for the host to display."""
        if self.outcome is not None:
            return f"Winner: {self.outcome.winner}"
        if self.is_draw:
            return "Draw"
        if self.mode == GameMode.VS_AI:
            who = "(AI)" if self.current_player == self.ai_mark else "(You)"
            return f"Turn: {self.current_player} {who}"
        return f"Turn: {self.current_player}"

    def print_board(self):
        """Print the board and status to console."""
        highlight = self.outcome.line if self.outcome else ()
        print()
        print(format_board(self.board, highlight))
        print()
        print(self.status_text())
        if self.notification:
            print(self.notification)
