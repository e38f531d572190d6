"""
Console host for TicTacToe.

This script ties together:
- The board and rules (GameState, WinChecker)
- The AI opponent (AIPlayer)
- Keyboard input and printed output

Run `python -m tictactoe` (or the `tictactoe` command) to play in a terminal!
"""

import random
import sys
import time
from typing import Optional, TextIO

from .ai_player import AIPlayer
from .board import BOARD_CELLS, Mark
from .config import GameConfig
from .game_state import GameMode, GameState

HELP_TEXT = (
    "Enter a cell number 1-9, or: "
    "r = reset board, n = new match, m = switch mode, h = hint, q = quit"
)


class ConsoleGame:
    """
    Main controller for a console TicTacToe session.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a cell (or a command) from the player
    3. In vs-AI mode the AI answers right after a human move
    4. On a win or draw, show the result and the score
    5. Repeat until the player quits
    """

    def __init__(
        self,
        mode: GameMode = GameMode(GameConfig.DEFAULT_MODE),
        ai_mark: Mark = GameConfig.AI_MARK,
        rng: Optional[random.Random] = None,
        delay: float = GameConfig.AI_DELAY_SECONDS,
        stdin: Optional[TextIO] = None,
    ):
        """
        Initialize the console game.

        Args:
            mode: Two players or vs AI.
            ai_mark: Which mark the AI plays in vs-AI mode.
            rng: Random source for the AI's corner/side picks.
            delay: Seconds to wait before the AI moves.
            stdin: Where to read player input from (default: sys.stdin).
        """
        self.game_state = GameState(mode=mode, ai_mark=ai_mark)
        self.ai = AIPlayer(ai_mark, rng)
        self.delay = delay
        self.stdin = stdin if stdin is not None else sys.stdin
        self.is_running = False

    def start(self):
        """Start the session."""
        print("\n" + "=" * 40)
        print("   TicTacToe")
        print("=" * 40)
        print(HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.game_state.is_ai_turn:
                self._ai_move()
                continue

            self.game_state.print_board()
            if self.game_state.is_game_over:
                print(f"Score  {self.game_state.scores}")
                print("Press r for another round, n for a new match, q to quit.")

            line = self.stdin.readline()
            if not line:
                # End of input
                self.is_running = False
                break

            self._handle_input(line.strip().lower())

    def _handle_input(self, text: str):
        """
        Handle one line of player input.

        Args:
            text: Stripped, lower-cased input line.
        """
        if text == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif text == "r":
            self.game_state.reset_board()
            print("Board reset.")
        elif text == "n":
            self.game_state.new_match()
            print("New match started.")
        elif text == "m":
            self._toggle_mode()
        elif text == "h":
            self._show_hint()
        elif text.isdigit():
            self._human_move(int(text) - 1)
        else:
            print(HELP_TEXT)

    def _human_move(self, index: int):
        """Apply a human placement after checking the cell number."""
        if not (0 <= index < BOARD_CELLS):
            print(f"Pick a cell from 1 to {BOARD_CELLS}.")
            return

        player = self.game_state.current_player
        if self.game_state.make_move(index):
            print(f"\n>>> {player} played cell {index + 1}")

    def _ai_move(self):
        """Let the AI take its turn."""
        print("\n>>> AI is thinking...")
        if self.delay > 0:
            time.sleep(self.delay)

        move = self.game_state.play_ai_move(self.ai)
        if move is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        print(f">>> AI played cell {move + 1}")

    def _toggle_mode(self):
        if self.game_state.mode == GameMode.TWO_PLAYER:
            self.game_state.set_mode(GameMode.VS_AI)
            print(f"Mode: play vs AI (you are {self.game_state.human_mark})")
        else:
            self.game_state.set_mode(GameMode.TWO_PLAYER)
            print("Mode: two players")

    def _show_hint(self):
        if not GameConfig.SHOW_HINTS:
            print("Hints are disabled.")
            return
        if self.game_state.is_game_over:
            print("The round is over.")
            return

        adviser = AIPlayer(self.game_state.current_player, self.ai.rng)
        print(f"Hint: {adviser.get_move_suggestion(self.game_state.board)}")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="2p for two players, ai to play against the computer"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Play vs AI, with the AI playing X and moving first"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's random corner/side choice"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause before AI moves"
    )

    args = parser.parse_args(argv)

    ai_mark = GameConfig.AI_MARK.opposite() if args.ai_first else GameConfig.AI_MARK
    mode = GameMode.VS_AI if args.ai_first else GameMode(args.mode)
    game = ConsoleGame(
        mode=mode,
        ai_mark=ai_mark,
        rng=random.Random(args.seed),
        delay=0 if args.no_delay else GameConfig.AI_DELAY_SECONDS,
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
