"""
Tests for the console host, driven by scripted input.
"""

import contextlib
import io
import unittest
from unittest import mock

from tictactoe import main
from tictactoe.main import ConsoleGame
from tictactoe.board import Mark
from tictactoe.game_state import GameMode


class FirstChoice:
    def choice(self, seq):
        return seq[0]


def run_game(script, **kwargs):
    """Run a ConsoleGame on the given input; return (game, printed text)."""
    kwargs.setdefault("rng", FirstChoice())
    kwargs.setdefault("delay", 0)
    game = ConsoleGame(stdin=io.StringIO(script), **kwargs)
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        game.start()
    return game, out.getvalue()


class TestConsoleGame(unittest.TestCase):
    def test_two_player_win(self):
        game, text = run_game("1\n4\n2\n5\n3\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertEqual(game.game_state.winner, Mark.X)
        self.assertEqual(game.game_state.scores.x, 1)
        self.assertIn("Player X wins!", text)
        self.assertIn("Score  X: 1  O: 0  Draw: 0", text)
        self.assertIn("Game quit by user.", text)
        self.assertFalse(game.is_running)

    def test_ai_replies(self):
        game, text = run_game("5\nq\n", mode=GameMode.VS_AI)
        board = game.game_state.board
        self.assertEqual(board[4], Mark.X)
        self.assertEqual(board[0], Mark.O)
        self.assertIn(">>> AI played cell 1", text)
        self.assertIn("Turn: X (You)", text)

    def test_ai_first(self):
        game, text = run_game("q\n", mode=GameMode.VS_AI, ai_mark=Mark.X)
        self.assertEqual(game.game_state.board[4], Mark.X)
        self.assertEqual(game.game_state.current_player, Mark.O)

    def test_end_of_input_stops(self):
        game, _ = run_game("", mode=GameMode.TWO_PLAYER)
        self.assertFalse(game.is_running)

    def test_bad_cell_numbers(self):
        game, text = run_game("0\n10\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertEqual(text.count("Pick a cell from 1 to 9."), 2)
        self.assertEqual(game.game_state.moves, [])

    def test_occupied_cell(self):
        game, text = run_game("5\n5\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("Cell 4 is already occupied by X", text)
        self.assertEqual(game.game_state.moves, [4])

    def test_unknown_command_shows_help(self):
        _, text = run_game("what\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertGreaterEqual(text.count("r = reset board"), 2)

    def test_reset_and_new_match(self):
        game, text = run_game("1\n4\n2\n5\n3\nr\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("Board reset.", text)
        self.assertEqual(game.game_state.board, [None] * 9)
        self.assertEqual(game.game_state.scores.x, 1)

        game, text = run_game("1\n4\n2\n5\n3\nn\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("New match started.", text)
        self.assertEqual(game.game_state.scores.x, 0)

    def test_toggle_mode(self):
        game, text = run_game("m\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertEqual(game.game_state.mode, GameMode.VS_AI)
        self.assertIn("Mode: play vs AI (you are X)", text)

        game, text = run_game("m\nq\n", mode=GameMode.VS_AI)
        self.assertEqual(game.game_state.mode, GameMode.TWO_PLAYER)
        self.assertIn("Mode: two players", text)

    def test_hint(self):
        _, text = run_game("h\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("Hint: Place X at cell 5 (row 1, col 1)", text)

    def test_typing_hinted_cell_plays_suggested_move(self):
        game, text = run_game("h\n5\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("Hint: Place X at cell 5", text)
        self.assertEqual(game.game_state.board[4], Mark.X)
        self.assertEqual(game.game_state.moves, [4])

    def test_hinted_block_lands_on_blocking_cell(self):
        # X on 1 and 2, O on 5: O is told to block at cell 3 (index 2)
        game, text = run_game("1\n5\n2\nh\n3\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("Hint: Place O at cell 3 (row 0, col 2)", text)
        self.assertEqual(game.game_state.board[2], Mark.O)

    def test_reads_current_stdin_by_default(self):
        with mock.patch("sys.stdin", io.StringIO("5\nq\n")):
            game = ConsoleGame(mode=GameMode.TWO_PLAYER, delay=0)
            with contextlib.redirect_stdout(io.StringIO()):
                game.start()
        self.assertEqual(game.game_state.board[4], Mark.X)

    def test_hint_after_game_over(self):
        _, text = run_game("1\n4\n2\n5\n3\nh\nq\n", mode=GameMode.TWO_PLAYER)
        self.assertIn("The round is over.", text)


class TestMain(unittest.TestCase):
    def test_parses_arguments(self):
        with mock.patch.object(main, "ConsoleGame") as console:
            with contextlib.redirect_stdout(io.StringIO()):
                self.assertEqual(main.main(["--mode", "ai", "--seed", "3", "--no-delay"]), 0)

        kwargs = console.call_args.kwargs
        self.assertEqual(kwargs["mode"], GameMode.VS_AI)
        self.assertEqual(kwargs["ai_mark"], Mark.O)
        self.assertEqual(kwargs["delay"], 0)
        console.return_value.start.assert_called_once_with()

    def test_ai_first_plays_x_vs_ai(self):
        with mock.patch.object(main, "ConsoleGame") as console:
            with contextlib.redirect_stdout(io.StringIO()):
                main.main(["--ai-first"])

        kwargs = console.call_args.kwargs
        self.assertEqual(kwargs["mode"], GameMode.VS_AI)
        self.assertEqual(kwargs["ai_mark"], Mark.X)

    def test_keyboard_interrupt(self):
        out = io.StringIO()
        with mock.patch.object(main, "ConsoleGame") as console:
            console.return_value.start.side_effect = KeyboardInterrupt
            with contextlib.redirect_stdout(out):
                self.assertEqual(main.main([]), 0)
        self.assertIn("Game interrupted by user.", out.getvalue())
        self.assertIn("Goodbye!", out.getvalue())


if __name__ == "__main__":
    unittest.main()
