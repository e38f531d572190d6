"""
Game configuration for TicTacToe.
Defaults for turn order, marks, and the console host.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags in main.py override these per run.
    """

    # ==================== PLAYERS ====================
    FIRST_PLAYER = Mark.X   # X always opens a round
    HUMAN_MARK = Mark.X     # Human side in vs-AI mode
    AI_MARK = Mark.O        # AI side in vs-AI mode

    # ==================== MODE ====================
    DEFAULT_MODE = "2p"     # "2p" (two players) or "ai" (play vs AI)

    # ==================== CONSOLE ====================
    # Short pause before the AI answers, so the move is easy to follow
    AI_DELAY_SECONDS = 0.55
    SHOW_HINTS = True       # Allow 'h' to print the AI's suggestion
