"""Run the console game with: python -m tictactoe"""

import sys

from .main import main

sys.exit(main())
