"""Allow ``python -m board_game_scoring``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
