"""Console entrypoint.

Runs one purchase session. Equivalent to ``python -m lotto_game``.
"""

import sys

from lotto_game.cli import main


if __name__ == "__main__":
    sys.exit(main())
