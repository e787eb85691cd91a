import sys

from lotto_game.cli import main

sys.exit(main())
