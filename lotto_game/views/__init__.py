"""Console views."""

from lotto_game.views.input_view import InputView
from lotto_game.views.output_view import OutputView

__all__ = ["InputView", "OutputView"]
