"""Domain models."""

from lotto_game.models.customer import Customer
from lotto_game.models.prize import PrizeTally, PrizeTier
from lotto_game.models.result import GameResult
from lotto_game.models.ticket import Ticket
from lotto_game.models.winning_draw import WinningDraw

__all__ = ["Customer", "GameResult", "PrizeTally", "PrizeTier", "Ticket", "WinningDraw"]
