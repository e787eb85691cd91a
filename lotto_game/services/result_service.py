"""Business logic for the profit rate summary."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from lotto_game.models.prize import PrizeTally


class ResultCalculator:
    """Turn a prize tally into a percentage string such as ``"62.5"``."""

    def __init__(self, decimals: int = 1) -> None:
        self._decimals = max(1, int(decimals))

    def profit_rate(self, tally: PrizeTally, money_spent: int) -> str:
        if money_spent <= 0:
            raise ValueError("money_spent must be positive")

        rate = Decimal(tally.total_prize()) * 100 / Decimal(money_spent)
        quantum = Decimal(1).scaleb(-self._decimals)
        return str(rate.quantize(quantum, rounding=ROUND_HALF_UP))
