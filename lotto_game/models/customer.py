"""The buyer: owns the purchased tickets for one session."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from lotto_game.models.prize import PrizeTally
from lotto_game.models.ticket import Ticket
from lotto_game.models.winning_draw import WinningDraw

if TYPE_CHECKING:
    from lotto_game.services.checker_service import Checker
    from lotto_game.services.store_service import Store


class Customer:
    def __init__(self) -> None:
        self._tickets: list[Ticket] = []

    def insert_money(self, store: Store, amount: int) -> None:
        store.receive_money(amount)

    def receive_tickets(self, tickets: Iterable[Ticket]) -> None:
        self._tickets = list(tickets)

    def list_tickets(self) -> list[Ticket]:
        """Copy of the held tickets; mutating it leaves the customer untouched."""

        return list(self._tickets)

    def request_check(self, checker: Checker, winning_draw: WinningDraw) -> PrizeTally:
        return checker.evaluate(self._tickets, winning_draw)
