"""One purchase session, wired from input to printed statistics."""

from __future__ import annotations

import logging

from lotto_game.error_handlers import prompt_until_valid
from lotto_game.models.customer import Customer
from lotto_game.models.result import GameResult
from lotto_game.models.ticket import Ticket
from lotto_game.models.winning_draw import WinningDraw
from lotto_game.services.checker_service import Checker
from lotto_game.services.result_service import ResultCalculator
from lotto_game.services.store_service import Store
from lotto_game.views.input_view import InputView
from lotto_game.views.output_view import OutputView

logger = logging.getLogger(__name__)


class LottoGame:
    """Buy tickets, read the winning draw, report prizes and profit rate."""

    def __init__(
        self,
        input_view: InputView,
        output_view: OutputView,
        store: Store,
        customer: Customer | None = None,
        checker: Checker | None = None,
        calculator: ResultCalculator | None = None,
    ) -> None:
        self._input = input_view
        self._output = output_view
        self._store = store
        self._customer = customer or Customer()
        self._checker = checker or Checker()
        self._calculator = calculator or ResultCalculator()

    def run(self, show_statistics: bool = True) -> GameResult:
        money = prompt_until_valid(self._purchase, self._output.error)

        self._customer.receive_tickets(self._store.issue_tickets())
        tickets = self._customer.list_tickets()
        self._output.purchased(tickets)

        winning_ticket = prompt_until_valid(self._read_winning_ticket, self._output.error)
        winning_draw = prompt_until_valid(lambda: self._read_winning_draw(winning_ticket), self._output.error)

        tally = self._customer.request_check(self._checker, winning_draw)
        rate = self._calculator.profit_rate(tally, money)
        logger.info("Session finished: %d tickets, total prize %d, rate %s%%", len(tickets), tally.total_prize(), rate)

        if show_statistics:
            self._output.prize_result(tally)
            self._output.profit_rate(rate)

        return GameResult(money_spent=money, tickets=tickets, tally=tally, profit_rate=rate)

    def _purchase(self) -> int:
        amount = self._input.read_money()
        self._customer.insert_money(self._store, amount)
        self._store.validate_money()
        return self._store.money

    def _read_winning_ticket(self) -> Ticket:
        return Ticket(self._input.read_winning_numbers())

    def _read_winning_draw(self, winning_ticket: Ticket) -> WinningDraw:
        return WinningDraw(ticket=winning_ticket, bonus_number=self._input.read_bonus_number())
