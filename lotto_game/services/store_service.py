"""Business logic for selling tickets."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any

from lotto_game.errors import BelowMinimumError, InvalidInputError, MoneyNotValidatedError, NotDivisibleError
from lotto_game.models.ticket import Ticket
from lotto_game.services.number_pool import NumberPool

logger = logging.getLogger(__name__)

TICKET_PRICE = 1000


class Store:
    """Accept money, validate it and issue one random ticket per 1,000 won.

    The amount is stored first and validated separately, so a caller can
    re-collect input between the two steps. Ticket operations require a
    successful ``validate_money`` since the last ``receive_money``.
    """

    def __init__(self, number_pool: NumberPool | None = None) -> None:
        self._pool = number_pool or NumberPool()
        self._money: Any = 0
        self._validated = False

    @property
    def money(self) -> Any:
        """The amount as received; an ``int`` once validation has passed."""

        return self._money

    def receive_money(self, amount: Any) -> None:
        self._money = amount
        self._validated = False

    def validate_money(self) -> None:
        amount = self._money
        if isinstance(amount, bool) or not isinstance(amount, Real):
            raise InvalidInputError(details={"money": amount})
        if amount < TICKET_PRICE:
            raise BelowMinimumError(details={"money": amount})
        # 1000.5 % 1000 == 0.5, so fractional amounts end up here too.
        if amount % TICKET_PRICE != 0:
            raise NotDivisibleError(details={"money": amount})
        self._money = int(amount)
        self._validated = True

    def ticket_count(self) -> int:
        self._require_validated()
        return self._money // TICKET_PRICE

    def issue_tickets(self) -> list[Ticket]:
        count = self.ticket_count()
        tickets = [self._pool.generate() for _ in range(count)]
        logger.info("Issued %d tickets for %d won", count, self._money)
        return tickets

    def _require_validated(self) -> None:
        if not self._validated:
            raise MoneyNotValidatedError(details={"money": self._money})
