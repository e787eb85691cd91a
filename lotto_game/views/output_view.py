"""Console output rendered from the message table."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lotto_game.errors import AppError
from lotto_game.messages import MessageTable
from lotto_game.models.prize import PrizeTally, PrizeTier
from lotto_game.models.ticket import Ticket


class OutputView:
    def __init__(self, messages: MessageTable, writer: Callable[[str], None] = print) -> None:
        self._messages = messages
        self._writer = writer

    def purchased(self, tickets: Sequence[Ticket]) -> None:
        self._writer(self._messages["purchased_count"].format(count=len(tickets)))
        for ticket in tickets:
            self._writer(self.format_ticket(ticket))

    def format_ticket(self, ticket: Ticket) -> str:
        return self._messages["ticket"].format(numbers=", ".join(str(n) for n in ticket))

    def prize_result(self, tally: PrizeTally) -> None:
        self._writer(self._messages["stats_header"])
        for tier, count in tally.winning_counts():
            self._writer(self.prize_line(tier, count))

    def prize_line(self, tier: PrizeTier, count: int) -> str:
        key = "prize_line_bonus" if tier.requires_bonus else "prize_line"
        return self._messages[key].format(match_count=tier.match_count, payout=tier.payout, count=count)

    def profit_rate(self, rate: str) -> None:
        self._writer(self._messages["profit_rate"].format(rate=rate))

    def error(self, exc: AppError) -> None:
        self._writer(self._messages.get(f"error.{exc.code}", exc.message))
