"""Business logic for checking tickets against the winning draw."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lotto_game.models.prize import PrizeTally, PrizeTier
from lotto_game.models.ticket import Ticket
from lotto_game.models.winning_draw import WinningDraw

logger = logging.getLogger(__name__)


class Checker:
    """Rank tickets and tally how many landed in each tier."""

    @staticmethod
    def rank(ticket: Ticket, winning_draw: WinningDraw) -> PrizeTier:
        match_count = ticket.match_count(winning_draw.ticket)
        # Bonus only matters for the 5-match split.
        bonus_match = match_count == 5 and winning_draw.bonus_number in ticket
        return PrizeTier.of(match_count, bonus_match)

    def evaluate(self, tickets: Iterable[Ticket], winning_draw: WinningDraw) -> PrizeTally:
        tally = PrizeTally()
        for ticket in tickets:
            tally.record(self.rank(ticket, winning_draw))

        logger.debug(
            "Checked %d tickets: %s",
            tally.total_tickets(),
            {tier.name: n for tier, n in tally.counts.items()},
        )
        return tally
