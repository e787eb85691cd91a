"""Outcome of one purchase session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lotto_game.models.prize import PrizeTally
from lotto_game.models.ticket import Ticket


@dataclass(frozen=True)
class GameResult:
    money_spent: int
    tickets: list[Ticket]
    tally: PrizeTally
    profit_rate: str

    def to_payload(self) -> dict[str, Any]:
        """Plain structure for ``GameResultSchema.dump``."""

        return {
            "money_spent": self.money_spent,
            "ticket_count": len(self.tickets),
            "tickets": [list(t.numbers) for t in self.tickets],
            "prizes": [
                {
                    "tier": tier.name,
                    "match_count": tier.match_count,
                    "bonus_match": tier.requires_bonus,
                    "payout": tier.payout,
                    "count": count,
                }
                for tier, count in self.tally.winning_counts()
            ],
            "total_prize": self.tally.total_prize(),
            "profit_rate": self.profit_rate,
        }
