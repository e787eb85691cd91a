"""Prize tiers and per-tier counters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class PrizeTier(Enum):
    """Each member carries (match_count, requires_bonus, payout)."""

    FIRST = (6, False, 2_000_000_000)
    SECOND = (5, True, 30_000_000)
    THIRD = (5, False, 1_500_000)
    FOURTH = (4, False, 50_000)
    FIFTH = (3, False, 5_000)
    NONE = (0, False, 0)

    def __init__(self, match_count: int, requires_bonus: bool, payout: int) -> None:
        self.match_count = match_count
        self.requires_bonus = requires_bonus
        self.payout = payout

    @classmethod
    def of(cls, match_count: int, bonus_match: bool) -> PrizeTier:
        """Resolve a tier; FIRST is checked first, NONE is the fallback."""

        if match_count == 6:
            return cls.FIRST
        if match_count == 5:
            return cls.SECOND if bonus_match else cls.THIRD
        if match_count == 4:
            return cls.FOURTH
        if match_count == 3:
            return cls.FIFTH
        return cls.NONE

    @classmethod
    def winning_tiers(cls) -> list[PrizeTier]:
        """Winning tiers in ascending payout order (display order)."""

        return sorted((t for t in cls if t is not cls.NONE), key=lambda t: t.payout)


@dataclass
class PrizeTally:
    """Count of tickets per tier. Every tier, NONE included, is always present."""

    counts: dict[PrizeTier, int] = field(default_factory=lambda: {t: 0 for t in PrizeTier})

    def record(self, tier: PrizeTier) -> None:
        self.counts[tier] = self.counts.get(tier, 0) + 1

    def count(self, tier: PrizeTier) -> int:
        return self.counts.get(tier, 0)

    def total_tickets(self) -> int:
        return sum(self.counts.values())

    def total_prize(self) -> int:
        return sum(tier.payout * n for tier, n in self.counts.items())

    def winning_counts(self) -> Iterator[tuple[PrizeTier, int]]:
        for tier in PrizeTier.winning_tiers():
            yield tier, self.count(tier)
