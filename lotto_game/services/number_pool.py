"""Random ticket generation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from lotto_game.models.ticket import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_TICKET, Ticket


class RandomSource(Protocol):
    """Anything with ``random.Random.sample`` semantics."""

    def sample(self, population: Sequence[int], k: int) -> list[int]: ...


class NumberPool:
    """Draw one ticket: 6 numbers sampled without replacement from 1..45."""

    def __init__(self, source: RandomSource | None = None, seed: int | None = None) -> None:
        self._source: RandomSource = source if source is not None else random.Random(seed)
        self._population = range(MIN_NUMBER, MAX_NUMBER + 1)

    def generate(self) -> Ticket:
        picked = self._source.sample(self._population, NUMBERS_PER_TICKET)
        return Ticket(picked)
