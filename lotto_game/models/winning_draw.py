"""The official draw: six winning numbers plus a bonus number."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lotto_game.errors import InvalidBonusError, OutOfRangeError
from lotto_game.models.ticket import MAX_NUMBER, MIN_NUMBER, Ticket, to_number


@dataclass(frozen=True)
class WinningDraw:
    """Raw number sequences given as ``ticket`` are validated into a Ticket."""

    ticket: Ticket
    bonus_number: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket, Ticket):
            object.__setattr__(self, "ticket", Ticket(self.ticket))

        bonus = to_number(self.bonus_number, field="bonus_number")
        if bonus < MIN_NUMBER or bonus > MAX_NUMBER:
            raise OutOfRangeError(details={"bonus_number": bonus})
        if bonus in self.ticket:
            raise InvalidBonusError(details={"bonus_number": bonus, "numbers": list(self.ticket)})
        object.__setattr__(self, "bonus_number", bonus)

    @classmethod
    def of(cls, numbers: Iterable[int], bonus_number: int) -> WinningDraw:
        return cls(ticket=Ticket(numbers), bonus_number=bonus_number)
