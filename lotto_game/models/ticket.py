"""A single lotto ticket: six unique numbers in 1..45, kept sorted."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

from lotto_game.errors import DuplicateNumberError, InvalidInputError, OutOfRangeError, WrongCountError

MIN_NUMBER = 1
MAX_NUMBER = 45
NUMBERS_PER_TICKET = 6

NumberTuple6 = tuple[int, int, int, int, int, int]


def to_number(value: object, field: str = "numbers") -> int:
    """Exact integer value of ``value``; floats and strings are rejected, not truncated."""

    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidInputError(details={field: [value]}) from exc


class Ticket:
    """Immutable, self-validating lotto ticket.

    Numbers may be given in any order; they are stored ascending.
    Equality and hashing are by content.
    """

    __slots__ = ("_numbers",)

    def __init__(self, numbers: Iterable[int]) -> None:
        values = self._validate(list(numbers))
        self._numbers: NumberTuple6 = tuple(sorted(values))  # type: ignore[assignment]

    @staticmethod
    def _validate(raw: list[object]) -> list[int]:
        if len(raw) != NUMBERS_PER_TICKET:
            raise WrongCountError(details={"numbers": raw, "count": len(raw)})
        values = [to_number(n) for n in raw]
        if len(set(values)) != len(values):
            raise DuplicateNumberError(details={"numbers": values})
        out_of_range = [n for n in values if n < MIN_NUMBER or n > MAX_NUMBER]
        if out_of_range:
            raise OutOfRangeError(details={"numbers": out_of_range})
        return values

    @property
    def numbers(self) -> NumberTuple6:
        return self._numbers

    def match_count(self, other: Ticket) -> int:
        """Number of values shared with another ticket."""

        return len(set(self._numbers).intersection(other.numbers))

    def __contains__(self, number: object) -> bool:
        return number in self._numbers

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers)

    def __len__(self) -> int:
        return len(self._numbers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return self._numbers == other._numbers

    def __hash__(self) -> int:
        return hash(self._numbers)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_numbers"):
            raise AttributeError("Ticket is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"Ticket({list(self._numbers)!r})"
