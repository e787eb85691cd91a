"""Console input. Reads raw lines and parses them with marshmallow schemas."""

from __future__ import annotations

from collections.abc import Callable

from lotto_game.messages import MessageTable
from lotto_game.schemas.console import BonusNumberSchema, PurchaseRequestSchema, WinningNumbersSchema

_purchase_schema = PurchaseRequestSchema()
_winning_schema = WinningNumbersSchema()
_bonus_schema = BonusNumberSchema()


class InputView:
    def __init__(
        self,
        messages: MessageTable,
        reader: Callable[[], str] = input,
        writer: Callable[[str], None] = print,
    ) -> None:
        self._messages = messages
        self._reader = reader
        self._writer = writer

    def _ask(self, key: str) -> str:
        self._writer(self._messages[key])
        return self._reader().strip()

    def read_money(self) -> int:
        data = _purchase_schema.load({"money": self._ask("ask_money")})
        return int(data["money"])

    def read_winning_numbers(self) -> list[int]:
        data = _winning_schema.load({"numbers": self._ask("ask_winning_numbers")})
        return list(data["numbers"])

    def read_bonus_number(self) -> int:
        data = _bonus_schema.load({"bonus_number": self._ask("ask_bonus_number")})
        return int(data["bonus_number"])
