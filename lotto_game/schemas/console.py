"""Schemas for raw console input.

These only turn text into integers. Range, count and duplicate rules are
enforced by the domain models so each violation keeps its own error kind.
"""

from __future__ import annotations

from marshmallow import Schema, fields


class NumberListField(fields.Field):
    """Comma separated integers, e.g. ``"1, 2, 3,4,5,6"``."""

    default_error_messages = {"invalid": "Not a valid comma separated list of integers."}

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(value, str):
            items = [part.strip() for part in value.split(",")]
        elif isinstance(value, (list, tuple)):
            items = list(value)
        else:
            raise self.make_error("invalid")

        try:
            return [int(item) for item in items]
        except (TypeError, ValueError) as exc:
            raise self.make_error("invalid") from exc

    def _serialize(self, value, attr, obj, **kwargs):  # type: ignore[no-untyped-def]
        if value is None:
            return None
        return [int(n) for n in value]


class PurchaseRequestSchema(Schema):
    money = fields.Integer(required=True)


class WinningNumbersSchema(Schema):
    numbers = NumberListField(required=True)


class BonusNumberSchema(Schema):
    bonus_number = fields.Integer(required=True)
