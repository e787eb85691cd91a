"""Schemas for the end-of-session summary."""

from __future__ import annotations

from marshmallow import Schema, fields


class PrizeCountSchema(Schema):
    tier = fields.String(required=True)
    match_count = fields.Integer(required=True)
    bonus_match = fields.Boolean(required=True)
    payout = fields.Integer(required=True)
    count = fields.Integer(required=True)


class GameResultSchema(Schema):
    money_spent = fields.Integer(required=True)
    ticket_count = fields.Integer(required=True)
    tickets = fields.List(fields.List(fields.Integer()), required=True)

    # Ascending payout order: FIFTH .. FIRST.
    prizes = fields.List(fields.Nested(PrizeCountSchema), required=True)

    total_prize = fields.Integer(required=True)
    profit_rate = fields.String(required=True)
