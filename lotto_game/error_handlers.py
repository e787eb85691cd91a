"""Centralized handling of recoverable input errors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from marshmallow import ValidationError as MarshmallowValidationError

from lotto_game.errors import InvalidInputError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def prompt_until_valid(action: Callable[[], T], on_error: Callable[[ValidationError], None]) -> T:
    """Run ``action`` until it stops raising input validation errors.

    Every rejected attempt is reported through ``on_error``. Anything that is
    not a validation error propagates.
    """

    while True:
        try:
            return action()
        except MarshmallowValidationError as exc:
            # exc.messages is a dict of field -> list[str]
            wrapped = InvalidInputError(details=exc.messages)
            logger.info("Rejected input: %s %s", wrapped.code, wrapped.details)
            on_error(wrapped)
        except ValidationError as exc:
            logger.info("Rejected input: %s %s", exc.code, exc.details)
            on_error(exc)
