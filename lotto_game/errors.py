"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Input validation error. Recoverable by asking for new input."""

    def __init__(
        self,
        message: str = "[ERROR] Invalid input.",
        details: Any | None = None,
        code: str = "validation_error",
    ) -> None:
        super().__init__(code=code, message=message, details=details)


class BelowMinimumError(ValidationError):
    """Purchase amount is lower than a single ticket price."""

    def __init__(self, message: str = "[ERROR] Purchase amount must be at least 1000.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="below_minimum")


class NotDivisibleError(ValidationError):
    """Purchase amount is not a whole number of tickets."""

    def __init__(self, message: str = "[ERROR] Purchase amount must be a multiple of 1000.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="not_divisible")


class WrongCountError(ValidationError):
    def __init__(self, message: str = "[ERROR] A ticket needs exactly 6 numbers.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="wrong_count")


class DuplicateNumberError(ValidationError):
    def __init__(self, message: str = "[ERROR] Ticket numbers must be unique.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="duplicate_number")


class OutOfRangeError(ValidationError):
    def __init__(self, message: str = "[ERROR] Numbers must be within 1..45.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="out_of_range")


class InvalidBonusError(ValidationError):
    """Bonus number repeats one of the winning numbers."""

    def __init__(self, message: str = "[ERROR] Bonus number must not be one of the winning numbers.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="invalid_bonus")


class InvalidInputError(ValidationError):
    """Raw text could not be parsed into numbers."""

    def __init__(self, message: str = "[ERROR] Expected integer input.", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="invalid_input")


class MoneyNotValidatedError(AppError):
    """Tickets requested before the purchase amount passed validation."""

    def __init__(self, message: str = "Money must be validated before issuing tickets", details: Any | None = None) -> None:
        super().__init__(code="money_not_validated", message=message, details=details)
