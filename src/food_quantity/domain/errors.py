"""Errors raised by the quantity engine."""

from collections.abc import Mapping


class QuantityError(Exception):
    """Base error for recoverable quantity failures.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code
    """

    code = "quantity_error"

    def __init__(
        self, message: str, details: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidUnitForFood(QuantityError):
    """Raised when a unit cannot be used with a food."""

    code = "invalid_unit_for_food"


class ParseFailure(QuantityError):
    """Raised when free-text input is not a number."""

    code = "parse_failure"
