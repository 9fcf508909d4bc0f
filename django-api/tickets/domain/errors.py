"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    INVALID_REQUEST_SHAPE = "INVALID_REQUEST_SHAPE"
    NON_POSITIVE_COUNT = "NON_POSITIVE_COUNT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    MISSING_ADULT = "MISSING_ADULT"
    INFANT_RATIO_EXCEEDED = "INFANT_RATIO_EXCEEDED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseException(DomainError):
    """Raised when a ticket purchase request is rejected."""


class InvalidAccountError(InvalidPurchaseException):
    """Raised when the account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Account ID must be a valid integer greater than 0",
        )


class EmptyRequestError(InvalidPurchaseException):
    """Raised when no ticket requests are supplied."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="At least one ticket request must be provided",
        )


class InvalidRequestShapeError(InvalidPurchaseException):
    """Raised when an item is not a TicketTypeRequest."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST_SHAPE,
            message="All ticket requests must be instances of TicketTypeRequest",
        )


class NonPositiveCountError(InvalidPurchaseException):
    """Raised when a ticket request asks for zero or fewer tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NON_POSITIVE_COUNT,
            message="Number of tickets must be greater than 0",
        )


class CapacityExceededError(InvalidPurchaseException):
    """Raised when more tickets are requested than one purchase allows."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Cannot purchase more than {max_tickets} tickets at a time",
        )
        self.max_tickets = max_tickets


class MissingAdultError(InvalidPurchaseException):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Child and Infant tickets cannot be purchased without an Adult ticket",
        )


class InfantRatioExceededError(InvalidPurchaseException):
    """Raised when infants outnumber adults."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANT_RATIO_EXCEEDED,
            message=(
                "Number of Infant tickets cannot exceed number of Adult tickets "
                "(Infants sit on Adult laps)"
            ),
        )
