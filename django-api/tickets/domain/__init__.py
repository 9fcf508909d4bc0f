from tickets.domain.errors import (
    CapacityExceededError,
    DomainError,
    EmptyRequestError,
    ErrorCode,
    InfantRatioExceededError,
    InvalidAccountError,
    InvalidPurchaseException,
    InvalidRequestShapeError,
    MissingAdultError,
    NonPositiveCountError,
)
from tickets.domain.models import TicketTypeRequest
from tickets.domain.value_objects import TicketCategory, TicketCounts

__all__ = [
    "TicketTypeRequest",
    "TicketCategory",
    "TicketCounts",
    "ErrorCode",
    "DomainError",
    "InvalidPurchaseException",
    "InvalidAccountError",
    "EmptyRequestError",
    "InvalidRequestShapeError",
    "NonPositiveCountError",
    "CapacityExceededError",
    "MissingAdultError",
    "InfantRatioExceededError",
]
