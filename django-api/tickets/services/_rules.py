"""Validation and calculation steps of the ticket purchase pipeline.

Internal to the service package: callers go through TicketService.
Each validator raises the matching InvalidPurchaseException subclass on the
first violation it finds. The account check also returns the ID as an int.
"""

import numbers
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from tickets.domain.errors import (
    CapacityExceededError,
    EmptyRequestError,
    InfantRatioExceededError,
    InvalidAccountError,
    InvalidRequestShapeError,
    MissingAdultError,
    NonPositiveCountError,
)
from tickets.domain.models import TicketTypeRequest
from tickets.domain.value_objects import TicketCategory, TicketCounts


def validate_account_id(account_id: object) -> int:
    """Return the account ID as an int; whole-number floats such as 2.0 are accepted."""
    if isinstance(account_id, bool):
        raise InvalidAccountError()
    if isinstance(account_id, float) and account_id.is_integer():
        account_id = int(account_id)
    if not isinstance(account_id, numbers.Integral) or account_id <= 0:
        raise InvalidAccountError()
    return int(account_id)


def collect_ticket_type_requests(ticket_type_requests: object) -> tuple[object, ...]:
    """Materialise the requests; a lone TicketTypeRequest counts as a one-item sequence."""
    if ticket_type_requests is None:
        return ()
    if isinstance(ticket_type_requests, TicketTypeRequest):
        return (ticket_type_requests,)
    if not isinstance(ticket_type_requests, Iterable):
        raise InvalidRequestShapeError()
    return tuple(ticket_type_requests)


def validate_ticket_type_requests(ticket_type_requests: Sequence[object]) -> None:
    if not ticket_type_requests:
        raise EmptyRequestError()

    for request in ticket_type_requests:
        if not isinstance(request, TicketTypeRequest):
            raise InvalidRequestShapeError()
        if not isinstance(request.category, TicketCategory):
            raise InvalidRequestShapeError()
        if request.count <= 0:
            raise NonPositiveCountError()


def calculate_ticket_counts(ticket_type_requests: Sequence[TicketTypeRequest]) -> TicketCounts:
    totals: Counter[TicketCategory] = Counter()
    for request in ticket_type_requests:
        totals[request.category] += request.count

    return TicketCounts(
        adult=totals[TicketCategory.ADULT],
        child=totals[TicketCategory.CHILD],
        infant=totals[TicketCategory.INFANT],
    )


def validate_purchase_rules(ticket_counts: TicketCounts, max_tickets: int) -> None:
    """Check aggregate limits in a fixed order: capacity, adult presence, infant ratio."""
    if ticket_counts.total > max_tickets:
        raise CapacityExceededError(max_tickets)

    if (ticket_counts.child > 0 or ticket_counts.infant > 0) and ticket_counts.adult == 0:
        raise MissingAdultError()

    # Each infant sits on an adult's lap.
    if ticket_counts.infant > ticket_counts.adult:
        raise InfantRatioExceededError()


def calculate_total_amount(
    ticket_counts: TicketCounts, ticket_prices: Mapping[TicketCategory, int]
) -> int:
    return sum(ticket_prices[category] * count for category, count in ticket_counts.items())


def calculate_total_seats(ticket_counts: TicketCounts) -> int:
    """Infants are not allocated a seat."""
    return ticket_counts.adult + ticket_counts.child
