"""Ticket service - all purchase logic lives here.

Services:
- Depend only on interfaces (providers)
- Validate domain invariants
- Perform orchestration and error mapping
- Raise domain errors; never return partial results

A purchase is validated completely before either provider is called, so a
rejected request has no side effects.
"""

import logging
from collections.abc import Iterable, Mapping

from tickets import conf
from tickets.domain.errors import InvalidPurchaseException
from tickets.domain.models import TicketTypeRequest
from tickets.domain.value_objects import TicketCategory
from tickets.providers.interfaces import SeatReservationService, TicketPaymentService
from tickets.providers.thirdparty import (
    ThirdPartySeatReservationService,
    ThirdPartyTicketPaymentService,
)
from tickets.services import _rules
from tickets.signals import tickets_purchased

logger = logging.getLogger(__name__)


class TicketService:
    """Service for purchasing tickets."""

    def __init__(
        self,
        payment_service: TicketPaymentService | None = None,
        seat_reservation_service: SeatReservationService | None = None,
        *,
        ticket_prices: Mapping[TicketCategory | str, int] | None = None,
        max_tickets: int | None = None,
    ) -> None:
        if payment_service is None:
            payment_service = ThirdPartyTicketPaymentService()
        if seat_reservation_service is None:
            seat_reservation_service = ThirdPartySeatReservationService()
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service
        self._ticket_prices = (
            conf.get_ticket_prices()
            if ticket_prices is None
            else conf.build_price_table(ticket_prices)
        )
        self._max_tickets = (
            conf.get_max_tickets_per_purchase()
            if max_tickets is None
            else conf.check_max_tickets(max_tickets)
        )

    def purchase_tickets(
        self,
        account_id: int | float,
        ticket_type_requests: Iterable[TicketTypeRequest] | TicketTypeRequest | None,
    ) -> None:
        """Charge the account and reserve seats for the requested tickets.

        ``account_id`` may be a whole-number float such as 2.0; providers always
        receive an int. A single TicketTypeRequest is treated as a one-item list.

        Raises:
            InvalidAccountError: If account_id is not a positive integer.
            EmptyRequestError: If no ticket requests are given.
            InvalidRequestShapeError: If an item is not a TicketTypeRequest, or the
                requests are not iterable.
            NonPositiveCountError: If an item asks for zero or fewer tickets.
            CapacityExceededError: If more tickets are requested than allowed.
            MissingAdultError: If child or infant tickets have no adult ticket.
            InfantRatioExceededError: If infants outnumber adults.
        """
        try:
            account_id = _rules.validate_account_id(account_id)
            requests = _rules.collect_ticket_type_requests(ticket_type_requests)
            _rules.validate_ticket_type_requests(requests)
            ticket_counts = _rules.calculate_ticket_counts(requests)
            _rules.validate_purchase_rules(ticket_counts, self._max_tickets)
        except InvalidPurchaseException as exc:
            logger.warning(
                "Ticket purchase rejected",
                extra={"account_id": account_id, "code": exc.code.value},
            )
            raise

        total_amount = _rules.calculate_total_amount(ticket_counts, self._ticket_prices)
        total_seats = _rules.calculate_total_seats(ticket_counts)

        self._payment_service.make_payment(account_id, total_amount)
        self._seat_reservation_service.reserve_seat(account_id, total_seats)

        tickets_purchased.send(
            sender=self.__class__,
            account_id=account_id,
            ticket_counts=ticket_counts,
            total_amount=total_amount,
            total_seats=total_seats,
        )
