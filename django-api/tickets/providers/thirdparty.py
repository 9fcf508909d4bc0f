"""Default provider implementations standing in for the third-party systems.

They only check argument types, the same contract the real payment gateway
and seat booking clients publish, and record the call in the log.
"""

import logging

from tickets.providers.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


def _require_integer(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class ThirdPartyTicketPaymentService(TicketPaymentService):
    """Payment gateway client."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_integer("accountId", account_id)
        _require_integer("totalAmountToPay", total_amount_to_pay)
        logger.debug(
            "Payment requested",
            extra={"account_id": account_id, "total_amount": total_amount_to_pay},
        )


class ThirdPartySeatReservationService(SeatReservationService):
    """Seat booking client."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_integer("accountId", account_id)
        _require_integer("totalSeatsToAllocate", total_seats_to_allocate)
        logger.debug(
            "Seat reservation requested",
            extra={"account_id": account_id, "total_seats": total_seats_to_allocate},
        )
