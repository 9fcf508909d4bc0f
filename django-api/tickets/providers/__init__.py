from tickets.providers.interfaces import SeatReservationService, TicketPaymentService
from tickets.providers.thirdparty import (
    ThirdPartySeatReservationService,
    ThirdPartyTicketPaymentService,
)

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "ThirdPartyTicketPaymentService",
    "ThirdPartySeatReservationService",
]
