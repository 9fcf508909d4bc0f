"""Provider interfaces for the external payment and seat booking systems.

Providers must be swappable. The ticket service only calls them once a
purchase has passed every rule, and assumes they always succeed.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for charging an account for a ticket purchase."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge ``total_amount_to_pay`` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Hold ``total_seats_to_allocate`` seats for the account."""
        ...
