"""Pytest configuration and shared fixtures."""

import pytest

from tickets.providers.interfaces import SeatReservationService, TicketPaymentService
from tickets.services import TicketService


class RecordingPaymentService(TicketPaymentService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


@pytest.fixture
def provider_calls() -> list:
    """Provider calls in the order they were made, shared by both fakes."""
    return []


@pytest.fixture
def payment_service(provider_calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(provider_calls)


@pytest.fixture
def seat_reservation_service(provider_calls: list) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(provider_calls)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service) -> TicketService:
    return TicketService(payment_service, seat_reservation_service)
