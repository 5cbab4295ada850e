"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways import PaymentGateway, SeatReservationGateway
from tickets.services import TicketService


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, calls: list, error: Exception | None = None) -> None:
        self.calls = calls
        self.error = error

    def make_payment(self, account_id: int, amount: int) -> None:
        self.calls.append(("make_payment", account_id, amount))
        if self.error is not None:
            raise self.error


class RecordingSeatReservationGateway(SeatReservationGateway):
    def __init__(self, calls: list, error: Exception | None = None) -> None:
        self.calls = calls
        self.error = error

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append(("reserve_seat", account_id, seat_count))
        if self.error is not None:
            raise self.error


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    return []


@pytest.fixture
def payment_gateway(gateway_calls) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def seat_reservation_gateway(gateway_calls) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def ticket_service(payment_gateway, seat_reservation_gateway) -> TicketService:
    return TicketService(payment_gateway, seat_reservation_gateway)


@pytest.fixture
def make_ticket_service(gateway_calls):
    """Build a TicketService whose gateways record into gateway_calls."""

    def make(payment_error=None, reservation_error=None, policy=None) -> TicketService:
        return TicketService(
            RecordingPaymentGateway(gateway_calls, error=payment_error),
            RecordingSeatReservationGateway(gateway_calls, error=reservation_error),
            policy,
        )

    return make
