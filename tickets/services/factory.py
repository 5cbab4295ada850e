"""Build the ticket service from Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.domain.policy import PurchasePolicy
from tickets.services.ticket_service import TicketService

DEFAULT_PAYMENT_GATEWAY = "tickets.gateways.LoggingPaymentGateway"
DEFAULT_SEAT_RESERVATION_GATEWAY = "tickets.gateways.LoggingSeatReservationGateway"


def build_ticket_service() -> TicketService:
    """Return a TicketService wired from ``settings.TICKETS``."""
    config = getattr(settings, "TICKETS", {})
    payment_gateway_class = import_string(
        config.get("PAYMENT_GATEWAY", DEFAULT_PAYMENT_GATEWAY)
    )
    seat_reservation_gateway_class = import_string(
        config.get("SEAT_RESERVATION_GATEWAY", DEFAULT_SEAT_RESERVATION_GATEWAY)
    )
    return TicketService(
        payment_gateway=payment_gateway_class(),
        seat_reservation_gateway=seat_reservation_gateway_class(),
        policy=PurchasePolicy.from_settings(config),
    )
