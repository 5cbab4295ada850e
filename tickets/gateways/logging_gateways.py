"""Default gateways that only record the call.

Used until a provider client is configured in ``settings.TICKETS``.
"""

import logging

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(PaymentGateway):
    """Payment gateway that logs the charge and takes no payment."""

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment of %s requested for account %s", amount, account_id)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that logs the request and reserves nothing."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reservation of %s seats requested for account %s", seat_count, account_id)
