"""Ticket service - all purchase logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from tickets.domain.errors import ErrorCode, ExternalServiceError, InvalidPurchaseError
from tickets.domain.policy import PurchasePolicy
from tickets.domain.value_objects import TicketInformation, TicketTypeRequest
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services.purchase_rules import calculate_ticket_information, validate_purchase

logger = logging.getLogger(__name__)


class TicketService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        policy: PurchasePolicy | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._policy = policy or PurchasePolicy()

    @property
    def payment_gateway(self) -> PaymentGateway:
        return self._payment_gateway

    @property
    def seat_reservation_gateway(self) -> SeatReservationGateway:
        return self._seat_reservation_gateway

    @property
    def policy(self) -> PurchasePolicy:
        return self._policy

    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> TicketInformation:
        """Validate, price, pay for and reserve a purchase.

        Payment is taken before seats are reserved. A failed reservation does
        not refund the payment.

        Raises:
            InvalidPurchaseError: For any rejected request or provider failure.
        """
        try:
            validate_purchase(account_id, ticket_type_requests, self._policy)
            ticket_information = calculate_ticket_information(
                ticket_type_requests, self._policy
            )
        except InvalidPurchaseError as e:
            if e.code is ErrorCode.INTERNAL_INCONSISTENCY:
                logger.exception(
                    "Unpriced ticket type %s for account %s", e.ticket_type, account_id
                )
            else:
                logger.info("Purchase rejected for account %s: %s", account_id, e.code.value)
            raise

        logger.info(
            "Purchase accepted for account %s: total price %s, total seats %s",
            account_id,
            ticket_information.total_price,
            ticket_information.total_seats,
        )
        self._pay_and_reserve(account_id, ticket_information)
        return ticket_information

    def _pay_and_reserve(self, account_id: int, ticket_information: TicketInformation) -> None:
        try:
            self._payment_gateway.make_payment(account_id, ticket_information.total_price)
            self._seat_reservation_gateway.reserve_seat(
                account_id, ticket_information.total_seats
            )
        except Exception as e:
            logger.exception("External service failed for account %s", account_id)
            raise ExternalServiceError() from e
