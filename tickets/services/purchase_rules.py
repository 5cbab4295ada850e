"""Validation and pricing rules for a ticket purchase."""

from collections.abc import Sequence

from tickets.domain.errors import (
    EmptyPurchaseError,
    InternalInconsistencyError,
    InvalidAccountError,
    MissingAdultTicketError,
    TicketLimitExceededError,
)
from tickets.domain.models import PurchaseRequest
from tickets.domain.policy import PurchasePolicy
from tickets.domain.value_objects import TicketInformation, TicketType, TicketTypeRequest


def validate_purchase(
    account_id: int,
    tickets: Sequence[TicketTypeRequest],
    policy: PurchasePolicy,
) -> None:
    """Check a purchase against the policy.

    Checks run in a fixed order and the first failure wins: account, then
    emptiness, then the ticket limit, then the adult requirement.

    Raises:
        InvalidAccountError: If account_id is below 1.
        EmptyPurchaseError: If no ticket requests are given.
        TicketLimitExceededError: If the total count is above the limit.
        MissingAdultTicketError: If no adult ticket is requested.
    """
    if account_id < 1:
        raise InvalidAccountError(account_id)

    if not tickets:
        raise EmptyPurchaseError()

    request = PurchaseRequest.of(account_id, tickets)
    if request.total_tickets > policy.max_tickets:
        raise TicketLimitExceededError(request.total_tickets, policy.max_tickets)

    if request.count_of(TicketType.ADULT) < 1:
        raise MissingAdultTicketError()


def calculate_ticket_information(
    tickets: Sequence[TicketTypeRequest],
    policy: PurchasePolicy,
) -> TicketInformation:
    """Sum the price and seat count of validated ticket requests.

    Raises:
        InternalInconsistencyError: If a ticket type has no price in the policy.
    """
    total_price = 0
    total_seats = 0
    for request in tickets:
        price = policy.price_of(request.ticket_type)
        if price is None:
            raise InternalInconsistencyError(request.ticket_type)
        total_price += request.count * price
        if request.ticket_type.occupies_seat:
            total_seats += request.count
    return TicketInformation(total_price=total_price, total_seats=total_seats)
