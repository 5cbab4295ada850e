"""Domain models for a ticket purchase.

These are pure domain objects with no API input rules.
Request parsing lives in tickets/handlers/serializers.py.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from tickets.domain.value_objects import TicketType, TicketTypeRequest


@dataclass(frozen=True)
class PurchaseRequest:
    """A single purchase attempt for one account."""

    account_id: int
    tickets: tuple[TicketTypeRequest, ...] = ()

    @classmethod
    def of(cls, account_id: int, tickets: Iterable[TicketTypeRequest]) -> Self:
        return cls(account_id=account_id, tickets=tuple(tickets))

    @property
    def total_tickets(self) -> int:
        return sum(request.count for request in self.tickets)

    def count_of(self, ticket_type: TicketType) -> int:
        return sum(
            request.count
            for request in self.tickets
            if request.ticket_type is ticket_type
        )
