from tickets.domain.models import PurchaseRequest
from tickets.domain.policy import PurchasePolicy
from tickets.domain.value_objects import TicketInformation, TicketType, TicketTypeRequest

__all__ = [
    "PurchaseRequest",
    "PurchasePolicy",
    "TicketInformation",
    "TicketType",
    "TicketTypeRequest",
]
