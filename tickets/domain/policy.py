"""Purchase policy: the per-purchase ticket limit and the price table."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from tickets.domain.value_objects import TicketType

MAX_TICKETS = 20

DEFAULT_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)


@dataclass(frozen=True)
class PurchasePolicy:
    """Immutable limits and prices applied to every purchase."""

    max_tickets: int = MAX_TICKETS
    prices: Mapping[TicketType, int] = field(default_factory=lambda: DEFAULT_PRICES)

    def __post_init__(self) -> None:
        if self.max_tickets < 0:
            raise ValueError("Ticket limit cannot be negative")
        if any(price < 0 for price in self.prices.values()):
            raise ValueError("Ticket price cannot be negative")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    @classmethod
    def from_settings(cls, config: Mapping[str, Any]) -> Self:
        """Build a policy from the ``TICKETS`` settings dict.

        Prices are keyed by ticket type name. Missing keys, including single
        ticket types left out of ``TICKET_PRICES``, keep the defaults.
        """
        max_tickets = int(config.get("MAX_TICKETS_PER_PURCHASE", MAX_TICKETS))
        raw_prices = config.get("TICKET_PRICES") or {}
        prices = {
            **DEFAULT_PRICES,
            **{
                TicketType.from_string(name): int(price)
                for name, price in raw_prices.items()
            },
        }
        return cls(max_tickets=max_tickets, prices=prices)

    def price_of(self, ticket_type: TicketType) -> int | None:
        return self.prices.get(ticket_type)
