"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """Ticket categories sold per purchase."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value.upper())


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of a single type."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"Ticket count must be an integer: {self.count!r}")
        if self.count < 0:
            raise ValueError("Ticket count cannot be negative")


@dataclass(frozen=True)
class TicketInformation:
    """Totals derived from a set of ticket requests."""

    total_price: int
    total_seats: int

    def __post_init__(self) -> None:
        if self.total_price < 0:
            raise ValueError("Total price cannot be negative")
        if self.total_seats < 0:
            raise ValueError("Total seats cannot be negative")
