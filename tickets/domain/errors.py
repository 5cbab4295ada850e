"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    MISSING_ADULT = "MISSING_ADULT"
    EXTERNAL_SERVICE_FAILURE = "EXTERNAL_SERVICE_FAILURE"
    INTERNAL_INCONSISTENCY = "INTERNAL_INCONSISTENCY"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised for any purchase that cannot be completed."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self, account_id: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account.",
        )
        self.account_id = account_id


class EmptyPurchaseError(InvalidPurchaseError):
    """Raised when no ticket requests are given."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="Please add at least 1 ticket to the purchase.",
        )


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when the total ticket count is above the per-purchase limit."""

    def __init__(self, attempted: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=(
                f"You are trying to purchase {attempted} tickets. "
                f"Max tickets allowed to be purchased is {limit}."
            ),
        )
        self.attempted = attempted
        self.limit = limit


class MissingAdultTicketError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message=(
                "Child and Infant tickets cannot be purchased "
                "without purchasing an Adult ticket."
            ),
        )


class ExternalServiceError(InvalidPurchaseError):
    """Raised when the payment or seat reservation provider fails.

    The provider's own error is chained as ``__cause__`` and logged, never
    included in the message.
    """

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EXTERNAL_SERVICE_FAILURE,
            message="Sorry, there is some problem with the server.",
        )


class InternalInconsistencyError(InvalidPurchaseError):
    """Raised when a ticket type has no configured price."""

    def __init__(self, ticket_type: object) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL_INCONSISTENCY,
            message="Sorry, there is some problem with the server.",
        )
        self.ticket_type = ticket_type
