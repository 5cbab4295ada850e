"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from tickets.domain import (
    PurchasePolicy,
    PurchaseRequest,
    TicketInformation,
    TicketType,
    TicketTypeRequest,
)
from tickets.domain.errors import ErrorCode, TicketLimitExceededError


class TestTicketType:
    """Tests for TicketType enum."""

    def test_infant_does_not_occupy_seat(self):
        """Only infants travel without a seat."""
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat

    def test_from_string_is_case_insensitive(self):
        """TicketType.from_string accepts lower case names."""
        assert TicketType.from_string("child") is TicketType.CHILD

    def test_from_string_unknown_name(self):
        """TicketType.from_string raises ValueError for unknown names."""
        with pytest.raises(ValueError):
            TicketType.from_string("SENIOR")


class TestTicketTypeRequest:
    """Tests for TicketTypeRequest value object."""

    def test_accepts_zero_count(self):
        """A request may ask for zero tickets."""
        assert TicketTypeRequest(TicketType.ADULT, 0).count == 0

    def test_rejects_negative_count(self):
        """TicketTypeRequest raises ValueError for negative count."""
        with pytest.raises(ValueError):
            TicketTypeRequest(TicketType.ADULT, -1)

    @pytest.mark.parametrize("count", [1.5, 2.0, True, "3"])
    def test_rejects_non_integer_count(self, count):
        """TicketTypeRequest raises ValueError for a count that is not an int."""
        with pytest.raises(ValueError):
            TicketTypeRequest(TicketType.ADULT, count)

    def test_rejects_unknown_type(self):
        """TicketTypeRequest raises ValueError for a type outside the enum."""
        with pytest.raises(ValueError):
            TicketTypeRequest("ADULT", 1)

    def test_is_immutable(self):
        """Requests cannot be changed after creation."""
        request = TicketTypeRequest(TicketType.CHILD, 2)
        with pytest.raises(AttributeError):
            request.count = 3


class TestTicketInformation:
    """Tests for TicketInformation value object."""

    def test_rejects_negative_totals(self):
        """TicketInformation raises ValueError for negative totals."""
        with pytest.raises(ValueError):
            TicketInformation(total_price=-1, total_seats=0)
        with pytest.raises(ValueError):
            TicketInformation(total_price=0, total_seats=-1)


class TestPurchaseRequest:
    """Tests for PurchaseRequest."""

    def test_totals_by_type(self):
        """Counts of the same type are summed across requests."""
        request = PurchaseRequest.of(
            1,
            [
                TicketTypeRequest(TicketType.ADULT, 2),
                TicketTypeRequest(TicketType.CHILD, 3),
                TicketTypeRequest(TicketType.ADULT, 4),
            ],
        )
        assert request.total_tickets == 9
        assert request.count_of(TicketType.ADULT) == 6
        assert request.count_of(TicketType.INFANT) == 0


class TestPurchasePolicy:
    """Tests for PurchasePolicy config struct."""

    def test_defaults(self):
        """Default policy allows 20 tickets at the standard prices."""
        policy = PurchasePolicy()
        assert policy.max_tickets == 20
        assert policy.price_of(TicketType.ADULT) == 20
        assert policy.price_of(TicketType.CHILD) == 10
        assert policy.price_of(TicketType.INFANT) == 0

    def test_rejects_negative_limit(self):
        """PurchasePolicy raises ValueError for a negative limit."""
        with pytest.raises(ValueError):
            PurchasePolicy(max_tickets=-1)

    def test_rejects_negative_price(self):
        """PurchasePolicy raises ValueError for a negative price."""
        with pytest.raises(ValueError):
            PurchasePolicy(prices={TicketType.ADULT: -5})

    def test_prices_are_read_only(self):
        """The price table cannot be modified through the policy."""
        prices = {TicketType.ADULT: 30}
        policy = PurchasePolicy(prices=prices)
        prices[TicketType.ADULT] = 1
        assert policy.price_of(TicketType.ADULT) == 30
        with pytest.raises(TypeError):
            policy.prices[TicketType.ADULT] = 1

    def test_from_settings(self):
        """Prices are read by ticket type name."""
        policy = PurchasePolicy.from_settings(
            {
                "MAX_TICKETS_PER_PURCHASE": 5,
                "TICKET_PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
            }
        )
        assert policy.max_tickets == 5
        assert policy.price_of(TicketType.ADULT) == 25
        assert policy.price_of(TicketType.CHILD) == 15

    def test_from_settings_empty_uses_defaults(self):
        """An empty settings dict gives the default policy."""
        assert PurchasePolicy.from_settings({}) == PurchasePolicy()

    def test_from_settings_partial_prices_keep_defaults(self):
        """Ticket types left out of TICKET_PRICES keep their default price."""
        policy = PurchasePolicy.from_settings({"TICKET_PRICES": {"ADULT": 25}})
        assert policy.price_of(TicketType.ADULT) == 25
        assert policy.price_of(TicketType.CHILD) == 10
        assert policy.price_of(TicketType.INFANT) == 0

    def test_from_settings_coerces_limit(self):
        """A limit given as a string, e.g. from the environment, is read as an int."""
        assert PurchasePolicy.from_settings({"MAX_TICKETS_PER_PURCHASE": "12"}).max_tickets == 12


class TestDomainError:
    """Tests for the error taxonomy."""

    def test_str_includes_code(self):
        """String form is 'CODE: message'."""
        error = TicketLimitExceededError(attempted=24, limit=20)
        assert str(error).startswith("TICKET_LIMIT_EXCEEDED: ")
        assert error.code is ErrorCode.TICKET_LIMIT_EXCEEDED
        assert error.attempted == 24
        assert error.limit == 20
