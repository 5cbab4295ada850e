"""Serializers for purchase requests and responses."""

from rest_framework import serializers

from tickets.domain import TicketInformation, TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Parses one ``{"type", "count"}`` entry into a TicketTypeRequest."""

    type = serializers.ChoiceField(choices=[ticket_type.value for ticket_type in TicketType])
    count = serializers.IntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Input format for POST /api/purchases.

    Only the shape is checked here. Purchase rules belong to the service.
    """

    account_id = serializers.IntegerField()
    tickets = TicketTypeRequestSerializer(many=True, allow_empty=True)

    def ticket_type_requests(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest(ticket_type=TicketType(item["type"]), count=item["count"])
            for item in self.validated_data["tickets"]
        ]


class TicketInformationSerializer(serializers.Serializer):
    """Serializer for TicketInformation domain model."""

    total_price = serializers.IntegerField()
    total_seats = serializers.IntegerField()

    @classmethod
    def from_domain(cls, ticket_information: TicketInformation) -> dict:
        return cls(ticket_information).data
