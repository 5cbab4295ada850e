"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import ErrorCode, InvalidPurchaseError
from tickets.handlers.serializers import PurchaseRequestSerializer, TicketInformationSerializer
from tickets.services import TicketService, build_ticket_service

ERROR_STATUS = {
    ErrorCode.EXTERNAL_SERVICE_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.INTERNAL_INCONSISTENCY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: InvalidPurchaseError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_422_UNPROCESSABLE_ENTITY),
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    service_factory = staticmethod(build_ticket_service)

    def get_service(self) -> TicketService:
        return self.service_factory()

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            ticket_information = self.get_service().purchase_tickets(
                serializer.validated_data["account_id"],
                *serializer.ticket_type_requests(),
            )
        except InvalidPurchaseError as e:
            return error_response(e)

        return Response(
            TicketInformationSerializer.from_domain(ticket_information),
            status=status.HTTP_201_CREATED,
        )
