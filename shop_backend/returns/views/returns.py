# returns/views/returns.py

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from returns import selectors
from returns.serializers import (
    ReturnCreateCommandSerializer,
    ReturnItemReadSerializer,
    ReturnReadSerializer,
)
from returns.services import ReturnError, create_return
from returns.views.errors import return_error_response


# ======================================================
# RETURNS VIEWSET (LIST / CREATE / DETAIL)
# ======================================================

class ReturnViewSet(viewsets.ViewSet):
    """
    GET  /api/returns/?return_type=customer|supplier
    POST /api/returns/
    GET  /api/returns/<uuid>/

    Returns are immutable: no update, no delete.
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = (
        "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    )

    def get_serializer_class(self):
        if self.action == "create":
            return ReturnCreateCommandSerializer
        return ReturnReadSerializer

    def list(self, request):
        try:
            rows = selectors.list_returns(
                return_type=request.query_params.get("return_type") or None
            )
        except ReturnError as exc:
            return return_error_response(exc)

        return Response(ReturnReadSerializer(rows, many=True).data)

    def retrieve(self, request, pk=None):
        try:
            detail = selectors.get_return_detail(return_id=pk)
        except ReturnError as exc:
            return return_error_response(exc)

        return Response(
            {
                "return": ReturnReadSerializer(detail["return"]).data,
                "items": ReturnItemReadSerializer(detail["items"], many=True).data,
            }
        )

    # --------------------------------------------------
    # CREATE RETURN
    # --------------------------------------------------

    def create(self, request):
        command_serializer = ReturnCreateCommandSerializer(
            data=request.data,
            context={"request": request},
        )
        command_serializer.is_valid(raise_exception=True)
        data = command_serializer.validated_data

        try:
            result = create_return(
                return_type=data["return_type"],
                invoice_id=data["invoice_id"],
                party_id=data["party_id"],
                items=[dict(item) for item in data["items"]],
                reason=data.get("reason"),
                refund_type=data.get("refund_type") or None,
                notes=data.get("notes"),
            )
        except ReturnError as exc:
            return return_error_response(exc)

        detail = selectors.get_return_detail(return_id=result.return_record.pk)

        return Response(
            {
                "message": "Return created successfully",
                "return": ReturnReadSerializer(detail["return"]).data,
                "return_no": result.return_no,
            },
            status=status.HTTP_201_CREATED,
        )
