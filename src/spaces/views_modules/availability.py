import logging

from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import permissions, status
from drf_spectacular.utils import (
    extend_schema, OpenApiParameter, OpenApiTypes,
    OpenApiExample, OpenApiResponse
)

from ..models import AdvertisingSpace
from ..serializers import AvailabilityQuerySerializer, AvailabilityResultSerializer
from ..services import check_availability
from ..throttling import ScopedRateThrottleIsolated

logger = logging.getLogger(__name__)


@extend_schema(
    summary="Check space availability",
    description=(
        "Check a closed date range against the space's pending and confirmed bookings. "
        "When the range is taken, the next free window of the same length is suggested."
    ),
    parameters=[
        OpenApiParameter("space_id", OpenApiTypes.INT, description="Space ID", required=True),
        OpenApiParameter("start_date", OpenApiTypes.DATE, description="Start date (YYYY-MM-DD)", required=True),
        OpenApiParameter("end_date", OpenApiTypes.DATE, description="End date (YYYY-MM-DD)", required=True),
    ],
    responses={
        200: AvailabilityResultSerializer,
        400: OpenApiResponse(description="Invalid parameters"),
        404: OpenApiResponse(description="Space not found"),
    },
    examples=[
        OpenApiExample(
            "Taken range",
            value={
                "available": False,
                "conflicting_bookings": [
                    {"start_date": "2024-01-01", "end_date": "2024-01-31", "status": "confirmed"}
                ],
                "next_available_date": "2024-02-01",
                "suggested_end_date": "2024-03-03",
            },
            response_only=True,
        )
    ],
)
class AvailabilityView(APIView):
    """
    API view for checking whether a space is free over a date range.
    """
    permission_classes = [permissions.AllowAny]
    throttle_classes = [ScopedRateThrottleIsolated]
    throttle_scope = 'availability'

    def get(self, request):
        params = AvailabilityQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        space_id = params.validated_data['space_id']

        try:
            space_exists = AdvertisingSpace.objects.filter(pk=space_id).exists()
        except DatabaseError:
            logger.exception("Space lookup failed for %s; checking availability anyway", space_id)
            space_exists = True

        if not space_exists:
            return Response(
                {"detail": "Space not found."},
                status=status.HTTP_404_NOT_FOUND
            )

        result = check_availability(
            space_id,
            params.validated_data['start_date'],
            params.validated_data['end_date'],
        )
        if result.lookup_failed:
            logger.warning("Availability for space %s reported without booking data", space_id)

        return Response(AvailabilityResultSerializer(result).data)
