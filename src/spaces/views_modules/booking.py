import logging

from rest_framework import viewsets, mixins, permissions, status
from rest_framework.response import Response
from drf_spectacular.utils import (
    extend_schema_view, extend_schema, OpenApiResponse
)

from ..models import Booking
from ..serializers import BookingCreateSerializer, BookingSerializer
from ..services import BookingService, SpaceSnapshot
from ..throttling import ScopedRateThrottleIsolated

logger = logging.getLogger(__name__)


@extend_schema_view(
    create=extend_schema(
        summary="Create booking",
        description=(
            "Store a pending booking and send the confirmation and alert emails. "
            "Email failures do not fail the request."
        ),
        request=BookingCreateSerializer,
        responses={
            201: BookingSerializer,
            400: OpenApiResponse(description="Validation error"),
            503: OpenApiResponse(description="Booking could not be stored"),
        }
    ),
    retrieve=extend_schema(
        summary="Get booking details",
        description="Get a booking by its UUID",
        responses={
            200: BookingSerializer,
            404: OpenApiResponse(description="Booking not found"),
        }
    ),
)
class BookingViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    Booking wizard endpoint: create and look up bookings.

    Status changes happen in the admin.
    """
    queryset = Booking.objects.select_related('space')
    serializer_class = BookingSerializer
    permission_classes = (permissions.AllowAny,)
    throttle_classes = [ScopedRateThrottleIsolated]
    throttle_scope = 'bookings'

    def get_serializer_class(self):
        if self.action == 'create':
            return BookingCreateSerializer
        return BookingSerializer

    def get_service(self):
        return BookingService.from_settings()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        space = data['space']

        outcome = self.get_service().create_booking(
            space.pk,
            serializer.to_form(),
            total_price=data['total_price'],
            duration_months=data['duration_months'],
            space_snapshot=SpaceSnapshot.from_space(space),
        )
        if not outcome.ok:
            logger.error("Booking for space %s not stored: %s", space.pk, outcome.error)
            return Response(
                {"detail": outcome.error},
                status=status.HTTP_503_SERVICE_UNAVAILABLE
            )

        return Response(
            BookingSerializer(outcome.booking, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )
