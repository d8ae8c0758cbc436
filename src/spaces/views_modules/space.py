import logging

from rest_framework import viewsets, permissions, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import (
    extend_schema_view, extend_schema, OpenApiParameter, OpenApiTypes,
    OpenApiExample, OpenApiResponse
)
from django_filters import rest_framework as df

from ..models import AdvertisingSpace
from ..serializers import AdvertisingSpaceSerializer, QuoteQuerySerializer, QuoteSerializer
from ..services import calculate_period_in_months, campaign_end_date, format_inr, quote_price
from ..pagination import SpacePagination
from ..throttling import ScopedRateThrottleIsolated
from .filters import SpaceFilter

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        summary="List advertising spaces",
        description="Paginated listing directory with location, media and price filters",
        parameters=[
            OpenApiParameter("q", OpenApiTypes.STR, description="Search query"),
            OpenApiParameter("city", OpenApiTypes.STR, description="City name"),
            OpenApiParameter("state", OpenApiTypes.STR, description="State name"),
            OpenApiParameter("media_type", OpenApiTypes.STR, description="Media type"),
            OpenApiParameter("illumination", OpenApiTypes.STR, description="Lit, Non-lit or Digital"),
            OpenApiParameter("available", OpenApiTypes.BOOL, description="Coarse availability flag"),
            OpenApiParameter("price_min", OpenApiTypes.NUMBER, description="Minimum monthly price"),
            OpenApiParameter("price_max", OpenApiTypes.NUMBER, description="Maximum monthly price"),
            OpenApiParameter("lat_min", OpenApiTypes.NUMBER, description="Minimum latitude"),
            OpenApiParameter("lat_max", OpenApiTypes.NUMBER, description="Maximum latitude"),
            OpenApiParameter("lon_min", OpenApiTypes.NUMBER, description="Minimum longitude"),
            OpenApiParameter("lon_max", OpenApiTypes.NUMBER, description="Maximum longitude"),
            OpenApiParameter("available_from", OpenApiTypes.DATE, description="Free from (YYYY-MM-DD)"),
            OpenApiParameter("available_to", OpenApiTypes.DATE, description="Free to (YYYY-MM-DD)"),
        ],
        responses={
            200: AdvertisingSpaceSerializer,
            400: OpenApiResponse(description="Invalid filter parameters"),
        }
    ),
    retrieve=extend_schema(
        summary="Get space details",
        description="Get detailed information about a specific advertising space",
        responses={
            200: AdvertisingSpaceSerializer,
            404: OpenApiResponse(description="Space not found"),
        }
    ),
)
class AdvertisingSpaceViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only listing directory.

    Spaces are maintained through the admin; the public API only lists and
    prices them.
    """
    serializer_class = AdvertisingSpaceSerializer
    permission_classes = (permissions.AllowAny,)
    pagination_class = SpacePagination
    filter_backends = (df.DjangoFilterBackend, filters.OrderingFilter)
    filterset_class = SpaceFilter
    ordering_fields = ['monthly_price', 'created_at', 'name']
    ordering = ['-created_at']
    throttle_classes = [ScopedRateThrottleIsolated]
    throttle_scope = 'spaces'

    def get_queryset(self):
        return AdvertisingSpace.objects.select_related('city__state', 'managed_by')

    @extend_schema(
        summary="Price quote",
        description="Campaign end date, period and GST-inclusive total for a start date and month count",
        parameters=[
            OpenApiParameter("start_date", OpenApiTypes.DATE, description="Campaign start (YYYY-MM-DD)", required=True),
            OpenApiParameter("duration_months", OpenApiTypes.INT, description="Number of months (default 1)"),
        ],
        responses={
            200: QuoteSerializer,
            400: OpenApiResponse(description="Invalid parameters"),
            404: OpenApiResponse(description="Space not found"),
        },
        examples=[
            OpenApiExample(
                "Example response",
                value={
                    "start_date": "2024-01-31",
                    "end_date": "2024-03-02",
                    "duration_months": 1,
                    "period_in_months": 1.06,
                    "monthly_rate": "100000.00",
                    "base_amount": "100000.00",
                    "gst_amount": "18000.00",
                    "total": "118000",
                    "total_display": "₹1,18,000",
                },
                response_only=True,
            )
        ],
    )
    @action(detail=True, methods=['get'])
    def quote(self, request, pk=None):
        """Price the space for the booking wizard."""
        space = self.get_object()
        params = QuoteQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        start = params.validated_data['start_date']
        months = params.validated_data['duration_months']
        end = campaign_end_date(start, months)
        price = quote_price(space.monthly_price, months)

        data = {
            'start_date': start,
            'end_date': end,
            'duration_months': months,
            'period_in_months': calculate_period_in_months(start, end),
            'monthly_rate': price.monthly_rate,
            'base_amount': price.base_amount,
            'gst_amount': price.gst_amount,
            'total': price.total,
            'total_display': format_inr(price.total),
        }
        return Response(QuoteSerializer(data).data)
