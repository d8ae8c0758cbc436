from rest_framework import generics, permissions
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiTypes

from ..models import State, City, AdvertisingSpace
from ..serializers import StateSerializer, CitySerializer, MediaTypeSerializer
from ..throttling import ScopedRateThrottleIsolated


class LookupMixin:
    permission_classes = [permissions.AllowAny]
    pagination_class = None
    throttle_classes = [ScopedRateThrottleIsolated]
    throttle_scope = 'lookups'


@extend_schema(summary="List states", responses={200: StateSerializer(many=True)})
class StateListView(LookupMixin, generics.ListAPIView):
    queryset = State.objects.all()
    serializer_class = StateSerializer


@extend_schema(
    summary="List cities",
    parameters=[OpenApiParameter("state_id", OpenApiTypes.INT, description="Only cities of this state")],
    responses={200: CitySerializer(many=True)},
)
class CityListView(LookupMixin, generics.ListAPIView):
    serializer_class = CitySerializer

    def get_queryset(self):
        queryset = City.objects.all()
        state_id = self.request.query_params.get('state_id')
        if state_id and state_id.isdigit():
            queryset = queryset.filter(state_id=int(state_id))
        return queryset


@extend_schema(
    summary="List media types",
    description="Distinct media types of listed spaces, optionally narrowed to a state and city",
    parameters=[
        OpenApiParameter("state_id", OpenApiTypes.INT, description="State filter"),
        OpenApiParameter("city_id", OpenApiTypes.INT, description="City filter"),
    ],
    responses={200: MediaTypeSerializer(many=True)},
)
class MediaTypeListView(LookupMixin, generics.GenericAPIView):
    serializer_class = MediaTypeSerializer

    def get(self, request):
        queryset = AdvertisingSpace.objects.all()
        state_id = request.query_params.get('state_id')
        city_id = request.query_params.get('city_id')
        if state_id and state_id.isdigit():
            queryset = queryset.filter(city__state_id=int(state_id))
        if city_id and city_id.isdigit():
            queryset = queryset.filter(city_id=int(city_id))

        names = queryset.order_by('media_type').values_list('media_type', flat=True).distinct()
        return Response(MediaTypeSerializer([{"name": n} for n in names], many=True).data)
