from django.db.models import Q, Exists, OuterRef
from django_filters import rest_framework as df
from django.utils.dateparse import parse_date

from ..models import AdvertisingSpace, Booking


class SpaceFilter(df.FilterSet):
    city         = df.CharFilter(field_name='city__name', lookup_expr='iexact', label='City (exact name)')
    city_id      = df.NumberFilter(field_name='city_id', label='City id')
    state        = df.CharFilter(field_name='city__state__name', lookup_expr='iexact', label='State (exact name)')
    state_id     = df.NumberFilter(field_name='city__state_id', label='State id')
    media_type   = df.CharFilter(field_name='media_type', lookup_expr='iexact', label='Media type (exact)')
    illumination = df.CharFilter(field_name='illumination', lookup_expr='iexact', label='Illumination (exact)')
    available    = df.BooleanFilter(field_name='is_available', label='Availability flag')
    slug         = df.CharFilter(field_name='slug', lookup_expr='exact', label='Slug')
    price_min    = df.NumberFilter(field_name='monthly_price', lookup_expr='gte', label='Monthly price min')
    price_max    = df.NumberFilter(field_name='monthly_price', lookup_expr='lte', label='Monthly price max')
    lat_min = df.NumberFilter(field_name='latitude', lookup_expr='gte', label='Latitude min')
    lat_max = df.NumberFilter(field_name='latitude', lookup_expr='lte', label='Latitude max')
    lon_min = df.NumberFilter(field_name='longitude', lookup_expr='gte', label='Longitude min')
    lon_max = df.NumberFilter(field_name='longitude', lookup_expr='lte', label='Longitude max')

    q = df.CharFilter(method='filter_q', label='Search')
    available_from = df.DateFilter(method='filter_free', label='Free from (YYYY-MM-DD)')
    available_to   = df.DateFilter(method='filter_free', label='Free to (YYYY-MM-DD)')

    def filter_q(self, queryset, name, value):
        terms = [t.strip() for t in (value or "").split() if t.strip()]
        for term in terms:
            queryset = queryset.filter(
                Q(name__icontains=term) |
                Q(address__icontains=term) |
                Q(description__icontains=term) |
                Q(city__name__icontains=term) |
                Q(city__state__name__icontains=term)
            )
        return queryset

    def _free_range(self):
        """
        Read both params from query and parse to dates.
        If only one is provided, treat it as a single-day window [d..d].
        """
        req = getattr(self, 'request', None)
        if not req:
            return None, None
        s = req.query_params.get('available_from') or None
        e = req.query_params.get('available_to') or None
        d1 = parse_date(s) if s else None
        d2 = parse_date(e) if e else None
        if d1 and not d2:
            d2 = d1
        if d2 and not d1:
            d1 = d2
        return d1, d2

    def filter_free(self, queryset, name, value):
        """
        Exclude spaces having any pending or confirmed booking overlapping the window.
        Overlap condition: existing.start_date <= req_end AND existing.end_date >= req_start
        """
        # Prevent applying twice (method bound to two fields).
        if getattr(self, '_free_applied', False):
            return queryset

        start, end = self._free_range()
        if not start or not end:
            return queryset

        conflict = Booking.objects.filter(
            space=OuterRef('pk'),
            status__in=Booking.ACTIVE_STATUSES,
            start_date__lte=end,
            end_date__gte=start,
        )
        self._free_applied = True
        return queryset.exclude(Exists(conflict))

    class Meta:
        model = AdvertisingSpace
        fields = [
            'city', 'city_id', 'state', 'state_id',
            'media_type', 'illumination', 'available', 'slug',
            'price_min', 'price_max', 'q',
            'available_from', 'available_to',
            'lat_min', 'lat_max', 'lon_min', 'lon_max',
        ]
