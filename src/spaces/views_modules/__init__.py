try:
    from .space import AdvertisingSpaceViewSet
    from .booking import BookingViewSet
    from .availability import AvailabilityView
    from .location import StateListView, CityListView, MediaTypeListView
    from .filters import SpaceFilter
except ImportError as e:
    print(f"Import error in views_modules/__init__.py: {e}")
    raise

__all__ = [
    "AdvertisingSpaceViewSet",
    "BookingViewSet",
    "AvailabilityView",
    "StateListView",
    "CityListView",
    "MediaTypeListView",
    "SpaceFilter",
]
