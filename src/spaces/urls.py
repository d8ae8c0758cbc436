from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views_modules import (
    AdvertisingSpaceViewSet, BookingViewSet, AvailabilityView,
    StateListView, CityListView, MediaTypeListView,
)

app_name = "spaces"

router = DefaultRouter()
router.register(r"spaces", AdvertisingSpaceViewSet, basename="space")
router.register(r"bookings", BookingViewSet, basename="booking")

urlpatterns = [
    path("", include(router.urls)),
    path("availability/", AvailabilityView.as_view(), name="availability"),
    path("states/", StateListView.as_view(), name="state-list"),
    path("cities/", CityListView.as_view(), name="city-list"),
    path("media-types/", MediaTypeListView.as_view(), name="media-type-list"),
]
