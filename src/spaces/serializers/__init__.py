from .location import StateSerializer, CitySerializer, MediaTypeSerializer
from .space import AdvertisingSpaceSerializer, QuoteQuerySerializer, QuoteSerializer
from .availability import (
    AvailabilityQuerySerializer, ConflictingBookingSerializer, AvailabilityResultSerializer,
)
from .booking import BookingCreateSerializer, BookingSerializer

__all__ = [
    "StateSerializer",
    "CitySerializer",
    "MediaTypeSerializer",
    "AdvertisingSpaceSerializer",
    "QuoteQuerySerializer",
    "QuoteSerializer",
    "AvailabilityQuerySerializer",
    "ConflictingBookingSerializer",
    "AvailabilityResultSerializer",
    "BookingCreateSerializer",
    "BookingSerializer",
]
