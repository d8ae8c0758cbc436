from .location import State, City
from .space import AdvertisingSpace
from .booking import Booking

__all__ = [
    "State",
    "City",
    "AdvertisingSpace",
    "Booking",
]
