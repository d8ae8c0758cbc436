from .availability import AvailabilityResult, check_availability, overlaps
from .booking import BookingOutcome, BookingService, StatusUpdate
from .notifications import BookingNotifier
from .payloads import BookingForm, BookingNotice, SpaceSnapshot
from .periods import calculate_period_in_months, campaign_end_date
from .pricing import PriceQuote, format_inr, quote_price

__all__ = [
    "AvailabilityResult",
    "check_availability",
    "overlaps",
    "BookingOutcome",
    "BookingService",
    "StatusUpdate",
    "BookingNotifier",
    "BookingForm",
    "BookingNotice",
    "SpaceSnapshot",
    "calculate_period_in_months",
    "campaign_end_date",
    "PriceQuote",
    "format_inr",
    "quote_price",
]
