"""Plain data carried between the API layer, the booking service and notifications."""
from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class BookingForm:
    """Contact and campaign details collected by the booking wizard."""
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_months: int = 1
    company_name: str = ""
    company_gst: str = ""
    campaign_details: str = ""
    special_requirements: str = ""

    REQUIRED = ("client_name", "client_email", "client_phone", "start_date", "end_date")

    @classmethod
    def from_data(cls, data):
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names and v is not None})

    def missing_fields(self):
        missing = []
        for name in self.REQUIRED:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


@dataclass(frozen=True)
class SpaceSnapshot:
    """What the emails need to know about the booked space."""
    id: int
    name: str
    media_type: str
    address: str
    city: str
    state: str
    size: str
    monthly_price: Decimal
    currency: str = "INR"

    @classmethod
    def from_space(cls, space):
        state = space.state
        return cls(
            id=space.pk,
            name=space.name,
            media_type=space.media_type,
            address=space.address,
            city=space.city.name if space.city_id else "",
            state=state.name if state else "",
            size=space.size,
            monthly_price=space.monthly_price,
            currency=space.currency,
        )


@dataclass(frozen=True)
class BookingNotice:
    space: SpaceSnapshot
    form: BookingForm
    booking_id: str
    total_price: Decimal
    booking_code: int

    @property
    def reference(self):
        return str(self.booking_id)[:8].upper()
