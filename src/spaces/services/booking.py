"""Booking creation and status changes."""
import logging
import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from ..models import Booking
from .availability import check_availability
from .notifications import BookingNotifier
from .payloads import BookingForm, BookingNotice

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999

# pending is the only state a booking can leave
ALLOWED_TRANSITIONS = {
    Booking.PENDING: {Booking.CONFIRMED, Booking.CANCELLED},
}


@dataclass(frozen=True)
class BookingOutcome:
    booking: Optional[Booking]
    error: Optional[str]

    @property
    def ok(self):
        return self.booking is not None


@dataclass(frozen=True)
class StatusUpdate:
    success: bool
    error: Optional[str] = None


def generate_booking_code() -> int:
    return random.randint(CODE_MIN, CODE_MAX)


class BookingService:
    """
    Entry point for the booking wizard.

    The notifier is optional: without one, bookings are stored and no email is
    sent. Price and duration are stored exactly as supplied by the caller.
    """

    def __init__(self, notifier: Optional[BookingNotifier] = None):
        self.notifier = notifier

    @classmethod
    def from_settings(cls):
        return cls(notifier=BookingNotifier.from_settings())

    def check_availability(self, space_id, start, end):
        return check_availability(space_id, start, end)

    def create_booking(self, space_id, form: BookingForm, total_price, duration_months,
                       space_snapshot=None) -> BookingOutcome:
        missing = form.missing_fields()
        if missing:
            raise ValidationError({name: "This field is required." for name in missing})
        if form.start_date > form.end_date:
            raise ValidationError({"end_date": "End date must not be before start date."})

        code = generate_booking_code()
        logger.info("Creating booking for space %s", space_id)
        try:
            booking = Booking.objects.create(
                space_id=space_id,
                start_date=form.start_date,
                end_date=form.end_date,
                client_name=form.client_name,
                client_email=form.client_email,
                client_phone=form.client_phone,
                company_name=form.company_name,
                company_gst=form.company_gst,
                campaign_details=form.campaign_details,
                special_requirements=form.special_requirements,
                booking_price=Decimal(str(total_price)),
                period=Decimal(str(duration_months)),
                booker=form.client_name,
                code=code,
                status=Booking.PENDING,
            )
        except DatabaseError as exc:
            logger.error("Error creating booking for space %s: %s", space_id, exc)
            return BookingOutcome(booking=None, error=str(exc) or "Failed to create booking")

        logger.info("Booking %s created (code %s)", booking.reference, code)

        if space_snapshot is None:
            logger.warning("No space snapshot for booking %s; skipping emails", booking.reference)
        elif self.notifier is None:
            logger.warning("Notifications not configured; skipping emails for %s", booking.reference)
        else:
            self.notifier.notify(BookingNotice(
                space=space_snapshot,
                form=form,
                booking_id=str(booking.id),
                total_price=booking.booking_price,
                booking_code=code,
            ))

        return BookingOutcome(booking=booking, error=None)

    def get_booking(self, booking_id) -> Optional[Booking]:
        return Booking.objects.select_related("space").filter(pk=booking_id).first()

    def bookings_for_space(self, space_id):
        return list(Booking.objects.filter(space_id=space_id).order_by("-created_at"))

    def update_status(self, booking_id, status) -> StatusUpdate:
        if status not in dict(Booking.STATUS_CHOICES):
            return StatusUpdate(success=False, error=f"Unknown status: {status}")

        try:
            booking = self.get_booking(booking_id)
            if booking is None:
                return StatusUpdate(success=False, error="Booking not found.")
            if status not in ALLOWED_TRANSITIONS.get(booking.status, set()):
                return StatusUpdate(
                    success=False,
                    error=f"Cannot change status from {booking.status} to {status}.",
                )
            booking.status = status
            booking.save(update_fields=["status", "updated_at"])
        except DatabaseError as exc:
            logger.error("Error updating booking %s status: %s", booking_id, exc)
            return StatusUpdate(success=False, error="Failed to update booking status")

        logger.info("Booking %s is now %s", booking.reference, status)
        return StatusUpdate(success=True)
