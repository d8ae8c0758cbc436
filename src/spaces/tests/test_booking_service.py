from datetime import date, timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.core import mail
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.utils import timezone

from src.spaces.models import Booking
from src.spaces.factories import SpaceFactory, BookingFactory
from src.spaces.services import (
    BookingForm, BookingNotifier, BookingService, SpaceSnapshot,
)
from src.spaces.services.booking import CODE_MAX, CODE_MIN


def make_notifier(**overrides):
    options = {
        "client_from": "bookings@example.com",
        "alert_from": "alerts@example.com",
        "alert_recipients": ["ops@example.com"],
        "support_email": "support@example.com",
        "support_whatsapp": "+91 98765 43210",
    }
    options.update(overrides)
    return BookingNotifier(**options)


@pytest.mark.django_db
class TestCreateBooking:
    def setup_method(self):
        self.space = SpaceFactory(name="Marine Drive Billboard", monthly_price=Decimal("100000"))
        self.snapshot = SpaceSnapshot.from_space(self.space)
        self.form = BookingForm(
            client_name="Asha Rao",
            client_email="asha@example.com",
            client_phone="+91 90000 00000",
            start_date=date(2024, 1, 15),
            end_date=date(2024, 2, 15),
            duration_months=1,
            company_name="Rao Media",
            company_gst="27AAPFU0939F1ZV",
        )
        self.service = BookingService(notifier=make_notifier())

    def test_creates_pending_booking_with_caller_figures(self):
        outcome = self.service.create_booking(
            self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            space_snapshot=self.snapshot,
        )

        assert outcome.ok
        assert outcome.error is None
        booking = Booking.objects.get(pk=outcome.booking.pk)
        assert booking.status == Booking.PENDING
        assert booking.booking_price == Decimal("118000")
        assert booking.period == Decimal("1")
        assert booking.booker == "Asha Rao"
        assert CODE_MIN <= booking.code <= CODE_MAX
        assert booking.space_id == self.space.id

    def test_price_is_stored_as_supplied(self):
        outcome = self.service.create_booking(
            self.space.id, self.form, total_price=1, duration_months=7,
        )
        assert outcome.booking.booking_price == Decimal("1")
        assert outcome.booking.period == Decimal("7")

    def test_sends_confirmation_and_alert(self):
        outcome = self.service.create_booking(
            self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            space_snapshot=self.snapshot,
        )

        assert len(mail.outbox) == 2
        client_mail, alert_mail = mail.outbox
        ref = outcome.booking.reference
        assert client_mail.to == ["asha@example.com"]
        assert client_mail.subject == f"Booking Confirmation - Marine Drive Billboard | Ref: {ref}"
        assert alert_mail.to == ["ops@example.com"]
        assert alert_mail.subject == f"NEW BOOKING: Marine Drive Billboard - ₹1,18,000 | {ref}"

    def test_email_failure_still_returns_booking(self):
        with mock.patch.object(
            BookingNotifier, "send_client_confirmation", side_effect=ConnectionError("provider down"),
        ), mock.patch.object(
            BookingNotifier, "send_internal_alert", side_effect=ConnectionError("provider down"),
        ):
            outcome = self.service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
                space_snapshot=self.snapshot,
            )

        assert outcome.booking is not None
        assert outcome.error is None
        assert Booking.objects.filter(pk=outcome.booking.pk).exists()

    def test_client_failure_does_not_block_alert(self):
        with mock.patch.object(
            BookingNotifier, "send_client_confirmation", side_effect=RuntimeError("bad template"),
        ):
            outcome = self.service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
                space_snapshot=self.snapshot,
            )

        assert outcome.ok
        assert [m.to for m in mail.outbox] == [["ops@example.com"]]

    def test_persistence_failure_returns_error_and_sends_nothing(self):
        notifier = mock.Mock(spec=BookingNotifier)
        service = BookingService(notifier=notifier)

        with mock.patch.object(Booking.objects, "create", side_effect=DatabaseError("disk full")):
            outcome = service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
                space_snapshot=self.snapshot,
            )

        assert outcome.booking is None
        assert outcome.error == "disk full"
        assert not outcome.ok
        notifier.notify.assert_not_called()
        assert mail.outbox == []

    def test_persistence_failure_without_message_gets_generic_error(self):
        with mock.patch.object(Booking.objects, "create", side_effect=DatabaseError()):
            outcome = self.service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            )
        assert outcome.error == "Failed to create booking"

    def test_without_snapshot_no_email_is_sent(self):
        outcome = self.service.create_booking(
            self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
        )
        assert outcome.ok
        assert mail.outbox == []

    def test_without_notifier_no_email_is_sent(self):
        outcome = BookingService().create_booking(
            self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            space_snapshot=self.snapshot,
        )
        assert outcome.ok
        assert mail.outbox == []

    @pytest.mark.parametrize("field", ["client_name", "client_email", "client_phone", "start_date", "end_date"])
    def test_missing_required_field_is_rejected_before_saving(self, field):
        blank = None if field.endswith("_date") else "  "
        setattr(self.form, field, blank)

        with pytest.raises(ValidationError) as exc:
            self.service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            )

        assert field in exc.value.message_dict
        assert Booking.objects.count() == 0

    def test_reversed_range_is_rejected(self):
        self.form.start_date, self.form.end_date = self.form.end_date, self.form.start_date
        with pytest.raises(ValidationError):
            self.service.create_booking(
                self.space.id, self.form, total_price=Decimal("118000"), duration_months=1,
            )
        assert Booking.objects.count() == 0


@pytest.mark.django_db
class TestBookingLookupsAndStatus:
    def setup_method(self):
        self.service = BookingService()
        self.space = SpaceFactory()

    def test_get_booking(self):
        booking = BookingFactory(space=self.space)
        assert self.service.get_booking(booking.pk) == booking

    def test_get_unknown_booking_returns_none(self):
        assert self.service.get_booking("7f0c1d9e-0000-4000-8000-000000000000") is None

    def test_bookings_for_space_newest_first(self):
        first = BookingFactory(space=self.space)
        second = BookingFactory(space=self.space)
        Booking.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(days=1))
        BookingFactory()  # other space

        result = self.service.bookings_for_space(self.space.id)

        assert [b.pk for b in result] == [second.pk, first.pk]

    @pytest.mark.parametrize("status", [Booking.CONFIRMED, Booking.CANCELLED])
    def test_pending_can_be_confirmed_or_cancelled(self, status):
        booking = BookingFactory(space=self.space)

        result = self.service.update_status(booking.pk, status)

        assert result.success
        assert result.error is None
        booking.refresh_from_db()
        assert booking.status == status

    def test_cancelled_booking_cannot_be_revived(self):
        booking = BookingFactory(space=self.space, cancelled=True)

        result = self.service.update_status(booking.pk, Booking.CONFIRMED)

        assert not result.success
        assert "cancelled" in result.error
        booking.refresh_from_db()
        assert booking.status == Booking.CANCELLED

    def test_unknown_status_is_rejected(self):
        booking = BookingFactory(space=self.space)
        result = self.service.update_status(booking.pk, "archived")
        assert not result.success
        assert "Unknown status" in result.error

    def test_missing_booking(self):
        result = self.service.update_status("7f0c1d9e-0000-4000-8000-000000000000", Booking.CONFIRMED)
        assert not result.success
        assert result.error == "Booking not found."

    def test_lookup_error_is_reported_not_raised(self):
        booking = BookingFactory(space=self.space)

        with mock.patch.object(BookingService, "get_booking", side_effect=DatabaseError("db down")):
            result = self.service.update_status(booking.pk, Booking.CONFIRMED)

        assert not result.success
        assert result.error == "Failed to update booking status"
        booking.refresh_from_db()
        assert booking.status == Booking.PENDING

    def test_save_error_is_reported_not_raised(self):
        booking = BookingFactory(space=self.space)

        with mock.patch.object(Booking, "save", side_effect=DatabaseError("disk full")):
            result = self.service.update_status(booking.pk, Booking.CANCELLED)

        assert not result.success
        assert result.error == "Failed to update booking status"
