from datetime import date
from decimal import Decimal

from django.core import mail
from django.test import SimpleTestCase, override_settings

from src.spaces.services import BookingForm, BookingNotice, BookingNotifier, SpaceSnapshot
from src.spaces.services.notifications import long_date


def make_notice(**form_overrides):
    form = BookingForm(
        client_name="Vikram Shah",
        client_email="vikram@example.com",
        client_phone="+91 91234 56789",
        start_date=date(2024, 1, 15),
        end_date=date(2024, 4, 15),
        duration_months=3,
        company_name="Shah Traders",
        company_gst="27aapfu0939f1zv",
        campaign_details="Festive launch",
    )
    for name, value in form_overrides.items():
        setattr(form, name, value)
    space = SpaceSnapshot(
        id=42,
        name="Andheri Flyover Billboard",
        media_type="Billboard",
        address="SV Road, Andheri West",
        city="Mumbai",
        state="Maharashtra",
        size="40 x 20 ft",
        monthly_price=Decimal("50000"),
    )
    return BookingNotice(
        space=space,
        form=form,
        booking_id="3f2b9c1a-7d4e-4c1b-9a8e-2b6f0d1e5c77",
        total_price=Decimal("177000"),
        booking_code=482913,
    )


class BookingNotifierTests(SimpleTestCase):

    def setUp(self):
        self.notifier = BookingNotifier(
            client_from="OOH Bookings <bookings@example.com>",
            alert_from="OOH Alerts <alerts@example.com>",
            alert_recipients=["ops@example.com", "sales@example.com"],
            support_email="support@example.com",
            support_whatsapp="+91 98765 43210",
        )
        self.notice = make_notice()

    def test_reference_is_first_eight_uuid_chars_upper_cased(self):
        self.assertEqual(self.notice.reference, "3F2B9C1A")

    def test_client_confirmation(self):
        self.notifier.send_client_confirmation(self.notice)

        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.subject, "Booking Confirmation - Andheri Flyover Billboard | Ref: 3F2B9C1A")
        self.assertEqual(message.to, ["vikram@example.com"])
        self.assertEqual(message.from_email, "OOH Bookings <bookings@example.com>")

        html, mimetype = message.alternatives[0]
        self.assertEqual(mimetype, "text/html")
        self.assertIn("#482913", html)
        self.assertIn("Monday, 15 January 2024", html)
        self.assertIn("3 months", html)
        self.assertIn("₹1,50,000", html)  # subtotal
        self.assertIn("₹27,000", html)    # GST
        self.assertIn("₹1,77,000", html)  # total
        self.assertIn("27 AAPFU 0939 F 1 Z V", html)
        self.assertIn("https://wa.me/919876543210", html)

        # plain-text body carries no markup
        self.assertNotIn("<div", message.body)
        self.assertIn("3F2B9C1A", message.body)

    def test_internal_alert(self):
        sent = self.notifier.send_internal_alert(self.notice)

        self.assertTrue(sent)
        message = mail.outbox[0]
        self.assertEqual(message.subject, "NEW BOOKING: Andheri Flyover Billboard - ₹1,77,000 | 3F2B9C1A")
        self.assertEqual(message.to, ["ops@example.com", "sales@example.com"])
        self.assertIn("Festive launch", message.alternatives[0][0])
        self.assertIn("Maharashtra", message.alternatives[0][0])

    def test_alert_skipped_without_recipients(self):
        notifier = BookingNotifier(client_from="a@example.com", alert_from="b@example.com")

        with self.assertLogs("src.spaces.services.notifications", level="WARNING"):
            sent = notifier.send_internal_alert(self.notice)

        self.assertFalse(sent)
        self.assertEqual(mail.outbox, [])

    def test_notify_sends_both(self):
        results = self.notifier.notify(self.notice)
        self.assertEqual(results, {"client": True, "alert": True})
        self.assertEqual(len(mail.outbox), 2)

    def test_notify_swallows_transport_errors(self):
        class BrokenConnection:
            def send_messages(self, messages):
                raise OSError("smtp unreachable")

        notifier = BookingNotifier(
            BrokenConnection(),
            client_from="a@example.com",
            alert_from="b@example.com",
            alert_recipients=["ops@example.com"],
        )

        with self.assertLogs("src.spaces.services.notifications", level="ERROR") as logs:
            results = notifier.notify(self.notice)

        self.assertEqual(results, {"client": False, "alert": False})
        self.assertEqual(len(logs.records), 2)

    def test_single_month_duration_label(self):
        self.notifier.send_client_confirmation(make_notice(duration_months=1, company_gst=""))
        html = mail.outbox[0].alternatives[0][0]
        self.assertIn("1 month<", html)
        self.assertNotIn("GST Number", html)


class NotifierFactoryTests(SimpleTestCase):

    @override_settings(BOOKING_EMAIL={"API_KEY": ""})
    def test_no_api_key_means_no_notifier(self):
        with self.assertLogs("src.spaces.services.notifications", level="WARNING"):
            self.assertIsNone(BookingNotifier.from_settings())

    @override_settings(BOOKING_EMAIL={
        "API_KEY": "re_123",
        "CLIENT_FROM": "bookings@example.com",
        "ALERT_FROM": "alerts@example.com",
        "ALERT_RECIPIENTS": ["ops@example.com"],
        "SUPPORT_EMAIL": "support@example.com",
        "SUPPORT_WHATSAPP": "+91 98765 43210",
    })
    def test_notifier_built_from_settings(self):
        notifier = BookingNotifier.from_settings()

        self.assertIsNotNone(notifier)
        self.assertIsNotNone(notifier.connection)
        self.assertEqual(notifier.client_from, "bookings@example.com")
        self.assertEqual(notifier.alert_recipients, ["ops@example.com"])


def test_long_date():
    assert long_date(date(2024, 3, 2)) == "Saturday, 2 March 2024"
    assert long_date(None) == ""
