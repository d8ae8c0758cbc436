"""Booking emails: client confirmation and internal alert."""
import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from ..validators import format_gstin
from .pricing import format_inr, quote_price

logger = logging.getLogger(__name__)


def long_date(value):
    if not value:
        return ""
    return f"{value:%A}, {value.day} {value:%B %Y}"


class BookingNotifier:
    """
    Sends the two booking emails through a Django mail connection.

    Build it with ``from_settings()``; it returns ``None`` when no email API
    key is configured so callers can treat notifications as absent.
    """

    def __init__(self, connection=None, *, client_from, alert_from,
                 alert_recipients=(), support_email="", support_whatsapp=""):
        self.connection = connection
        self.client_from = client_from
        self.alert_from = alert_from
        self.alert_recipients = list(alert_recipients)
        self.support_email = support_email
        self.support_whatsapp = support_whatsapp

    @classmethod
    def from_settings(cls):
        conf = getattr(settings, "BOOKING_EMAIL", {})
        api_key = conf.get("API_KEY")
        if not api_key:
            logger.warning("Booking emails disabled: no email API key configured")
            return None
        return cls(
            connection=get_connection(password=api_key),
            client_from=conf.get("CLIENT_FROM", settings.DEFAULT_FROM_EMAIL),
            alert_from=conf.get("ALERT_FROM", settings.DEFAULT_FROM_EMAIL),
            alert_recipients=conf.get("ALERT_RECIPIENTS", []),
            support_email=conf.get("SUPPORT_EMAIL", ""),
            support_whatsapp=conf.get("SUPPORT_WHATSAPP", ""),
        )

    # -------------------------
    # Rendering
    # -------------------------
    def _context(self, notice):
        form = notice.form
        quote = quote_price(notice.space.monthly_price, form.duration_months)
        months = form.duration_months
        return {
            "space": notice.space,
            "form": form,
            "reference": notice.reference,
            "booking_code": notice.booking_code,
            "company_gst": format_gstin(form.company_gst),
            "start_date": long_date(form.start_date),
            "end_date": long_date(form.end_date),
            "duration": f"{months} month{'' if months == 1 else 's'}",
            "monthly_rate": format_inr(quote.monthly_rate),
            "subtotal": format_inr(quote.base_amount),
            "gst": format_inr(quote.gst_amount),
            "total": format_inr(notice.total_price),
            "support_email": self.support_email,
            "support_whatsapp": self.support_whatsapp,
            "whatsapp_link": "".join(ch for ch in self.support_whatsapp if ch.isdigit()),
        }

    def _send(self, subject, template_name, context, from_email, to):
        html = render_to_string(template_name, context)
        message = EmailMultiAlternatives(
            subject=subject,
            body=strip_tags(html),
            from_email=from_email,
            to=to,
            connection=self.connection,
        )
        message.attach_alternative(html, "text/html")
        message.send()

    # -------------------------
    # Messages
    # -------------------------
    def send_client_confirmation(self, notice):
        subject = f"Booking Confirmation - {notice.space.name} | Ref: {notice.reference}"
        self._send(
            subject,
            "spaces/emails/booking_confirmation.html",
            self._context(notice),
            self.client_from,
            [notice.form.client_email],
        )
        logger.info("Client confirmation sent for booking %s", notice.reference)

    def send_internal_alert(self, notice):
        if not self.alert_recipients:
            logger.warning("No alert recipients configured; skipping alert for %s", notice.reference)
            return False
        subject = (
            f"NEW BOOKING: {notice.space.name} - {format_inr(notice.total_price)} | {notice.reference}"
        )
        self._send(
            subject,
            "spaces/emails/booking_alert.html",
            self._context(notice),
            self.alert_from,
            self.alert_recipients,
        )
        logger.info("Internal alert sent for booking %s", notice.reference)
        return True

    def notify(self, notice):
        """Send both emails; a failure of either is logged and never raised."""
        results = {"client": False, "alert": False}
        try:
            self.send_client_confirmation(notice)
            results["client"] = True
        except Exception:
            logger.exception("Failed to send client confirmation for booking %s", notice.reference)
        try:
            results["alert"] = self.send_internal_alert(notice)
        except Exception:
            logger.exception("Failed to send internal alert for booking %s", notice.reference)
        return results
