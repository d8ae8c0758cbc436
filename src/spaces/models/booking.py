import uuid

from django.db import models

from .space import AdvertisingSpace


class Booking(models.Model):
    """Booking request for one advertising space over a closed date range."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    STATUS_CHOICES = [
        (PENDING, 'Pending'),
        (CONFIRMED, 'Confirmed'),
        (CANCELLED, 'Cancelled'),
    ]
    # Statuses that block the dates for other requests
    ACTIVE_STATUSES = (PENDING, CONFIRMED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    space = models.ForeignKey(
        AdvertisingSpace,
        on_delete=models.CASCADE,
        related_name='bookings',
        db_column='media_id',
    )
    start_date = models.DateField()
    end_date = models.DateField()

    client_name = models.CharField(max_length=150)
    client_email = models.EmailField()
    client_phone = models.CharField(max_length=30, blank=True)
    company_name = models.CharField(max_length=150, blank=True)
    company_gst = models.CharField(max_length=20, blank=True)
    campaign_details = models.TextField(blank=True)
    special_requirements = models.TextField(blank=True)

    booking_price = models.DecimalField(max_digits=12, decimal_places=2)
    period = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)  # months
    booker = models.CharField(max_length=150, blank=True)
    code = models.PositiveIntegerField(null=True, blank=True, db_index=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=PENDING)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(
                fields=['space', 'status', 'start_date', 'end_date'],
                name='booking_overlap_idx',
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_date__lte=models.F('end_date')),
                name='booking_start_before_end',
            ),
        ]

    def __str__(self):
        return f"#{self.code} {self.client_name} → {self.space} [{self.status}]"

    @property
    def reference(self):
        """Short human reference used in email subjects."""
        return str(self.id)[:8].upper()
