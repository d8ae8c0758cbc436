import re

from django.db import models
from django.conf import settings

from .location import City


def generate_space_slug(media_type, illumination, name):
    """`<type>-<illumination>-<name>`, lower-cased, punctuation dropped."""
    clean_name = re.sub(r"[^\w\s-]", "", (name or "").lower().strip())
    clean_name = re.sub(r"\s+", "-", clean_name)
    slug = "-".join([
        re.sub(r"\s+", "-", (media_type or "").lower().strip()),
        re.sub(r"\s+", "-", (illumination or "").lower().strip()),
        clean_name,
    ])
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class AdvertisingSpace(models.Model):
    """A physical media asset rented out by the month."""

    class MediaType(models.TextChoices):
        BILLBOARD = "Billboard", "Billboard"
        DIGITAL_DISPLAY = "Digital Display", "Digital Display"
        TRANSIT = "Transit", "Transit"
        STREET_FURNITURE = "Street Furniture", "Street Furniture"
        MALL_DISPLAY = "Mall Display", "Mall Display"

    class Illumination(models.TextChoices):
        LIT = "Lit", "Lit"
        NON_LIT = "Non-lit", "Non-lit"
        DIGITAL = "Digital", "Digital"

    class Visibility(models.TextChoices):
        HIGH = "High", "High"
        MEDIUM = "Medium", "Medium"
        LOW = "Low", "Low"

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=255, blank=True, db_index=True)
    media_type = models.CharField(
        max_length=30,
        choices=MediaType.choices,
        default=MediaType.BILLBOARD,
    )
    address = models.CharField(max_length=255, blank=True)
    city = models.ForeignKey(
        City,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='spaces',
    )
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    width = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)  # ft
    height = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)  # ft
    illumination = models.CharField(
        max_length=10,
        choices=Illumination.choices,
        default=Illumination.NON_LIT,
    )
    visibility = models.CharField(
        max_length=10,
        choices=Visibility.choices,
        default=Visibility.MEDIUM,
    )
    traffic = models.CharField(max_length=100, blank=True)

    monthly_price = models.DecimalField(max_digits=12, decimal_places=2, db_index=True)
    currency = models.CharField(max_length=3, default="INR")
    # Coarse flag maintained by admins; date-ranged bookings are checked separately.
    is_available = models.BooleanField(default=True)

    description = models.TextField(blank=True)
    image_urls = models.JSONField(default=list, blank=True)
    features = models.JSONField(default=list, blank=True)
    footfall = models.CharField(max_length=100, blank=True)
    target_audience = models.CharField(max_length=200, blank=True)

    managed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='managed_spaces',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['media_type'], name='space_media_type_idx'),
            models.Index(fields=['latitude', 'longitude'], name='space_lat_lon_idx'),
        ]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = generate_space_slug(self.media_type, self.illumination, self.name)[:255]
        super().save(*args, **kwargs)

    @property
    def size(self):
        if self.width is None or self.height is None:
            return ""
        return f"{self.width.normalize():f} x {self.height.normalize():f} ft"

    @property
    def state(self):
        return self.city.state if self.city_id else None
