from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field, OpenApiTypes
from django.core.exceptions import ValidationError as DjangoValidationError

from src.spaces.models import AdvertisingSpace, Booking
from src.spaces.validators import normalize_gstin, validate_gstin
from src.spaces.services import BookingForm

DATE_ERRORS = {"invalid": "Invalid date or format. Expected YYYY-MM-DD and a real calendar date."}


class BookingCreateSerializer(serializers.Serializer):
    """
    Input of the booking wizard's final step.

    ``total_price`` and ``duration_months`` are the figures the wizard showed
    to the client; they are stored as given.
    """
    space = serializers.PrimaryKeyRelatedField(queryset=AdvertisingSpace.objects.select_related("city__state"))
    start_date = serializers.DateField(error_messages=DATE_ERRORS)
    end_date = serializers.DateField(error_messages=DATE_ERRORS)
    duration_months = serializers.IntegerField(min_value=1, max_value=36)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)

    client_name = serializers.CharField(max_length=150)
    client_email = serializers.EmailField()
    client_phone = serializers.CharField(max_length=30)
    company_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")
    company_gst = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    campaign_details = serializers.CharField(required=False, allow_blank=True, default="")
    special_requirements = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_company_gst(self, value):
        try:
            validate_gstin(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return normalize_gstin(value)

    def validate(self, attrs):
        if attrs["start_date"] > attrs["end_date"]:
            raise serializers.ValidationError({"end_date": "must not be before start_date"})
        return attrs

    def to_form(self) -> BookingForm:
        return BookingForm.from_data(self.validated_data)


class BookingSerializer(serializers.ModelSerializer):
    media_id = serializers.IntegerField(source="space_id", read_only=True)
    space_name = serializers.CharField(source="space.name", read_only=True)
    reference = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = (
            "id", "reference", "code",
            "media_id", "space_name",
            "start_date", "end_date",
            "client_name", "client_email", "client_phone",
            "company_name", "company_gst",
            "campaign_details", "special_requirements",
            "booking_price", "period", "booker", "status",
            "created_at", "updated_at",
        )
        read_only_fields = fields

    @extend_schema_field(OpenApiTypes.STR)
    def get_reference(self, obj):
        return obj.reference
