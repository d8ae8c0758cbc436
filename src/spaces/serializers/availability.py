from rest_framework import serializers

from src.spaces.models import Booking

DATE_ERRORS = {"invalid": "Invalid date or format. Expected YYYY-MM-DD and a real calendar date."}


class AvailabilityQuerySerializer(serializers.Serializer):
    space_id = serializers.IntegerField(min_value=1)
    start_date = serializers.DateField(error_messages=DATE_ERRORS)
    end_date = serializers.DateField(error_messages=DATE_ERRORS)

    def validate(self, attrs):
        if attrs["start_date"] > attrs["end_date"]:
            raise serializers.ValidationError({"end_date": "must not be before start_date"})
        return attrs


class ConflictingBookingSerializer(serializers.ModelSerializer):
    """Public projection of a blocking booking; no client details."""

    class Meta:
        model = Booking
        fields = ("start_date", "end_date", "status")


class AvailabilityResultSerializer(serializers.Serializer):
    available = serializers.BooleanField()
    conflicting_bookings = ConflictingBookingSerializer(many=True)
    next_available_date = serializers.DateField(allow_null=True)
    suggested_end_date = serializers.DateField(allow_null=True)
