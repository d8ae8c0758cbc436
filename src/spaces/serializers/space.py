from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field, OpenApiTypes

from src.spaces.models import AdvertisingSpace


class SpaceLocationSerializer(serializers.Serializer):
    lat = serializers.FloatField(allow_null=True)
    lng = serializers.FloatField(allow_null=True)
    address = serializers.CharField(allow_blank=True)
    city = serializers.CharField(allow_blank=True)
    state = serializers.CharField(allow_blank=True)


class SpaceSpecificationsSerializer(serializers.Serializer):
    size = serializers.CharField(allow_blank=True)
    illumination = serializers.CharField()
    visibility = serializers.CharField()
    traffic = serializers.CharField(allow_blank=True)


class SpacePricingSerializer(serializers.Serializer):
    monthly = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()


class AdvertisingSpaceSerializer(serializers.ModelSerializer):
    """
    Read-only listing projection grouped the way the map and detail pages
    consume it (location / specifications / pricing / demographics).
    """
    type = serializers.CharField(source="media_type", read_only=True)
    location = serializers.SerializerMethodField()
    specifications = serializers.SerializerMethodField()
    pricing = serializers.SerializerMethodField()
    availability = serializers.SerializerMethodField()
    images = serializers.JSONField(source="image_urls", read_only=True)
    demographics = serializers.SerializerMethodField()
    managed_by = serializers.SerializerMethodField()

    class Meta:
        model = AdvertisingSpace
        fields = (
            "id", "name", "slug", "type",
            "location", "specifications", "pricing", "availability",
            "images", "description", "features", "demographics",
            "managed_by", "created_at", "updated_at",
        )
        read_only_fields = fields

    @extend_schema_field(SpaceLocationSerializer)
    def get_location(self, obj):
        state = obj.state
        return {
            "lat": float(obj.latitude) if obj.latitude is not None else None,
            "lng": float(obj.longitude) if obj.longitude is not None else None,
            "address": obj.address,
            "city": obj.city.name if obj.city_id else "",
            "state": state.name if state else "",
        }

    @extend_schema_field(SpaceSpecificationsSerializer)
    def get_specifications(self, obj):
        return {
            "size": obj.size,
            "illumination": obj.illumination,
            "visibility": obj.visibility,
            "traffic": obj.traffic,
        }

    @extend_schema_field(SpacePricingSerializer)
    def get_pricing(self, obj):
        return {"monthly": obj.monthly_price, "currency": obj.currency}

    @extend_schema_field(OpenApiTypes.STR)
    def get_availability(self, obj):
        return "Available" if obj.is_available else "Booked"

    @extend_schema_field(OpenApiTypes.OBJECT)
    def get_demographics(self, obj):
        return {"footfall": obj.footfall, "target_audience": obj.target_audience}

    @extend_schema_field(OpenApiTypes.STR)
    def get_managed_by(self, obj):
        manager = getattr(obj, "managed_by", None)
        return manager.display_name if manager else None


class QuoteQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    duration_months = serializers.IntegerField(min_value=1, max_value=36, default=1)


class QuoteSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    duration_months = serializers.IntegerField()
    period_in_months = serializers.FloatField()
    monthly_rate = serializers.DecimalField(max_digits=12, decimal_places=2)
    base_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    gst_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=0)
    total_display = serializers.CharField()
