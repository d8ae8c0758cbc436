from rest_framework import serializers

from src.spaces.models import State, City


class StateSerializer(serializers.ModelSerializer):
    class Meta:
        model = State
        fields = ("id", "name")


class CitySerializer(serializers.ModelSerializer):
    state_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = City
        fields = ("id", "name", "state_id")


class MediaTypeSerializer(serializers.Serializer):
    name = serializers.CharField()
