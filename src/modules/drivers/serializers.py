"""Driver matching serializers (camelCase output)."""

from __future__ import annotations

from rest_framework import serializers


class NearestDriversParamsSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()
    radius = serializers.FloatField(required=False)
    limit = serializers.IntegerField(required=False)


class SearchDriversParamsSerializer(serializers.Serializer):
    source = serializers.CharField()
    destination = serializers.CharField(required=False, allow_blank=True)
    vehicleType = serializers.CharField(required=False, allow_blank=True)


class _DriverFieldsSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="driver.id")
    userId = serializers.IntegerField(source="driver.user_id")
    name = serializers.CharField(source="driver.user.name")
    phone = serializers.CharField(source="driver.user.phone")
    vehicleType = serializers.CharField(source="driver.vehicle_type")
    latitude = serializers.FloatField(source="driver.latitude")
    longitude = serializers.FloatField(source="driver.longitude")
    serviceArea = serializers.CharField(source="driver.service_area")
    rating = serializers.DecimalField(
        source="driver.rating", max_digits=5, decimal_places=2
    )
    isAvailable = serializers.BooleanField(source="driver.is_available")


class NearbyDriverSerializer(_DriverFieldsSerializer):
    distanceKm = serializers.SerializerMethodField()

    def get_distanceKm(self, obj) -> float:
        return round(obj.distance_km, 3)


class AreaDriverSerializer(_DriverFieldsSerializer):
    canDeliverToDestination = serializers.BooleanField(
        source="can_deliver_to_destination"
    )
