from rest_framework import serializers

from .models import BlockedTimeSlot, Booking


class BookingSerializer(serializers.ModelSerializer):
    vipNumber = serializers.CharField(source='vip_number', allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at')

    class Meta:
        model = Booking
        fields = ['id', 'name', 'email', 'phone', 'service', 'date', 'time', 'vipNumber', 'status', 'createdAt']


class BlockedTimeSlotSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at')

    class Meta:
        model = BlockedTimeSlot
        fields = ['id', 'date', 'time', 'createdAt']
