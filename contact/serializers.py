from rest_framework import serializers

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    isResponded = serializers.BooleanField(source='is_responded')
    createdAt = serializers.DateTimeField(source='created_at')

    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'phone', 'message', 'isResponded', 'createdAt']
