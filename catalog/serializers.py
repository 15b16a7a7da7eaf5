from rest_framework import serializers

from .localization import localized, split_benefits
from .models import MembershipTier, Service, ServiceGroup


class MembershipTierSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    description = serializers.SerializerMethodField()
    benefits = serializers.SerializerMethodField()
    discountPercentage = serializers.IntegerField(source='discount_percentage')
    isPopular = serializers.BooleanField(source='is_popular')

    class Meta:
        model = MembershipTier
        fields = [
            'id', 'tier', 'name', 'description', 'benefits', 'price',
            'discountPercentage', 'validity', 'color', 'isPopular',
        ]

    def get_name(self, obj):
        return localized(obj.name_en, obj.name_ar, obj.name_de, obj.name_tr)

    def get_description(self, obj):
        return localized(obj.description_en, obj.description_ar, obj.description_de, obj.description_tr)

    def get_benefits(self, obj):
        return localized(
            split_benefits(obj.benefits_en),
            split_benefits(obj.benefits_ar),
            split_benefits(obj.benefits_de),
            split_benefits(obj.benefits_tr),
        )


class ServiceSummarySerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    imageUrl = serializers.CharField(source='image_url', allow_null=True)

    class Meta:
        model = Service
        fields = ['id', 'slug', 'name', 'duration', 'price', 'imageUrl']

    def get_name(self, obj):
        return localized(obj.name_en, obj.name_ar, obj.name_de, obj.name_tr)


class ServiceSerializer(ServiceSummarySerializer):
    groupId = serializers.IntegerField(source='group_id', allow_null=True)
    description = serializers.SerializerMethodField()
    longDescription = serializers.SerializerMethodField()
    imageLarge = serializers.CharField(source='image_large', allow_null=True)

    class Meta:
        model = Service
        fields = [
            'id', 'slug', 'category', 'groupId', 'name', 'description',
            'longDescription', 'duration', 'price', 'imageUrl', 'imageLarge',
        ]

    def get_description(self, obj):
        return localized(obj.description_en, obj.description_ar, obj.description_de, obj.description_tr)

    def get_longDescription(self, obj):
        return localized(
            obj.long_description_en,
            obj.long_description_ar,
            obj.long_description_de,
            obj.long_description_tr,
        )


class ServiceGroupSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    description = serializers.SerializerMethodField()
    displayOrder = serializers.IntegerField(source='display_order')
    services = serializers.SerializerMethodField()

    class Meta:
        model = ServiceGroup
        fields = ['id', 'slug', 'name', 'description', 'icon', 'displayOrder', 'services']

    def get_name(self, obj):
        return localized(obj.name_en, obj.name_ar, obj.name_de, obj.name_tr)

    def get_description(self, obj):
        return localized(obj.description_en, obj.description_ar, obj.description_de, obj.description_tr)

    def get_services(self, obj):
        services = [service for service in obj.services.all() if service.is_active]
        return ServiceSummarySerializer(services, many=True).data
