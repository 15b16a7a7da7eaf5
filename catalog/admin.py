from django.contrib import admin
from .models import MembershipTier, Service, ServiceGroup


@admin.register(MembershipTier)
class MembershipTierAdmin(admin.ModelAdmin):
    list_display = ['tier', 'name_en', 'price_display', 'discount_percentage', 'validity', 'is_popular']
    list_filter = ['is_popular']
    search_fields = ['tier', 'name_en']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Tier', {
            'fields': ('tier', 'price', 'discount_percentage', 'validity', 'color', 'is_popular')
        }),
        ('English', {
            'fields': ('name_en', 'description_en', 'benefits_en')
        }),
        ('Arabic', {
            'fields': ('name_ar', 'description_ar', 'benefits_ar')
        }),
        ('German', {
            'fields': ('name_de', 'description_de', 'benefits_de')
        }),
        ('Turkish', {
            'fields': ('name_tr', 'description_tr', 'benefits_tr')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at')
        }),
    )

    def price_display(self, obj):
        return f"{obj.price/100:.2f}"
    price_display.short_description = 'Price'


@admin.register(ServiceGroup)
class ServiceGroupAdmin(admin.ModelAdmin):
    list_display = ['slug', 'name_en', 'display_order']
    search_fields = ['slug', 'name_en']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ['slug', 'name_en', 'group', 'duration', 'price_display', 'is_active']
    list_filter = ['is_active', 'group']
    search_fields = ['slug', 'name_en', 'category']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['group']

    def price_display(self, obj):
        return f"{obj.price/100:.2f}"
    price_display.short_description = 'Price'
