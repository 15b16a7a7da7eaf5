from django.contrib import admin
from .models import BlockedTimeSlot, Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'email', 'service', 'date', 'time', 'status', 'created_at']
    list_filter = ['status', 'date', 'created_at']
    search_fields = ['name', 'email', 'phone', 'vip_number']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(BlockedTimeSlot)
class BlockedTimeSlotAdmin(admin.ModelAdmin):
    list_display = ['id', 'date', 'time', 'created_at']
    list_filter = ['date']
    readonly_fields = ['created_at']
