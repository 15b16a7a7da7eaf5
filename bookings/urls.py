from django.urls import path
from . import views

urlpatterns = [
    path('booking', views.create_booking, name='create_booking'),
    path('time-slots', views.time_slots, name='time_slots'),
    path('appointments', views.appointments, name='appointments'),
    path('appointments/check', views.check_appointment, name='check_appointment'),
    path('admin/bookings', views.admin_bookings, name='admin_bookings'),
    path('admin/dashboard-summary', views.dashboard_summary, name='dashboard_summary'),
    path('admin/blocked-slots', views.blocked_slots, name='blocked_slots'),
]
