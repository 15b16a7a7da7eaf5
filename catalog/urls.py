from django.urls import path
from . import views

urlpatterns = [
    path('memberships', views.memberships, name='memberships'),
    path('services', views.services, name='services'),
    path('service-groups', views.service_groups, name='service_groups'),
]
