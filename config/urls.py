from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('accounts.urls')),
    path('api/', include('bookings.urls')),
    path('api/', include('contact.urls')),
    path('api/', include('catalog.urls')),
    path('api/', include('common.urls')),
]
