"""URL configuration for ShareIt project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and the routers of each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('bookings/', include('apps.bookings.urls')),
    path('items/', include('apps.items.urls')),
]
