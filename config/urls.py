"""URL configuration for the realty portal project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the public listing API, the portal API and the portal dashboard pages.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # Public listing data
    path('api/', include(('apps.listings.urls', 'listings'), namespace='listings')),
    # Portal API (agents, office admins, super admins)
    path('api/portal/', include(('apps.portal.urls', 'portal'), namespace='portal')),
    # Portal dashboard pages
    path('portal/', include(('apps.portal.page_urls', 'portal-pages'), namespace='portal-pages')),
    # OpenAPI schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
