"""URL routing for the portal API (namespace: portal)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ImpersonationView, OfficeListView, PortalAuthCheckView, PortalMeView

app_name = "portal"

urlpatterns = [
    path("auth/me/", PortalMeView.as_view(), name="auth-me"),
    path("auth/check/", PortalAuthCheckView.as_view(), name="auth-check"),
    path("offices/", OfficeListView.as_view(), name="office-list"),
    path("impersonate/", ImpersonationView.as_view(), name="impersonate"),
]
