"""URL routing for server-rendered portal pages (namespace: portal-pages)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .pages import PortalDashboardView

app_name = "portal-pages"

urlpatterns = [
    path("", PortalDashboardView.as_view(), name="dashboard"),
]
