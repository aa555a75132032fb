"""URL routing for public listing endpoints (namespace: listings)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CityListView

app_name = "listings"

urlpatterns = [
    path("cities/", CityListView.as_view(), name="city-list"),
]
