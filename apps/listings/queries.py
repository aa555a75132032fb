"""Read queries over listings."""

from __future__ import annotations

from django.db.models import Count  # type: ignore

from .models import Listing


def get_cities_with_counts() -> list[dict]:
    """Return one ``{"city", "state", "count"}`` row per city with listings.

    Busiest cities come first; ties are broken alphabetically so the order is
    stable between requests.
    """
    rows = (
        Listing.objects.order_by()
        .values("city", "state")
        .annotate(count=Count("id"))
        .order_by("-count", "city", "state")
    )
    return list(rows)
