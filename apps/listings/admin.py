"""Admin registrations for listings."""

from __future__ import annotations

from django.contrib import admin

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("mls_id", "street_address", "city", "state", "status", "price", "office")
    list_filter = ("status", "state", "property_type")
    search_fields = ("mls_id", "street_address", "city", "zip")
    raw_id_fields = ("agent", "office")
    readonly_fields = ("created_at", "updated_at")
